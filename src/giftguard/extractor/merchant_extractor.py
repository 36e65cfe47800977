"""
Merchant Extractor
==================
Scans the text against the fixed BRANDS lexicon.

The lexicon is walked in order and the first brand found ANYWHERE in the
text wins, so lexicon order is the tie-break when OCR noise makes two brand
names appear. Matching is a case-insensitive substring test on the
unnormalized lines.
"""

from typing import Optional, Sequence

from loguru import logger

from giftguard.lexicons import BRANDS


def find_brand(line: str, brands: Sequence[str] = BRANDS) -> Optional[str]:
    """Return the first lexicon brand contained in a single line."""
    lowered = line.lower()
    for brand in brands:
        if brand.lower() in lowered:
            return brand
    return None


def extract_merchant(text: str, brands: Sequence[str] = BRANDS) -> str:
    """
    Return the first lexicon brand present in `text`, or "" if none.

    Args:
        text:   Raw recognized text (NOT normalized, "CU" must stay "CU")
        brands: Ordered lexicon, highest priority first
    """
    lines = [line.lower() for line in text.splitlines()]
    for brand in brands:
        needle = brand.lower()
        if any(needle in line for line in lines):
            logger.debug(f"[MerchantExtractor] matched {brand!r}")
            return brand
    return ""
