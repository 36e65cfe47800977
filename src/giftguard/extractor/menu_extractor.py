"""
Menu / Item Name Extractor
==========================
Picks the single most plausible item line from a gifticon.

Strategies (tried in order, first hit wins)
-------------------------------------------
  1. label          "상품명: 카페라떼": text after the label, else the next line
  2. brand_anchor   the 3 lines after the first brand line
  3. keyword_scan   first line anywhere containing a menu keyword
  4. fallback       first line that merely passes looks_bad()
                    (last resort, may return a non-menu string)

Strategies 1-3 require a MENU_KEYWORDS hit. Every candidate is run through
clean_line() and must survive looks_bad().

The text is only label-noise normalized here, never with the lossy digit
normalization used for dates. The result is shown to the user.
"""

import re
from typing import Callable, List, Optional, Tuple

from loguru import logger

from giftguard.extractor.merchant_extractor import find_brand
from giftguard.lexicons import BOILERPLATE_WORDS, LABEL_WORDS, MENU_KEYWORDS, QUANTITY_WORDS
from giftguard.text_normalizer import normalize_label_noise


_LABELS = "|".join(LABEL_WORDS)

_LABEL_LINE = re.compile(rf'^({_LABELS})\s*[:：\-]?\s*(.*)$')
_LABEL_PREFIX = re.compile(rf'^({_LABELS})\s*[:：\-]?\s*')
_PARENS = re.compile(r'\([^)]*\)')
_BRACKETS = re.compile(r'\[[^\]]*]')
_MULTI_SPACE = re.compile(r'\s{2,}')

_QTY_COUNT = re.compile(r'\b(\d+)\s*개\b')
_QTY_TIMES = re.compile(r'\bx\s*\d+\b', re.IGNORECASE)
_SERIAL = re.compile(r'\d{8,}')
_PRICE = re.compile(r'[₩\\]?\s?\d{2,3}(,\d{3})*\s*(원|KRW)?')
_OPTION = re.compile(r'\b(옵션|사이즈|HOT|ICE|L|R|Tall|Grande|Venti)\b', re.IGNORECASE)

_EDGE_PUNCT = "-•·:："

MIN_NAME_LEN = 2
MAX_NAME_LEN = 40
BRAND_WINDOW = 3


# ─── Line cleaning and quality filter ─────────────────────────────────────────

def clean_line(line: str) -> str:
    """
    Strip label, (…) / […] groups, repeated spaces and edge punctuation.

    "상품명: 카페라떼 (ICE) [1+1]" → "카페라떼"
    """
    t = _LABEL_PREFIX.sub("", line)
    t = _PARENS.sub("", t)
    t = _BRACKETS.sub("", t)
    t = _MULTI_SPACE.sub(" ", t)
    return t.strip().strip(_EDGE_PUNCT).strip()


def is_quantity_line(s: str) -> bool:
    lowered = s.lower()
    if any(w.lower() in lowered for w in QUANTITY_WORDS):
        return True
    if _QTY_COUNT.search(s):
        return True
    if _QTY_TIMES.search(s):
        return True
    return False


def looks_bad(s: str) -> bool:
    """
    True when a cleaned line cannot be an item name.

    Rejects: blank, quantity lines, lines starting with a field label,
    length outside 2-40, 8+ digit runs (barcodes), prices, size/option
    tokens, voucher boilerplate. Any single rule rejects.
    """
    if not s or not s.strip():
        return True
    if is_quantity_line(s):
        return True
    lowered = s.lower()
    if any(lowered.startswith(w.lower()) for w in LABEL_WORDS):
        return True
    if not MIN_NAME_LEN <= len(s) <= MAX_NAME_LEN:
        return True
    if _SERIAL.search(s):
        return True
    if _PRICE.search(s):
        return True
    if _OPTION.search(s):
        return True
    if any(w.lower() in lowered for w in BOILERPLATE_WORDS):
        return True
    return False


def contains_menu_word(s: str) -> bool:
    lowered = s.lower()
    return any(kw.lower() in lowered for kw in MENU_KEYWORDS)


def _acceptable(candidate: str, require_keyword: bool = True) -> bool:
    if looks_bad(candidate):
        return False
    return contains_menu_word(candidate) if require_keyword else True


# ─── Strategies ───────────────────────────────────────────────────────────────

def from_label(lines: List[str]) -> Optional[str]:
    """Text after an explicit field label, or the line right below it."""
    for i, line in enumerate(lines):
        m = _LABEL_LINE.match(line)
        if not m:
            continue
        after = (m.group(2) or "").strip()
        if after:
            value = clean_line(after)
            if _acceptable(value):
                return value
        if i + 1 < len(lines):
            nxt = clean_line(lines[i + 1])
            if _acceptable(nxt):
                return nxt
    return None


def from_brand_anchor(lines: List[str]) -> Optional[str]:
    """Item lines usually sit just under the brand name."""
    brand_idx = next((i for i, line in enumerate(lines) if find_brand(line)), -1)
    if brand_idx < 0:
        return None
    for line in lines[brand_idx + 1:brand_idx + 1 + BRAND_WINDOW]:
        value = clean_line(line)
        if _acceptable(value):
            return value
    return None


def from_keyword_scan(lines: List[str]) -> Optional[str]:
    for line in lines:
        value = clean_line(line)
        if _acceptable(value):
            return value
    return None


def from_fallback(lines: List[str]) -> Optional[str]:
    for line in lines:
        value = clean_line(line)
        if _acceptable(value, require_keyword=False):
            return value
    return None


MENU_STRATEGIES: Tuple[Tuple[str, Callable[[List[str]], Optional[str]]], ...] = (
    ("label", from_label),
    ("brand_anchor", from_brand_anchor),
    ("keyword_scan", from_keyword_scan),
    ("fallback", from_fallback),
)


# ─── Public entry point ───────────────────────────────────────────────────────

def extract_menu_name(text: str) -> str:
    """Return the most plausible item/menu name in `text`, or ""."""
    lines = [normalize_label_noise(l.strip()) for l in text.splitlines() if l.strip()]
    if not lines:
        return ""

    for name, strategy in MENU_STRATEGIES:
        value = strategy(lines)
        if value:
            logger.debug(f"[MenuExtractor] {name}: {value!r}")
            return value

    logger.debug("[MenuExtractor] no item line passed the filter")
    return ""
