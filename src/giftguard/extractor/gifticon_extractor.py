"""
Gifticon Extractor
==================
Runs every field extractor over one recognized text and gates the result:

  item_name    ← extract_menu_name()    (label-noise normalized text)
  merchant     ← extract_merchant()     (raw text)
  expiry_date  ← extract_expiry_date()  (OCR-noise normalized text)
  code         ← extract_gift_code()    (raw text)

The extractors are independent and side-effect free; nothing here raises
for any input string. Call extract(text) → ExtractionResult.
"""

from datetime import date
from typing import Optional

from loguru import logger

from giftguard.extractor.code_extractor import extract_gift_code, is_code_found
from giftguard.extractor.date_extractor import extract_expiry_date
from giftguard.extractor.menu_extractor import extract_menu_name
from giftguard.extractor.merchant_extractor import extract_merchant
from giftguard.extractor.record_validator import missing_fields
from giftguard.models import (
    ExtractionResult,
    FIELD_EXPIRY_DATE,
    FIELD_ITEM_NAME,
    FIELD_MERCHANT,
    VoucherRecord,
)


class GifticonExtractor:
    """
    Stateless facade over the field extractors.

    Safe to share between threads: it only reads the module-level lexicons.
    """

    def extract(
        self,
        text: str,
        source_uri: Optional[str] = None,
        today: Optional[date] = None,
    ) -> ExtractionResult:
        """
        Extract all gifticon fields from recognized text.

        Args:
            text:       Raw OCR text
            source_uri: Opaque reference to the source image, passed through
            today:      Reference date for month-day-only expiry dates

        Returns
        -------
        ExtractionResult; check .is_complete before storing
        """
        text = text or ""

        item_name = extract_menu_name(text)
        merchant = extract_merchant(text)
        expiry = extract_expiry_date(text, today)
        code = extract_gift_code(text)

        record = VoucherRecord(
            item_name=item_name,
            merchant=merchant,
            expiry_date=expiry,
            code=code,
            source_uri=source_uri,
        )
        missing = missing_fields(item_name, merchant, expiry)
        code_found = is_code_found(code)
        confidence = self._confidence_score(missing, code_found)

        logger.info(
            f"[{self.__class__.__name__}] item={item_name!r} merchant={merchant!r} "
            f"expiry={expiry!r} code_found={code_found} missing={missing} "
            f"confidence={confidence:.2f}"
        )
        return ExtractionResult(
            record=record,
            missing_fields=missing,
            code_found=code_found,
            extraction_confidence=confidence,
        )

    def _confidence_score(self, missing, code_found: bool) -> float:
        """Produce a 0–1 confidence score based on what was extracted."""
        score = 1.0
        if FIELD_ITEM_NAME in missing:    score -= 0.30
        if FIELD_MERCHANT in missing:     score -= 0.30
        if FIELD_EXPIRY_DATE in missing:  score -= 0.30
        if not code_found:                score -= 0.10
        return round(max(0.0, score), 2)


def extract_gifticon(text: str, source_uri: Optional[str] = None, today: Optional[date] = None) -> ExtractionResult:
    """Module-level shortcut for GifticonExtractor().extract()."""
    return GifticonExtractor().extract(text, source_uri=source_uri, today=today)
