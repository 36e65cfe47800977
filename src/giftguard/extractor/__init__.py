"""
Extractor package — field extractors for gifticon OCR text.

Each module recovers one field; GifticonExtractor combines them and gates
the record with the validator.

Usage
-----
from giftguard.extractor import GifticonExtractor
result = GifticonExtractor().extract(text)
if result.is_complete:
    ...
"""

from giftguard.extractor.code_extractor import CODE_NOT_FOUND, extract_gift_code
from giftguard.extractor.date_extractor import extract_expiry_date, is_valid_ymd
from giftguard.extractor.gifticon_extractor import GifticonExtractor, extract_gifticon
from giftguard.extractor.menu_extractor import extract_menu_name
from giftguard.extractor.merchant_extractor import extract_merchant
from giftguard.extractor.record_validator import validate_record

__all__ = [
    "CODE_NOT_FOUND",
    "GifticonExtractor",
    "extract_expiry_date",
    "extract_gift_code",
    "extract_gifticon",
    "extract_menu_name",
    "extract_merchant",
    "is_valid_ymd",
    "validate_record",
]
