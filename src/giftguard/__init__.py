"""GiftGuard: recover item, merchant, expiry date and code from gifticon OCR text."""

from giftguard.extractor import CODE_NOT_FOUND, GifticonExtractor, extract_gifticon
from giftguard.models import (
    ExtractionResult,
    ProcessingResult,
    ProcessingStatus,
    VoucherRecord,
)

__version__ = "1.0.0"

__all__ = [
    "CODE_NOT_FOUND",
    "ExtractionResult",
    "GifticonExtractor",
    "ProcessingResult",
    "ProcessingStatus",
    "VoucherRecord",
    "extract_gifticon",
]
