"""
Data model for gifticon extraction and processing results.

VoucherRecord is built once per extraction run and never mutated; the
caller takes ownership when it hands the record to storage.
"""

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Dict, List, Optional, Tuple


FIELD_ITEM_NAME = "item_name"
FIELD_MERCHANT = "merchant"
FIELD_EXPIRY_DATE = "expiry_date"

REQUIRED_FIELDS = (FIELD_ITEM_NAME, FIELD_MERCHANT, FIELD_EXPIRY_DATE)


@dataclass(frozen=True)
class VoucherRecord:
    """Fields recovered from one gifticon text."""
    item_name: str
    merchant: str
    expiry_date: Optional[str]     # YYYY-MM-DD, None when not found
    code: str                      # CODE_NOT_FOUND sentinel when absent
    source_uri: Optional[str] = None

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass(frozen=True)
class ExtractionResult:
    """VoucherRecord plus what the validator thought of it."""
    record: VoucherRecord
    missing_fields: List[str] = field(default_factory=list)
    code_found: bool = False
    extraction_confidence: float = 0.0

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields


class ProcessingStatus(str, Enum):
    """Outcome of one gifticon processing attempt."""
    SAVED = "saved"
    NO_TEXT_RECOGNIZED = "no_text_recognized"
    FIELD_EXTRACTION_INCOMPLETE = "field_extraction_incomplete"
    STORAGE_REJECTED = "storage_rejected"
    RECOGNITION_FAILED = "recognition_failed"
    IMAGE_UNREADABLE = "image_unreadable"


@dataclass
class ProcessingResult:
    """What the processor hands back to the UI / API layer."""
    status: ProcessingStatus
    source_uri: Optional[str] = None
    extraction: Optional[ExtractionResult] = None
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.status is ProcessingStatus.SAVED

    @property
    def missing_fields(self) -> List[str]:
        return list(self.extraction.missing_fields) if self.extraction else []

    @property
    def message(self) -> Tuple[str, str]:
        """(title, content) notification text for this outcome."""
        from giftguard.messages import message_for  # messages imports this module
        return message_for(self)
