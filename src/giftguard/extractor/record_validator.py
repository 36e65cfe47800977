"""
Record Validator
================
A gifticon is complete only with a non-blank item name, a non-blank
merchant and a calendar-valid expiry date. Incomplete records are never
stored.
"""

from typing import List, Optional

from giftguard.extractor.date_extractor import is_valid_ymd
from giftguard.models import FIELD_EXPIRY_DATE, FIELD_ITEM_NAME, FIELD_MERCHANT


def missing_fields(item_name: Optional[str], merchant: Optional[str], expiry: Optional[str]) -> List[str]:
    """Names of the required fields that failed, in a fixed order."""
    missing = []
    if not item_name or not item_name.strip():
        missing.append(FIELD_ITEM_NAME)
    if not merchant or not merchant.strip():
        missing.append(FIELD_MERCHANT)
    if not expiry or not is_valid_ymd(expiry):
        missing.append(FIELD_EXPIRY_DATE)
    return missing


def validate_record(item_name: Optional[str], merchant: Optional[str], expiry: Optional[str]) -> bool:
    return not missing_fields(item_name, merchant, expiry)
