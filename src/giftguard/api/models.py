"""
API Models — Request and Response schemas
Using Pydantic for automatic validation and documentation
"""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field


# ─── Requests ─────────────────────────────────────────────────────────────────

class TextRequest(BaseModel):
    """Already-recognized gifticon text."""
    text: str                  = Field(...,  description="Recognized OCR text")
    source_uri: Optional[str]  = Field(None, description="Reference to the source image")
    today: Optional[date]      = Field(None, description="Reference date for month-day-only expiry dates")

    class Config:
        json_schema_extra = {
            "example": {
                "text": "스타벅스\n상품명: 카페라떼\n유효기간: 2024.01.01 ~ 2024.12.31\nAB12-CD34-EF56",
                "source_uri": "content://media/external/images/media/1042",
            }
        }


# ─── Extraction ───────────────────────────────────────────────────────────────

class GifticonFields(BaseModel):
    """Fields recovered from one gifticon."""
    item_name: str             = Field(...,  description="Item / menu name ('' when not found)")
    merchant: str              = Field(...,  description="Brand from the merchant lexicon ('' when not found)")
    expiry_date: Optional[str] = Field(None, description="Expiry date YYYY-MM-DD")
    code: str                  = Field(...,  description="Redemption code or the not-found sentinel")
    source_uri: Optional[str]  = Field(None, description="Reference to the source image")


class ExtractionResponse(BaseModel):
    """Extraction without storage."""
    status: str                = Field("success", description="Response status")
    record: GifticonFields
    is_complete: bool          = Field(...,  description="Item, merchant and valid expiry all present")
    missing_fields: List[str]  = Field(default_factory=list, description="Required fields that failed")
    code_found: bool           = Field(...,  description="False when code is the not-found sentinel")
    extraction_confidence: float = Field(..., description="0–1 score", ge=0, le=1)


class ScanResponse(BaseModel):
    """Outcome of recognize → extract → store."""
    status: str                = Field(...,  description="Processing status")
    success: bool
    title: str                 = Field(...,  description="Notification title")
    message: str               = Field(...,  description="Notification content")
    extraction: Optional[ExtractionResponse] = None
    error: Optional[str]       = None


# ─── Storage ──────────────────────────────────────────────────────────────────

class StoredGifticonModel(BaseModel):
    id: int
    item_name: str
    merchant: str
    expiry_date: str
    source_ref: Optional[str] = None
    code: str
    memo: str
    created_at: str


class GifticonListResponse(BaseModel):
    total: int
    gifticons: List[StoredGifticonModel]


# ─── Health & Error Models ────────────────────────────────────────────────────

class HealthResponse(BaseModel):
    status: str  = Field("healthy",        description="Health status")
    service: str = Field("giftguard-api",  description="Service name")
    version: str = Field("1.0.0",          description="API version")
