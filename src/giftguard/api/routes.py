"""
API Routes - gifticon extraction and storage endpoints
"""

import shutil
import uuid
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from loguru import logger

from giftguard.api.models import (
    ExtractionResponse,
    GifticonFields,
    GifticonListResponse,
    ScanResponse,
    StoredGifticonModel,
    TextRequest,
)
from giftguard.extractor.gifticon_extractor import GifticonExtractor
from giftguard.gifticon_processor import GifticonProcessor
from giftguard.models import ExtractionResult, ProcessingResult
from giftguard.utils import ensure_directory, sanitize_filename

# Create router
router = APIRouter()

_processor: Optional[GifticonProcessor] = None
_extractor = GifticonExtractor()


def get_processor() -> GifticonProcessor:
    """Shared processor; the OCR model itself loads on first scan."""
    global _processor
    if _processor is None:
        _processor = GifticonProcessor()
    return _processor


# ==================== UTILITY FUNCTIONS ====================

def validate_file(file: UploadFile, processor: GifticonProcessor):
    """Validate uploaded file"""
    if not file.filename:
        raise HTTPException(400, detail="No filename provided")

    allowed = processor.allowed_extensions or []
    ext = Path(file.filename).suffix.lower()
    if ext not in allowed:
        raise HTTPException(
            400,
            detail=f"Invalid file type: {ext}. Allowed: {', '.join(allowed)}"
        )


def save_upload(file: UploadFile, processor: GifticonProcessor) -> Path:
    """Save uploaded file and return path"""
    upload_dir = Path(ensure_directory(
        processor.config.get('upload', {}).get('upload_dir', 'data/uploads')
    ))
    ext = Path(sanitize_filename(file.filename)).suffix.lower()
    file_path = upload_dir / f"{uuid.uuid4()}{ext}"

    with file_path.open("wb") as buffer:
        shutil.copyfileobj(file.file, buffer)

    return file_path


def to_extraction_response(extraction: ExtractionResult) -> ExtractionResponse:
    record = extraction.record
    return ExtractionResponse(
        status="success",
        record=GifticonFields(**record.to_dict()),
        is_complete=extraction.is_complete,
        missing_fields=list(extraction.missing_fields),
        code_found=extraction.code_found,
        extraction_confidence=extraction.extraction_confidence,
    )


def to_scan_response(result: ProcessingResult) -> ScanResponse:
    title, message = result.message
    return ScanResponse(
        status=result.status.value,
        success=result.success,
        title=title,
        message=message,
        extraction=to_extraction_response(result.extraction) if result.extraction else None,
        error=result.error,
    )


# ==================== API ENDPOINTS ====================

@router.post("/gifticons/extract", response_model=ExtractionResponse, tags=["Gifticon"])
async def extract_fields(request: TextRequest):
    """
    **Extract gifticon fields from recognized text**

    Nothing is stored. Use this to preview what a scan would save.

    **Example:**
    ```bash
    curl -X POST http://localhost:8000/api/v1/gifticons/extract \\
      -H "Content-Type: application/json" \\
      -d '{"text": "스타벅스\\n상품명: 카페라떼\\n유효기간: 2024.12.31"}'
    ```
    """
    try:
        extraction = _extractor.extract(
            request.text, source_uri=request.source_uri, today=request.today
        )
        return to_extraction_response(extraction)
    except Exception as e:
        logger.exception(f"Extraction error: {e}")
        raise HTTPException(500, str(e))


@router.post("/gifticons", response_model=ScanResponse, tags=["Gifticon"])
async def save_from_text(
    request: TextRequest,
    processor: GifticonProcessor = Depends(get_processor),
):
    """
    **Extract and store a gifticon from recognized text**

    Returns the outcome status with the notification title/message.
    """
    try:
        result = processor.process_text(
            request.text, source_uri=request.source_uri, today=request.today
        )
        return to_scan_response(result)
    except Exception as e:
        logger.exception(f"Processing error: {e}")
        raise HTTPException(500, str(e))


@router.post("/gifticons/scan", response_model=ScanResponse, tags=["Gifticon"])
async def scan_gifticon(
    file: UploadFile = File(..., description="Gifticon image"),
    source_uri: Optional[str] = Form(None, description="Reference stored with the record (default: generated upload name)"),
    processor: GifticonProcessor = Depends(get_processor),
):
    """
    **Scan a gifticon image and store it**

    OCR → field extraction → validation → storage.

    **Example:**
    ```bash
    curl -X POST http://localhost:8000/api/v1/gifticons/scan \\
      -F "file=@gifticon.png"
    ```
    """
    validate_file(file, processor)

    file_path = None
    try:
        file_path = save_upload(file, processor)
        logger.info(f"Scanning: {file.filename}")

        result = processor.process_image(
            str(file_path),
            source_uri=source_uri or file_path.name,
        )
        return to_scan_response(result)

    except Exception as e:
        logger.exception(f"Error processing {file.filename}: {e}")
        raise HTTPException(500, str(e))
    finally:
        if file_path and file_path.exists():
            file_path.unlink()


@router.get("/gifticons", response_model=GifticonListResponse, tags=["Gifticon"])
async def list_gifticons(processor: GifticonProcessor = Depends(get_processor)):
    """List stored gifticons in insertion order"""
    rows = processor.store.all()
    return GifticonListResponse(
        total=len(rows),
        gifticons=[StoredGifticonModel(**row.to_dict()) for row in rows],
    )
