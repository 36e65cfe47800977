"""
Integrated Gifticon Processing Pipeline
Combines OCR, field extraction, validation and storage into one workflow
"""

from datetime import date
from typing import Dict, Optional

from loguru import logger

from giftguard.config import load_config
from giftguard.extractor.gifticon_extractor import GifticonExtractor
from giftguard.models import ProcessingResult, ProcessingStatus
from giftguard.ocr_engine import OCREngine, RecognitionError
from giftguard.storage import GifticonStore, InMemoryGifticonStore
from giftguard.utils import preview, validate_image_file


class GifticonProcessor:
    """
    End-to-end gifticon processing pipeline

    Workflow:
    1. Validate the input image
    2. Recognize text (OCR)
    3. Stop early when no text came back
    4. Extract item, merchant, expiry and code
    5. Store the record when it is complete

    Every step reports through the returned ProcessingResult; nothing is
    retried, since extraction is deterministic for the same text.
    """

    def __init__(
        self,
        recognizer=None,
        store: Optional[GifticonStore] = None,
        config: Optional[Dict] = None,
    ):
        """
        Args:
            recognizer: Object with recognize(image_path) -> str (default: OCREngine)
            store:      Object with insert(...) -> bool (default: in-memory store)
            config:     Parsed configuration (default: load_config())
        """
        self.config = config if config is not None else load_config()
        self.recognizer = recognizer if recognizer is not None else OCREngine(self.config)
        self.store = store if store is not None else InMemoryGifticonStore()
        self.extractor = GifticonExtractor()
        self.memo = self.config.get('storage', {}).get('memo', '자동 인식 저장')
        self.allowed_extensions = self.config.get('upload', {}).get('allowed_extensions')

    def process_image(
        self,
        image_path: str,
        source_uri: Optional[str] = None,
        today: Optional[date] = None,
    ) -> ProcessingResult:
        """
        Recognize a gifticon image and store it when all fields are found.

        Args:
            image_path: Path to gifticon image
            source_uri: Reference stored with the record (default: image_path)
            today:      Reference date for month-day-only expiry dates
        """
        source_uri = source_uri or image_path
        logger.info(f"Processing gifticon image: {source_uri}")

        try:
            is_valid, msg = validate_image_file(image_path, self.allowed_extensions)
        except OSError as e:
            is_valid, msg = False, str(e)
        if not is_valid:
            logger.error(f"Image access failed for {source_uri}: {msg}")
            return ProcessingResult(
                status=ProcessingStatus.IMAGE_UNREADABLE,
                source_uri=source_uri,
                error=msg,
            )

        try:
            text = self.recognizer.recognize(image_path)
        except RecognitionError as e:
            logger.error(f"OCR failed for {source_uri}: {e}")
            return ProcessingResult(
                status=ProcessingStatus.RECOGNITION_FAILED,
                source_uri=source_uri,
                error=str(e),
            )

        logger.debug(f"OCR text head: {preview(text)}")
        return self.process_text(text, source_uri=source_uri, today=today)

    def process_text(
        self,
        text: str,
        source_uri: Optional[str] = None,
        today: Optional[date] = None,
    ) -> ProcessingResult:
        """
        Extract, validate and store already-recognized gifticon text.
        """
        if not text or not text.strip():
            logger.warning(f"No text recognized for {source_uri}")
            return ProcessingResult(
                status=ProcessingStatus.NO_TEXT_RECOGNIZED,
                source_uri=source_uri,
            )

        extraction = self.extractor.extract(text, source_uri=source_uri, today=today)
        if not extraction.is_complete:
            logger.warning(f"Required fields missing for {source_uri}: {extraction.missing_fields}")
            return ProcessingResult(
                status=ProcessingStatus.FIELD_EXTRACTION_INCOMPLETE,
                source_uri=source_uri,
                extraction=extraction,
            )

        record = extraction.record
        ok = self.store.insert(
            record.item_name,
            record.merchant,
            record.expiry_date,
            record.source_uri,
            record.code,
            self.memo,
        )
        if not ok:
            logger.warning(f"Storage rejected gifticon from {source_uri}")
            return ProcessingResult(
                status=ProcessingStatus.STORAGE_REJECTED,
                source_uri=source_uri,
                extraction=extraction,
            )

        logger.success(f"Saved gifticon: {record.item_name} ({record.merchant}) until {record.expiry_date}")
        return ProcessingResult(
            status=ProcessingStatus.SAVED,
            source_uri=source_uri,
            extraction=extraction,
        )
