"""
OCR Engine boundary
Turns a gifticon image into plain recognized text using PaddleOCR's
Korean model.

Only the recognize(image) -> text | RecognitionError contract matters to
the rest of the package; image preprocessing and engine tuning are out of
scope. The PaddleOCR model is loaded lazily on the first recognize() call
so importing this module stays cheap.
"""

import os
import time
from typing import Dict, List, Optional

from loguru import logger

from giftguard.config import load_config

try:
    from paddleocr import PaddleOCR
except ImportError:
    PaddleOCR = None


class RecognitionError(Exception):
    """The image could not be turned into text."""


class OCREngine:
    """
    Gifticon OCR Engine powered by PaddleOCR

    Usage
    -----
        engine = OCREngine()
        text = engine.recognize("screenshot.png")
    """

    def __init__(self, config: Optional[Dict] = None):
        self.config = config if config is not None else load_config()
        self.ocr = None

    def _initialize_ocr(self):
        """Initialize PaddleOCR model from the `ocr` config section"""
        if PaddleOCR is None:
            raise RecognitionError(
                "paddleocr is not installed. Install with: pip install 'giftguard[ocr]'"
            )

        ocr_config = self.config.get('ocr', {})
        init_params = {
            'use_angle_cls': ocr_config.get('use_angle_cls', True),
            'lang': ocr_config.get('lang', 'korean'),
            'use_gpu': ocr_config.get('use_gpu', False),
            'drop_score': ocr_config.get('drop_score', 0.5),
            'use_space_char': ocr_config.get('use_space_char', True),
            'show_log': False,
        }
        logger.info(f"Initializing PaddleOCR (lang={init_params['lang']}, "
                    f"gpu={init_params['use_gpu']})")
        try:
            self.ocr = PaddleOCR(**init_params)
        except Exception as e:
            logger.error(f"Failed to initialize PaddleOCR: {e}")
            raise RecognitionError(f"OCR engine initialization failed: {e}") from e
        logger.success("PaddleOCR model loaded")

    def recognize_lines(self, image_path: str) -> List[Dict]:
        """
        Recognize text lines with confidence scores

        Returns:
            [{'text': str, 'confidence': float}, ...] in detection order
        """
        if not os.path.exists(image_path):
            raise RecognitionError(f"Image not found: {image_path}")

        if self.ocr is None:
            self._initialize_ocr()

        start_time = time.time()
        try:
            result = self.ocr.ocr(image_path, cls=self.config.get('ocr', {}).get('use_angle_cls', True))
        except Exception as e:
            logger.error(f"OCR extraction failed: {e}")
            raise RecognitionError(f"Text recognition failed: {e}") from e

        if not result or not result[0]:
            logger.warning(f"No text detected in {image_path}")
            return []

        lines = [
            {'text': line[1][0], 'confidence': round(float(line[1][1]), 3)}
            for line in result[0]
        ]
        processing_time = int((time.time() - start_time) * 1000)
        logger.info(f"Recognized {len(lines)} lines in {processing_time}ms")
        return lines

    def recognize(self, image_path: str) -> str:
        """
        Recognize the full text of an image, one line per detected box

        Raises:
            RecognitionError: missing file or engine failure
        """
        return "\n".join(line['text'] for line in self.recognize_lines(image_path))
