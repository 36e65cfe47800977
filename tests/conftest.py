"""
Shared fixtures for gifticon tests
"""

from datetime import date

import pytest

from giftguard.config import default_config
from giftguard.gifticon_processor import GifticonProcessor
from giftguard.ocr_engine import RecognitionError
from giftguard.storage import InMemoryGifticonStore


STARBUCKS_TEXT = "스타벅스\n상품명: 카페라떼\n유효기간: 2024.01.01 ~ 2024.12.31\nAB12-CD34-EF56"


class FakeRecognizer:
    """Stands in for OCREngine: returns canned text or raises."""

    def __init__(self, text: str = STARBUCKS_TEXT, error: str = None):
        self.text = text
        self.error = error
        self.calls = []

    def recognize(self, image_path: str) -> str:
        self.calls.append(image_path)
        if self.error:
            raise RecognitionError(self.error)
        return self.text


@pytest.fixture
def today():
    """Fixed reference date for month-day-only expiry dates"""
    return date(2024, 3, 1)


@pytest.fixture
def starbucks_text():
    return STARBUCKS_TEXT


@pytest.fixture
def recognizer():
    return FakeRecognizer()


@pytest.fixture
def store():
    return InMemoryGifticonStore()


@pytest.fixture
def config(tmp_path):
    cfg = default_config()
    cfg['upload']['upload_dir'] = str(tmp_path / "uploads")
    return cfg


@pytest.fixture
def processor(recognizer, store, config):
    return GifticonProcessor(recognizer=recognizer, store=store, config=config)


@pytest.fixture
def make_recognizer():
    """Factory for recognizers with custom text or error"""
    return FakeRecognizer
