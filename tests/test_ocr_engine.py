"""
Tests for the OCR boundary (PaddleOCR is mocked)
"""

from unittest.mock import MagicMock

import pytest

from giftguard.ocr_engine import OCREngine, RecognitionError


def _box(text, score):
    return [[[0, 0], [10, 0], [10, 10], [0, 10]], (text, score)]


@pytest.fixture
def image(tmp_path):
    path = tmp_path / "gift.png"
    path.write_bytes(b"\x89PNG\r\n\x1a\n")
    return str(path)


@pytest.fixture
def paddle(monkeypatch):
    cls = MagicMock(name="PaddleOCR")
    cls.return_value.ocr.return_value = [[
        _box("스타벅스", 0.98),
        _box("상품명: 카페라떼", 0.9512),
    ]]
    monkeypatch.setattr("giftguard.ocr_engine.PaddleOCR", cls)
    return cls


def test_recognize_joins_lines(paddle, config, image):
    assert OCREngine(config).recognize(image) == "스타벅스\n상품명: 카페라떼"


def test_recognize_lines_keeps_confidence(paddle, config, image):
    lines = OCREngine(config).recognize_lines(image)
    assert lines == [
        {'text': "스타벅스", 'confidence': 0.98},
        {'text': "상품명: 카페라떼", 'confidence': 0.951},
    ]


def test_model_loads_lazily_with_korean_model(paddle, config, image):
    engine = OCREngine(config)
    paddle.assert_not_called()

    engine.recognize(image)
    engine.recognize(image)

    paddle.assert_called_once()
    assert paddle.call_args.kwargs['lang'] == "korean"


def test_missing_file(paddle, config, tmp_path):
    with pytest.raises(RecognitionError):
        OCREngine(config).recognize(str(tmp_path / "missing.png"))
    paddle.assert_not_called()


def test_no_text_detected(paddle, config, image):
    paddle.return_value.ocr.return_value = [None]
    assert OCREngine(config).recognize(image) == ""


def test_engine_failure_is_wrapped(paddle, config, image):
    paddle.return_value.ocr.side_effect = RuntimeError("bad tensor")
    with pytest.raises(RecognitionError, match="bad tensor"):
        OCREngine(config).recognize(image)


def test_paddleocr_not_installed(monkeypatch, config, image):
    monkeypatch.setattr("giftguard.ocr_engine.PaddleOCR", None)
    with pytest.raises(RecognitionError, match="not installed"):
        OCREngine(config).recognize(image)
