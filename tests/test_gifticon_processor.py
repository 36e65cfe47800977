"""
Tests for the recognize → extract → store pipeline
"""

import pytest

from giftguard.models import ProcessingStatus

NO_CODE_TEXT = "스타벅스\n카페라떼\n유효기간 2024.12.31"


# ─── process_text ─────────────────────────────────────────────────────────────

def test_complete_text_is_saved(processor, store, starbucks_text, today):
    result = processor.process_text(starbucks_text, source_uri="img-1", today=today)

    assert result.status is ProcessingStatus.SAVED
    assert result.success
    assert len(store) == 1
    row = store.all()[0]
    assert row.item_name == "카페라떼"
    assert row.merchant == "스타벅스"
    assert row.expiry_date == "2024-12-31"
    assert row.code == "AB12CD34EF56"
    assert row.source_ref == "img-1"
    assert row.memo == "자동 인식 저장"


def test_duplicate_source_is_rejected(processor, store, today):
    assert processor.process_text(NO_CODE_TEXT, source_uri="img-1", today=today).success
    result = processor.process_text(NO_CODE_TEXT, source_uri="img-1", today=today)
    assert result.status is ProcessingStatus.STORAGE_REJECTED
    assert result.extraction is not None
    assert len(store) == 1


def test_duplicate_code_is_rejected(processor, store, starbucks_text, today):
    assert processor.process_text(starbucks_text, source_uri="img-1", today=today).success
    result = processor.process_text(starbucks_text, source_uri="img-2", today=today)
    assert result.status is ProcessingStatus.STORAGE_REJECTED
    assert len(store) == 1


def test_missing_code_is_never_a_duplicate(processor, store, today):
    assert processor.process_text(NO_CODE_TEXT, source_uri="img-1", today=today).success
    assert processor.process_text(NO_CODE_TEXT, source_uri="img-2", today=today).success
    assert len(store) == 2


@pytest.mark.parametrize("text", ["", "  \n "])
def test_blank_text(processor, store, text):
    result = processor.process_text(text, source_uri="img-1")
    assert result.status is ProcessingStatus.NO_TEXT_RECOGNIZED
    assert result.extraction is None
    assert result.missing_fields == []
    assert len(store) == 0


def test_incomplete_extraction_is_not_stored(processor, store, today):
    result = processor.process_text("스타벅스\n카페라떼", source_uri="img-1", today=today)
    assert result.status is ProcessingStatus.FIELD_EXTRACTION_INCOMPLETE
    assert result.missing_fields == ["expiry_date"]
    assert len(store) == 0


def test_custom_memo_from_config(recognizer, store, config, starbucks_text, today):
    from giftguard.gifticon_processor import GifticonProcessor

    config['storage']['memo'] = "수동 등록"
    processor = GifticonProcessor(recognizer=recognizer, store=store, config=config)
    processor.process_text(starbucks_text, source_uri="img-1", today=today)
    assert store.all()[0].memo == "수동 등록"


class RejectingStore:
    def __init__(self):
        self.calls = []

    def insert(self, item_name, merchant, expiry_ymd, source_ref, code, memo):
        self.calls.append((item_name, merchant, expiry_ymd, source_ref, code, memo))
        return False


def test_store_refusal(recognizer, config, starbucks_text, today):
    from giftguard.gifticon_processor import GifticonProcessor

    store = RejectingStore()
    processor = GifticonProcessor(recognizer=recognizer, store=store, config=config)
    result = processor.process_text(starbucks_text, source_uri="img-1", today=today)

    assert result.status is ProcessingStatus.STORAGE_REJECTED
    assert store.calls == [
        ("카페라떼", "스타벅스", "2024-12-31", "img-1", "AB12CD34EF56", "자동 인식 저장")
    ]


# ─── process_image ────────────────────────────────────────────────────────────

@pytest.fixture
def valid_image(monkeypatch):
    monkeypatch.setattr(
        "giftguard.gifticon_processor.validate_image_file",
        lambda path, allowed=None: (True, "Valid image file"),
    )


def test_image_is_recognized_and_saved(valid_image, processor, recognizer, store, today):
    result = processor.process_image("/tmp/gift.png", today=today)

    assert recognizer.calls == ["/tmp/gift.png"]
    assert result.status is ProcessingStatus.SAVED
    assert result.source_uri == "/tmp/gift.png"
    assert store.all()[0].source_ref == "/tmp/gift.png"


def test_explicit_source_uri(valid_image, processor, store, today):
    result = processor.process_image("/tmp/gift.png", source_uri="content://media/7", today=today)
    assert result.source_uri == "content://media/7"
    assert store.all()[0].source_ref == "content://media/7"


def test_recognition_failure(valid_image, store, config, make_recognizer):
    from giftguard.gifticon_processor import GifticonProcessor

    processor = GifticonProcessor(
        recognizer=make_recognizer(error="engine crashed"), store=store, config=config
    )
    result = processor.process_image("/tmp/gift.png")

    assert result.status is ProcessingStatus.RECOGNITION_FAILED
    assert result.error == "engine crashed"
    assert len(store) == 0


def test_empty_recognition(valid_image, store, config, make_recognizer):
    from giftguard.gifticon_processor import GifticonProcessor

    processor = GifticonProcessor(recognizer=make_recognizer(text=""), store=store, config=config)
    assert processor.process_image("/tmp/gift.png").status is ProcessingStatus.NO_TEXT_RECOGNIZED


def test_unreadable_image_skips_recognition(monkeypatch, processor, recognizer):
    monkeypatch.setattr(
        "giftguard.gifticon_processor.validate_image_file",
        lambda path, allowed=None: (False, "File not found"),
    )
    result = processor.process_image("/missing.png")

    assert result.status is ProcessingStatus.IMAGE_UNREADABLE
    assert result.error == "File not found"
    assert recognizer.calls == []


def test_permission_error_is_unreadable(monkeypatch, processor, recognizer):
    def denied(path, allowed=None):
        raise PermissionError("Permission denied")

    monkeypatch.setattr("giftguard.gifticon_processor.validate_image_file", denied)
    result = processor.process_image("/secret.png")

    assert result.status is ProcessingStatus.IMAGE_UNREADABLE
    assert "Permission denied" in result.error
    assert recognizer.calls == []


def test_mime_check_failure_does_not_escape(monkeypatch, processor, recognizer, tmp_path, today):
    magic = pytest.importorskip("magic")

    def broken(path, mime=False):
        raise magic.MagicException("could not find any valid magic files!")

    monkeypatch.setattr(magic, "from_file", broken)
    image = tmp_path / "gift.png"
    image.write_bytes(b"\x89PNG\r\n\x1a\n")

    result = processor.process_image(str(image), today=today)

    assert result.status is ProcessingStatus.SAVED
    assert recognizer.calls == [str(image)]
