"""
User-facing messages for each processing outcome.

Every ProcessingStatus maps to its own (title, content) pair so the UI can
tell the user exactly what went wrong.
"""

from typing import Tuple

from giftguard.models import (
    FIELD_EXPIRY_DATE,
    FIELD_ITEM_NAME,
    FIELD_MERCHANT,
    ProcessingResult,
    ProcessingStatus,
)

FIELD_LABELS = {
    FIELD_ITEM_NAME: "메뉴",
    FIELD_MERCHANT: "사용처",
    FIELD_EXPIRY_DATE: "유효기간",
}


def message_for(result: ProcessingResult) -> Tuple[str, str]:
    """Return the (title, content) notification text for a processing result."""
    status = result.status

    if status is ProcessingStatus.SAVED:
        record = result.extraction.record
        return "✅ 자동 저장 완료", f"{record.item_name} ({record.merchant}) 기프티콘 저장 완료."

    if status is ProcessingStatus.NO_TEXT_RECOGNIZED:
        return "자동 저장 실패", "이미지에서 텍스트를 찾지 못했어요."

    if status is ProcessingStatus.FIELD_EXTRACTION_INCOMPLETE:
        failed = ", ".join(FIELD_LABELS.get(f, f) for f in result.missing_fields)
        return "자동 저장 실패", f"필수 정보({failed}) 추출 실패."

    if status is ProcessingStatus.STORAGE_REJECTED:
        return "❌ 자동 저장 실패", "DB에 저장할 수 없습니다. (중복 또는 DB 오류)"

    if status is ProcessingStatus.RECOGNITION_FAILED:
        return "자동 저장 실패", f"텍스트 인식 중 오류: {result.error or '알 수 없는 오류'}"

    if status is ProcessingStatus.IMAGE_UNREADABLE:
        return "자동 저장 실패", "이미지를 열 수 없습니다. (권한/경로)"

    raise ValueError(f"Unknown processing status: {status}")
