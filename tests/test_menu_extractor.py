"""
Tests for menu / item name extraction
"""

import pytest

from giftguard.extractor.menu_extractor import (
    MENU_STRATEGIES,
    clean_line,
    contains_menu_word,
    extract_menu_name,
    from_brand_anchor,
    from_keyword_scan,
    from_label,
    looks_bad,
)


# ─── clean_line ───────────────────────────────────────────────────────────────

@pytest.mark.parametrize("line, expected", [
    ("상품명: 카페라떼 (ICE) [1+1]", "카페라떼"),
    ("• 카페모카 -", "카페모카"),
    ("Item - 바닐라라떼", "바닐라라떼"),
    ("아이스    아메리카노", "아이스 아메리카노"),
])
def test_clean_line(line, expected):
    assert clean_line(line) == expected


# ─── looks_bad ────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("line", [
    "",
    "카페라떼 2개",              # quantity
    "수량 1",
    "아메리카노 x2",
    "상품명 라떼",              # starts with a label
    "라",                       # too short
    "아" * 41,                  # too long
    "카페라떼 8801234567890",    # barcode
    "카페라떼 4,500원",          # price
    "카페라떼 Tall",             # size option
    "아이스 아메리카노 R",
    "카페라떼 교환권",           # boilerplate
    "유효기간 안내",
])
def test_looks_bad_rejects(line):
    assert looks_bad(line) is True


@pytest.mark.parametrize("line", ["카페라떼", "아이스 아메리카노", "초코 케이크", "햄버거 세트"])
def test_looks_bad_accepts(line):
    assert looks_bad(line) is False


def test_contains_menu_word():
    assert contains_menu_word("딸기 마카롱")
    assert not contains_menu_word("햄버거 세트")


# ─── Strategies ───────────────────────────────────────────────────────────────

def test_strategy_order():
    assert [name for name, _ in MENU_STRATEGIES] == ["label", "brand_anchor", "keyword_scan", "fallback"]


def test_label_same_line():
    assert extract_menu_name("상품명: 아이스 아메리카노") == "아이스 아메리카노"


def test_label_next_line():
    assert extract_menu_name("상품명\n카페라떼") == "카페라떼"


def test_label_rejected_value_falls_to_next_line():
    assert from_label(["상품명: 2개", "카페라떼"]) == "카페라떼"


def test_label_full_width_colon():
    assert extract_menu_name("메뉴명：바닐라라떼") == "바닐라라떼"


def test_label_separator_artifact():
    assert extract_menu_name("상품명I 카페라떼") == "카페라떼"


def test_label_beats_brand_anchor():
    text = "스타벅스\n카페모카\n상품명: 카페라떼"
    assert extract_menu_name(text) == "카페라떼"


def test_brand_anchored():
    assert extract_menu_name("스타벅스\n카페라떼") == "카페라떼"


def test_brand_anchor_skips_noise_lines():
    text = "투썸플레이스\n모바일 교환권\n딸기 케이크\n12,000원"
    assert extract_menu_name(text) == "딸기 케이크"


def test_brand_anchor_window_is_three_lines():
    lines = ["스타벅스", "모바일 교환권", "선물하기", "안녕하세요", "카페라떼"]
    assert from_brand_anchor(lines) is None
    assert from_keyword_scan(lines) == "카페라떼"


def test_keyword_scan_without_brand():
    assert extract_menu_name("선물이 도착했어요\n바닐라라떼") == "바닐라라떼"


def test_fallback_returns_first_clean_line():
    assert extract_menu_name("햄버거 세트\n유효기간 2024.12.31") == "햄버거 세트"


def test_quality_filter_beats_keyword():
    """Price and boilerplate lines are rejected even with a menu keyword"""
    text = "카페라떼 4,500원\n카페라떼 교환권\n아메리카노 2개"
    assert extract_menu_name(text) == ""


@pytest.mark.parametrize("text", ["", "   \n  ", "유효기간 2024.12.31\n12,000원"])
def test_nothing_found(text):
    assert extract_menu_name(text) == ""


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
