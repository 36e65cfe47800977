"""
Tests for merchant (brand) matching
"""

import pytest

from giftguard.extractor.merchant_extractor import extract_merchant, find_brand
from giftguard.lexicons import BRANDS


def test_brand_on_its_own_line():
    assert extract_merchant("스타벅스\n카페라떼") == "스타벅스"


def test_lexicon_order_beats_line_order():
    """이디야 appears first in the text but 스타벅스 comes first in the lexicon"""
    text = "이디야 제휴 이벤트\n스타벅스 e카드"
    assert extract_merchant(text) == "스타벅스"


@pytest.mark.parametrize("text, expected", [
    ("gs25 편의점 모바일상품권", "GS25"),
    ("Cu 모바일 교환권", "CU"),
])
def test_case_insensitive_match(text, expected):
    assert extract_merchant(text) == expected


def test_brand_inside_longer_line():
    assert extract_merchant("[파리바게뜨] 생크림 케이크") == "파리바게뜨"


def test_no_brand_returns_empty():
    assert extract_merchant("선물이 도착했어요\n카페라떼") == ""
    assert extract_merchant("") == ""


def test_find_brand_single_line():
    assert find_brand("메가커피 아이스티") == "메가커피"
    assert find_brand("아이스티") is None


def test_lexicon_is_immutable():
    assert isinstance(BRANDS, tuple)
    assert len(BRANDS) == 17


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
