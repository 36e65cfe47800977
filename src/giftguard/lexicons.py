"""
Static lookup tables for gifticon text extraction.

All tables are tuples built once at import time and never mutated, so any
number of concurrent extraction calls can read them without locking.
"""

# ─── Brands ───────────────────────────────────────────────────────────────────
# Order matters: extract_merchant() returns the FIRST entry found anywhere in
# the text, so earlier entries win when OCR noise makes two brands appear.
BRANDS = (
    "스타벅스", "이디야", "투썸", "할리스", "폴바셋", "파스쿠찌", "메가커피",
    "배스킨라빈스", "던킨", "파리바게뜨", "뚜레쥬르", "버거킹", "맥도날드",
    "CU", "GS25", "세븐일레븐", "미니스톱",
)

# ─── Menu keywords (cafe / dessert items) ─────────────────────────────────────
MENU_KEYWORDS = (
    "아메리카노", "에스프레소", "라떼", "카페라떼", "바닐라라떼", "카푸치노", "콜드브루",
    "헤이즐넛", "카라멜마키아토", "카페모카", "화이트모카", "돌체라떼", "샷", "디카페인",
    "아이스아메리카노", "아이스라떼", "아이스바닐라라떼", "아이스모카", "아이스콜드브루", "아이스티",
    "그린티", "블랙티", "얼그레이", "캐모마일", "유자차", "자몽", "레몬에이드", "복숭아아이스티",
    "초코", "초콜릿",
    "스콘", "케이크", "마카롱", "쿠키",
)

# ─── Field labels printed before the item name ────────────────────────────────
# "상품명" must precede "상품" so the longer label is consumed first.
LABEL_WORDS = ("상품명", "제품명", "메뉴명", "상품", "Item", "ITEM", "Product", "PRODUCT")

QUANTITY_WORDS = ("수량", "매수", "개", "수량:", "QTY", "Qty", "qty")

# Voucher boilerplate that never appears inside an item name
BOILERPLATE_WORDS = (
    "유효기간", "까지", "만료", "사용처", "안내", "고객센터",
    "교환", "코드", "바코드", "포인트", "결제", "주문",
)

# ─── Expiry keywords ──────────────────────────────────────────────────────────
# Korean terms are matched as-is, Latin ones case-insensitively.
EXPIRY_KEYWORDS = ("유효기간", "만료", "까지", "사용기한", "교환기한")
EXPIRY_KEYWORDS_LATIN = ("valid", "expire")

# Range separators; the expiry side of "A ~ B" is B.
# The en and em dashes only split raw text: normalize_ocr_noise() turns them
# into "-" before date scanning, and latest-wins still picks the end date.
RANGE_SEPARATORS = ("~", "〜", "–", "—")
