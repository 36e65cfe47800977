"""
Expiry Date Extractor
=====================
Finds the expiry date printed on a gifticon and returns it as YYYY-MM-DD.

Pipeline
--------
  1. normalize_ocr_noise() the text (l/I → 1, O → 0, long dashes → '-')
  2. Candidate pool = lines carrying an expiry keyword + the whole text
  3. For "A ~ B" ranges keep only B (the expiry side)
  4. Run every DatePattern over every pool entry (patterns are NOT
     mutually exclusive: one line can feed several of them)
  5. to_ymd() each match, keep the calendar-valid ones
  6. Return the LATEST valid date

Why latest-wins
---------------
Vouchers print both an issue/purchase date and the expiry date, and the
expiry is the later one. Unrelated dates and digit noise also show up, so
"latest valid date" is the single most robust rule without semantic tagging.
It misfires when boilerplate carries a later unrelated date; the combined
extractor's confidence score does not try to detect that.

Month-day only dates ("12/25까지") get their year from `today`: the current
year unless that date has already passed, then next year. `today` is a
parameter so callers and tests control it.
"""

import re
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Tuple

from loguru import logger

from giftguard.lexicons import EXPIRY_KEYWORDS, EXPIRY_KEYWORDS_LATIN, RANGE_SEPARATORS
from giftguard.text_normalizer import normalize_ocr_noise


@dataclass(frozen=True)
class DatePattern:
    """One date shape. Matches are handed whole to to_ymd()."""
    name: str
    regex: re.Pattern


# ─── Date shapes, most specific first ─────────────────────────────────────────

DATE_PATTERNS: Tuple[DatePattern, ...] = (
    # 2024년 12월 31일 (화) 23:59 까지
    DatePattern(
        "korean_full",
        re.compile(
            r'(20\d{2})\s*년\s*(1[0-2]|0?[1-9])\s*월\s*(3[01]|[12]?\d)\s*일?'
            r'(\s*\([^)]+\))?(\s*\d{1,2}:\d{2})?\s*(까지|만료)?'
        ),
    ),
    # 2024.12.31  2024-12-31  2024/12/31
    DatePattern(
        "yyyy_mm_dd",
        re.compile(r'(20\d{2})[.\-/](1[0-2]|0?[1-9])[.\-/](3[01]|[12]?\d)'),
    ),
    # 24.12.31
    DatePattern(
        "yy_mm_dd",
        re.compile(r'(2\d)[.\-/](1[0-2]|0?[1-9])[.\-/](3[01]|[12]?\d)'),
    ),
    # 20241231
    DatePattern(
        "yyyymmdd",
        re.compile(r'\b((20\d{2})(1[0-2]|0[1-9])(3[01]|[12]\d))\b', re.ASCII),
    ),
    # 241231
    DatePattern(
        "yymmdd",
        re.compile(r'\b((\d{2})(1[0-2]|0[1-9])(3[01]|[12]\d))\b', re.ASCII),
    ),
    # 12-25  12.25  12/25, never the tail of a date that already has a year
    DatePattern(
        "mm_dd",
        re.compile(
            r'(?<!\d[.\-/])\b(1[0-2]|0?[1-9])[.\-/](3[01]|[12]?\d)\b(?![.\-/]\d)',
            re.ASCII,
        ),
    ),
)

_DIGITS = re.compile(r'\d+', re.ASCII)
_YMD = re.compile(r'(20\d{2})-(0[1-9]|1[0-2])-(0[1-9]|[12]\d|3[01])', re.ASCII)
_RANGE_SPLIT = re.compile("[" + "".join(RANGE_SEPARATORS) + "]")

_MONTH_DAYS = {1: 31, 2: 28, 3: 31, 4: 30, 5: 31, 6: 30,
               7: 31, 8: 31, 9: 30, 10: 31, 11: 30, 12: 31}


# ─── Calendar validation ──────────────────────────────────────────────────────

def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def is_valid_ymd(ymd: str) -> bool:
    """
    Exact YYYY-MM-DD with year 2000-2099 and a day that exists in that month.

    Any deviation from the format is rejected outright.
    """
    m = _YMD.fullmatch(ymd)
    if not m:
        return False
    year, month, day = int(m.group(1)), int(m.group(2)), int(m.group(3))
    max_day = 29 if month == 2 and is_leap_year(year) else _MONTH_DAYS[month]
    return 1 <= day <= max_day


# ─── Numeric-token interpretation ─────────────────────────────────────────────

def _fmt(year: int, month: int, day: int) -> str:
    return f"{year:04d}-{month:02d}-{day:02d}"


def infer_year(month: int, day: int, today: Optional[date] = None) -> Optional[Tuple[int, int, int]]:
    """
    Pick the year for a month/day with no year printed.

    Current year unless (month, day) is already behind `today`, then next year.
    """
    if not (1 <= month <= 12 and 1 <= day <= 31):
        return None
    today = today or date.today()
    this_key = today.year * 10000 + month * 100 + day
    today_key = today.year * 10000 + today.month * 100 + today.day
    year = today.year + 1 if this_key < today_key else today.year
    return year, month, day


def to_ymd(raw: str, today: Optional[date] = None) -> Optional[str]:
    """
    Convert a raw date match into YYYY-MM-DD (not yet calendar-validated).

    Token shapes understood:
      ≥3 tokens, first has 4 digits  → year, month, day
      ≥3 tokens, first has 2 digits  → 20yy, month, day
      1 token of 8 digits            → yyyy mm dd
      1 token of 6 digits            → yy mm dd
      2 tokens                       → month, day, year inferred from `today`
    Anything else → None.
    """
    nums = _DIGITS.findall(raw)

    if len(nums) >= 3 and len(nums[0]) == 4:
        return _fmt(int(nums[0]), int(nums[1]), int(nums[2]))

    if len(nums) >= 3 and len(nums[0]) == 2:
        return _fmt(2000 + int(nums[0]), int(nums[1]), int(nums[2]))

    if len(nums) == 1:
        n = nums[0]
        if len(n) == 8:
            return _fmt(int(n[:4]), int(n[4:6]), int(n[6:8]))
        if len(n) == 6:
            return _fmt(2000 + int(n[:2]), int(n[2:4]), int(n[4:6]))

    if len(nums) == 2:
        inferred = infer_year(int(nums[0]), int(nums[1]), today)
        if inferred is None:
            return None
        return _fmt(*inferred)

    return None


# ─── Candidate pool ───────────────────────────────────────────────────────────

def _has_expiry_keyword(line: str) -> bool:
    if any(kw in line for kw in EXPIRY_KEYWORDS):
        return True
    lowered = line.lower()
    return any(kw in lowered for kw in EXPIRY_KEYWORDS_LATIN)


def _candidate_pool(original: str, normalized: str) -> List[str]:
    """
    Keyword lines first, then the whole normalized text, de-duplicated.

    Keywords are looked up on the ORIGINAL line, since normalization would turn
    "valid" into "va1id". Normalization is 1:1 per character so raw and
    normalized lines stay aligned.
    """
    keyword_lines = []
    for raw_line, norm_line in zip(original.splitlines(), normalized.splitlines()):
        norm_line = norm_line.strip()
        if norm_line and _has_expiry_keyword(raw_line):
            keyword_lines.append(norm_line)
    return list(dict.fromkeys(keyword_lines + [normalized]))


def right_of_range(s: str) -> str:
    """'2024.01.01 ~ 2024.12.31' → '2024.12.31'; text without a range is unchanged."""
    parts = [p.strip() for p in _RANGE_SPLIT.split(s)]
    return parts[-1] if len(parts) >= 2 else s


# ─── Public entry point ───────────────────────────────────────────────────────

def find_date_candidates(text: str, today: Optional[date] = None) -> List[str]:
    """All calendar-valid YYYY-MM-DD candidates, in discovery order (may repeat)."""
    normalized = normalize_ocr_noise(text)
    candidates: List[str] = []

    for entry in _candidate_pool(text, normalized):
        target = right_of_range(entry).rstrip()
        for pattern in DATE_PATTERNS:
            for m in pattern.regex.finditer(target):
                ymd = to_ymd(m.group(0), today)
                if ymd and is_valid_ymd(ymd):
                    candidates.append(ymd)
                elif ymd:
                    logger.debug(f"[DateExtractor] {pattern.name}: dropped invalid {ymd!r}")

    return candidates


def extract_expiry_date(text: str, today: Optional[date] = None) -> Optional[str]:
    """
    Return the latest valid date in `text` as YYYY-MM-DD, or None.

    Args:
        text:  Raw recognized text
        today: Reference date for month-day-only matches (default: date.today())
    """
    if not text or not text.strip():
        return None

    candidates = find_date_candidates(text, today)
    if not candidates:
        logger.debug("[DateExtractor] no valid date candidates")
        return None

    best = max(candidates)
    logger.debug(f"[DateExtractor] {len(candidates)} candidate(s), latest={best}")
    return best
