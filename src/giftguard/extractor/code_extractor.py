"""
Redemption Code Extractor
=========================
One regex pass for the usual 4-4-4 voucher code ("AB12-CD34-EF56",
"1234 5678 9012", "123456789012"). Separators are removed from the result.
"""

import re

from loguru import logger

# Returned when no code shape is present. NOT an empty string; callers
# must compare against this constant.
CODE_NOT_FOUND = "코드 추출 실패"

# ASCII word characters only: Hangul runs such as "스타벅스 카페라떼 ..." would
# otherwise look like 4-character groups.
_CODE = re.compile(r'(\w{4}[-\s]?){2}\w{4}', re.ASCII)
_SEPARATORS = re.compile(r'[-\s]')


def extract_gift_code(text: str) -> str:
    """Return the first 4-4-4 code in `text` without separators, or CODE_NOT_FOUND."""
    m = _CODE.search(text)
    if not m:
        logger.debug("[CodeExtractor] no code found")
        return CODE_NOT_FOUND
    code = _SEPARATORS.sub("", m.group(0))
    logger.debug(f"[CodeExtractor] code={code!r}")
    return code


def is_code_found(code: str) -> bool:
    return bool(code) and code != CODE_NOT_FOUND
