"""
OCR Noise Normalizer
====================
Two deliberately separate cleaners:

  normalize_ocr_noise()    Lossy. Turns glyphs OCR confuses with digits
                           (l, I → 1 and O → 0) into digits and long dashes
                           into '-'. Only ever fed to date-pattern scanning;
                           the output is never shown or used as an item name.

  normalize_label_noise()  Light. Runs ahead of menu-name extraction only:
                           full-width colon → ':' and the "상품명I 카페라떼"
                           artifact where the label colon is read as I/l.

Both map every input character to exactly one output character except the
label-noise repair, so line positions survive normalize_ocr_noise().
"""

_DASH_TABLE = str.maketrans({
    "–": "-",   # en dash
    "—": "-",   # em dash
    "l": "1",
    "I": "1",
    "O": "0",
})


def normalize_ocr_noise(text: str) -> str:
    """
    Replace OCR-confusable glyphs with the digits they usually are.

    Args:
        text: Raw recognized text

    Returns:
        Text of the same length, suitable only for date scanning
    """
    return text.translate(_DASH_TABLE)


def normalize_label_noise(line: str) -> str:
    """Repair label separators on a single line before menu extraction."""
    return (
        line.replace("：", ":")
        .replace("I ", ": ")
        .replace("l ", ": ")
        .strip()
    )
