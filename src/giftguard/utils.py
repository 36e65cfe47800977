"""
Utility functions for gifticon processing
"""

import os
import re
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from loguru import logger


DEFAULT_IMAGE_EXTENSIONS = ['.jpg', '.jpeg', '.png', '.webp', '.bmp']


def validate_image_file(file_path: str, allowed_extensions: Optional[List[str]] = None) -> Tuple[bool, str]:
    """
    Validate if file is a readable image

    Args:
        file_path: Path to file
        allowed_extensions: List of allowed extensions (default: common image formats)

    Returns:
        (is_valid, message)
    """
    if allowed_extensions is None:
        allowed_extensions = DEFAULT_IMAGE_EXTENSIONS

    if not os.path.exists(file_path):
        return False, "File not found"

    ext = os.path.splitext(file_path)[1].lower()
    if ext not in allowed_extensions:
        return False, f"Invalid extension: {ext}. Allowed: {allowed_extensions}"

    # Verify MIME type (don't trust extension alone)
    try:
        import magic
        mime = magic.from_file(file_path, mime=True)
        if not mime.startswith('image/'):
            return False, f"Not an image file (MIME type: {mime})"
    except Exception as e:
        logger.warning(f"Could not verify MIME type: {e}")

    return True, "Valid image file"


def sanitize_filename(filename: str) -> str:
    """
    Sanitize filename to prevent path traversal and special characters

    Args:
        filename: Original filename

    Returns:
        Sanitized filename
    """
    filename = os.path.basename(filename)
    filename = re.sub(r'[^a-zA-Z0-9._-]', '_', filename)

    if len(filename) > 100:
        name, ext = os.path.splitext(filename)
        filename = name[:95] + ext

    return filename


def ensure_directory(dir_path: str) -> str:
    """Create directory if missing, return its absolute path"""
    path = Path(dir_path)
    path.mkdir(parents=True, exist_ok=True)
    return str(path.absolute())


def preview(text: str, limit: int = 100) -> str:
    """Single-line head of recognized text for log messages"""
    flat = " ".join(text.split())
    return flat if len(flat) <= limit else flat[:limit] + "…"


def setup_logging(log_file: str = "logs/giftguard.log", level: str = "INFO"):
    """
    Setup logging configuration

    Args:
        log_file: Path to log file
        level: Log level (DEBUG, INFO, WARNING, ERROR)
    """
    logger.remove()

    logger.add(
        sys.stdout,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        level=level
    )

    log_dir = os.path.dirname(log_file)
    if log_dir:
        ensure_directory(log_dir)
    logger.add(
        log_file,
        rotation="10 MB",
        retention="30 days",
        level=level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
    )

    logger.info("Logging initialized")
