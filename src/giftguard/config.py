"""
Configuration loader
Reads config/giftguard_config.yaml and merges it over built-in defaults
"""

import copy
import os
from pathlib import Path
from typing import Dict, Optional, Union

import yaml
from loguru import logger


DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "giftguard_config.yaml"


def default_config() -> Dict:
    """Return default configuration"""
    return {
        'ocr': {
            'use_gpu': False,
            'use_angle_cls': True,
            'lang': 'korean',
            'drop_score': 0.5,
            'use_space_char': True,
        },
        'storage': {
            'memo': '자동 인식 저장',
        },
        'logging': {
            'level': 'INFO',
            'file': 'logs/giftguard.log',
        },
        'upload': {
            'upload_dir': 'data/uploads',
            'allowed_extensions': ['.jpg', '.jpeg', '.png', '.webp', '.bmp'],
            'max_file_size_mb': 10,
        },
    }


def _merge(base: Dict, override: Dict) -> Dict:
    merged = copy.deepcopy(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Optional[Union[str, Path]] = None) -> Dict:
    """
    Load configuration from YAML file

    Falls back to defaults when the file is missing. Sections present in the
    file override the defaults key by key.
    """
    if config_path is None:
        config_path = os.environ.get("GIFTGUARD_CONFIG", DEFAULT_CONFIG_PATH)

    if not os.path.exists(config_path):
        logger.warning(f"Config file not found: {config_path}, using defaults")
        return default_config()

    with open(config_path, 'r', encoding='utf-8') as f:
        raw = yaml.safe_load(f) or {}

    return _merge(default_config(), raw)
