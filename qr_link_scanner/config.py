# -*- coding: utf-8 -*-
"""
Configuration defaults and optional YAML overrides.

Keys present in the YAML file override the defaults below; anything else
keeps its default value.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import yaml

from .frames import VALID_ROTATIONS

logger = logging.getLogger(__name__)

# ========================== Default Configuration ============================
# Camera
CAMERA_ID = 0
FRAME_WIDTH = 1280
FRAME_HEIGHT = 720
ROTATION_DEGREES = 0

# Decoding
ENHANCE_CONTRAST = True
DECODE_WORKERS = 1

# UI
WINDOW_TITLE = 'QR Link Scanner'
TOAST_SECONDS = 2.0

# Logging
LOG_LEVEL = 'INFO'
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

DEFAULTS: Dict[str, Any] = {
    'camera_id': CAMERA_ID,
    'frame_width': FRAME_WIDTH,
    'frame_height': FRAME_HEIGHT,
    'rotation_degrees': ROTATION_DEGREES,
    'enhance_contrast': ENHANCE_CONTRAST,
    'symbol_types': None,
    'decode_workers': DECODE_WORKERS,
    'window_title': WINDOW_TITLE,
    'toast_seconds': TOAST_SECONDS,
    'log_level': LOG_LEVEL,
}
# ============================================================================


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Return the defaults merged with the YAML file at ``path``, if any."""
    cfg = dict(DEFAULTS)
    if not path:
        return cfg
    try:
        with open(path, 'r', encoding='utf-8') as f:
            loaded = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Could not load config '%s': %s", path, e)
        return cfg
    if not isinstance(loaded, dict):
        logger.warning("Ignoring config '%s': expected a mapping, got %s", path, type(loaded).__name__)
        return cfg

    unknown = sorted(set(loaded) - set(DEFAULTS))
    if unknown:
        logger.warning("Unknown config keys ignored: %s", ', '.join(unknown))
    cfg.update({k: v for k, v in loaded.items() if k in DEFAULTS})
    _check_values(cfg)
    logger.info("Loaded config: %s", path)
    return cfg


def normalize_log_level(value: Any) -> Optional[str]:
    """Upper-cased level name, or None if logging would not accept it."""
    level = str(value).upper()
    return level if level in LOG_LEVELS else None


def _check_values(cfg: Dict[str, Any]) -> None:
    # out-of-range values are replaced by their defaults
    if cfg['rotation_degrees'] not in VALID_ROTATIONS:
        logger.warning("rotation_degrees must be one of %s, got %r; using %d",
                       VALID_ROTATIONS, cfg['rotation_degrees'], ROTATION_DEGREES)
        cfg['rotation_degrees'] = ROTATION_DEGREES

    level = normalize_log_level(cfg['log_level'])
    if level is None:
        logger.warning("Unknown log_level %r; using %s", cfg['log_level'], LOG_LEVEL)
        level = LOG_LEVEL
    cfg['log_level'] = level
