# -*- coding: utf-8 -*-
"""
Symbol decoder backed by pyzbar (zbar).

Frames are turned upright using their rotation tag, optionally
contrast-enhanced, then handed to zbar. ``process()`` runs the decode on a
worker thread and returns a ``concurrent.futures.Future``.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

import cv2
import numpy as np
from pyzbar.pyzbar import ZBarSymbol, decode

from .errors import DecodeError
from .frames import VALID_ROTATIONS

logger = logging.getLogger(__name__)

# Clockwise rotation that makes a frame tagged with N degrees upright
ROTATIONS = {90: cv2.ROTATE_90_CLOCKWISE, 180: cv2.ROTATE_180, 270: cv2.ROTATE_90_COUNTERCLOCKWISE}


@dataclass(frozen=True)
class DetectedSymbol:
    raw_value: Optional[str]
    format: str
    rect: Tuple[int, int, int, int] = (0, 0, 0, 0)
    polygon: Tuple[Tuple[int, int], ...] = field(default_factory=tuple)


def symbol_types_from_names(names: Optional[Iterable[str]]) -> Optional[List[ZBarSymbol]]:
    """Translate config names like ``QRCODE`` or ``EAN13`` into zbar symbol types."""
    if not names:
        return None
    types = []
    for name in names:
        try:
            types.append(ZBarSymbol[str(name).upper()])
        except KeyError:
            raise ValueError(f"Unknown symbol type: {name}") from None
    return types


def raw_text(data: bytes) -> Optional[str]:
    """zbar hands back bytes; payloads that are not UTF-8 have no string value."""
    try:
        return data.decode('utf-8')
    except UnicodeDecodeError:
        return None


class PyzbarDecoder:
    def __init__(
        self,
        symbol_types: Optional[Iterable[str]] = None,
        enhance_contrast: bool = True,
        max_workers: int = 1,
    ) -> None:
        self.symbols = symbol_types_from_names(symbol_types)
        self.enhance_contrast = enhance_contrast
        self._pool = ThreadPoolExecutor(max_workers=max(1, int(max_workers)), thread_name_prefix='decoder')

    # --------------------------- Preprocess --------------------------------
    def preprocess(self, image: np.ndarray, rotation_degrees: int) -> np.ndarray:
        """Rotate upright and convert to grayscale, with CLAHE if enabled."""
        if rotation_degrees not in VALID_ROTATIONS:
            raise DecodeError(f"Unsupported rotation: {rotation_degrees}")
        if rotation_degrees:
            image = cv2.rotate(image, ROTATIONS[rotation_degrees])

        if image.ndim == 3:
            gray = cv2.cvtColor(image, cv2.COLOR_BGR2GRAY)
        else:
            gray = image

        if self.enhance_contrast:
            clahe = cv2.createCLAHE(clipLimit=2.0, tileGridSize=(8, 8))
            gray = clahe.apply(gray)
        return gray

    # ----------------------------- Detect ----------------------------------
    def decode(self, image: np.ndarray, rotation_degrees: int = 0) -> List[DetectedSymbol]:
        """Decode synchronously. Results keep zbar's reporting order."""
        if image is None or getattr(image, 'size', 0) == 0:
            raise DecodeError("Empty image")
        try:
            gray = self.preprocess(image, rotation_degrees)
            found = decode(gray, symbols=self.symbols)
        except DecodeError:
            raise
        except Exception as e:
            raise DecodeError(str(e)) from e

        results = []
        for barcode in found:
            results.append(DetectedSymbol(
                raw_value=raw_text(barcode.data),
                format=barcode.type,
                rect=tuple(barcode.rect),
                polygon=tuple((pt.x, pt.y) for pt in barcode.polygon),
            ))
        if results:
            logger.debug("Decoded %d symbol(s): %s", len(results), [r.format for r in results])
        return results

    def process(self, image: np.ndarray, rotation_degrees: int = 0) -> 'Future[List[DetectedSymbol]]':
        """Decode on the worker pool."""
        return self._pool.submit(self.decode, image, rotation_degrees)

    def close(self) -> None:
        self._pool.shutdown(wait=True)
