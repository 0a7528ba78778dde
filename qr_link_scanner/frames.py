# -*- coding: utf-8 -*-
"""
Frames handed from the camera to the scan coordinator.

A frame is borrowed: whoever receives it must call ``release()`` exactly
once, whatever happens to it afterwards.
"""

from __future__ import annotations

import threading
from typing import Any, Callable, Optional

from .errors import FrameReleaseError

VALID_ROTATIONS = (0, 90, 180, 270)


class Frame:
    """One camera image plus the clockwise rotation needed to make it upright."""

    def __init__(
        self,
        image: Optional[Any],
        rotation_degrees: int = 0,
        on_release: Optional[Callable[['Frame'], None]] = None,
    ) -> None:
        if rotation_degrees not in VALID_ROTATIONS:
            raise ValueError(f"rotation_degrees must be one of {VALID_ROTATIONS}, got {rotation_degrees!r}")
        self.image = image
        self.rotation_degrees = rotation_degrees
        self._on_release = on_release
        self._released = False
        self._lock = threading.Lock()

    @property
    def has_image(self) -> bool:
        if self.image is None:
            return False
        # numpy arrays: an empty capture buffer counts as missing
        size = getattr(self.image, 'size', None)
        return size is None or size > 0

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        with self._lock:
            if self._released:
                raise FrameReleaseError("frame released twice")
            self._released = True
        if self._on_release is not None:
            self._on_release(self)

    def __repr__(self) -> str:
        shape = getattr(self.image, 'shape', None)
        return f"Frame(shape={shape}, rotation={self.rotation_degrees}, released={self._released})"
