# -*- coding: utf-8 -*-
"""
Camera frame source.

A background thread keeps reading the device and holds on to the newest
frame only. The UI loop uses two views of it:

- ``latest()``: the newest image, for the preview
- ``poll()``: the newest image wrapped in a ``Frame`` for analysis; a new one
  is handed out only after the previous ``Frame`` has been released, and
  frames captured in between are dropped
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Optional

import cv2
import numpy as np

from .errors import CameraUnavailableError
from .frames import VALID_ROTATIONS, Frame

logger = logging.getLogger(__name__)


class CameraFrameSource:
    def __init__(
        self,
        camera_id: int = 0,
        frame_width: int = 1280,
        frame_height: int = 720,
        rotation_degrees: int = 0,
    ) -> None:
        if rotation_degrees not in VALID_ROTATIONS:
            raise ValueError(f"rotation_degrees must be one of {VALID_ROTATIONS}, got {rotation_degrees!r}")
        self.camera_id = camera_id
        self.frame_width = frame_width
        self.frame_height = frame_height
        self.rotation_degrees = rotation_degrees

        self.cap: Optional[cv2.VideoCapture] = None
        self._lock = threading.Lock()
        self._latest: Optional[np.ndarray] = None
        self._seq = 0
        self._delivered_seq = 0
        self._outstanding: Optional[Frame] = None
        self._stopped = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def start(self) -> None:
        self.cap = cv2.VideoCapture(self.camera_id)
        if not self.cap.isOpened():
            self.cap.release()
            self.cap = None
            raise CameraUnavailableError(f"Could not open camera {self.camera_id}")
        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, int(self.frame_width))
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, int(self.frame_height))

        self._stopped.clear()
        self._thread = threading.Thread(target=self._loop, name='camera-grabber', daemon=True)
        self._thread.start()
        logger.info("Camera %s opened", self.camera_id)

    def _loop(self) -> None:
        cap = self.cap
        try:
            while not self._stopped.is_set():
                ok, frame = cap.read()
                if not ok:
                    time.sleep(0.005)
                    continue
                self.push(frame)
        finally:
            # only this thread reads, so only it may release
            cap.release()
            logger.info("Camera %s released", self.camera_id)

    def push(self, image: np.ndarray) -> None:
        """Store a newly captured image, replacing any undelivered one."""
        with self._lock:
            self._latest = image
            self._seq += 1

    # ------------------------------ Consumers -------------------------------
    def latest(self) -> Optional[np.ndarray]:
        with self._lock:
            return self._latest

    def poll(self) -> Optional[Frame]:
        with self._lock:
            if self._outstanding is not None or self._seq == self._delivered_seq:
                return None
            self._delivered_seq = self._seq
            frame = Frame(self._latest, self.rotation_degrees, on_release=self._on_release)
            self._outstanding = frame
            return frame

    def _on_release(self, frame: Frame) -> None:
        with self._lock:
            if self._outstanding is frame:
                self._outstanding = None

    def stop(self) -> None:
        self._stopped.set()
        if self._thread is not None:
            self._thread.join(timeout=1.0)
            if self._thread.is_alive():
                logger.warning("Camera %s grabber still in read(); it releases the device when that returns",
                               self.camera_id)
            self._thread = None
        self.cap = None
