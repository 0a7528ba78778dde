#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
QR Link Scanner - Camera QR/Barcode Scanner with Link Prompts

Purpose
-------
Previews a live camera feed, decodes the first QR code or barcode it sees,
and asks what to do with it:

- Values starting with http:// or https:// -> "Open URL?" (Yes opens the browser)
- Anything else                             -> "Scanned Text" (OK)

While a prompt is open no new frames are decoded. Closing the prompt in any
way resumes scanning.

Controls
--------
While a prompt is open:
  y / Enter = Yes / OK
  n         = No
  Esc       = Close the prompt
Otherwise:
  q / Esc   = Quit

Dependencies
------------
  pip install opencv-python numpy pyzbar pyyaml
  (pyzbar needs the zbar shared library, e.g. apt install libzbar0)
"""

from __future__ import annotations

import argparse
import logging
import time
from typing import Any, Dict, Optional

import cv2

from . import overlay
from .camera import CameraFrameSource
from .config import LOG_LEVELS, load_config
from .coordinator import ScanCoordinator
from .decoder import PyzbarDecoder
from .errors import CameraUnavailableError
from .foreground import ForegroundQueue
from .prompts import KEY_ESC, PromptPresenter, ToastNotifier

logger = logging.getLogger(__name__)

CAMERA_NOTICE = "Camera permission is required to scan"


class ScannerApp:
    def __init__(self, cfg: Dict[str, Any]) -> None:
        self.cfg = cfg
        self.window = str(cfg['window_title'])

        self.source = CameraFrameSource(
            camera_id=int(cfg['camera_id']),
            frame_width=int(cfg['frame_width']),
            frame_height=int(cfg['frame_height']),
            rotation_degrees=int(cfg['rotation_degrees']),
        )
        self.decoder = PyzbarDecoder(
            symbol_types=cfg['symbol_types'],
            enhance_contrast=bool(cfg['enhance_contrast']),
            max_workers=int(cfg['decode_workers']),
        )
        self.foreground = ForegroundQueue()
        self.presenter = PromptPresenter()
        self.notifier = ToastNotifier(duration=float(cfg['toast_seconds']))
        self.coordinator = ScanCoordinator(self.decoder, self.foreground, self.presenter, self.notifier)

        # Stats
        self.fps = 0.0
        self._t0 = time.time()
        self._frames = 0

    # ----------------------------- Render ----------------------------------
    def render(self) -> Any:
        frame = self.source.latest()
        if frame is None:
            out = overlay.blank_canvas(int(self.cfg['frame_width']), int(self.cfg['frame_height']))
        else:
            out = frame.copy()

        overlay.draw_status_bar(out, self.fps, self.coordinator.scanning_in_progress)
        toast = self.notifier.current()
        if toast:
            overlay.draw_toast(out, toast)
        if self.presenter.active is not None:
            overlay.draw_prompt(out, self.presenter.active)
        return out

    def _tick_fps(self) -> None:
        self._frames += 1
        dt = time.time() - self._t0
        if dt >= 1.0:
            self.fps = self._frames / dt
            self._frames = 0
            self._t0 = time.time()

    # ------------------------------ Keys -----------------------------------
    def handle_key(self, key: int) -> bool:
        """Returns False when the app should quit."""
        if key == 0xFF:
            return True
        if self.presenter.handle_key(key):
            return True
        return key not in (ord('q'), KEY_ESC)

    # ------------------------------- Loop ----------------------------------
    def step(self) -> None:
        """One pass of the UI loop minus the key read."""
        self.foreground.run_pending()
        frame = self.source.poll()
        if frame is not None:
            self.coordinator.on_frame(frame)
        self._tick_fps()

    def run(self) -> None:
        try:
            self.source.start()
        except CameraUnavailableError as e:
            logger.error("Error starting camera: %s", e)
            self.show_notice(CAMERA_NOTICE)
            self.decoder.close()
            return

        print("=== QR Link Scanner Started ===")
        print("Controls: y/Enter=Yes/OK, n=No, Esc=Close prompt, q=Quit")
        print("---------------------------")
        try:
            while True:
                self.step()
                cv2.imshow(self.window, self.render())
                if not self.handle_key(cv2.waitKey(1) & 0xFF):
                    break
        finally:
            self.source.stop()
            self.decoder.close()
            # completions queued during shutdown still release their frames
            self.foreground.run_pending()
            cv2.destroyAllWindows()
            print("Stopped.")

    def show_notice(self, text: str) -> None:
        out = overlay.blank_canvas(int(self.cfg['frame_width']), int(self.cfg['frame_height']))
        overlay.draw_notice(out, text)
        cv2.imshow(self.window, out)
        cv2.waitKey(0)
        cv2.destroyAllWindows()


# ================================ CLI ======================================

def parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description='QR Link Scanner - scan QR codes and barcodes from a camera')
    p.add_argument('--camera', type=int, default=None, help='Camera device ID (default 0)')
    p.add_argument('--config', type=str, default=None, help='Optional YAML config path')
    p.add_argument('--log-level', type=str.upper, default=None, choices=LOG_LEVELS,
                   help='Root log level (default INFO)')
    return p.parse_args(argv)


def build_config(args: argparse.Namespace) -> Dict[str, Any]:
    cfg = load_config(args.config)
    if args.camera is not None:
        cfg['camera_id'] = args.camera
    if args.log_level:
        cfg['log_level'] = args.log_level
    return cfg


def main(argv: Optional[list] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO, format='[%(levelname)s] %(name)s: %(message)s')
    cfg = build_config(args)
    logging.getLogger().setLevel(cfg['log_level'])
    ScannerApp(cfg).run()


if __name__ == '__main__':
    main()
