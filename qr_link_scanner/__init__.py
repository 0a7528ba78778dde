# -*- coding: utf-8 -*-
"""
QR Link Scanner.

Camera QR/barcode scanner that offers to open links and shows everything
else as text. The OpenCV/pyzbar parts (``camera``, ``decoder``, ``overlay``,
``app``) are imported on demand.
"""

from .coordinator import ScanCoordinator
from .errors import CameraUnavailableError, DecodeError, FrameReleaseError, ScannerError
from .foreground import ForegroundQueue
from .frames import Frame
from .prompts import Prompt, PromptButton, PromptPresenter, ToastNotifier
from .routing import OpenAsLink, ShowAsText, route

__version__ = '1.0.0'

__all__ = [
    'ScanCoordinator',
    'ForegroundQueue',
    'Frame',
    'Prompt',
    'PromptButton',
    'PromptPresenter',
    'ToastNotifier',
    'OpenAsLink',
    'ShowAsText',
    'route',
    'ScannerError',
    'DecodeError',
    'CameraUnavailableError',
    'FrameReleaseError',
]
