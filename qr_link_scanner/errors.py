# -*- coding: utf-8 -*-
"""Exception types raised by the scanner."""


class ScannerError(Exception):
    """Base class for all scanner errors."""


class DecodeError(ScannerError):
    """The decoder could not process a frame."""


class CameraUnavailableError(ScannerError):
    """The camera could not be opened (missing device or access denied)."""


class FrameReleaseError(ScannerError):
    """A frame was released more than once."""
