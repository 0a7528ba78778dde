"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Fake decoder, navigator and a wired-up coordinator. None of these touch a
camera, OpenCV or zbar.

==============================================================================
"""

from concurrent.futures import Future
from typing import List

import pytest

from qr_link_scanner import ForegroundQueue, Frame, PromptPresenter, ScanCoordinator, ToastNotifier
from qr_link_scanner.errors import DecodeError


class Symbol:
    def __init__(self, raw_value, format='QRCODE'):
        self.raw_value = raw_value
        self.format = format


class FakeDecoder:
    """Records every request and hands back a future the test resolves."""

    def __init__(self) -> None:
        self.calls: List[tuple] = []
        self.futures: List[Future] = []

    def process(self, image, rotation_degrees=0):
        self.calls.append((image, rotation_degrees))
        future = Future()
        self.futures.append(future)
        return future

    def finish(self, *raw_values) -> None:
        self.futures[-1].set_result([Symbol(v) for v in raw_values])

    def fail(self, message: str = 'boom') -> None:
        self.futures[-1].set_exception(DecodeError(message))


class Navigator:
    def __init__(self) -> None:
        self.urls: List[str] = []

    def __call__(self, url: str) -> bool:
        self.urls.append(url)
        return True


class CountingFrame(Frame):
    """Frame that counts releases instead of raising on the second one."""

    def __init__(self, image='pixels', rotation_degrees=0):
        super().__init__(image, rotation_degrees)
        self.release_count = 0

    def release(self) -> None:
        self.release_count += 1
        super().release()


# ============================================================================
# FIXTURES
# ============================================================================

@pytest.fixture
def decoder() -> FakeDecoder:
    return FakeDecoder()


@pytest.fixture
def foreground() -> ForegroundQueue:
    return ForegroundQueue()


@pytest.fixture
def presenter() -> PromptPresenter:
    return PromptPresenter()


@pytest.fixture
def clock():
    now = [100.0]
    return now


@pytest.fixture
def notifier(clock) -> ToastNotifier:
    return ToastNotifier(duration=2.0, clock=lambda: clock[0])


@pytest.fixture
def navigator() -> Navigator:
    return Navigator()


@pytest.fixture
def coordinator(decoder, foreground, presenter, notifier, navigator) -> ScanCoordinator:
    return ScanCoordinator(decoder, foreground, presenter, notifier, navigate=navigator)


@pytest.fixture
def frame() -> CountingFrame:
    return CountingFrame()


@pytest.fixture
def make_frame():
    return CountingFrame
