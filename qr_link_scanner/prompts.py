# -*- coding: utf-8 -*-
"""
Modal prompts and the transient notification shown over the preview.

Only the state lives here; drawing is done by ``overlay``. Every method is
meant to be called from the UI loop.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

logger = logging.getLogger(__name__)

KEY_ENTER = (10, 13)
KEY_ESC = 27


@dataclass
class PromptButton:
    label: str
    on_click: Callable[[], None]


@dataclass
class Prompt:
    title: str
    message: Optional[str]
    positive: PromptButton
    negative: Optional[PromptButton] = None
    on_dismiss: Optional[Callable[[], None]] = None


class PromptPresenter:
    """Shows one prompt at a time.

    Accepting or declining runs the button callback and then closes the
    prompt; every close, including ``dismiss()``, runs ``on_dismiss``.
    """

    def __init__(self) -> None:
        self._active: Optional[Prompt] = None

    @property
    def active(self) -> Optional[Prompt]:
        return self._active

    def show(self, prompt: Prompt) -> None:
        if self._active is not None:
            logger.debug("Replacing open prompt '%s'", self._active.title)
            self.dismiss()
        self._active = prompt
        logger.debug("Prompt shown: %s", prompt.title)

    def accept(self) -> None:
        prompt = self._active
        if prompt is None:
            return
        prompt.positive.on_click()
        self._close(prompt)

    def decline(self) -> None:
        prompt = self._active
        if prompt is None or prompt.negative is None:
            return
        prompt.negative.on_click()
        self._close(prompt)

    def dismiss(self) -> None:
        prompt = self._active
        if prompt is None:
            return
        self._close(prompt)

    def handle_key(self, key: int) -> bool:
        """Map a HighGUI key code onto the open prompt. Returns True if consumed."""
        if self._active is None:
            return False
        if key in KEY_ENTER or key == ord('y'):
            self.accept()
        elif key == ord('n'):
            self.decline()
        elif key == KEY_ESC:
            self.dismiss()
        else:
            return False
        return True

    def _close(self, prompt: Prompt) -> None:
        # a button callback may already have replaced the prompt
        if self._active is prompt:
            self._active = None
        if prompt.on_dismiss is not None:
            prompt.on_dismiss()


class ToastNotifier:
    """Short-lived one-line message, like a mobile toast."""

    def __init__(self, duration: float = 2.0, clock: Callable[[], float] = time.monotonic) -> None:
        self.duration = duration
        self._clock = clock
        self._text: Optional[str] = None
        self._expires = 0.0

    def show(self, text: str) -> None:
        logger.info(text)
        self._text = text
        self._expires = self._clock() + self.duration

    def current(self) -> Optional[str]:
        if self._text is not None and self._clock() >= self._expires:
            self._text = None
        return self._text
