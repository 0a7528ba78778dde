# -*- coding: utf-8 -*-
"""
Scan coordinator: admission gate, decode dispatch and result routing.

Flow per frame:

    on_frame -> decoder (worker thread) -> ForegroundQueue -> on_decode_result
             -> route -> prompt -> (user closes prompt) -> admission re-armed

``scanning_in_progress`` is only read and written on the foreground
sequence. While it is set, frames are released without being decoded.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future
from typing import Callable, List, Optional

from .foreground import ForegroundQueue
from .frames import Frame
from .navigation import open_in_browser
from .prompts import Prompt, PromptButton, PromptPresenter, ToastNotifier
from .routing import OpenAsLink, PromptChoice, route

logger = logging.getLogger(__name__)


class ScanCoordinator:
    def __init__(
        self,
        decoder,
        foreground: ForegroundQueue,
        presenter: PromptPresenter,
        notifier: Optional[ToastNotifier] = None,
        navigate: Callable[[str], object] = open_in_browser,
    ) -> None:
        """
        Args:
            decoder: anything with ``process(image, rotation_degrees) -> Future``
                resolving to a list of ``DetectedSymbol``
            foreground: queue drained by the UI loop
            presenter: shows the link/text prompts
            notifier: transient "Scanned: ..." message, optional
            navigate: opens a URL externally; its return value is ignored
        """
        self._decoder = decoder
        self._foreground = foreground
        self._presenter = presenter
        self._notifier = notifier
        self._navigate = navigate
        self._scanning = False

    @property
    def scanning_in_progress(self) -> bool:
        return self._scanning

    # ------------------------------ Admission -------------------------------
    def on_frame(self, frame: Frame) -> None:
        if self._scanning:
            frame.release()
            return
        if not frame.has_image:
            frame.release()
            return

        try:
            future = self._decoder.process(frame.image, frame.rotation_degrees)
        except Exception as e:
            # e.g. RuntimeError once the decoder pool is shut down
            self.on_decode_result(frame, [], error=e)
            return
        future.add_done_callback(lambda f: self._foreground.submit(self._complete, frame, f))

    def _complete(self, frame: Frame, future: Future) -> None:
        try:
            symbols = future.result()
        except Exception as e:
            self.on_decode_result(frame, [], error=e)
        else:
            self.on_decode_result(frame, symbols)

    # ------------------------------- Results --------------------------------
    def on_decode_result(self, frame: Frame, symbols: List, error: Optional[BaseException] = None) -> None:
        """Handle one finished decode. The frame is released on every path."""
        try:
            if error is not None:
                logger.error("Scan failed: %s", error)
                return
            if not symbols:
                return
            if self._scanning:
                # a prompt is already pending; only one decision at a time
                logger.debug("Dropping result that arrived while a prompt is open")
                return

            # decoder order decides which code wins in a multi-code frame
            raw_value = symbols[0].raw_value
            self._scanning = True
            if self._notifier is not None:
                self._notifier.show(f"Scanned: {raw_value}")
            self._present(route(raw_value))
        finally:
            frame.release()

    # ------------------------------- Prompts --------------------------------
    def _present(self, choice: PromptChoice) -> None:
        if isinstance(choice, OpenAsLink):
            url = choice.url
            prompt = Prompt(
                title='Open URL?',
                message=url,
                positive=PromptButton('Yes', lambda: self._open(url)),
                negative=PromptButton('No', self._rearm),
                on_dismiss=self._rearm,
            )
        else:
            prompt = Prompt(
                title='Scanned Text',
                message=choice.text,
                positive=PromptButton('OK', self._rearm),
                on_dismiss=self._rearm,
            )
        self._presenter.show(prompt)

    def _open(self, url: str) -> None:
        try:
            self._navigate(url)
        except Exception as e:
            logger.error("Could not open %s: %s", url, e)
        finally:
            self._rearm()

    def _rearm(self) -> None:
        self._scanning = False
