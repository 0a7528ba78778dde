# -*- coding: utf-8 -*-
"""
Single-threaded task queue for the UI loop.

Worker threads post callables here; the UI loop runs them in order on its own
thread, so every piece of UI state is only ever touched from one place.
"""

from __future__ import annotations

import queue
from typing import Any, Callable


class ForegroundQueue:
    def __init__(self) -> None:
        self._tasks: 'queue.Queue[tuple]' = queue.Queue()

    def submit(self, fn: Callable[..., Any], *args: Any) -> None:
        """Schedule ``fn(*args)`` on the foreground sequence. Safe from any thread."""
        self._tasks.put((fn, args))

    def run_pending(self) -> int:
        """Run every task queued so far, in order. Returns how many ran."""
        ran = 0
        while True:
            try:
                fn, args = self._tasks.get_nowait()
            except queue.Empty:
                return ran
            fn(*args)
            ran += 1

    def __len__(self) -> int:
        return self._tasks.qsize()
