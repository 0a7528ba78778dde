# -*- coding: utf-8 -*-
"""Hand URLs to the system browser."""

from __future__ import annotations

import logging
import webbrowser

logger = logging.getLogger(__name__)


def open_in_browser(url: str) -> bool:
    opened = webbrowser.open_new_tab(url)
    if opened:
        logger.info("Opened %s", url)
    else:
        logger.warning("No browser available to open %s", url)
    return opened
