# -*- coding: utf-8 -*-
"""Decide how a scanned value is offered to the user."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

LINK_PREFIXES = ('http://', 'https://')


@dataclass(frozen=True)
class OpenAsLink:
    url: str


@dataclass(frozen=True)
class ShowAsText:
    text: Optional[str]


PromptChoice = Union[OpenAsLink, ShowAsText]


def route(raw_value: Optional[str]) -> PromptChoice:
    """Links get an "open" prompt, everything else is shown as plain text.

    The prefix match is case-sensitive: ``HTTPS://x`` is text.
    """
    if raw_value is not None and raw_value.startswith(LINK_PREFIXES):
        return OpenAsLink(raw_value)
    return ShowAsText(raw_value)
