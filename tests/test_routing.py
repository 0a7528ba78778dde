"""Tests for picking the prompt from a scanned value."""

import pytest

from qr_link_scanner import OpenAsLink, ShowAsText, route


@pytest.mark.parametrize("value", ["https://example.com", "http://x", "https://a.io/path?q=1"])
def test_links_open_as_link(value):
    assert route(value) == OpenAsLink(value)


@pytest.mark.parametrize("value", ["HTTPS://x", "Http://x", "ftp://host", "hello world", " https://x", "www.example.com"])
def test_everything_else_is_text(value):
    assert route(value) == ShowAsText(value)


def test_none_and_empty_are_text():
    assert route(None) == ShowAsText(None)
    assert route("") == ShowAsText("")


def test_bare_scheme_still_counts_as_link():
    assert isinstance(route("https://"), OpenAsLink)
