"""Smoke tests for the preview drawing helpers."""

import pytest

pytest.importorskip('cv2')

from qr_link_scanner import overlay  # noqa: E402
from qr_link_scanner.prompts import Prompt, PromptButton  # noqa: E402


def test_wrap_text():
    assert overlay.wrap_text(None) == ['']
    assert overlay.wrap_text('abcdef', width=4) == ['abcd', 'ef']
    lines = overlay.wrap_text('x' * 100, width=10, max_lines=2)
    assert len(lines) == 2 and lines[-1].endswith('...')


def test_prompt_and_toast_draw_over_preview():
    out = overlay.blank_canvas(320, 240)
    before = out.copy()
    prompt = Prompt('Open URL?', 'https://a.io', PromptButton('Yes', lambda: None), PromptButton('No', lambda: None))

    overlay.draw_status_bar(out, 29.7, scanning=True)
    overlay.draw_toast(out, 'Scanned: https://a.io')
    overlay.draw_prompt(out, prompt)

    assert out.shape == before.shape
    assert (out != before).any()


def test_prompt_with_empty_message():
    out = overlay.blank_canvas(320, 240)
    overlay.draw_prompt(out, Prompt('Scanned Text', None, PromptButton('OK', lambda: None)))
