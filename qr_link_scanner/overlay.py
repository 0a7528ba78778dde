# -*- coding: utf-8 -*-
"""Drawing helpers for the preview window."""

from __future__ import annotations

from typing import Optional

import cv2
import numpy as np

from .prompts import Prompt

FONT = cv2.FONT_HERSHEY_SIMPLEX

# UI Colors (BGR)
COLOR_INFO = (255, 255, 255)
COLOR_BG = (30, 30, 30)
COLOR_SCANNING = (0, 165, 255)   # Orange while a prompt is pending
COLOR_READY = (0, 200, 0)        # Green while admitting frames
COLOR_BUTTON = (200, 200, 200)

MAX_MESSAGE_CHARS = 48


def blank_canvas(width: int = 1280, height: int = 720) -> np.ndarray:
    return np.full((height, width, 3), COLOR_BG, dtype=np.uint8)


def wrap_text(text: Optional[str], width: int = MAX_MESSAGE_CHARS, max_lines: int = 4):
    if not text:
        return ['']
    lines = [text[i:i + width] for i in range(0, len(text), width)]
    if len(lines) > max_lines:
        lines = lines[:max_lines]
        lines[-1] = lines[-1][:-3] + '...'
    return lines


def draw_status_bar(out: np.ndarray, fps: float, scanning: bool) -> None:
    color = COLOR_SCANNING if scanning else COLOR_READY
    cv2.rectangle(out, (0, 0), (out.shape[1], 40), color, -1)
    state = "WAITING FOR ANSWER" if scanning else "SCANNING"
    cv2.putText(out, state, (15, 28), FONT, 0.8, COLOR_INFO, 2)
    cv2.putText(out, f"FPS: {fps:.1f}", (out.shape[1] - 140, 28), FONT, 0.6, COLOR_INFO, 1)


def draw_toast(out: np.ndarray, text: str) -> None:
    label = text if len(text) <= 60 else text[:57] + '...'
    (tw, th), _ = cv2.getTextSize(label, FONT, 0.6, 1)
    x = max(10, (out.shape[1] - tw) // 2)
    y = out.shape[0] - 40
    cv2.rectangle(out, (x - 12, y - th - 12), (x + tw + 12, y + 12), (60, 60, 60), -1)
    cv2.putText(out, label, (x, y), FONT, 0.6, COLOR_INFO, 1)


def draw_prompt(out: np.ndarray, prompt: Prompt) -> None:
    """Dim the preview and draw the prompt box with its key hints."""
    h, w = out.shape[:2]
    shade = out.copy()
    cv2.rectangle(shade, (0, 0), (w, h), (0, 0, 0), -1)
    cv2.addWeighted(shade, 0.5, out, 0.5, 0, dst=out)

    lines = wrap_text(prompt.message)
    box_w = min(w - 40, 640)
    box_h = 130 + 28 * len(lines)
    x0 = (w - box_w) // 2
    y0 = (h - box_h) // 2
    cv2.rectangle(out, (x0, y0), (x0 + box_w, y0 + box_h), COLOR_BG, -1)
    cv2.rectangle(out, (x0, y0), (x0 + box_w, y0 + box_h), (100, 100, 100), 2)

    cv2.putText(out, prompt.title, (x0 + 20, y0 + 40), FONT, 0.9, COLOR_INFO, 2)
    y = y0 + 80
    for line in lines:
        cv2.putText(out, line, (x0 + 20, y), FONT, 0.6, COLOR_INFO, 1)
        y += 28

    hints = [f"[y/Enter] {prompt.positive.label}"]
    if prompt.negative is not None:
        hints.append(f"[n] {prompt.negative.label}")
    hints.append("[Esc] Close")
    cv2.putText(out, "   ".join(hints), (x0 + 20, y0 + box_h - 20), FONT, 0.55, COLOR_BUTTON, 1)


def draw_notice(out: np.ndarray, text: str) -> None:
    (tw, th), _ = cv2.getTextSize(text, FONT, 0.8, 2)
    x = max(10, (out.shape[1] - tw) // 2)
    y = out.shape[0] // 2
    cv2.putText(out, text, (x, y), FONT, 0.8, COLOR_INFO, 2)
    cv2.putText(out, "Press any key to exit", (x, y + 40), FONT, 0.6, COLOR_BUTTON, 1)
