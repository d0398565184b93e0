from __future__ import annotations

from donut_cli_renderer.canvas import BLANK


def cell(canvas, x: int, y: int) -> str:
    return canvas.chars[x + canvas.w * y]


def is_blank(canvas) -> bool:
    return all(ch == BLANK for ch in canvas.chars)
