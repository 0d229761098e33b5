"""Viewport arithmetic: byte offsets to grid cells and back."""

from __future__ import annotations


def visible_byte_count(width: int, height: int) -> int:
    return max(0, width * height)


def cell_for(index: int, width: int) -> tuple[int, int]:
    """(column, row) of the `index`-th visible byte."""
    return index % width, index // width


def index_for(column: int, row: int, width: int) -> int:
    return row * width + column


def clamp_start(start: int, buffer_length: int) -> int:
    return max(0, min(start, buffer_length))


def viewport_end(start: int, width: int, height: int) -> int:
    """Offset one past the last byte the viewport can show."""
    return start + visible_byte_count(width, height)
