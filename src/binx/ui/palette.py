from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from rich.color import Color
from rich.style import Style


@dataclass(frozen=True)
class Palette:
    status_fg: str
    status_bg: str
    prompt_fg: str
    prompt_bg: str
    byte_bg: str
    highlight_bg: str


DEFAULT = Palette(
    status_fg="#d8dee9",
    status_bg="#1f2430",
    prompt_fg="#ffffff",
    prompt_bg="#314f76",
    byte_bg="#000000",
    highlight_bg="#ffa657",
)

# Selected palette for now
PALETTE = DEFAULT


def byte_color(value: int) -> Color:
    """Foreground color for a byte: the xterm 256-color entry of the same index."""
    if not 0 <= value <= 255:
        raise ValueError("Byte value must be between 0 and 255")
    return Color.from_ansi(value)


@lru_cache(maxsize=256)
def byte_style(value: int) -> Style:
    return Style(color=byte_color(value), bgcolor=PALETTE.byte_bg)


@lru_cache(maxsize=256)
def highlight_style(value: int) -> Style:
    return Style(color=byte_color(value), bgcolor=PALETTE.highlight_bg, reverse=True)
