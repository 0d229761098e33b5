from __future__ import annotations

from typing import Protocol

from rich.style import Style
from rich.text import Text

from binx.core.io import ByteBuffer
from binx.core.state import AppState, Mode
from binx.core.viewport import cell_for, clamp_start, visible_byte_count, viewport_end
from binx.ui.palette import PALETTE, byte_style, highlight_style

# tcell's RuneBoard
DEFAULT_GLYPH = "░"

PROMPTS = {
    Mode.SEEK_INPUT: "seek> ",
    Mode.PATTERN_INPUT: "find> ",
}


class Screen(Protocol):
    """Cell-level drawing surface the renderer writes to."""

    def size(self) -> tuple[int, int]: ...

    def clear(self) -> None: ...

    def set_content(self, x: int, y: int, glyph: str, style: Style | None) -> None: ...

    def show(self) -> None: ...


class TextCanvas:
    """Screen backed by a grid of cells, flushed into a Rich `Text` frame.

    Writes outside the canvas are ignored, like a terminal would clip them.
    """

    def __init__(self, width: int, height: int) -> None:
        self._width = max(0, width)
        self._height = max(0, height)
        self._cells: list[list[tuple[str, Style | None]]] = []
        self._frame = Text()
        self.clear()

    def size(self) -> tuple[int, int]:
        return self._width, self._height

    def clear(self) -> None:
        self._cells = [[(" ", None)] * self._width for _ in range(self._height)]

    def set_content(self, x: int, y: int, glyph: str, style: Style | None) -> None:
        if 0 <= x < self._width and 0 <= y < self._height:
            self._cells[y][x] = (glyph, style)

    def cell(self, x: int, y: int) -> tuple[str, Style | None]:
        return self._cells[y][x]

    def show(self) -> None:
        text = Text(no_wrap=True, overflow="crop")
        for y, row in enumerate(self._cells):
            if y:
                text.append("\n")
            for glyph, style in row:
                text.append(glyph, style=style)
        self._frame = text

    @property
    def frame(self) -> Text:
        """The last frame produced by `show()`."""
        return self._frame


def emit_str(screen: Screen, x: int, y: int, style: Style | None, text: str) -> None:
    width, _ = screen.size()
    for ch in text:
        if x >= width:
            break
        screen.set_content(x, y, ch, style)
        x += 1


def status_line(state: AppState, buffer_size: int) -> str:
    end = viewport_end(state.start_byte, state.viewport_width, state.viewport_height)
    return (
        f"--{state.start_byte}--{end}--{buffer_size} bytes"
        f"--Mode: {state.mode.value}"
        f"--Last Action: {state.last_action or '-'}"
        f"--Status: {state.status}"
    )


def prompt_line(state: AppState) -> str | None:
    prompt = PROMPTS.get(state.mode)
    if prompt is None:
        return None
    return f"{prompt}{state.user_input}"


def _highlighted(state: AppState, offset: int) -> bool:
    pos = state.highlight_pos
    return pos is not None and pos <= offset < pos + max(1, state.highlight_length)


def render_frame(
    state: AppState,
    buffer: ByteBuffer,
    screen: Screen,
    *,
    glyph: str = DEFAULT_GLYPH,
) -> None:
    """Draw the viewport grid and status lines. Reads `state` only."""
    screen.clear()
    width = state.viewport_width
    height = state.viewport_height
    count = visible_byte_count(width, height)
    # Short (or empty) past EOF; absent cells stay blank
    data = buffer.slice(clamp_start(state.start_byte, buffer.size), count)
    for i, b in enumerate(data):
        x, y = cell_for(i, width)
        style = highlight_style(b) if _highlighted(state, state.start_byte + i) else byte_style(b)
        screen.set_content(x, y, glyph, style)

    emit_str(
        screen,
        0,
        height,
        Style(color=PALETTE.status_fg, bgcolor=PALETTE.status_bg),
        status_line(state, buffer.size),
    )
    prompt = prompt_line(state)
    if prompt is not None:
        emit_str(
            screen,
            0,
            height + 1,
            Style(color=PALETTE.prompt_fg, bgcolor=PALETTE.prompt_bg),
            prompt,
        )
    screen.show()
