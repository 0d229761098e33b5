from __future__ import annotations

from rich.text import Text
from textual.widget import Widget


class ByteGrid(Widget):
    """Read-only widget showing the last frame drawn by the renderer.

    The app pushes a new frame after every reduced action; the widget never
    reads application state itself.
    """

    DEFAULT_CSS = """
    ByteGrid {
        width: 100%;
        height: 100%;
    }
    """

    def __init__(self) -> None:
        super().__init__(id="grid")
        self._frame = Text("")

    @property
    def frame(self) -> Text:
        return self._frame

    def update_frame(self, frame: Text) -> None:
        self._frame = frame
        self.refresh()

    def render(self) -> Text:
        return self._frame
