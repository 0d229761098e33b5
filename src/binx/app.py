from __future__ import annotations

import logging
import os

from textual import events
from textual.app import App, ComposeResult
from textual.message import Message

from binx.config import BinxConfig
from binx.core.input import translate, translate_resize
from binx.core.io import ByteBuffer
from binx.core.state import AppState
from binx.core.store import Store
from binx.ui.render import TextCanvas, render_frame
from binx.widgets.byte_grid import ByteGrid

log = logging.getLogger(__name__)


class StateChanged(Message):
    """Posted by the reducer thread after each reduced action."""

    def __init__(self, running: bool) -> None:
        super().__init__()
        self.running = running


class BinxApp(App):
    """Textual application shell for binx.

    Key and resize events are translated on the UI thread and queued on the
    store; the store's reducer thread applies them in order and posts a
    `StateChanged` message after each one. The reducer thread
    never waits on the UI loop.
    """

    CSS = """
    Screen {
        background: black;
    }
    """

    def __init__(self, buffer: ByteBuffer, config: BinxConfig | None = None) -> None:
        super().__init__()
        self._buffer = buffer
        self._config = config or BinxConfig()
        self.title = f"binx - {os.path.basename(buffer.path or '<memory>')}"
        self.state = AppState(viewport_width=self._config.viewport_width)
        self.store = Store(
            self.state,
            buffer,
            capacity=self._config.queue_capacity,
            on_change=self._state_changed,
        )
        self.grid = ByteGrid()

    def compose(self) -> ComposeResult:
        yield self.grid

    def on_mount(self) -> None:
        self.store.start()
        self.store.dispatch(translate_resize(self.size.width, self.size.height))

    def on_unmount(self) -> None:
        self.store.stop(timeout=0.2)

    # ---- Producer ----
    def on_key(self, event: events.Key) -> None:
        self.store.dispatch(translate(event))

    def on_resize(self, event: events.Resize) -> None:
        self.store.dispatch(translate(event))

    # ---- Called on the reducer thread ----
    def _state_changed(self, state: AppState) -> None:
        if self.is_running:
            self.post_message(StateChanged(state.running))

    def on_state_changed(self, message: StateChanged) -> None:
        if not message.running:
            log.info("escape in normal mode, exiting")
            self.exit()
            return
        self.redraw()

    # ---- Rendering ----
    def redraw(self) -> None:
        canvas = TextCanvas(self.size.width, self.size.height)
        with self.store.locked() as state:
            render_frame(state, self._buffer, canvas, glyph=self._config.glyph)
        self.grid.update_frame(canvas.frame)
