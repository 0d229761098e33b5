from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Mode(Enum):
    """Which interactive state governs input interpretation."""

    NORMAL = "normal"
    SEEK_INPUT = "seek"
    PATTERN_INPUT = "find"


class ActionName(Enum):
    RESIZE = "BINX_RESIZE"
    ESCAPE = "BINX_ESCAPE"
    COMMIT = "BINX_KEYENTER"
    SCROLL_UP = "BINX_KEYUP"
    SCROLL_DOWN = "BINX_KEYDOWN"
    KEY_S = "BINX_KEY_S"
    KEY_F = "BINX_KEY_F"
    OTHER_KEY = "BINX_KEY_OTHER"


@dataclass(frozen=True)
class Action:
    """One unit of user intent. Produced once, reduced once."""

    name: ActionName
    payload: Any = None  # character str, (width, height), or None


DEFAULT_WIDTH = 80
DEFAULT_HEIGHT = 22


@dataclass
class AppState:
    """Session state. Written only by `binx.core.reducer.reduce`."""

    mode: Mode = Mode.NORMAL
    start_byte: int = 0
    viewport_width: int = DEFAULT_WIDTH
    viewport_height: int = DEFAULT_HEIGHT
    user_input: str = ""
    highlight_pos: int | None = None
    highlight_length: int = 0
    last_action: str = ""
    status: str = ""
    running: bool = True
