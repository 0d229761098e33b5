"""State transitions for the viewer.

`reduce` is the only function that writes `AppState`. It runs on the store's
reducer thread with the state lock held, one action at a time.
"""

from __future__ import annotations

import logging

from binx.core.io import ByteBuffer
from binx.core.search import InvalidPattern, decode_pattern, find
from binx.core.state import Action, ActionName, AppState, Mode

log = logging.getLogger(__name__)

INT64_MAX = 2**63 - 1
# Terminal rows not available to the grid: status line + prompt line
RESERVED_ROWS = 2

_TEXT_ACTIONS = (ActionName.KEY_S, ActionName.KEY_F, ActionName.OTHER_KEY)


def parse_offset(text: str) -> int | None:
    """Parse a numeric literal in any common base.

    Accepts decimal, `0x` hex, `0o` or leading-zero octal and `0b` binary.
    Returns None for malformed, negative or out-of-range (> int64) values.
    """
    s = text.strip().lower()
    if s.startswith("+"):
        s = s[1:]
    if not s or not s.isascii() or s.startswith("-"):
        return None
    try:
        if s.startswith(("0x", "0o", "0b")):
            value = int(s, 0)
        elif len(s) > 1 and s.startswith("0"):
            value = int(s, 8)
        else:
            value = int(s, 10)
    except ValueError:
        return None
    if value > INT64_MAX:
        return None
    return value


def reduce(state: AppState, action: Action, buffer: ByteBuffer) -> AppState:
    state.last_action = action.name.value
    name = action.name

    if name is ActionName.RESIZE:
        _, height = action.payload
        state.viewport_height = max(1, int(height) - RESERVED_ROWS)
        return state

    if state.mode is Mode.NORMAL:
        _reduce_normal(state, name)
        return state

    if name is ActionName.ESCAPE:
        _leave_input(state)
    elif name in _TEXT_ACTIONS:
        ch = action.payload
        if isinstance(ch, str) and ch.isprintable():
            state.user_input += ch
    elif name is ActionName.COMMIT:
        if state.mode is Mode.SEEK_INPUT:
            _commit_seek(state)
        else:
            _commit_pattern(state, buffer)
    return state


def _reduce_normal(state: AppState, name: ActionName) -> None:
    if name is ActionName.KEY_S:
        state.mode = Mode.SEEK_INPUT
        state.user_input = ""
    elif name is ActionName.KEY_F:
        state.mode = Mode.PATTERN_INPUT
        state.user_input = ""
    elif name is ActionName.SCROLL_DOWN:
        state.start_byte += state.viewport_width
    elif name is ActionName.SCROLL_UP:
        state.start_byte = max(0, state.start_byte - state.viewport_width)
    elif name is ActionName.ESCAPE:
        state.running = False


def _leave_input(state: AppState) -> None:
    state.mode = Mode.NORMAL
    state.user_input = ""


def _commit_seek(state: AppState) -> None:
    offset = parse_offset(state.user_input)
    if offset is None:
        # Stay in seek mode so the entry can be corrected
        state.status = f"invalid offset: {state.user_input!r}"
        log.info("seek rejected: %r", state.user_input)
        return
    state.start_byte = offset
    state.status = f"seek 0x{offset:X}"
    _leave_input(state)


def _commit_pattern(state: AppState, buffer: ByteBuffer) -> None:
    pattern = state.user_input
    try:
        pos = find(pattern, buffer)
    except InvalidPattern as e:
        state.status = f"invalid pattern: {e}"
        log.info("pattern rejected: %s", e)
    else:
        if pos is None:
            state.status = f"pattern not found: {pattern}"
        else:
            state.highlight_pos = pos
            state.highlight_length = len(decode_pattern(pattern))
            state.status = f"match at {pos} (0x{pos:X})"
    _leave_input(state)
