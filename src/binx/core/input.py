"""Translate raw terminal events into actions.

One event in, exactly one action out. Nothing here touches state.
"""

from __future__ import annotations

from textual import events

from binx.core.state import Action, ActionName

_KEY_ACTIONS = {
    "escape": ActionName.ESCAPE,
    "down": ActionName.SCROLL_DOWN,
    "up": ActionName.SCROLL_UP,
    "enter": ActionName.COMMIT,
}


def translate_key(key: str, character: str | None) -> Action:
    name = _KEY_ACTIONS.get(key)
    if name is not None:
        return Action(name)
    if character == "s":
        return Action(ActionName.KEY_S, character)
    if character == "f":
        return Action(ActionName.KEY_F, character)
    if character is not None and not character.isprintable():
        character = None
    return Action(ActionName.OTHER_KEY, character)


def translate_resize(width: int, height: int) -> Action:
    return Action(ActionName.RESIZE, (width, height))


def translate(event: events.Key | events.Resize) -> Action:
    if isinstance(event, events.Resize):
        return translate_resize(event.size.width, event.size.height)
    return translate_key(event.key, event.character)
