from __future__ import annotations

import threading

import pytest

from binx.core.io import ByteBuffer
from binx.core.state import Action, ActionName, AppState, Mode
from binx.core.store import Store


def make_store(**kwargs) -> Store:
    return Store(AppState(viewport_width=16), ByteBuffer(bytes(256)), **kwargs)


def test_actions_reduced_in_order() -> None:
    seen: list[str] = []
    store = make_store(on_change=lambda s: seen.append(s.user_input))
    store.dispatch(Action(ActionName.KEY_S, "s"))
    for ch in "123":
        store.dispatch(Action(ActionName.OTHER_KEY, ch))
    store.start()
    store.stop()
    assert seen == ["", "1", "12", "123"]


def test_on_change_once_per_action() -> None:
    calls = []
    store = make_store(on_change=lambda s: calls.append(s.start_byte))
    for _ in range(5):
        store.dispatch(Action(ActionName.SCROLL_DOWN))
    store.start()
    store.stop()
    assert calls == [16, 32, 48, 64, 80]


def test_dispatch_blocks_when_full() -> None:
    store = make_store(capacity=2)
    store.dispatch(Action(ActionName.SCROLL_DOWN))
    store.dispatch(Action(ActionName.SCROLL_DOWN))

    done = threading.Event()

    def producer() -> None:
        store.dispatch(Action(ActionName.SCROLL_DOWN))
        done.set()

    t = threading.Thread(target=producer, daemon=True)
    t.start()
    # Nothing drops: the third dispatch waits for the consumer
    assert not done.wait(0.2)
    store.start()
    assert done.wait(2.0)
    store.stop()
    with store.locked() as state:
        assert state.start_byte == 48


def test_loop_ends_on_escape_in_normal() -> None:
    store = make_store()
    store.dispatch(Action(ActionName.ESCAPE))
    store.run()
    with store.locked() as state:
        assert state.running is False


def test_reduce_one_under_lock() -> None:
    store = make_store()
    store.reduce_one(Action(ActionName.KEY_F, "f"))
    with store.locked() as state:
        assert state.mode is Mode.PATTERN_INPUT


def test_capacity_validation() -> None:
    assert make_store().capacity == 20
    with pytest.raises(ValueError):
        make_store(capacity=0)


def test_failing_callback_does_not_stop_reducer() -> None:
    calls = []

    def on_change(state: AppState) -> None:
        calls.append(state.start_byte)
        if len(calls) == 1:
            raise RuntimeError("app is shutting down")

    store = make_store(capacity=2, on_change=on_change)
    store.start()
    for _ in range(5):
        store.dispatch(Action(ActionName.SCROLL_DOWN))
    store.stop(timeout=2.0)
    assert calls == [16, 32, 48, 64, 80]
