from __future__ import annotations

import logging
import queue
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager

from binx.core.io import ByteBuffer
from binx.core.reducer import reduce
from binx.core.state import Action, AppState

log = logging.getLogger(__name__)

DEFAULT_CAPACITY = 20

_STOP = object()


class Store:
    """Ordered action queue feeding a single reducer thread.

    - `dispatch` blocks while the queue is full; actions are never dropped.
    - Actions are reduced strictly in submission order, one at a time, with
      the state lock held. `on_change` runs after each reduction, outside the
      lock.
    - Readers take the same lock through `locked()` for one render pass.
    """

    def __init__(
        self,
        state: AppState,
        buffer: ByteBuffer,
        *,
        capacity: int = DEFAULT_CAPACITY,
        on_change: Callable[[AppState], None] | None = None,
    ) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._state = state
        self._buffer = buffer
        self._queue: queue.Queue[object] = queue.Queue(maxsize=capacity)
        self._lock = threading.Lock()
        self._thread: threading.Thread | None = None
        self.on_change = on_change

    @property
    def capacity(self) -> int:
        return self._queue.maxsize

    def dispatch(self, action: Action) -> None:
        self._queue.put(action)

    @contextmanager
    def locked(self) -> Iterator[AppState]:
        with self._lock:
            yield self._state

    def reduce_one(self, action: Action) -> None:
        with self._lock:
            reduce(self._state, action, self._buffer)
        log.debug("reduced %s -> mode=%s start=%d", action.name.value,
                  self._state.mode.value, self._state.start_byte)
        if self.on_change is not None:
            self.on_change(self._state)

    def run(self) -> None:
        """Drain the queue until stopped or the session ends."""
        while True:
            item = self._queue.get()
            if item is _STOP:
                break
            try:
                self.reduce_one(item)  # type: ignore[arg-type]
            except Exception:
                log.exception("failed to reduce %r", item)
            if not self._state.running:
                break
        log.debug("reducer loop finished")

    def start(self) -> None:
        if self._thread is not None:
            return
        self._thread = threading.Thread(target=self.run, name="binx-reducer", daemon=True)
        self._thread.start()

    def stop(self, timeout: float | None = 1.0) -> None:
        thread = self._thread
        if thread is None:
            return
        if thread.is_alive():
            try:
                self._queue.put(_STOP, timeout=timeout)
            except queue.Full:
                log.warning("reducer queue full on shutdown")
            thread.join(timeout)
        self._thread = None
