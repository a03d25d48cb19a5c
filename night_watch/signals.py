"""Game signals and the bus that carries them.

Every signal is stamped with the day and cycle phase it was raised in, so
anything downstream (the on-screen log, the chronicle) can place it in the
game without looking back at the state. Signals raised during a tick are
queued and handed out when the engine flushes at the end of the tick.
"""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable

from night_watch.types import CyclePhase

# Every signal the game publishes.
SIGNAL_TYPES = (
    "session", "phase", "upgrade", "undo", "night_report", "event", "game_over",
)


@dataclass(frozen=True, slots=True)
class Signal:
    name: str
    day: int
    phase: CyclePhase | None  # None outside the Play session
    data: dict[str, Any] = field(default_factory=dict)

    def record(self) -> dict[str, Any]:
        """Flat, JSON-friendly form: type, day and phase first, then the payload."""
        record: dict[str, Any] = {
            "type": self.name,
            "day": self.day,
            "phase": self.phase.value if self.phase is not None else None,
        }
        record.update(self.data)
        return record


Handler = Callable[[Signal], None]


class SignalBus:
    """Queues game signals and dispatches them by name on flush.

    Names outside SIGNAL_TYPES are rejected on subscribe and publish, so a
    misspelt handler fails loudly instead of never firing.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[Handler]] = {name: [] for name in SIGNAL_TYPES}
        self._watchers: list[Handler] = []
        self._queue: deque[Signal] = deque()

    def _handlers_for(self, name: str) -> list[Handler]:
        try:
            return self._handlers[name]
        except KeyError:
            raise KeyError(f"Unknown signal '{name}'") from None

    def subscribe(self, name: str, handler: Handler) -> None:
        self._handlers_for(name).append(handler)

    def watch(self, handler: Handler) -> None:
        """Receive every signal, after the handlers subscribed to its name."""
        self._watchers.append(handler)

    def unsubscribe(self, name: str, handler: Handler) -> None:
        handlers = self._handlers_for(name)
        if handler in handlers:
            handlers.remove(handler)

    def publish(self, signal: Signal) -> None:
        self._handlers_for(signal.name)
        self._queue.append(signal)

    def pending(self) -> int:
        return len(self._queue)

    def flush(self) -> int:
        """Dispatch what was queued before this call. Returns how many signals went out.

        Signals published by a handler wait for the next flush.
        """
        batch = list(self._queue)
        self._queue.clear()
        for signal in batch:
            for handler in self._handlers[signal.name]:
                handler(signal)
            for watcher in self._watchers:
                watcher(signal)
        return len(batch)

    def clear(self) -> None:
        self._queue.clear()
