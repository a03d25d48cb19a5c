"""Run chronicle: every game signal of a session, kept per day and dumped as JSONL."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

from night_watch.signals import Signal, SignalBus


class ChronicleRecorder:
    """Watches a SignalBus and keeps one record per signal.

    Each record carries the tick it was flushed on and the day and phase the
    signal was raised in, followed by the signal payload.
    """

    def __init__(self, bus: SignalBus, clock_fn: Callable[[], int]) -> None:
        self._records: list[dict[str, Any]] = []
        self._clock_fn = clock_fn
        bus.watch(self._on_signal)

    def _on_signal(self, signal: Signal) -> None:
        self._records.append({"tick": self._clock_fn(), **signal.record()})

    @property
    def count(self) -> int:
        return len(self._records)

    @property
    def records(self) -> list[dict[str, Any]]:
        return list(self._records)

    def by_day(self) -> dict[int, list[dict[str, Any]]]:
        days: dict[int, list[dict[str, Any]]] = {}
        for record in self._records:
            days.setdefault(record["day"], []).append(record)
        return days

    def nights(self) -> list[dict[str, Any]]:
        """The morning reports in order, one per night survived or lost."""
        return [r for r in self._records if r["type"] == "night_report"]

    def write(self, path: str | Path) -> int:
        """Write all records as JSONL. Returns the number of lines written."""
        lines = [json.dumps(record) for record in self._records]
        Path(path).write_text("".join(line + "\n" for line in lines))
        return len(lines)
