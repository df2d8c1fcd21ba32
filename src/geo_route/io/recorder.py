# io/recorder.py
import json
import logging
import math
import sys
from collections import deque
from collections.abc import Iterator
from dataclasses import asdict
from typing import Any, Protocol

from geo_route.app.events import DETAIL, SUMMARY, Level, TraceEvent
from geo_route.sim.clock import WallClock

log = logging.getLogger("geo_route.recorder")


def json_safe(value: Any) -> Any:
    """Replace non-finite floats with strings so output stays strict JSON."""
    if isinstance(value, float) and not math.isfinite(value):
        return "nan" if math.isnan(value) else ("inf" if value > 0 else "-inf")
    if isinstance(value, dict):
        return {k: json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [json_safe(v) for v in value]
    return value


class Sink(Protocol):
    def write(self, ev: TraceEvent) -> None: ...


class JsonlSink:
    def __init__(self, fp=sys.stdout):
        self.fp = fp

    def write(self, ev: TraceEvent) -> None:
        self.fp.write(json.dumps(json_safe(asdict(ev)), default=str, allow_nan=False) + "\n")


class MemorySink:
    def __init__(self):
        self.events: list[TraceEvent] = []

    def write(self, ev: TraceEvent) -> None:
        self.events.append(ev)


class Trace:
    """
    Append-only record of search steps, newest first.

    Every event carries its level so a reader can choose between the summary
    milestones and the full relaxation detail; the trace itself keeps both.
    Events are forwarded to the sinks as soon as they are recorded.
    """

    def __init__(self, *sinks: Sink, clock=None):
        self.sinks = list(sinks)
        self.clock = clock or WallClock()
        self._events: deque[TraceEvent] = deque()

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[TraceEvent]:
        return iter(self._events)

    @property
    def events(self) -> list[TraceEvent]:
        return list(self._events)

    def texts(self, level: Level | None = None) -> list[str]:
        return [ev.text for ev in self._events if level is None or ev.level == level]

    def record(self, level: Level, text: str, meta: dict[str, Any] | None = None) -> TraceEvent:
        ev = TraceEvent(t=self.clock.now(), level=level, text=text, meta=meta)
        self._events.appendleft(ev)
        for s in self.sinks:
            try:
                s.write(ev)
            except Exception:
                log.exception("trace sink %s failed", type(s).__name__)
        return ev

    def summary(self, text: str, meta: dict[str, Any] | None = None) -> TraceEvent:
        return self.record(SUMMARY, text, meta)

    def detail(self, text: str, meta: dict[str, Any] | None = None) -> TraceEvent:
        return self.record(DETAIL, text, meta)

    def clear(self) -> None:
        self._events.clear()
