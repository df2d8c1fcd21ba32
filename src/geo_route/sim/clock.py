# sim/clock.py
from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import UTC, datetime, tzinfo


class WallClock:
    """Timestamps trace events with wall time (epoch seconds)."""

    def now(self) -> float:
        return time.time()

    def to_wall(self, t: float, tz: tzinfo | str | None = None) -> datetime:
        return _in_tz(datetime.fromtimestamp(t, tz=UTC), tz)


@dataclass
class ManualClock:
    """Deterministic clock; advances by ``step`` seconds on every reading."""

    t: float = 0.0
    step: float = 0.0

    def now(self) -> float:
        t = self.t
        self.t += self.step
        return t

    def advance(self, dt: float) -> None:
        self.t += dt

    def to_wall(self, t: float, tz: tzinfo | str | None = None) -> datetime:
        return _in_tz(datetime.fromtimestamp(t, tz=UTC), tz)


def _in_tz(dt: datetime, tz: tzinfo | str | None) -> datetime:
    """Return dt in the requested timezone (tzinfo or IANA string); UTC if None."""
    if tz is None:
        return dt
    if isinstance(tz, str):
        from zoneinfo import ZoneInfo

        tz = ZoneInfo(tz)
    return dt.astimezone(tz)
