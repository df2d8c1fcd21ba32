# app/events.py
from dataclasses import dataclass
from typing import Any, Literal

Level = Literal["summary", "detail"]

SUMMARY: Level = "summary"
DETAIL: Level = "detail"


@dataclass(frozen=True)
class TraceEvent:
    t: float  # wall-clock seconds
    level: Level
    text: str
    meta: dict[str, Any] | None = None

    @property
    def is_summary(self) -> bool:
        return self.level == SUMMARY
