# io/render.py
import json
import math

from geo_route.app.events import TraceEvent
from geo_route.io.recorder import Trace
from geo_route.sim.clock import WallClock


def _meta_value(v):
    if isinstance(v, float):
        return "∞" if math.isinf(v) else round(v, 2)
    return v


def render_event(ev: TraceEvent, *, clock=None, tz=None) -> str:
    clock = clock or WallClock()
    stamp = clock.to_wall(ev.t, tz).strftime("%H:%M:%S")
    line = f"{stamp} {ev.text}"
    if ev.meta and not ev.is_summary:
        meta = {k: _meta_value(v) for k, v in ev.meta.items()}
        body = json.dumps(meta, indent=2, ensure_ascii=False)
        line += "\n" + "\n".join("    " + row for row in body.splitlines())
    return line


def render_lines(trace: Trace, detailed: bool = False, *, clock=None, tz=None) -> list[str]:
    """Newest-first log lines; detail events are shown only when ``detailed``."""
    clock = clock or trace.clock
    return [
        render_event(ev, clock=clock, tz=tz) for ev in trace if ev.is_summary or detailed
    ]
