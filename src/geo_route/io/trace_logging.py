# io/trace_logging.py
import json
import logging
import sys

from geo_route.app.events import TraceEvent
from geo_route.io.recorder import json_safe
from geo_route.sim.hooks import NoopHooks


def _default_json_logger(name="geo_route", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(json_safe(payload), default=str, allow_nan=False)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class TraceLogging(NoopHooks):
    """
    Mirrors trace events and search lifecycle into structured logs.

    Summary events go out at INFO; detail events only at DEBUG and only when
    ``debug`` is set, since a detailed run emits one entry per relaxation.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug = run_id, debug
        self.log = logger or _default_json_logger(level=level)

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    # --------------- trace sink -----------------------------

    def write(self, ev: TraceEvent) -> None:
        if ev.is_summary:
            self._emit("INFO", ev.text, t=ev.t, trace_level=ev.level)
        elif self.debug:
            self._emit("DEBUG", ev.text, t=ev.t, trace_level=ev.level, meta=ev.meta)

    # --------------- search lifecycle -----------------------

    def run_start(self, *, algorithm: str, start: str, goal: str, nodes: int):
        self._emit("INFO", "run_start", algorithm=algorithm, start=start, goal=goal, nodes=nodes)

    def run_end(self, *, algorithm: str, **extra):
        self._emit("INFO", "run_end", algorithm=algorithm, **extra)

    def error(self, *, algorithm: str, reason: str, **extra):
        self._emit("ERROR", "search_error", algorithm=algorithm, reason=reason, **extra)
