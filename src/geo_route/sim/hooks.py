# sim/hooks.py
from typing import Protocol


class SearchHooks(Protocol):
    def run_start(self, *, algorithm: str, start: str, goal: str, nodes: int): ...
    def run_end(
        self,
        *,
        algorithm: str,
        found: bool,
        cost: float | None,
        visited: int,
        pushes: int,
        wall_ms: float,
    ): ...
    def error(self, *, algorithm: str, reason: str, **kw): ...


class NoopHooks:
    def run_start(self, **_):
        pass

    def run_end(self, **_):
        pass

    def error(self, *_, **__):
        pass
