# geo_route/app/controllers/runner.py
from geo_route.config.models import AStarModel, DijkstraModel, SearchUnion
from geo_route.domain.graph import Graph
from geo_route.domain.search.search_core import SearchResult
from geo_route.io.recorder import Trace
from geo_route.runtime.registries import make_search
from geo_route.sim.hooks import NoopHooks, SearchHooks

_MODELS = {"dijkstra": DijkstraModel, "astar": AStarModel}


class SearchRunner:
    """Runs one search at a time against the session graph, on a cleared trace."""

    def __init__(
        self,
        graph: Graph,
        trace: Trace,
        search: SearchUnion,
        *,
        detailed: bool = False,
        hooks: SearchHooks | None = None,
    ):
        self.graph, self.trace, self.search = graph, trace, search
        self.detailed = detailed
        self.hooks = hooks or NoopHooks()

    def run(
        self,
        start: str | None,
        goal: str | None,
        kind: str | None = None,
        *,
        emit_detail: bool | None = None,
    ) -> SearchResult | None:
        self.trace.clear()
        if not start or not goal:
            self.trace.summary("Select start and goal.")
            return None

        cfg = self.search if kind is None or kind == self.search.kind else self._model(kind)
        if emit_detail is None:
            emit_detail = cfg.emit_detail if cfg.emit_detail is not None else self.detailed
        fn = make_search(cfg)
        return fn(self.graph, start, goal, emit_detail, trace=self.trace, hooks=self.hooks)

    @staticmethod
    def _model(kind: str) -> SearchUnion:
        try:
            return _MODELS[kind]()
        except KeyError:
            raise ValueError(f"Unknown search kind {kind!r}") from None


def distance_label(result: SearchResult | None) -> str:
    if result is None or result.path is None:
        return "No path"
    return f"{result.cost:.2f} m"
