# geo_route/domain/search/search_core.py
from dataclasses import dataclass, field

from geo_route.domain.errors import MissingNode
from geo_route.domain.graph import Graph
from geo_route.io.recorder import Trace
from geo_route.sim.hooks import NoopHooks, SearchHooks

INF = float("inf")


@dataclass
class SearchResult:
    """
    Outcome of one Dijkstra or A* run.

    ``path`` is None when the goal cannot be reached; the cost and predecessor
    maps still hold whatever the search settled before the queue ran dry.
    ``costs`` is the distance map for Dijkstra and the g-score map for A*.
    """

    algorithm: str
    start: str
    goal: str
    path: list[str] | None
    visited_order: list[str]
    costs: dict[str, float]
    predecessors: dict[str, str]
    trace: Trace
    cost: float | None = None
    f_scores: dict[str, float] = field(default_factory=dict)

    @property
    def found(self) -> bool:
        return self.path is not None


def check_endpoints(graph: Graph, start: str, goal: str, *, algorithm: str, hooks: SearchHooks):
    for node_id, role in ((start, "start"), (goal, "goal")):
        if not graph.has_node(node_id):
            hooks.error(algorithm=algorithm, reason="missing_node", node_id=node_id, role=role)
            raise MissingNode(node_id, role)


def resolve(trace: Trace | None, hooks: SearchHooks | None) -> tuple[Trace, SearchHooks]:
    return (trace if trace is not None else Trace()), (hooks or NoopHooks())


def reconstruct_path(predecessors: dict[str, str], start: str, goal: str) -> list[str]:
    path = []
    cur: str | None = goal
    while cur is not None:
        path.append(cur)
        if cur == start:
            break
        cur = predecessors.get(cur)
    path.reverse()
    return path


def path_cost(graph: Graph, path: list[str]) -> float:
    """Sum the stored edge weights along consecutive pairs of ``path``.

    A pair with no edge between it contributes nothing.
    """
    total = 0.0
    for a, b in zip(path, path[1:]):
        w = graph.edge_weight(a, b)
        total += w if w is not None else 0.0
    return total


def format_path(path: list[str], cost: float) -> str:
    return f"Path: {' -> '.join(path)} dist={cost:.2f} m"
