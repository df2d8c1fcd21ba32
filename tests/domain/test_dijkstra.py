# tests/domain/test_dijkstra.py
import math

import pytest

from geo_route.domain.errors import MissingNode
from geo_route.domain.graph import Graph
from geo_route.domain.search.search_dijkstra import dijkstra
from geo_route.io.recorder import Trace
from geo_route.sim.hooks import NoopHooks

ONE_DEG_M = 6_371_000.0 * math.radians(1.0)


class RecordingHooks(NoopHooks):
    def __init__(self):
        self.calls = []

    def run_start(self, **kw):
        self.calls.append(("run_start", kw))

    def run_end(self, **kw):
        self.calls.append(("run_end", kw))

    def error(self, **kw):
        self.calls.append(("error", kw))


@pytest.fixture
def line() -> Graph:
    g = Graph()
    g.add_node("A", 0.0, 0.0)
    g.add_node("B", 0.0, 1.0)
    g.add_node("C", 0.0, 2.0)
    g.add_edge("A", "B")
    g.add_edge("B", "C")
    return g


@pytest.fixture
def detour() -> Graph:
    # A-B is expensive, A-C-B is cheap, so B is queued twice; E is isolated
    g = Graph()
    for nid in "ABCDE":
        g.add_node(nid, 0.0, 0.0)
    g.add_edge("A", "B", 10.0)
    g.add_edge("A", "C", 1.0)
    g.add_edge("C", "B", 1.0)
    g.add_edge("B", "D", 1.0)
    return g


def test_line_path_cost_and_visit_order(line: Graph):
    res = dijkstra(line, "A", "C")
    assert res.path == ["A", "B", "C"]
    assert res.visited_order == ["A", "B", "C"]
    assert res.cost == pytest.approx(2 * ONE_DEG_M, rel=1e-9)
    assert res.cost == pytest.approx(222_390, abs=1.0)
    assert res.predecessors == {"B": "A", "C": "B"}
    assert res.found


def test_line_summary_trace(line: Graph):
    res = dijkstra(line, "A", "C")
    d1, d2 = ONE_DEG_M, 2 * ONE_DEG_M
    assert list(reversed(res.trace.texts())) == [
        "Dijkstra push A (0)",
        "Pop A dist=0.00",
        f"Update B via A -> {d1:.2f}",
        f"Pop B dist={d1:.2f}",
        f"Update C via B -> {d2:.2f}",
        f"Pop C dist={d2:.2f}",
        "Reached C",
        f"Path: A -> B -> C dist={d2:.2f} m",
    ]
    assert all(ev.level == "summary" for ev in res.trace)


def test_missing_goal_raises_before_any_work(line: Graph):
    trace, hooks = Trace(), RecordingHooks()
    with pytest.raises(MissingNode) as exc:
        dijkstra(line, "A", "D", trace=trace, hooks=hooks)
    assert exc.value.node_id == "D"
    assert exc.value.role == "goal"
    assert len(trace) == 0
    assert [name for name, _ in hooks.calls] == ["error"]


def test_missing_start_raises(line: Graph):
    with pytest.raises(MissingNode):
        dijkstra(line, "Z", "A")


def test_start_equals_goal(line: Graph):
    hooks = RecordingHooks()
    res = dijkstra(line, "B", "B", hooks=hooks)
    assert res.path == ["B"]
    assert res.cost == 0.0
    assert res.visited_order == ["B"]
    end = dict(hooks.calls)["run_end"]
    assert end["pushes"] == 1 and end["visited"] == 1


def test_stale_entries_are_discarded(detour: Graph):
    res = dijkstra(detour, "A", "E", emit_detail=True)
    assert res.path is None
    assert res.cost is None
    assert res.visited_order == ["A", "C", "B", "D"]
    assert res.costs["B"] == 2.0
    assert res.costs["D"] == 3.0
    assert math.isinf(res.costs["E"])
    assert res.predecessors["B"] == "C"

    details = res.trace.texts("detail")
    assert "Pop B (stale)" in details
    assert res.trace.texts("summary")[0] == "Goal unreachable"


def test_stale_pop_only_logged_with_detail(detour: Graph):
    res = dijkstra(detour, "A", "E")
    assert res.trace.texts("detail") == []


def test_detail_check_recorded_before_comparison(detour: Graph):
    res = dijkstra(detour, "A", "D", emit_detail=True)
    checks = [ev for ev in reversed(res.trace.events) if ev.text.startswith("Check")]
    # every neighbor inspection is recorded, including those that do not improve
    assert checks[0].meta == {"u": "A", "v": "B", "weight": 10.0, "alt": 10.0, "cur": math.inf}
    no_gain = [ev for ev in checks if ev.meta["alt"] >= ev.meta["cur"]]
    assert no_gain
    assert all(ev.level == "detail" for ev in checks)
    assert res.path == ["A", "C", "B", "D"]
    assert res.cost == 3.0


def test_path_cost_uses_edge_weights(detour: Graph):
    res = dijkstra(detour, "A", "B")
    assert res.path == ["A", "C", "B"]
    assert res.cost == 2.0


def test_goal_stops_early(line: Graph):
    line.add_node("D", 0.0, 3.0)
    line.add_edge("C", "D")
    res = dijkstra(line, "A", "B")
    assert res.visited_order == ["A", "B"]
    assert math.isinf(res.costs["D"])
