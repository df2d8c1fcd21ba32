# geo_route/domain/search/search_dijkstra.py
import time

from geo_route.domain.graph import Graph
from geo_route.domain.search.search_core import (
    INF,
    SearchResult,
    check_endpoints,
    format_path,
    path_cost,
    reconstruct_path,
    resolve,
)
from geo_route.io.recorder import Trace
from geo_route.sim.hooks import SearchHooks
from geo_route.sim.pqueue import PriorityQueue

NAME = "dijkstra"


def dijkstra(
    graph: Graph,
    start: str,
    goal: str,
    emit_detail: bool = False,
    *,
    trace: Trace | None = None,
    hooks: SearchHooks | None = None,
) -> SearchResult:
    """
    Shortest path from ``start`` to ``goal``, stopping as soon as the goal is
    settled. The queue has no decrease-key: an improved distance is pushed as
    a new entry and the older entry is discarded when it surfaces.
    """
    trace, hooks = resolve(trace, hooks)
    check_endpoints(graph, start, goal, algorithm=NAME, hooks=hooks)
    t0 = time.perf_counter()
    hooks.run_start(algorithm=NAME, start=start, goal=goal, nodes=len(graph))

    dist = {k: INF for k in graph.node_ids()}
    dist[start] = 0.0
    came_from: dict[str, str] = {}

    pq: PriorityQueue[str] = PriorityQueue()
    pq.push(start, 0.0)
    pushes = 1
    trace.summary(f"Dijkstra push {start} (0)")

    settled: set[str] = set()
    visited: list[str] = []

    while pq.size() > 0:
        top = pq.pop()
        if top is None:
            break
        u = top.item

        if u in settled:
            if emit_detail:
                trace.detail(f"Pop {u} (stale)", {"u": u, "priority": top.priority})
            continue

        settled.add(u)
        visited.append(u)
        trace.summary(f"Pop {u} dist={dist[u]:.2f}")

        if u == goal:
            trace.summary(f"Reached {goal}")
            break

        for e in graph.neighbors(u):
            v, w = e.to, e.weight
            alt = dist[u] + w
            cur = dist.get(v, INF)
            if emit_detail:
                trace.detail(
                    f"Check {v} from {u}",
                    {"u": u, "v": v, "weight": w, "alt": alt, "cur": cur},
                )
            if alt < cur:
                dist[v] = alt
                came_from[v] = u
                pq.push(v, alt)
                pushes += 1
                trace.summary(f"Update {v} via {u} -> {alt:.2f}")

    result = SearchResult(NAME, start, goal, None, visited, dist, came_from, trace)
    if goal not in came_from and start != goal:
        trace.summary("Goal unreachable")
    else:
        result.path = reconstruct_path(came_from, start, goal)
        result.cost = path_cost(graph, result.path)
        trace.summary(format_path(result.path, result.cost))

    hooks.run_end(
        algorithm=NAME,
        found=result.found,
        cost=result.cost,
        visited=len(visited),
        pushes=pushes,
        wall_ms=(time.perf_counter() - t0) * 1000,
    )
    return result
