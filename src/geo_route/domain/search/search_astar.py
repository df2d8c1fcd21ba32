# geo_route/domain/search/search_astar.py
import time

from geo_route.domain.geodesy import haversine_m
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

NAME = "astar"


def astar(
    graph: Graph,
    start: str,
    goal: str,
    emit_detail: bool = False,
    *,
    trace: Trace | None = None,
    hooks: SearchHooks | None = None,
) -> SearchResult:
    """
    A* ordered by f = g + h, with h the great-circle distance to the goal.

    No closed set is kept: every pop is expanded, so a node reached twice may
    be expanded twice and appear twice in ``visited_order``. Only strictly
    cheaper tentative costs are accepted, which keeps the result optimal.
    """
    trace, hooks = resolve(trace, hooks)
    check_endpoints(graph, start, goal, algorithm=NAME, hooks=hooks)
    t0 = time.perf_counter()
    hooks.run_start(algorithm=NAME, start=start, goal=goal, nodes=len(graph))

    target = graph.node(goal)

    def h(n: str) -> float:
        return haversine_m(graph.node(n), target)

    g_score = {k: INF for k in graph.node_ids()}
    f_score = {k: INF for k in graph.node_ids()}
    came_from: dict[str, str] = {}
    g_score[start] = 0.0
    f_score[start] = h(start)

    open_q: PriorityQueue[str] = PriorityQueue()
    open_q.push(start, f_score[start])
    pushes = 1
    trace.summary(f"A* push {start} f={f_score[start]:.2f}")

    visited: list[str] = []

    while open_q.size() > 0:
        top = open_q.pop()
        if top is None:
            break
        current = top.item
        visited.append(current)
        trace.summary(f"Pop {current} f={top.priority:.2f} g={g_score[current]:.2f}")

        if current == goal:
            trace.summary(f"Reached {goal}")
            break

        for e in graph.neighbors(current):
            neighbor, w = e.to, e.weight
            tentative = g_score[current] + w
            h_n = h(neighbor)
            f_tent = tentative + h_n
            if emit_detail:
                trace.detail(
                    f"Check {neighbor}",
                    {
                        "current": current,
                        "neighbor": neighbor,
                        "weight": w,
                        "tentative": tentative,
                        "h": h_n,
                        "f_tentative": f_tent,
                    },
                )
            if tentative < g_score.get(neighbor, INF):
                came_from[neighbor] = current
                g_score[neighbor] = tentative
                f_score[neighbor] = f_tent
                open_q.push(neighbor, f_tent)
                pushes += 1
                trace.summary(
                    f"Update {neighbor} via {current} g={tentative:.2f} f={f_tent:.2f}"
                )

    result = SearchResult(
        NAME, start, goal, None, visited, g_score, came_from, trace, f_scores=f_score
    )
    if goal not in came_from and start != goal:
        trace.summary("Goal unreachable (A*)")
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
