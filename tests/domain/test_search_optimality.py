# tests/domain/test_search_optimality.py
import math

import numpy as np
import pytest

from geo_route.domain.graph import Graph
from geo_route.domain.search.search_astar import astar
from geo_route.domain.search.search_dijkstra import dijkstra


def random_graph(seed: int, n: int = 7, p: float = 0.35) -> Graph:
    rng = np.random.default_rng(seed)
    g = Graph()
    for i in range(n):
        g.add_node(f"N{i}", float(rng.uniform(31.49, 31.53)), float(rng.uniform(74.31, 74.40)))
    for i in range(n):
        for j in range(i + 1, n):
            if rng.random() < p:
                g.add_edge(f"N{i}", f"N{j}")
    return g


def brute_force_cost(g: Graph, start: str, goal: str) -> float:
    best = math.inf

    def walk(u: str, seen: set[str], acc: float):
        nonlocal best
        if u == goal:
            best = min(best, acc)
            return
        for e in g.neighbors(u):
            if e.to not in seen:
                seen.add(e.to)
                walk(e.to, seen, acc + e.weight)
                seen.remove(e.to)

    walk(start, {start}, 0.0)
    return best


@pytest.mark.parametrize("seed", range(12))
def test_dijkstra_and_astar_match_brute_force(seed):
    g = random_graph(seed)
    ids = g.node_ids()
    for start in ids[:3]:
        for goal in ids[-3:]:
            expected = brute_force_cost(g, start, goal)
            d = dijkstra(g, start, goal)
            a = astar(g, start, goal)
            if math.isinf(expected):
                assert d.path is None and a.path is None
                # everything the search reached has a finite distance
                assert all(math.isfinite(d.costs[v]) for v in d.visited_order)
                continue
            assert d.cost == pytest.approx(expected, rel=1e-9)
            assert a.cost == pytest.approx(expected, rel=1e-9)
            assert d.path[0] == start and d.path[-1] == goal
            assert a.path[0] == start and a.path[-1] == goal


def test_unreachable_component_is_fully_explored():
    g = random_graph(3, n=6, p=1.0)
    g.add_node("island", 31.5, 74.35)
    res = dijkstra(g, "N0", "island")
    assert res.path is None
    assert sorted(res.visited_order) == sorted(f"N{i}" for i in range(6))
    assert all(math.isfinite(res.costs[f"N{i}"]) for i in range(6))
    assert math.isinf(res.costs["island"])
