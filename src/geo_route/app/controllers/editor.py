# geo_route/app/controllers/editor.py
import numpy as np

from geo_route.domain.geodesy import haversine_m
from geo_route.domain.graph import Graph
from geo_route.io.recorder import Trace

# Lahore demo graph: (id, lat, lng) and undirected edges
EXAMPLE_NODES = [
    ("A", 31.53, 74.35),
    ("B", 31.52, 74.40),
    ("C", 31.50, 74.38),
    ("D", 31.49, 74.34),
    ("E", 31.51, 74.31),
]
EXAMPLE_EDGES = [("A", "B"), ("A", "D"), ("B", "C"), ("C", "D"), ("D", "E"), ("B", "E")]


class GraphEditor:
    """
    The graph operations a map front end drives (click to add, drag to move,
    click two markers to connect), each logged to the session trace.
    """

    def __init__(self, graph: Graph, trace: Trace):
        self.graph = graph
        self.trace = trace
        self.node_counter = 0

    def add_node(self, lat: float, lng: float, node_id: str | None = None) -> str:
        # the counter advances even for caller-chosen ids
        self.node_counter += 1
        if not node_id:
            while self.graph.has_node(f"N{self.node_counter}"):
                self.node_counter += 1
        nid = node_id or f"N{self.node_counter}"
        self.graph.add_node(nid, lat, lng)
        self.trace.summary(f"Added node {nid} at {lat:.5f}, {lng:.5f}")
        return nid

    def move_node(self, node_id: str, lat: float, lng: float) -> None:
        if not self.graph.has_node(node_id):
            return
        self.graph.update_node(node_id, lat, lng)
        self.trace.summary(f"Node {node_id} moved to {lat:.5f},{lng:.5f}")

    def connect(self, a: str, b: str) -> bool:
        g = self.graph
        if not (g.has_node(a) and g.has_node(b)):
            return False
        if g.has_edge(a, b):
            self.trace.detail(f"Edge {a}-{b} exists")
            return False
        g.add_edge(a, b)
        meters = haversine_m(g.node(a), g.node(b))
        self.trace.summary(f"Connected {a} ↔ {b}: {meters:.1f} m")
        return True

    def auto_connect(self, k: int = 2) -> int:
        """Connect every node to its k nearest neighbors by great-circle distance."""
        nodes = list(self.graph.nodes.values())
        added = 0
        for a in nodes:
            near = sorted(
                ((n.id, haversine_m(a, n)) for n in nodes if n.id != a.id),
                key=lambda x: x[1],
            )
            for nid, _ in near[:k]:
                if not self.graph.has_edge(a.id, nid) and self.connect(a.id, nid):
                    added += 1
        self.trace.summary(f"Auto-connected nearest {k} neighbors")
        return added

    def scatter(
        self, n: int, bbox: tuple[float, float, float, float], rng: np.random.Generator
    ) -> list[str]:
        lat0, lng0, lat1, lng1 = bbox
        lats = rng.uniform(lat0, lat1, size=n)
        lngs = rng.uniform(lng0, lng1, size=n)
        return [self.add_node(float(lat), float(lng)) for lat, lng in zip(lats, lngs)]

    def reset(self) -> None:
        self.graph.reset()
        self.node_counter = 0
        self.trace.clear()
        self.trace.summary("Graph reset")

    def seed_example(self) -> None:
        self.reset()
        for nid, lat, lng in EXAMPLE_NODES:
            self.add_node(lat, lng, nid)
        for a, b in EXAMPLE_EDGES:
            self.connect(a, b)
        self.trace.summary("Example seeded: A,B,C,D,E")

    def edge_lines(self) -> list[str]:
        return [f"{e.src} — {e.to}: {e.weight:.2f} m" for e in self.graph.unique_edges()] or [
            "(no edges)"
        ]
