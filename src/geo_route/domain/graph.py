# geo_route/domain/graph.py
from collections.abc import Iterator
from dataclasses import dataclass, field

from geo_route.domain.entities.geography import Edge, Node
from geo_route.domain.errors import InvalidReference
from geo_route.domain.geodesy import haversine_m


@dataclass
class Graph:
    """
    Undirected weighted graph keyed by node id.

    Each undirected edge is held as two directed ``Edge`` records, one in each
    endpoint's adjacency list. Adjacency order is insertion order and is the
    order in which the search algorithms relax neighbors.
    """

    nodes: dict[str, Node] = field(default_factory=dict)
    adj: dict[str, list[Edge]] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.nodes

    # ---------------- nodes ----------------

    def add_node(self, node_id: str, lat: float, lng: float) -> Node:
        n = Node(node_id, lat, lng)
        self.nodes[node_id] = n
        self.adj.setdefault(node_id, [])
        return n

    def update_node(self, node_id: str, lat: float, lng: float) -> None:
        n = self.nodes.get(node_id)
        if n is None:
            return
        # edge weights keep the snapshot taken in add_edge
        n.lat, n.lng = lat, lng

    def has_node(self, node_id: str) -> bool:
        return node_id in self.nodes

    def node(self, node_id: str) -> Node:
        return self.nodes[node_id]

    def node_ids(self) -> list[str]:
        return list(self.nodes)

    # ---------------- edges ----------------

    def add_edge(self, a: str, b: str, weight: float | None = None) -> float:
        if a not in self.nodes or b not in self.nodes:
            raise InvalidReference(a, b)
        if weight is None:
            weight = haversine_m(self.nodes[a], self.nodes[b])
        self.adj[a].append(Edge(a, b, weight))
        self.adj[b].append(Edge(b, a, weight))
        return weight

    def has_edge(self, a: str, b: str) -> bool:
        return any(e.to == b for e in self.adj.get(a, ()))

    def neighbors(self, node_id: str) -> list[Edge]:
        return list(self.adj.get(node_id, ()))

    def edge_weight(self, a: str, b: str) -> float | None:
        for e in self.neighbors(a):
            if e.to == b:
                return e.weight
        return None

    def unique_edges(self) -> Iterator[Edge]:
        """Yield each undirected pair once, oriented so that ``src < to``."""
        seen: set[tuple[str, str]] = set()
        for a, edges in self.adj.items():
            for e in edges:
                key = (a, e.to) if a < e.to else (e.to, a)
                if key in seen:
                    continue
                seen.add(key)
                yield Edge(key[0], key[1], e.weight)

    def reset(self) -> None:
        self.nodes.clear()
        self.adj.clear()
