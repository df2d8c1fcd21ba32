from dataclasses import dataclass


# Core geographic types shared by the graph and the search algorithms
@dataclass(frozen=True)
class Coordinate:
    lat: float  # degrees
    lng: float


@dataclass
class Node:
    """Graph vertex. Identity is ``id``; coordinates may be moved in place."""

    id: str
    lat: float
    lng: float


@dataclass(frozen=True)
class Edge:
    """One directed half of an undirected edge, as held in an adjacency list."""

    src: str
    to: str
    weight: float  # meters, snapshot taken when the edge was added
