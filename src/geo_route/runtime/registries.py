# runtime/registries.py
from collections.abc import Callable

from geo_route.app.protocols import SearchFn
from geo_route.config.models import AStarModel, DijkstraModel, SearchUnion
from geo_route.domain.search.search_astar import astar
from geo_route.domain.search.search_dijkstra import dijkstra

SearchFactory = Callable[[SearchUnion], SearchFn]

_search_registry: dict[str, SearchFactory] = {}


def register_search(kind: str):
    def deco(fn: SearchFactory):
        _search_registry[kind] = fn
        return fn

    return deco


def search_kinds() -> list[str]:
    return sorted(_search_registry)


def make_search(cfg: SearchUnion) -> SearchFn:
    try:
        factory = _search_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown search kind {cfg.kind!r}") from None
    return factory(cfg)


@register_search("dijkstra")
def _make_dijkstra(cfg: DijkstraModel) -> SearchFn:
    return dijkstra


@register_search("astar")
def _make_astar(cfg: AStarModel) -> SearchFn:
    return astar
