from typing import Protocol, runtime_checkable

from geo_route.domain.graph import Graph
from geo_route.domain.search.search_core import SearchResult
from geo_route.io.recorder import Trace
from geo_route.sim.hooks import SearchHooks


@runtime_checkable
class SearchFn(Protocol):
    """
    Responsibilities:
      • Find a shortest start→goal path over the graph's stored edge weights.
      • Record its steps into ``trace``; detail events only when emit_detail.
      • Raise MissingNode before any work when an endpoint is absent.
    """

    def __call__(
        self,
        graph: Graph,
        start: str,
        goal: str,
        emit_detail: bool = False,
        *,
        trace: Trace | None = None,
        hooks: SearchHooks | None = None,
    ) -> SearchResult: ...

