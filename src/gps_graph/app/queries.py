# app/queries.py
import heapq
from dataclasses import dataclass

from gps_graph.app.protocols import DistanceFn
from gps_graph.domain.distance import EdgeWeightDistance
from gps_graph.domain.entities.location import Location, as_index
from gps_graph.domain.errors import InvalidArgument, Unreachable
from gps_graph.engine.dijkstra import INF, NO_PREDECESSOR, ShortestPathEngine, ShortestPathResult


@dataclass(frozen=True)
class Neighbor:
    location: Location
    distance: float


@dataclass(frozen=True)
class Hop:
    location: Location
    distance: float  # cumulative from the route's source


@dataclass
class Route:
    source: int
    target: int
    hops: list[Hop]

    @property
    def total(self) -> float:
        return self.hops[-1].distance

    @property
    def locations(self) -> list[Location]:
        return [h.location for h in self.hops]


def walk_predecessors(result: ShortestPathResult, target_id: int) -> list[int]:
    """Ids from result.source to target_id inclusive; Unreachable if there is no path."""
    if result.distance(target_id) == INF:
        raise Unreachable(result.source, target_id)
    ids = [as_index(target_id)]
    while ids[-1] != result.source:
        p = result.predecessors[ids[-1]]
        if p == NO_PREDECESSOR:
            raise Unreachable(result.source, target_id)
        ids.append(p)
    ids.reverse()
    return ids


class QueryService:
    """Nearest-neighbour and path queries; the source is always passed in by the caller."""

    def __init__(self, engine: ShortestPathEngine):
        self.engine = engine
        self._edge_weight = EdgeWeightDistance()

    def k_nearest(self, source_id: int, k: int, distance_fn: DistanceFn) -> list[Neighbor]:
        try:
            k = as_index(k)
        except TypeError:
            raise InvalidArgument(f"k must be an integer, got {k!r}") from None
        if k < 0:
            raise InvalidArgument(f"k must be >= 0, got {k}")
        res = self.engine.run(source_id, distance_fn)
        cands = [(d, v) for v, d in enumerate(res.distances) if v != res.source and d < INF]
        store = self.engine.store
        return [Neighbor(store.get(v), d) for d, v in heapq.nsmallest(k, cands)]

    def route(self, source_id: int, target_id: int) -> Route:
        res = self.engine.run(source_id, self._edge_weight)
        ids = walk_predecessors(res, target_id)
        store = self.engine.store
        return Route(res.source, ids[-1], [Hop(store.get(v), res.distances[v]) for v in ids])

    def path_to(self, source_id: int, target_id: int) -> list[Location]:
        return self.route(source_id, target_id).locations
