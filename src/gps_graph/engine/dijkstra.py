# engine/dijkstra.py

import heapq
import math
import time
from dataclasses import dataclass, field

from gps_graph.app.protocols import DistanceFn, EngineHooks
from gps_graph.domain.entities.location import as_index
from gps_graph.domain.errors import GraphError, NotFound
from gps_graph.domain.graph import AdjacencyGraph
from gps_graph.domain.store import LocationStore
from gps_graph.engine.hooks import NoopHooks

INF = math.inf
NO_PREDECESSOR = -1


@dataclass
class ShortestPathResult:
    """
    Scratch state of one run, owned by the caller.
    distances/predecessors are indexed by location id.
    """

    source: int
    mode: str
    distances: list[float]
    predecessors: list[int]
    settled_order: list[int] = field(default_factory=list)

    def _check(self, v: int) -> int:
        try:
            i = as_index(v)
        except TypeError:
            i = -1
        if not 0 <= i < len(self.distances):
            raise NotFound(f"no location with id {v!r} in this result")
        return i

    def distance(self, v: int) -> float:
        return self.distances[self._check(v)]

    def predecessor(self, v: int) -> int:
        return self.predecessors[self._check(v)]

    def is_reachable(self, v: int) -> bool:
        return self.distance(v) < INF

    def reachable(self) -> list[int]:
        # settle order is ascending distance; unreachable ids never settle
        return [v for v in self.settled_order if self.distances[v] < INF]


class ShortestPathEngine:
    def __init__(
        self, store: LocationStore, graph: AdjacencyGraph, hooks: EngineHooks | None = None
    ):
        self.store, self.graph = store, graph
        self._hooks = hooks or NoopHooks()

    def run(self, source_id: int, distance_fn: DistanceFn) -> ShortestPathResult:
        """
        Dijkstra from source_id. The heap uses lazy deletion: a relaxed vertex
        is pushed again, and stale entries are skipped when popped.
        Ties pop in push order, which callers must not rely on.
        """
        n = self.store.count()
        mode = getattr(distance_fn, "kind", type(distance_fn).__name__)
        try:
            source_id = self.store.get(source_id).id
            if self.graph.size != n:
                raise GraphError(
                    f"adjacency graph covers {self.graph.size} locations, store has {n}; "
                    "regenerate the graph after loading"
                )
        except GraphError as exc:
            self._hooks.error("dijkstra", exc=exc, source=source_id, mode=mode)
            raise

        t0 = time.perf_counter()
        self._hooks.run_start(source=source_id, mode=mode, size=n)

        dist = [INF] * n
        pred = [NO_PREDECESSOR] * n
        visited = [False] * n
        order: list[int] = []

        dist[source_id] = 0.0
        seq = 0
        heap: list[tuple[float, int, int]] = [(0.0, seq, source_id)]

        while heap:
            d, _, u = heapq.heappop(heap)
            if visited[u] or d > dist[u]:
                continue
            visited[u] = True
            order.append(u)
            loc_u = self.store.get(u)
            for e in self.graph.edges_from(u):
                v = e.to_id
                if visited[v]:
                    continue
                cand = d + distance_fn(loc_u, self.store.get(v), e)
                if cand < dist[v]:
                    dist[v] = cand
                    pred[v] = u
                    seq += 1
                    heapq.heappush(heap, (cand, seq, v))

        self._hooks.run_end(
            source=source_id,
            mode=mode,
            settled=len(order),
            wall_ms=(time.perf_counter() - t0) * 1000,
        )
        return ShortestPathResult(source_id, mode, dist, pred, order)
