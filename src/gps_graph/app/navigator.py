# app/navigator.py
import os
import time
from collections.abc import Iterable

import numpy as np

from gps_graph.app.protocols import DistanceFn, EngineHooks
from gps_graph.app.queries import Neighbor, QueryService, Route
from gps_graph.config.models import AdjacencyModel
from gps_graph.domain.distance import EDGE_WEIGHT
from gps_graph.domain.entities.location import CityRecord, Location, LocationInfo
from gps_graph.domain.errors import InvalidArgument, NotFound
from gps_graph.domain.graph import AdjacencyGraph
from gps_graph.domain.store import LocationStore
from gps_graph.engine.hooks import NoopHooks
from gps_graph.io.cities_file import read_cities


class Navigator:
    """
    Session façade for a presentation layer (menu, web view, ...).

    Holds the state the core deliberately does not: which sources were
    loaded and which location is "current". Every query passes the current
    id into the QueryService explicitly.
    """

    def __init__(
        self,
        *,
        store: LocationStore,
        graph: AdjacencyGraph,
        queries: QueryService,
        distances: dict[str, DistanceFn],
        adjacency: AdjacencyModel,
        rng_adjacency: np.random.Generator,
        rng_selection: np.random.Generator,
        hooks: EngineHooks | None = None,
    ):
        self.store, self.graph, self.queries = store, graph, queries
        self.distances = distances
        self.adjacency = adjacency
        self.rng_adjacency, self.rng_selection = rng_adjacency, rng_selection
        self._hooks = hooks or NoopHooks()
        self._sources: list[str] = []
        self.current_id: int | None = None

    @property
    def loaded_sources(self) -> tuple[str, ...]:
        return tuple(self._sources)

    def source_count(self) -> int:
        return len(self._sources)

    # ---------------- data lifecycle ----------------

    def load(self, source: str, records: Iterable[CityRecord]) -> list[Location]:
        """Add a source's locations, then rebuild the adjacency over the whole store."""
        if source in self._sources:
            raise InvalidArgument(f"source {source!r} has already been loaded")
        added = self.store.load(records)
        self._sources.append(source)
        self._hooks.load(source=source, added=len(added), total=self.store.count())
        self.regenerate()
        return added

    def load_file(self, path: str | os.PathLike) -> list[Location]:
        source = os.fspath(path)
        if source in self._sources:
            raise InvalidArgument(f"source {source!r} has already been loaded")
        return self.load(source, read_cities(path))

    def regenerate(self) -> int:
        t0 = time.perf_counter()
        a = self.adjacency
        edges = self.graph.generate_random(
            self.store.count(),
            rng=self.rng_adjacency,
            min_out_degree=a.min_out_degree,
            max_out_degree=a.max_out_degree,
            min_weight=a.min_weight,
            max_weight=a.max_weight,
        )
        self._hooks.regenerate(
            locations=self.store.count(),
            edges=edges,
            wall_ms=(time.perf_counter() - t0) * 1000,
        )
        return edges

    def reset(self) -> None:
        self.store.reset()
        self.graph.reset()
        self._sources.clear()
        self.current_id = None

    # ---------------- lookups ----------------

    def info(self, loc_id: int) -> LocationInfo:
        loc = self.store.get(loc_id)
        in_deg, out_deg = self.graph.degree(loc.id) if loc.id < self.graph.size else (0, 0)
        return LocationInfo(loc, in_deg, out_deg)

    def search_region(self, region: str) -> list[LocationInfo]:
        return [self.info(loc.id) for loc in self.store.by_region(region)]

    def search_name(self, name: str) -> LocationInfo:
        return self.info(self.store.find_name(name).id)

    # ---------------- current location ----------------

    def set_current(self, loc_id: int) -> LocationInfo:
        info = self.info(loc_id)
        self.current_id = info.location.id
        return info

    def _current_id(self) -> int:
        if self.current_id is None:
            n = self.store.count()
            if n == 0:
                raise NotFound("no locations loaded")
            self.current_id = int(self.rng_selection.integers(0, n))
        return self.current_id

    def current(self) -> LocationInfo:
        return self.info(self._current_id())

    # ---------------- queries ----------------

    def distance_fn(self, mode: str) -> DistanceFn:
        try:
            return self.distances[mode]
        except KeyError:
            raise InvalidArgument(
                f"unknown distance mode {mode!r}; have {sorted(self.distances)}"
            ) from None

    def k_nearest(self, k: int, mode: str = EDGE_WEIGHT) -> list[Neighbor]:
        return self.queries.k_nearest(self._current_id(), k, self.distance_fn(mode))

    def route_to(self, target_id: int) -> Route:
        return self.queries.route(self._current_id(), target_id)

    def path_to(self, target_id: int) -> list[Location]:
        return self.queries.path_to(self._current_id(), target_id)
