# domain/graph.py
from collections.abc import Iterator
from math import isfinite

import numpy as np

from gps_graph.domain.entities.edge import Edge
from gps_graph.domain.entities.location import as_index
from gps_graph.domain.errors import InvalidArgument, NotFound


def _check_bounds(lo: int, hi: int, what: str) -> None:
    if lo < 0 or hi < 0:
        raise InvalidArgument(f"{what} bounds must be >= 0, got [{lo}, {hi}]")
    if lo > hi:
        raise InvalidArgument(f"{what} bounds must satisfy min <= max, got [{lo}, {hi}]")


class AdjacencyGraph:
    """
    Directed weighted adjacency lists over location ids [0, size).

    In/out degree counters are derived data: every insert bumps them and
    clear() zeroes them, so they always match the edge lists.
    """

    def __init__(self, size: int = 0):
        self.size = 0
        self._adj: list[list[Edge]] = []
        self._in: list[int] = []
        self._out: list[int] = []
        self.resize(size)

    def resize(self, size: int) -> None:
        """Drop all edges and size the adjacency lists for `size` locations."""
        if size < 0:
            raise InvalidArgument(f"location count must be >= 0, got {size}")
        self.size = size
        self._adj = [[] for _ in range(size)]
        self._in = [0] * size
        self._out = [0] * size

    def clear(self) -> None:
        self.resize(self.size)

    def reset(self) -> None:
        self.resize(0)

    def _check_id(self, loc_id: int) -> int:
        try:
            i = as_index(loc_id)
        except TypeError:
            i = -1
        if not 0 <= i < self.size:
            raise NotFound(f"no location with id {loc_id!r} in graph of size {self.size}")
        return i

    # ---------------- edges ----------------

    def insert_edge(self, from_id: int, to_id: int, weight: float) -> Edge:
        from_id, to_id = self._check_id(from_id), self._check_id(to_id)
        w = float(weight)
        if not isfinite(w) or w < 0:
            raise InvalidArgument(f"edge weight must be finite and >= 0, got {weight!r}")
        e = Edge(from_id, to_id, w)
        self._adj[from_id].append(e)
        self._out[from_id] += 1
        self._in[to_id] += 1
        return e

    def edges_from(self, loc_id: int) -> tuple[Edge, ...]:
        return tuple(self._adj[self._check_id(loc_id)])

    def has_edge(self, from_id: int, to_id: int) -> bool:
        return any(e.to_id == to_id for e in self._adj[self._check_id(from_id)])

    def iter_edges(self) -> Iterator[Edge]:
        for edges in self._adj:
            yield from edges

    def edge_count(self) -> int:
        return sum(self._out)

    def in_degree(self, loc_id: int) -> int:
        return self._in[self._check_id(loc_id)]

    def out_degree(self, loc_id: int) -> int:
        return self._out[self._check_id(loc_id)]

    def degree(self, loc_id: int) -> tuple[int, int]:
        """(in_degree, out_degree)"""
        i = self._check_id(loc_id)
        return self._in[i], self._out[i]

    # ---------------- generation ----------------

    def generate_random(
        self,
        location_count: int,
        *,
        rng: np.random.Generator,
        min_out_degree: int = 2,
        max_out_degree: int = 8,
        min_weight: int = 100,
        max_weight: int = 2000,
    ) -> int:
        """
        Rebuild the graph with a random fan-out per location.

        Each location independently gets k ~ U[min_out_degree, max_out_degree]
        distinct destinations (no self-loops), chosen by rejection sampling,
        with integer weights ~ U[min_weight, max_weight]. k is clamped to
        location_count - 1. Returns the number of edges created.
        """
        _check_bounds(min_out_degree, max_out_degree, "out-degree")
        _check_bounds(min_weight, max_weight, "weight")
        self.resize(location_count)

        for i in range(location_count):
            k = int(rng.integers(min_out_degree, max_out_degree, endpoint=True))
            k = min(k, location_count - 1)
            chosen: set[int] = set()
            while len(chosen) < k:
                j = int(rng.integers(0, location_count))
                if j == i or j in chosen:
                    continue
                chosen.add(j)
                w = int(rng.integers(min_weight, max_weight, endpoint=True))
                self.insert_edge(i, j, w)
        return self.edge_count()
