from typing import Protocol, runtime_checkable

from gps_graph.domain.entities.edge import Edge
from gps_graph.domain.entities.location import Location


@runtime_checkable
class DistanceFn(Protocol):
    """
    Effective length of an edge during a shortest-path run.
    Responsibilities:
      • Map (tail, head, stored edge) to a non-negative length.
      • Be a pure function: the engine may call it any number of times.
    """

    kind: str

    def __call__(self, a: Location, b: Location, edge: Edge) -> float: ...


@runtime_checkable
class EngineHooks(Protocol):
    def run_start(self, *, source: int, mode: str, size: int): ...
    def run_end(self, *, source: int, mode: str, settled: int, wall_ms: float): ...
    def regenerate(self, *, locations: int, edges: int, wall_ms: float): ...
    def load(self, *, source: str, added: int, total: int): ...
    def error(self, op: str, *, exc: BaseException, **kw): ...
