# domain/entities/edge.py
from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    from_id: int
    to_id: int
    weight: float  # >= 0
