# domain/entities/location.py
import operator
from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    id: int  # dense, 0-based, assigned by the store
    name: str
    region: str
    longitude: float
    latitude: float


@dataclass(frozen=True)
class LocationInfo:
    """Location plus the degree counters the adjacency graph keeps for it."""

    location: Location
    in_degree: int = 0
    out_degree: int = 0


# (name, region, longitude, latitude); region may be "" or None
CityRecord = tuple[str, str | None, float, float]


def as_index(v) -> int:
    """Plain int for any integer-like id (np.int64 included); bools are rejected."""
    if isinstance(v, bool):
        raise TypeError(f"expected an integer, got {v!r}")
    return operator.index(v)
