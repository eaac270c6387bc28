# domain/distance.py
import math
from collections.abc import Callable

from gps_graph.app.protocols import DistanceFn
from gps_graph.domain.entities.edge import Edge
from gps_graph.domain.entities.location import Location
from gps_graph.domain.errors import InvalidArgument

EARTH_RADIUS_MI = 3959.0

EDGE_WEIGHT = "edge_weight"
GREAT_CIRCLE = "great_circle"


def haversine(lon1: float, lat1: float, lon2: float, lat2: float, radius: float = EARTH_RADIUS_MI):
    """Great-circle distance; inputs are radians."""
    dlon = lon2 - lon1
    dlat = lat2 - lat1
    a = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    # rounding can push a a hair outside [0, 1] for (near-)antipodal points
    a = min(max(a, 0.0), 1.0)
    return 2 * radius * math.atan2(math.sqrt(a), math.sqrt(1 - a))


# ------------------- registry ---------------------------

DistanceFactory = Callable[..., DistanceFn]

_distance_registry: dict[str, DistanceFactory] = {}


def register_distance(kind: str):
    def deco(fn: DistanceFactory):
        _distance_registry[kind] = fn
        return fn

    return deco


@register_distance(EDGE_WEIGHT)
class EdgeWeightDistance(DistanceFn):
    kind = EDGE_WEIGHT

    def __call__(self, a, b, edge: Edge) -> float:
        return edge.weight


@register_distance(GREAT_CIRCLE)
class GreatCircleDistance(DistanceFn):
    """
    Haversine between the endpoints; the stored edge weight is ignored.

    Coordinates are used exactly as stored (i.e. taken to be radians) unless
    degrees=True, in which case they are converted first.
    """

    kind = GREAT_CIRCLE

    def __init__(self, radius: float = EARTH_RADIUS_MI, degrees: bool = False):
        self.radius, self.degrees = radius, degrees

    def between(self, a: Location, b: Location) -> float:
        lon1, lat1, lon2, lat2 = a.longitude, a.latitude, b.longitude, b.latitude
        if self.degrees:
            lon1, lat1, lon2, lat2 = map(math.radians, (lon1, lat1, lon2, lat2))
        return haversine(lon1, lat1, lon2, lat2, self.radius)

    def __call__(self, a, b, edge=None) -> float:
        return self.between(a, b)


def make_distance(kind: str, **opts) -> DistanceFn:
    try:
        factory = _distance_registry[kind]
    except KeyError:
        raise InvalidArgument(f"Unknown distance kind {kind!r}") from None
    return factory(**opts)
