# domain/store.py
from collections.abc import Iterable, Iterator
from math import isfinite

from gps_graph.domain.entities.location import CityRecord, Location, as_index
from gps_graph.domain.errors import InvalidArgument, NotFound


def _coord(v, what: str, name: str) -> float:
    try:
        f = float(v)
    except (TypeError, ValueError):
        raise InvalidArgument(f"{what} for {name!r} is not a number: {v!r}") from None
    if not isfinite(f):
        raise InvalidArgument(f"{what} for {name!r} must be finite, got {v!r}")
    return f


class LocationStore:
    """
    Dense id -> Location table.
    Ids are handed out sequentially across loads and only restart after reset().
    """

    def __init__(self):
        self._locs: list[Location] = []

    def __len__(self) -> int:
        return len(self._locs)

    def __iter__(self) -> Iterator[Location]:
        return iter(self._locs)

    def count(self) -> int:
        return len(self._locs)

    def load(self, records: Iterable[CityRecord]) -> list[Location]:
        # validate the whole batch first so a bad row never leaves a partial load
        rows: list[tuple[str, str, float, float]] = []
        for rec in records:
            try:
                name, region, lon, lat = rec
            except (TypeError, ValueError):
                raise InvalidArgument(f"expected (name, region, lon, lat), got {rec!r}") from None
            if not isinstance(name, str) or not name:
                raise InvalidArgument(f"location name must be a non-empty string, got {name!r}")
            if region is not None and not isinstance(region, str):
                raise InvalidArgument(f"region for {name!r} must be a string, got {region!r}")
            rows.append(
                (
                    name,
                    region or name,
                    _coord(lon, "longitude", name),
                    _coord(lat, "latitude", name),
                )
            )

        start = len(self._locs)
        added = [Location(start + i, *row) for i, row in enumerate(rows)]
        self._locs.extend(added)
        return added

    def get(self, loc_id: int) -> Location:
        try:
            i = as_index(loc_id)
        except TypeError:
            i = -1
        if not 0 <= i < len(self._locs):
            raise NotFound(f"no location with id {loc_id!r} (have {len(self._locs)})")
        return self._locs[i]

    def reset(self) -> None:
        self._locs.clear()

    # ---------------- lookups ----------------

    def by_region(self, region: str) -> list[Location]:
        key = region.casefold()
        return [loc for loc in self._locs if loc.region.casefold() == key]

    def find_name(self, name: str) -> Location:
        key = name.casefold()
        for loc in self._locs:
            if loc.name.casefold() == key:
                return loc
        raise NotFound(f"no location named {name!r}")
