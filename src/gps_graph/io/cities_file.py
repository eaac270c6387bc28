# io/cities_file.py
"""
Reader for the plain-text cities format:

    3
    Apple Valley, California
    -117.19
    34.50
    Chico
    ...

First line is the declared city count, then one block of three lines per
city: "Name, Region", longitude, latitude. A name without ", " is its own
region. Reading stops at end of input or at the first blank name line.
"""
import logging
import os
from collections.abc import Iterable

from gps_graph.domain.entities.location import CityRecord
from gps_graph.domain.errors import InvalidArgument

log = logging.getLogger("gps_graph.io")

SEP = ", "


def split_name(line: str) -> tuple[str, str]:
    if SEP not in line:
        return line, line
    name, region = line.split(SEP, 1)
    return name, region


def _number(raw: str | None, lineno: int, what: str) -> float:
    if raw is None:
        raise InvalidArgument(f"line {lineno}: missing {what}")
    try:
        return float(raw)
    except ValueError:
        raise InvalidArgument(f"line {lineno}: {what} is not a number: {raw!r}") from None


def parse_cities(lines: Iterable[str]) -> list[CityRecord]:
    it = (ln.rstrip("\r\n") for ln in lines)
    header = next(it, None)
    if header is None:
        raise InvalidArgument("line 1: empty input, expected a city count")
    try:
        declared = int(header.strip())
    except ValueError:
        raise InvalidArgument(f"line 1: city count is not an integer: {header!r}") from None

    records: list[CityRecord] = []
    lineno = 1
    for name_line in it:
        lineno += 1
        if not name_line.strip():
            break
        name, region = split_name(name_line.strip())
        lon = _number(next(it, None), lineno + 1, "longitude")
        lat = _number(next(it, None), lineno + 2, "latitude")
        lineno += 2
        records.append((name, region, lon, lat))

    if declared != len(records):
        log.warning("declared %d cities but read %d", declared, len(records))
    return records


def read_cities(path: str | os.PathLike) -> list[CityRecord]:
    with open(path, encoding="utf-8-sig") as fp:
        return parse_cities(fp)
