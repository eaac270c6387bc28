# tests/io/test_cities_file.py
import logging

import pytest

from gps_graph.domain.errors import InvalidArgument
from gps_graph.io.cities_file import parse_cities, read_cities, split_name

SAMPLE = """3
Apple Valley, California
-117.19
34.50
Bakersfield, California
-119.02
35.37
Chico
-121.84
39.73
"""


def test_parse_sample():
    recs = parse_cities(SAMPLE.splitlines(keepends=True))
    assert recs == [
        ("Apple Valley", "California", -117.19, 34.50),
        ("Bakersfield", "California", -119.02, 35.37),
        ("Chico", "Chico", -121.84, 39.73),
    ]


def test_stops_at_blank_line():
    text = SAMPLE.replace("Chico\n", "\nChico\n")
    assert len(parse_cities(text.splitlines())) == 2


def test_split_name_keeps_extra_separators_in_region():
    assert split_name("Washington, D.C., USA") == ("Washington", "D.C., USA")
    assert split_name("Reno") == ("Reno", "Reno")


def test_count_mismatch_only_warns(caplog):
    with caplog.at_level(logging.WARNING, logger="gps_graph.io"):
        recs = parse_cities(["5", "Reno", "1.0", "2.0"])
    assert len(recs) == 1
    assert "declared 5" in caplog.text


@pytest.mark.parametrize(
    "lines, where",
    [
        ([], "line 1"),
        (["three"], "line 1"),
        (["1", "Reno", "east", "2.0"], "line 3"),
        (["1", "Reno", "1.0"], "line 4"),
    ],
)
def test_malformed_input_names_the_line(lines, where):
    with pytest.raises(InvalidArgument, match=where):
        parse_cities(lines)


def test_read_cities_from_disk(tmp_path):
    p = tmp_path / "c.txt"
    p.write_text(SAMPLE, encoding="utf-8")
    assert len(read_cities(p)) == 3
    with pytest.raises(FileNotFoundError):
        read_cities(tmp_path / "missing.txt")


def test_read_cities_skips_byte_order_mark(tmp_path):
    p = tmp_path / "bom.txt"
    p.write_text(SAMPLE, encoding="utf-8-sig")
    recs = read_cities(p)
    assert len(recs) == 3 and recs[0][0] == "Apple Valley"
