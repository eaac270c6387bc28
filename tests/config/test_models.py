# tests/config/test_models.py
import pytest
from pydantic import ValidationError

from gps_graph.config.models import AdjacencyModel, GpsModel, GreatCircleModel


def test_defaults():
    m = GpsModel()
    assert (m.adjacency.min_out_degree, m.adjacency.max_out_degree) == (2, 8)
    assert (m.adjacency.min_weight, m.adjacency.max_weight) == (100, 2000)
    assert [d.kind for d in m.distances] == ["edge_weight", "great_circle"]
    gc = m.distances[1]
    assert gc.radius == 3959.0 and gc.degrees is False


def test_distance_union_is_discriminated():
    m = GpsModel.model_validate({"distances": [{"kind": "great_circle", "radius": 6371.0}]})
    assert isinstance(m.distances[0], GreatCircleModel)
    with pytest.raises(ValidationError):
        GpsModel.model_validate({"distances": [{"kind": "manhattan"}]})


@pytest.mark.parametrize(
    "payload",
    [
        {"min_out_degree": 9},
        {"min_weight": 3000},
        {"max_weight": -1},
        {"bogus": 1},
    ],
)
def test_adjacency_bounds(payload):
    with pytest.raises(ValidationError):
        AdjacencyModel.model_validate(payload)


def test_rejects_duplicate_kinds_and_bad_radius():
    with pytest.raises(ValidationError):
        GpsModel.model_validate({"distances": [{"kind": "edge_weight"}, {"kind": "edge_weight"}]})
    with pytest.raises(ValidationError):
        GreatCircleModel(radius=0)
