import pytest
from pydantic import ValidationError

from wordcodes.schemas import INT64_MAX, MinOnly, Range, Unbounded, bounds_adapter
from wordcodes.services.codec import Codec


def test_bounds_are_tagged_by_mode():
    assert isinstance(bounds_adapter.validate_python({"mode": "unbounded"}), Unbounded)
    assert bounds_adapter.validate_python({"mode": "min_only", "min": -3}) == MinOnly(min=-3)
    assert bounds_adapter.validate_python({"mode": "range", "min": 1, "max": 9}) == Range(min=1, max=9)


def test_bounds_from_json():
    bounds = bounds_adapter.validate_json('{"mode": "range", "min": 0, "max": 10000}')
    assert Codec.from_bounds(bounds).length() == 2


@pytest.mark.parametrize("data", [
    {"mode": "fixed", "min": 0, "max": 1},
    {"mode": "range", "min": 0},
    {"mode": "min_only", "min": "5"},
    {"mode": "range", "min": 0, "max": INT64_MAX + 1},
])
def test_bounds_rejects_invalid_data(data):
    with pytest.raises(ValidationError):
        bounds_adapter.validate_python(data)


def test_named_constructors_validate_types():
    with pytest.raises(ValidationError):
        Codec.with_minimum(1.5)
    with pytest.raises(ValidationError):
        Codec.for_range(0, "10")


def test_bounds_are_frozen():
    bounds = Range(min=0, max=1)
    with pytest.raises(ValidationError):
        bounds.max = 2
