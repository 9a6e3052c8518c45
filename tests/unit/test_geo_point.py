import math

import pytest
from src.domain.models.geo import GeoPoint


def test_geo_point_accepts_valid_coordinates() -> None:
    p = GeoPoint(lat=28.1234, lon=-15.4321)
    assert p.lat == 28.1234
    assert p.lon == -15.4321
    assert (p.x, p.y) == (28.1234, -15.4321)


@pytest.mark.parametrize(
    ("lat", "lon"),
    [
        (-90.0001, 0.0),
        (90.0001, 0.0),
        (0.0, -180.0001),
        (0.0, 180.0001),
    ],
)
def test_geo_point_rejects_out_of_range_coordinates(lat: float, lon: float) -> None:
    with pytest.raises(ValueError):
        GeoPoint(lat=lat, lon=lon)


def test_geo_point_equality_and_hash_are_by_value() -> None:
    a = GeoPoint(lat=1.5, lon=2.5)
    b = GeoPoint(lat=1.5, lon=2.5)
    c = GeoPoint(lat=1.5, lon=2.50001)

    assert a == b
    assert hash(a) == hash(b)
    assert a != c
    assert len({a, b, c}) == 2


def test_geo_point_is_immutable() -> None:
    p = GeoPoint(lat=0.0, lon=0.0)
    with pytest.raises(AttributeError):
        p.lat = 1.0  # type: ignore[misc]


def test_distance_is_euclidean_over_raw_coordinates() -> None:
    a = GeoPoint(lat=0.0, lon=0.0)
    b = GeoPoint(lat=3.0, lon=4.0)

    assert a.distance(b) == 5.0
    assert b.distance(a) == 5.0
    assert math.isclose(a.distance(GeoPoint(lat=1.0, lon=1.0)), math.sqrt(2.0))
