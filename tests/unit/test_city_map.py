from __future__ import annotations

import pytest

from src.domain.exceptions import NodeNotFound
from src.domain.models import CityMap, Location, Point, StreetSide


def _map_with_nodes(*points: Point) -> CityMap:
    city_map = CityMap()
    for p in points:
        city_map.add_node(p)
    return city_map


def test_add_street_creates_both_directed_edges_with_same_distance() -> None:
    a, b = Point(0, 0), Point(3, 4)
    city_map = _map_with_nodes(a, b)

    assert city_map.add_street("s1", a, b) is True

    (forward,) = city_map.node_at(a).edges
    (backward,) = city_map.node_at(b).edges
    assert forward.street_id == backward.street_id == "s1"
    assert forward.to == b and backward.to == a
    assert forward.from_node is city_map.node_at(a)
    assert forward.distance == backward.distance == 5.0
    assert city_map.street_by_id("s1").length == 5.0


def test_add_street_fails_for_unregistered_endpoint() -> None:
    a = Point(0, 0)
    city_map = _map_with_nodes(a)

    assert city_map.add_street("s1", a, Point(10, 0)) is False
    assert city_map.add_street("s2", Point(10, 0), a) is False
    assert city_map.node_at(a).edges == []
    assert city_map.street_by_id("s1") is None


def test_add_street_rejects_duplicate_id_and_leaves_map_unchanged() -> None:
    a, b, c = Point(0, 0), Point(10, 0), Point(10, 10)
    city_map = _map_with_nodes(a, b, c)
    assert city_map.add_street("s1", a, b)

    assert city_map.add_street("s1", b, c) is False
    assert city_map.street_by_id("s1").end == b
    assert city_map.node_at(c).edges == []


def test_add_street_rejects_zero_length_street() -> None:
    a = Point(0, 0)
    city_map = _map_with_nodes(a)

    assert city_map.add_street("loop", a, a) is False


def test_add_node_is_idempotent() -> None:
    city_map = CityMap()
    first = city_map.add_node(Point(1, 1))

    assert city_map.add_node(Point(1.0, 1.0)) is first
    assert len(city_map) == 1
    assert Point(1, 1) in city_map


def test_node_at_raises_for_unknown_coordinate() -> None:
    city_map = _map_with_nodes(Point(0, 0))

    with pytest.raises(NodeNotFound):
        city_map.node_at(Point(5, 5))


def test_node_by_label_looks_up_registered_nodes() -> None:
    city_map = _map_with_nodes(Point(10, 0))

    assert city_map.node_by_label("10_0") is city_map.node_at(Point(10, 0))
    assert city_map.node_by_label("depot") is None


def test_set_depot_requires_known_street() -> None:
    a, b = Point(0, 0), Point(10, 0)
    city_map = _map_with_nodes(a, b)
    city_map.add_street("s1", a, b)

    assert city_map.set_depot(Location("nope", StreetSide.LEFT)) is False
    assert city_map.depot is None

    depot = Location("s1", StreetSide.LEFT)
    assert city_map.set_depot(depot) is True
    assert city_map.depot == depot


def test_resolve_uses_side_of_street() -> None:
    a, b = Point(0, 0), Point(10, 0)
    city_map = _map_with_nodes(a, b)
    city_map.add_street("s1", a, b)

    assert city_map.resolve(Location("s1", StreetSide.LEFT)).position == a
    assert city_map.resolve(Location("s1", StreetSide.RIGHT)).position == b
    assert city_map.resolve(Location("s9", StreetSide.RIGHT)) is None
