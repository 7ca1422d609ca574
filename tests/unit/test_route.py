from __future__ import annotations

import pytest

from src.domain.models import Point, Route, StreetSide, TurnDirection


def _route(*street_ids: str) -> Route:
    route = Route()
    for street_id in street_ids:
        assert route.append_turn(TurnDirection.STRAIGHT, street_id)
    return route


def test_append_turn_alternates_sides_starting_on_the_right() -> None:
    route = _route("A", "B", "C")

    assert [leg.side for leg in route] == [
        StreetSide.RIGHT,
        StreetSide.LEFT,
        StreetSide.RIGHT,
    ]
    assert route.legs() == 3


def test_append_turn_rejects_missing_direction_or_street() -> None:
    route = Route()

    assert route.append_turn(None, "A") is False
    assert route.append_turn(TurnDirection.LEFT, "") is False
    assert route.legs() == 0


def test_append_turn_keeps_requested_direction_on_the_leg() -> None:
    route = Route()
    route.append_turn(TurnDirection.STRAIGHT, "A")
    route.append_turn(TurnDirection.RIGHT, "B")

    assert route.leg(2).turn == TurnDirection.RIGHT


def test_turn_onto_is_one_indexed() -> None:
    route = _route("A", "B")

    assert route.turn_onto(1) == "A"
    assert route.turn_onto(2) == "B"


@pytest.mark.parametrize("leg_number", [0, -1, 3])
def test_accessors_return_none_outside_route(leg_number: int) -> None:
    route = _route("A", "B")

    assert route.turn_onto(leg_number) is None
    assert route.turn_direction(leg_number) is None
    assert route.leg(leg_number) is None


def test_turn_direction_follows_side_of_street() -> None:
    route = _route("A", "B", "C", "C")

    assert route.turn_direction(1) == TurnDirection.STRAIGHT
    # Right -> Left side.
    assert route.turn_direction(2) == TurnDirection.LEFT
    # Left -> Right side.
    assert route.turn_direction(3) == TurnDirection.RIGHT
    # Same street.
    assert route.turn_direction(4) == TurnDirection.STRAIGHT


def test_first_leg_is_always_straight() -> None:
    route = Route()
    route.append_turn(TurnDirection.SHARP_LEFT, "A")

    assert route.turn_direction(1) == TurnDirection.STRAIGHT


def test_length_halves_distance_through_turn_points() -> None:
    route = Route()
    route.append_turn(TurnDirection.STRAIGHT, "s1", Point(0, 0))
    route.append_turn(TurnDirection.LEFT, "s2", Point(10, 0))
    route.append_turn(TurnDirection.LEFT, "s3", Point(10, 10))

    assert route.length() == 10.0


def test_length_of_route_without_points_is_zero() -> None:
    assert _route("A", "B").length() == 0.0
    assert Route().length() == 0.0


def test_loops_reports_only_outer_loop() -> None:
    route = _route("A", "B", "C", "B", "A")

    loops = route.loops()

    assert [(lp.subroute_start(), lp.subroute_end()) for lp in loops] == [(1, 5)]


def test_loops_requires_same_side_of_street() -> None:
    # A at legs 1 (right) and 2 (left): crossing, not returning.
    route = _route("A", "A", "B")

    assert route.loops() == []


def test_loops_are_reported_in_start_order() -> None:
    route = _route("A", "B", "A", "C", "D", "E", "D")

    loops = route.loops()

    assert [(lp.subroute_start(), lp.subroute_end()) for lp in loops] == [
        (1, 3),
        (5, 7),
    ]


def test_loops_keeps_longest_loop_for_a_start() -> None:
    route = _route("A", "B", "A", "B", "A")

    loops = route.loops()

    assert [(lp.subroute_start(), lp.subroute_end()) for lp in loops] == [(1, 5)]


def test_simplify_drops_straight_through_legs() -> None:
    route = _route("A", "B", "B", "C", "D", "D")

    simplified = route.simplify()

    assert simplified.street_ids() == ["A", "C", "D"]
    assert all(
        simplified.leg(i).turn == TurnDirection.STRAIGHT
        for i in range(1, simplified.legs() + 1)
    )


def test_simplify_keeps_first_and_last_leg() -> None:
    route = _route("A", "A", "A")

    assert route.simplify().street_ids() == ["A", "A"]


@pytest.mark.parametrize(
    "street_ids",
    [
        ("A",),
        ("A", "B"),
        ("A", "B", "C", "B", "A"),
        ("A", "S", "T", "T", "S", "B"),
        ("A", "A", "B", "B", "C", "C"),
    ],
)
def test_simplify_is_idempotent(street_ids: tuple[str, ...]) -> None:
    once = _route(*street_ids).simplify()

    assert once.simplify() == once


def test_simplify_of_empty_route_is_empty() -> None:
    assert Route().simplify().legs() == 0


def test_routes_compare_by_street_sequence() -> None:
    assert _route("A", "B") == _route("A", "B")
    assert _route("A", "B") != _route("B", "A")
