from __future__ import annotations

import math

from src.domain.models.geo import Point
from src.domain.models.turns import TurnDirection


def euclidean_distance(a: Point, b: Point) -> float:
    """Straight-line distance in metres."""

    return a.distance_to(b)


def heading_change_deg(a: Point, b: Point, c: Point) -> float:
    """Signed change of heading at ``b`` when driving a -> b -> c.

    Positive values are counter-clockwise (left), negative are clockwise
    (right). The result lies in (-180, 180].
    """

    in_heading = math.atan2(b.y - a.y, b.x - a.x)
    out_heading = math.atan2(c.y - b.y, c.x - b.x)
    delta = math.degrees(out_heading - in_heading)
    while delta <= -180.0:
        delta += 360.0
    while delta > 180.0:
        delta -= 360.0
    return delta


def validate_threshold(threshold_degrees: float) -> None:
    # Slight and sharp bands overlap from 45 degrees on.
    if not 0.0 <= threshold_degrees < 45.0:
        raise ValueError(f"Invalid turn threshold: {threshold_degrees}")


def turn_type(a: Point, b: Point, c: Point, threshold_degrees: float) -> TurnDirection:
    """Classify the turn made at ``b`` when driving a -> b -> c.

    A deviation within ``threshold_degrees`` of straight ahead is STRAIGHT and
    one within the threshold of reversing is a U-turn. Otherwise the turn is
    slight below ``90 - threshold``, sharp above ``90 + threshold`` and a plain
    LEFT/RIGHT in between.
    """

    validate_threshold(threshold_degrees)

    if a == b or b == c:
        # No heading on a zero-length segment.
        return TurnDirection.STRAIGHT

    delta = heading_change_deg(a, b, c)
    deviation = abs(delta)

    if deviation <= threshold_degrees:
        return TurnDirection.STRAIGHT
    if deviation >= 180.0 - threshold_degrees:
        return TurnDirection.U_TURN

    left = delta > 0
    if deviation < 90.0 - threshold_degrees:
        return TurnDirection.SLIGHT_LEFT if left else TurnDirection.SLIGHT_RIGHT
    if deviation > 90.0 + threshold_degrees:
        return TurnDirection.SHARP_LEFT if left else TurnDirection.SHARP_RIGHT
    return TurnDirection.LEFT if left else TurnDirection.RIGHT

