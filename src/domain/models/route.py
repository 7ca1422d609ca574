from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from src.domain.exceptions import InvalidLegNumber

from .geo import Point
from .turns import StreetSide, TurnDirection


@dataclass(frozen=True, slots=True)
class Leg:
    street_id: str
    side: StreetSide
    turn: TurnDirection = TurnDirection.STRAIGHT  # as passed to append_turn
    turn_point: Point | None = None


class Route:
    """Sequence of legs through the city map.

    Leg numbers start at 1. The first leg is on the right side of its street
    and every appended leg flips to the other side.
    """

    __slots__ = ("_legs",)

    def __init__(self) -> None:
        self._legs: list[Leg] = []

    def append_turn(
        self,
        direction: TurnDirection | None,
        street_id: str | None,
        turn_point: Point | None = None,
    ) -> bool:
        if direction is None or not street_id:
            return False

        if self._legs:
            side = self._legs[-1].side.opposite()
        else:
            side = StreetSide.RIGHT

        self._legs.append(
            Leg(street_id=street_id, side=side, turn=direction, turn_point=turn_point)
        )
        return True

    def leg(self, leg_number: int) -> Leg | None:
        if leg_number < 1 or leg_number > len(self._legs):
            return None
        return self._legs[leg_number - 1]

    def turn_onto(self, leg_number: int) -> str | None:
        leg = self.leg(leg_number)
        return leg.street_id if leg is not None else None

    def turn_direction(self, leg_number: int) -> TurnDirection | None:
        """Turn that starts the given leg, read from the sides of street.

        Moving from the left to the right side is a right turn and from the
        right to the left side a left turn. The first leg and a leg that stays
        on the same street are STRAIGHT.
        """

        current = self.leg(leg_number)
        if current is None:
            return None
        if leg_number == 1:
            return TurnDirection.STRAIGHT

        previous = self._legs[leg_number - 2]
        if previous.street_id == current.street_id:
            return TurnDirection.STRAIGHT
        if current.side is StreetSide.RIGHT:
            return TurnDirection.RIGHT
        return TurnDirection.LEFT

    def legs(self) -> int:
        return len(self._legs)

    def street_ids(self) -> list[str]:
        return [leg.street_id for leg in self._legs]

    def length(self) -> float:
        """Route length in metres.

        The route starts and ends mid-block, so the distance walked through
        the turn points is halved.
        """

        points = [leg.turn_point for leg in self._legs if leg.turn_point is not None]
        total = 0.0
        for a, b in zip(points, points[1:]):
            total += a.distance_to(b)
        return total / 2.0

    def loops(self) -> list[SubRoute]:
        """Loops in the order they start along the route.

        A loop starts and ends on the same street and the same side of it.
        A loop nested inside (or overlapping) one already reported is skipped.
        """

        anchors: dict[int, int] = {}
        count = len(self._legs)
        for i in range(1, count + 1):
            first = self._legs[i - 1]
            for j in range(i + 1, count + 1):
                if j in anchors:
                    continue
                last = self._legs[j - 1]
                if first.street_id == last.street_id and first.side is last.side:
                    anchors[j] = i

        found: list[SubRoute] = []
        consumed_end = 0
        for end, start in sorted(anchors.items(), key=lambda item: (item[1], -item[0])):
            if start <= consumed_end:
                continue
            found.append(SubRoute(route=self, start_leg=start, end_leg=end))
            consumed_end = end
        return found

    def simplify(self) -> Route:
        """Copy of the route without straight-through legs.

        First and last legs are always kept. An interior leg on the same street
        as one of its neighbours is dropped, until no such leg remains. Every
        leg of the copy is STRAIGHT.
        """

        kept = list(self._legs)
        while True:
            reduced = kept[:1]
            for i in range(1, len(kept) - 1):
                street_id = kept[i].street_id
                if street_id not in (kept[i - 1].street_id, kept[i + 1].street_id):
                    reduced.append(kept[i])
            if len(kept) > 1:
                reduced.append(kept[-1])
            if len(reduced) == len(kept):
                break
            kept = reduced

        simplified = Route()
        for leg in kept:
            simplified.append_turn(TurnDirection.STRAIGHT, leg.street_id, leg.turn_point)
        return simplified

    def __iter__(self) -> Iterator[Leg]:
        return iter(self._legs)

    def __len__(self) -> int:
        return len(self._legs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Route):
            return NotImplemented
        return self.street_ids() == other.street_ids()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Route({self.street_ids()!r})"


@dataclass(frozen=True, slots=True)
class SubRoute:
    """Legs ``start_leg..end_leg`` (inclusive, 1-indexed) of a route."""

    route: Route = field(repr=False, compare=False)
    start_leg: int
    end_leg: int

    def __post_init__(self) -> None:
        if not 1 <= self.start_leg <= self.end_leg <= self.route.legs():
            raise InvalidLegNumber(
                f"Invalid subroute {self.start_leg}..{self.end_leg} "
                f"of a {self.route.legs()}-leg route"
            )

    def subroute_start(self) -> int:
        return self.start_leg

    def subroute_end(self) -> int:
        return self.end_leg

    def extract_route(self) -> Route:
        if self.end_leg > self.route.legs():
            raise InvalidLegNumber(
                f"Route has {self.route.legs()} legs, subroute ends at {self.end_leg}"
            )

        extracted = Route()
        for leg_number in range(self.start_leg, self.end_leg + 1):
            leg = self.route.leg(leg_number)
            extracted.append_turn(
                self.route.turn_direction(leg_number),
                self.route.turn_onto(leg_number),
                leg.turn_point if leg is not None else None,
            )
        return extracted
