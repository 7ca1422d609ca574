from __future__ import annotations

from enum import Enum


class TurnDirection(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    STRAIGHT = "straight"
    U_TURN = "u_turn"
    SLIGHT_LEFT = "slight_left"
    SLIGHT_RIGHT = "slight_right"
    SHARP_LEFT = "sharp_left"
    SHARP_RIGHT = "sharp_right"

    @property
    def is_left(self) -> bool:
        return self in _LEFT_TURNS

    @property
    def is_right(self) -> bool:
        return self in _RIGHT_TURNS

    def collapse(self) -> TurnDirection:
        """Fold slight/sharp variants into LEFT/RIGHT; anything else is STRAIGHT."""

        if self.is_left:
            return TurnDirection.LEFT
        if self.is_right:
            return TurnDirection.RIGHT
        return TurnDirection.STRAIGHT


_LEFT_TURNS = frozenset(
    {TurnDirection.LEFT, TurnDirection.SLIGHT_LEFT, TurnDirection.SHARP_LEFT}
)
_RIGHT_TURNS = frozenset(
    {TurnDirection.RIGHT, TurnDirection.SLIGHT_RIGHT, TurnDirection.SHARP_RIGHT}
)


class StreetSide(str, Enum):
    LEFT = "left"
    RIGHT = "right"

    def opposite(self) -> StreetSide:
        return StreetSide.RIGHT if self is StreetSide.LEFT else StreetSide.LEFT
