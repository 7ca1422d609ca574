from __future__ import annotations

from dataclasses import dataclass

from .turns import StreetSide


@dataclass(frozen=True, slots=True)
class Location:
    """A position on one side of a street (depot, destination or route leg)."""

    street_id: str
    side: StreetSide = StreetSide.RIGHT
