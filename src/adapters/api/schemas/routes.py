from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

Side = Literal["left", "right"]
Turn = Literal[
    "left",
    "right",
    "straight",
    "u_turn",
    "slight_left",
    "slight_right",
    "sharp_left",
    "sharp_right",
]


class LocationSchema(BaseModel):
    street_id: str = Field(..., min_length=1)
    side: Side = "right"


class RouteRequestSchema(LocationSchema):
    simplify: bool = False


class PointSchema(BaseModel):
    x: float
    y: float


class RouteLegSchema(BaseModel):
    leg: int
    street_id: str
    side: Side
    turn: Turn
    maneuver: Turn
    turn_point: PointSchema | None = None


class LoopSchema(BaseModel):
    start_leg: int
    end_leg: int


class RouteSchema(BaseModel):
    legs: list[RouteLegSchema] = []
    length_m: float
    loops: list[LoopSchema] = []


class FarthestStreetSchema(BaseModel):
    street_id: str | None = None
