from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from src.adapters.api.dependencies import get_planner_service
from src.adapters.api.schemas.routes import (
    FarthestStreetSchema,
    LocationSchema,
    LoopSchema,
    PointSchema,
    RouteLegSchema,
    RouteRequestSchema,
    RouteSchema,
)
from src.app.services.map_planner_service import MapPlannerService
from src.domain.models import Location, Route, StreetSide

router = APIRouter(tags=["routes"])


def _route_to_schema(route: Route) -> RouteSchema:
    legs = []
    for leg_number, leg in enumerate(route, start=1):
        legs.append(
            RouteLegSchema(
                leg=leg_number,
                street_id=leg.street_id,
                side=leg.side.value,
                turn=route.turn_direction(leg_number).value,
                maneuver=leg.turn.value,
                turn_point=(
                    PointSchema(x=leg.turn_point.x, y=leg.turn_point.y)
                    if leg.turn_point is not None
                    else None
                ),
            )
        )
    return RouteSchema(
        legs=legs,
        length_m=route.length(),
        loops=[
            LoopSchema(start_leg=loop.subroute_start(), end_leg=loop.subroute_end())
            for loop in route.loops()
        ],
    )


@router.put("/depot", response_model=LocationSchema)
def set_depot(
    req: LocationSchema,
    service: MapPlannerService = Depends(get_planner_service),
) -> LocationSchema:
    depot = service.set_depot(Location(street_id=req.street_id, side=StreetSide(req.side)))
    return LocationSchema(street_id=depot.street_id, side=depot.side.value)


@router.get("/streets/farthest", response_model=FarthestStreetSchema)
def farthest_street(
    service: MapPlannerService = Depends(get_planner_service),
) -> FarthestStreetSchema:
    if service.depot() is None:
        raise HTTPException(status_code=404, detail="Depot location not configured")
    return FarthestStreetSchema(street_id=service.farthest_street())


@router.post("/routes", response_model=RouteSchema)
def calculate_route(
    req: RouteRequestSchema,
    service: MapPlannerService = Depends(get_planner_service),
) -> RouteSchema:
    destination = Location(street_id=req.street_id, side=StreetSide(req.side))
    route = service.route_to(destination, simplify=req.simplify)
    return _route_to_schema(route)
