from __future__ import annotations

import os
from functools import lru_cache

import networkx as nx

from src.adapters.maps.networkx_map_adapter import NetworkxMapAdapter
from src.adapters.persistence.local_map_repository import LocalMapRepository
from src.app.ports.output import IMapRepository
from src.app.services.map_planner_service import MapPlannerService
from src.domain.models import Location, StreetSide


@lru_cache(maxsize=1)
def get_planner_service() -> MapPlannerService:
    map_repository: IMapRepository = LocalMapRepository()
    if os.getenv("STREET_GRAPH_PATH"):
        map_repository = NetworkxMapAdapter(
            graph=nx.read_graphml(os.environ["STREET_GRAPH_PATH"])
        )

    # Allow tuning via env without changing code.
    threshold = float(os.getenv("TURN_THRESHOLD_DEG") or 20.0)
    service = MapPlannerService(
        map_repository=map_repository, turn_threshold_deg=threshold
    )

    if os.getenv("DEPOT_STREET_ID"):
        side = (os.getenv("DEPOT_SIDE") or "right").strip().lower()
        service.set_depot(
            Location(street_id=os.environ["DEPOT_STREET_ID"], side=StreetSide(side))
        )

    return service
