from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field

from src.app.ports.output import IMapRepository
from src.domain.algorithms.geo_utils import validate_threshold
from src.domain.exceptions import UnknownStreet, Unreachable
from src.domain.models import CityMap, Location, Route

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class MapPlannerService:
    """Application service (use case) for depot-based street routing.

    The map is loaded once on first use and only read afterwards. Sync
    endpoints run on a threadpool, so the first load is serialized.
    """

    map_repository: IMapRepository

    # Deviation from straight ahead (degrees) before a move counts as a turn.
    turn_threshold_deg: float = 20.0

    _city_map: CityMap | None = None
    _load_lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        validate_threshold(self.turn_threshold_deg)

    def city_map(self) -> CityMap:
        if self._city_map is None:
            with self._load_lock:
                if self._city_map is None:
                    self._city_map = self.map_repository.load_map()
        return self._city_map

    def set_depot(self, depot: Location) -> Location:
        if not self.city_map().set_depot(depot):
            raise UnknownStreet(f"Unknown depot street: {depot.street_id}")
        logger.info("Depot set to %s (%s side)", depot.street_id, depot.side.value)
        return depot

    def depot(self) -> Location | None:
        return self.city_map().depot

    def farthest_street(self) -> str | None:
        street_id = self.city_map().farthest_street()
        return street_id or None

    def route_to(self, destination: Location, *, simplify: bool = False) -> Route:
        city_map = self.city_map()
        if city_map.depot is None:
            raise UnknownStreet("Depot location not configured")
        if city_map.street_by_id(destination.street_id) is None:
            raise UnknownStreet(f"Unknown destination street: {destination.street_id}")

        route = city_map.route_avoiding_left_turns(
            destination, threshold_degrees=self.turn_threshold_deg
        )
        if route is None:
            logger.info(
                "No left-turn-free route from %s to %s",
                city_map.depot.street_id,
                destination.street_id,
            )
            raise Unreachable(
                f"No route to {destination.street_id} avoids left turns"
            )

        logger.debug("Route to %s: %s", destination.street_id, route.street_ids())
        return route.simplify() if simplify else route
