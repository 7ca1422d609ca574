from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from src.app.ports.output import IMapRepository
from src.domain.exceptions import MapDataError
from src.domain.models import CityMap, Point

logger = logging.getLogger(__name__)


def _node_point(graph: Any, node_id: Any) -> Point:
    data = dict(graph.nodes[node_id])
    try:
        return Point(x=float(data["x"]), y=float(data["y"]))
    except (KeyError, TypeError, ValueError) as exc:
        raise MapDataError(f"Node {node_id!r} has no usable x/y") from exc


@dataclass(slots=True)
class NetworkxMapAdapter(IMapRepository):
    """Builds a city map from a networkx street graph.

    Nodes carry planar ``x``/``y`` coordinates in metres. Each edge becomes
    one street; its id comes from the ``street_id`` edge attribute, or
    ``"<u>-<v>"`` when absent. Parallel edges and self-loops are skipped.
    """

    graph: Any

    def load_map(self) -> CityMap:
        city_map = CityMap()
        points = {n: _node_point(self.graph, n) for n in self.graph.nodes}
        for point in points.values():
            city_map.add_node(point)

        skipped = 0
        for u, v, data in self.graph.edges(data=True):
            street_id = str(data.get("street_id") or f"{u}-{v}")
            if not city_map.add_street(street_id, points[u], points[v]):
                skipped += 1

        if skipped:
            logger.warning("Skipped %d edges (duplicates or self-loops)", skipped)
        logger.info(
            "Built map from graph: %d intersections, %d streets",
            len(city_map),
            len(city_map.streets_by_id),
        )
        return city_map

