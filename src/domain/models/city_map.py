from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator

from src.domain.exceptions import NodeNotFound

from .geo import Point
from .location import Location
from .turns import StreetSide

if TYPE_CHECKING:
    from .route import Route


@dataclass(slots=True, eq=False)
class Node:
    """A street intersection and its outgoing edges (insertion order)."""

    position: Point
    edges: list[StreetEdge] = field(default_factory=list, repr=False)

    @property
    def label(self) -> str:
        return self.position.label


@dataclass(frozen=True, slots=True)
class StreetEdge:
    """One direction of travel along a street.

    ``to`` is the coordinate key of the target node; resolve it through
    ``CityMap.node_at``.
    """

    street_id: str
    from_node: Node = field(repr=False, compare=False)
    to: Point
    distance: float


@dataclass(frozen=True, slots=True)
class Street:
    """Street descriptor. ``start``/``end`` define the side of street."""

    street_id: str
    start: Point
    end: Point
    length: float

    def ahead(self, side: StreetSide) -> Point:
        """Endpoint a vehicle on ``side`` is driving towards."""

        return self.start if side is StreetSide.LEFT else self.end

    def behind(self, side: StreetSide) -> Point:
        return self.end if side is StreetSide.LEFT else self.start


@dataclass(slots=True)
class CityMap:
    """Street network: intersections keyed by coordinate, streets by id.

    Intersections must be registered with ``add_node`` before a street can
    reference them. Build the whole map (and set the depot) before querying.
    """

    nodes_by_coordinate: dict[Point, Node] = field(default_factory=dict)
    streets_by_id: dict[str, Street] = field(default_factory=dict)
    depot: Location | None = None
    _nodes_by_label: dict[str, Node] = field(default_factory=dict, repr=False)

    def add_node(self, position: Point) -> Node:
        node = self.nodes_by_coordinate.get(position)
        if node is None:
            node = Node(position=position)
            self.nodes_by_coordinate[position] = node
            self._nodes_by_label[node.label] = node
        return node

    def add_street(self, street_id: str, start: Point, end: Point) -> bool:
        if not street_id or street_id in self.streets_by_id:
            return False

        from_node = self.nodes_by_coordinate.get(start)
        to_node = self.nodes_by_coordinate.get(end)
        if from_node is None or to_node is None or from_node is to_node:
            return False

        distance = start.distance_to(end)
        from_node.edges.append(
            StreetEdge(street_id=street_id, from_node=from_node, to=end, distance=distance)
        )
        to_node.edges.append(
            StreetEdge(street_id=street_id, from_node=to_node, to=start, distance=distance)
        )
        self.streets_by_id[street_id] = Street(
            street_id=street_id, start=start, end=end, length=distance
        )
        return True

    def set_depot(self, location: Location) -> bool:
        if location.street_id not in self.streets_by_id:
            return False
        self.depot = location
        return True

    def node_at(self, position: Point) -> Node:
        try:
            return self.nodes_by_coordinate[position]
        except KeyError:
            raise NodeNotFound(f"No intersection at ({position.x}, {position.y})") from None

    def node_by_label(self, label: str) -> Node | None:
        return self._nodes_by_label.get(label)

    def street_by_id(self, street_id: str) -> Street | None:
        return self.streets_by_id.get(street_id)

    def resolve(self, location: Location) -> Node | None:
        """Intersection a vehicle at ``location`` drives towards."""

        street = self.street_by_id(location.street_id)
        if street is None:
            return None
        return self.node_at(street.ahead(location.side))

    def nodes(self) -> Iterator[Node]:
        return iter(self.nodes_by_coordinate.values())

    def streets(self) -> Iterator[Street]:
        return iter(self.streets_by_id.values())

    def __len__(self) -> int:
        return len(self.nodes_by_coordinate)

    def __contains__(self, position: object) -> bool:
        return position in self.nodes_by_coordinate

    def farthest_street(self) -> str:
        from src.domain.algorithms.dijkstra import farthest_street

        return farthest_street(self)

    def route_avoiding_left_turns(
        self, destination: Location, *, threshold_degrees: float = 20.0
    ) -> Route | None:
        from src.domain.algorithms.dijkstra import route_avoiding_left_turns

        return route_avoiding_left_turns(
            self, destination, threshold_degrees=threshold_degrees
        )
