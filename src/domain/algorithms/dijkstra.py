"""Shortest-path searches over a ``CityMap``.

The unconstrained search runs networkx's Dijkstra over the street graph. The
left-turn-free search needs the approach direction in its state, so it runs
its own ``heapq`` queue keyed by ``(distance, insertion counter)``: equally
distant entries leave the queue in the order they were pushed and a settled
state is never relaxed again.
"""

from __future__ import annotations

import heapq
import itertools
import math
from dataclasses import dataclass
from typing import Iterator

import networkx as nx

from src.domain.algorithms.geo_utils import turn_type, validate_threshold
from src.domain.models.city_map import CityMap, Node
from src.domain.models.geo import Point
from src.domain.models.location import Location
from src.domain.models.route import Route
from src.domain.models.turns import TurnDirection

DEPOT_LABEL = "depot"

State = tuple[str, str | None]


@dataclass(frozen=True, slots=True)
class ShortestPaths:
    distance_by_node: dict[Point, float]
    settled: tuple[Point, ...]

    def reached(self) -> list[Point]:
        """Settled nodes with a finite distance, in settling order."""

        return [p for p in self.settled if math.isfinite(self.distance_by_node[p])]


def street_graph(city_map: CityMap) -> nx.Graph:
    """Undirected graph keyed by coordinate, with street ``length`` weights."""

    graph = nx.Graph()
    for node in city_map.nodes():
        graph.add_node(node.position, x=node.position.x, y=node.position.y)
    for street in city_map.streets():
        graph.add_edge(
            street.start, street.end, street_id=street.street_id, length=street.length
        )
    return graph


def shortest_distances(city_map: CityMap, source: Node) -> ShortestPaths:
    """Single-source Dijkstra over Euclidean street lengths.

    networkx returns distances keyed in the order nodes are settled; nodes
    it never reaches keep an infinite distance.
    """

    reached = nx.single_source_dijkstra_path_length(
        street_graph(city_map), source.position, weight="length"
    )
    distance: dict[Point, float] = {p: math.inf for p in city_map.nodes_by_coordinate}
    distance.update(reached)
    return ShortestPaths(distance_by_node=distance, settled=tuple(reached))


def farthest_street(city_map: CityMap) -> str:
    """Street leading away from the node farthest (by travel) from the depot.

    Returns ``""`` when there is no depot or the depot street is unknown.
    """

    if city_map.depot is None:
        return ""
    start = city_map.resolve(city_map.depot)
    if start is None:
        return ""

    paths = shortest_distances(city_map, start)

    # Unreached nodes keep an infinite distance and must never win.
    farthest: Point | None = None
    farthest_distance = -math.inf
    for position in paths.reached():
        if paths.distance_by_node[position] >= farthest_distance:
            farthest = position
            farthest_distance = paths.distance_by_node[position]
    if farthest is None:
        return ""

    street_id = ""
    best = -math.inf
    for edge in city_map.node_at(farthest).edges:
        away = start.position.distance_to(edge.to)
        if away > best:
            street_id = edge.street_id
            best = away
    return street_id


def route_avoiding_left_turns(
    city_map: CityMap, destination: Location, *, threshold_degrees: float = 20.0
) -> Route | None:
    """Shortest route from the depot to ``destination`` without left turns.

    The search starts at a ``"depot"`` vertex behind the first intersection on
    the depot street and ends at a vertex labelled after the destination
    street, which can only be entered by driving along that street on the
    requested side. Returns ``None`` when either street is unknown or every
    path needs a left turn. Raises ``ValueError`` for a threshold outside
    [0, 45).
    """

    validate_threshold(threshold_degrees)
    depot = city_map.depot
    if depot is None:
        return None
    depot_street = city_map.street_by_id(depot.street_id)
    destination_street = city_map.street_by_id(destination.street_id)
    if depot_street is None or destination_street is None:
        return None

    if destination == depot:
        route = Route()
        route.append_turn(
            TurnDirection.STRAIGHT, depot.street_id, depot_street.behind(depot.side)
        )
        return route

    start = city_map.node_at(depot_street.ahead(depot.side))
    entry = destination_street.behind(destination.side)
    exit_point = destination_street.ahead(destination.side)
    target = f"street:{destination.street_id}"

    position: dict[str, Point] = {
        DEPOT_LABEL: depot_street.behind(depot.side),
        target: exit_point,
    }

    def moves(label: str) -> Iterator[tuple[str, str, float]]:
        # (street id, next label, length)
        if label == DEPOT_LABEL:
            position[start.label] = start.position
            yield depot.street_id, start.label, depot_street.length
            return
        if label == target:
            return

        node = city_map.node_by_label(label)
        if node is None:
            return
        for edge in node.edges:
            next_label = edge.to.label
            position.setdefault(next_label, edge.to)
            yield edge.street_id, next_label, edge.distance
            if (
                edge.street_id == destination.street_id
                and node.position == entry
                and edge.to == exit_point
            ):
                yield edge.street_id, target, edge.distance

    # A search state is (intersection label, label it was reached from): the
    # turn allowed at an intersection depends on the approach direction.
    start_state: State = (DEPOT_LABEL, None)
    distance: dict[State, float] = {start_state: 0.0}
    previous: dict[State, tuple[State, str]] = {}
    visited: set[State] = set()
    counter = itertools.count()
    heap: list[tuple[float, int, State]] = [(0.0, next(counter), start_state)]

    final_state: State | None = None
    while heap:
        current_distance, _, state = heapq.heappop(heap)
        if state in visited:
            continue
        visited.add(state)
        label, came_from = state
        if label == target:
            final_state = state
            break

        for street_id, next_label, length in moves(label):
            next_state: State = (next_label, label)
            if next_state in visited:
                continue
            if came_from is not None:
                turn = turn_type(
                    position[came_from],
                    position[label],
                    position[next_label],
                    threshold_degrees,
                )
                if turn.is_left:
                    continue
            new_distance = current_distance + length
            if new_distance < distance.get(next_state, math.inf):
                distance[next_state] = new_distance
                previous[next_state] = (state, street_id)
                heapq.heappush(heap, (new_distance, next(counter), next_state))

    if final_state is None:
        return None

    steps: list[tuple[TurnDirection, str, Point]] = []
    state = final_state
    while state != start_state:
        prev_state, street_id = previous[state]
        prev_label, before = prev_state
        if before is None:
            # Synthetic first leg along the depot street.
            direction = TurnDirection.STRAIGHT
        else:
            direction = turn_type(
                position[before],
                position[prev_label],
                position[state[0]],
                threshold_degrees,
            ).collapse()
        steps.append((direction, street_id, position[prev_label]))
        state = prev_state
    steps.reverse()

    route = Route()
    for direction, street_id, turn_point in steps:
        route.append_turn(direction, street_id, turn_point)
    return route
