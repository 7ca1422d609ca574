from __future__ import annotations

import networkx as nx

from src.adapters.maps.networkx_map_adapter import NetworkxMapAdapter
from src.domain.algorithms.dijkstra import street_graph
from src.domain.models import Point


def _tiny_graph() -> nx.Graph:
    g = nx.Graph()
    # Nodes carry planar x/y in metres.
    g.add_node(1, x=0.0, y=0.0)
    g.add_node(2, x=10.0, y=0.0)
    g.add_node(3, x=10.0, y=10.0)
    g.add_edge(1, 2, street_id="main")
    g.add_edge(2, 3)
    return g


def test_load_map_builds_streets_from_edges() -> None:
    city_map = NetworkxMapAdapter(graph=_tiny_graph()).load_map()

    assert len(city_map) == 3
    assert city_map.street_by_id("main").length == 10.0
    assert city_map.street_by_id("2-3").end == Point(10.0, 10.0)


def test_load_map_skips_duplicate_street_ids() -> None:
    g = nx.MultiGraph()
    g.add_node("a", x=0, y=0)
    g.add_node("b", x=5, y=0)
    g.add_edge("a", "b", street_id="s")
    g.add_edge("a", "b", street_id="s")

    city_map = NetworkxMapAdapter(graph=g).load_map()

    assert list(city_map.streets_by_id) == ["s"]
    assert len(city_map.node_at(Point(0, 0)).edges) == 1


def test_round_trip_preserves_lengths() -> None:
    city_map = NetworkxMapAdapter(graph=_tiny_graph()).load_map()

    exported = street_graph(city_map)

    assert exported.number_of_edges() == 2
    assert exported[Point(0, 0)][Point(10, 0)]["length"] == 10.0
    assert exported[Point(0, 0)][Point(10, 0)]["street_id"] == "main"
