from .city_map import CityMap, Node, Street, StreetEdge
from .geo import Point
from .location import Location
from .route import Leg, Route, SubRoute
from .turns import StreetSide, TurnDirection

__all__ = [
    "CityMap",
    "Leg",
    "Location",
    "Node",
    "Point",
    "Route",
    "Street",
    "StreetEdge",
    "StreetSide",
    "SubRoute",
    "TurnDirection",
]
