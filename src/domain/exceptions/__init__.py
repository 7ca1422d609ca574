from .routing import (
    InvalidLegNumber,
    MapDataError,
    NodeNotFound,
    NoPathFound,
    RoutingError,
    UnknownStreet,
    Unreachable,
)

__all__ = [
    "InvalidLegNumber",
    "MapDataError",
    "NodeNotFound",
    "NoPathFound",
    "RoutingError",
    "UnknownStreet",
    "Unreachable",
]
