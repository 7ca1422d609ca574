from __future__ import annotations


class RoutingError(Exception):
    """Base exception for map and route failures."""


class NoPathFound(RoutingError):
    """Raised when no feasible path exists for the given request."""


class Unreachable(NoPathFound):
    """The destination cannot be reached without a left turn."""


class NodeNotFound(RoutingError, KeyError):
    """No intersection is registered at the given coordinate."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "Node not found"


class UnknownStreet(RoutingError):
    """A depot or destination references a street id that is not on the map."""


class InvalidLegNumber(RoutingError, IndexError):
    """A 1-indexed leg number lies outside the route."""


class MapDataError(RoutingError):
    """Map input could not be turned into streets and intersections."""
