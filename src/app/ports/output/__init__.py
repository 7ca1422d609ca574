from .map_repository import IMapRepository

__all__ = [
    "IMapRepository",
]
