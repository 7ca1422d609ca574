from .local_map_repository import LocalMapRepository

__all__ = [
    "LocalMapRepository",
]
