from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import CityMap


class IMapRepository(ABC):
    """Port for loading a street network into an in-memory city map."""

    @abstractmethod
    def load_map(self) -> CityMap:
        raise NotImplementedError
