from __future__ import annotations

import csv
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from src.app.ports.output import IMapRepository
from src.domain.exceptions import MapDataError
from src.domain.models import CityMap, Point

logger = logging.getLogger(__name__)

_COLUMNS = ("street_id", "start_x", "start_y", "end_x", "end_y")


@dataclass(slots=True)
class LocalMapRepository(IMapRepository):
    """Loads a city map from a CSV file of streets.

    Columns: street_id, start_x, start_y, end_x, end_y (metres).

    Env vars:
      - STREET_MAP_PATH: path to the CSV file (default: data/streets.csv)
    """

    path: str | Path | None = None

    def _path(self) -> Path:
        value = self.path or os.getenv("STREET_MAP_PATH") or "data/streets.csv"
        return Path(value)

    def load_map(self) -> CityMap:
        path = self._path()

        rows: list[tuple[str, Point, Point]] = []
        with path.open("r", encoding="utf-8", newline="") as fp:
            reader = csv.DictReader(fp)
            missing = [c for c in _COLUMNS if c not in (reader.fieldnames or ())]
            if missing:
                raise MapDataError(f"{path}: missing columns {', '.join(missing)}")

            for line_no, row in enumerate(reader, start=2):
                street_id = (row.get("street_id") or "").strip()
                if not street_id:
                    logger.warning("Skipping row without street_id at %s:%d", path, line_no)
                    continue
                try:
                    start = Point(x=float(row["start_x"]), y=float(row["start_y"]))
                    end = Point(x=float(row["end_x"]), y=float(row["end_y"]))
                except (TypeError, ValueError) as exc:
                    raise MapDataError(
                        f"{path}:{line_no}: bad coordinates for street {street_id!r}"
                    ) from exc
                rows.append((street_id, start, end))

        city_map = CityMap()

        # Intersections first: add_street only links registered nodes.
        for _, start, end in rows:
            city_map.add_node(start)
            city_map.add_node(end)

        for street_id, start, end in rows:
            if street_id in city_map.streets_by_id:
                raise MapDataError(f"{path}: duplicate street id {street_id!r}")
            if not city_map.add_street(street_id, start, end):
                raise MapDataError(f"{path}: street {street_id!r} has identical endpoints")

        logger.info(
            "Loaded map from %s: %d intersections, %d streets",
            path,
            len(city_map),
            len(city_map.streets_by_id),
        )
        return city_map
