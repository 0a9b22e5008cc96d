"""Snapshot persistence as fixed-width city and road tables.

Each successful mutation re-renders the full state into two text files.
Files are write-only outputs; nothing reads them back.

City table::

    Index   City_Name
    1       Kigali

Road table::

    Nbr  Road                     Budget
    1.   Kigali-Muhanga           28.6

Columns are left-justified and padded (never truncated), so every line
keeps its trailing padding.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from roadledger.domain.view import NetworkView

logger = logging.getLogger(__name__)

CITY_COLUMNS: tuple[tuple[str, int], ...] = (("Index", 8), ("City_Name", 20))
ROAD_COLUMNS: tuple[tuple[str, int], ...] = (("Nbr", 5), ("Road", 25), ("Budget", 10))

DEFAULT_CITY_FILE = "cities.txt"
DEFAULT_ROAD_FILE = "roads.txt"


def format_budget(value: float) -> str:
    """Shortest general form with six significant digits (``28.6``, ``0``, ``117.5``)."""
    return f"{value:g}"


def _line(cells: list[str], columns: tuple[tuple[str, int], ...]) -> str:
    return "".join(cell.ljust(width) for cell, (_, width) in zip(cells, columns, strict=True))


def render_city_table(view: NetworkView) -> str:
    lines = [_line([name for name, _ in CITY_COLUMNS], CITY_COLUMNS)]
    for index, name in view.city_rows():
        lines.append(_line([str(index), name], CITY_COLUMNS))
    return "\n".join(lines) + "\n"


def render_road_table(view: NetworkView) -> str:
    lines = [_line([name for name, _ in ROAD_COLUMNS], ROAD_COLUMNS)]
    for road in view.iter_roads():
        cells = [f"{road.number}.", road.label, format_budget(road.budget)]
        lines.append(_line(cells, ROAD_COLUMNS))
    return "\n".join(lines) + "\n"


class SnapshotWriter:
    """Writes both tables for a given view into *directory*."""

    def __init__(
        self,
        directory: Path,
        *,
        city_file: str = DEFAULT_CITY_FILE,
        road_file: str = DEFAULT_ROAD_FILE,
    ) -> None:
        self.directory = directory
        self.city_path = directory / city_file
        self.road_path = directory / road_file

    def write(self, view: NetworkView) -> list[Path]:
        """Overwrite both snapshot files and return their paths.

        Raises OSError if a file cannot be written. The city table is
        written first; a failure there leaves the road table untouched.
        """
        self.directory.mkdir(parents=True, exist_ok=True)
        self.city_path.write_text(render_city_table(view), encoding="utf-8")
        self.road_path.write_text(render_road_table(view), encoding="utf-8")
        logger.debug(
            "Snapshot written: %d cities to %s, roads to %s",
            view.city_count,
            self.city_path,
            self.road_path,
        )
        return [self.city_path, self.road_path]
