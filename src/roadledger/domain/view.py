"""NetworkView: immutable read-only snapshot of the road network.

Collaborators (snapshot writer, graph export, console display) receive
a view instead of the live network, so they can never observe or cause
a half-applied mutation.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from roadledger.domain.types import City, RoadEntry


@dataclass(frozen=True)
class NetworkView:
    """Cities in ascending index order plus copies of both matrices.

    Row/column ``k`` of ``adjacency`` and ``budgets`` belongs to
    ``cities[k]``.
    """

    cities: tuple[City, ...]
    adjacency: tuple[tuple[int, ...], ...]
    budgets: tuple[tuple[float, ...], ...]

    @property
    def city_count(self) -> int:
        return len(self.cities)

    def city_rows(self) -> list[tuple[int, str]]:
        """``(index, name)`` pairs in ascending index order."""
        return [(city.index, city.name) for city in self.cities]

    def iter_roads(self) -> Iterator[RoadEntry]:
        """Yield each road exactly once, row-major over the upper triangle.

        Numbers start at 1 and follow enumeration order.
        """
        number = 0
        size = len(self.adjacency)
        for i in range(size):
            row = self.adjacency[i]
            for j in range(i + 1, size):
                if row[j] == 1:
                    number += 1
                    yield RoadEntry(
                        number=number,
                        first=self.cities[i],
                        second=self.cities[j],
                        budget=self.budgets[i][j],
                    )

    def roads(self) -> list[RoadEntry]:
        return list(self.iter_roads())

    @property
    def road_count(self) -> int:
        return sum(1 for _ in self.iter_roads())
