"""CityRegistry: ordered city list with a maintained name index.

INVARIANT: ``_cities[k].index == k + 1``. Indices are assigned as
``previous max + 1`` and never reused; with no deletion that makes the
list position and the matrix position the same number.

INVARIANT: ``_by_name`` is updated in the same call as ``_cities``;
the two never diverge.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from roadledger.domain.errors import DuplicateNameError, NotFoundError, SameNameError
from roadledger.domain.types import City

logger = logging.getLogger(__name__)


class CityRegistry:
    """Owns the set of cities, assigns indices, resolves names."""

    def __init__(self) -> None:
        self._cities: list[City] = []
        self._by_name: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._cities)

    def __iter__(self) -> Iterator[City]:
        return iter(self._cities)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    # ---- validation (no mutation) ----------------------------------------

    def next_index(self) -> int:
        """Index the next added city will receive."""
        return self._cities[-1].index + 1 if self._cities else 1

    def ensure_available(self, name: str) -> None:
        """Raise :class:`DuplicateNameError` if *name* is already registered."""
        if name in self._by_name:
            msg = f"City {name!r} already exists"
            raise DuplicateNameError(msg, name=name, index=self._by_name[name])

    def ensure_renamable(self, old_name: str, new_name: str) -> int:
        """Validate a rename and return the index of *old_name*.

        Checks run in order: missing source, identical names, taken target.
        """
        index = self._by_name.get(old_name)
        if index is None:
            msg = f"City {old_name!r} not found"
            raise NotFoundError(msg, name=old_name)
        if old_name == new_name:
            msg = f"City is already named {new_name!r}"
            raise SameNameError(msg, name=new_name, index=index)
        self.ensure_available(new_name)
        return index

    # ---- mutation --------------------------------------------------------

    def add_city(self, name: str) -> int:
        """Register *name* and return its newly assigned index."""
        self.ensure_available(name)
        index = self.next_index()
        self._cities.append(City(index=index, name=name))
        self._by_name[name] = index
        logger.debug("Registered city %s as %d", name, index)
        return index

    def rename(self, old_name: str, new_name: str) -> City:
        """Rename a city in place, preserving its index."""
        index = self.ensure_renamable(old_name, new_name)
        renamed = City(index=index, name=new_name)
        self._cities[index - 1] = renamed
        del self._by_name[old_name]
        self._by_name[new_name] = index
        logger.debug("Renamed city %d from %s to %s", index, old_name, new_name)
        return renamed

    # ---- queries ---------------------------------------------------------

    def find_index(self, name: str) -> int | None:
        return self._by_name.get(name)

    def find_name(self, index: int) -> str | None:
        city = self.find(index)
        return city.name if city is not None else None

    def find(self, index: int) -> City | None:
        """Return the city with *index*, or None."""
        if 1 <= index <= len(self._cities):
            return self._cities[index - 1]
        return None

    def get(self, name: str) -> City | None:
        index = self._by_name.get(name)
        return self._cities[index - 1] if index is not None else None

    def count(self) -> int:
        return len(self._cities)

    def all(self) -> tuple[City, ...]:
        """All cities in ascending index order."""
        return tuple(self._cities)
