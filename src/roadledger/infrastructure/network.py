"""InfrastructureGraph: cities, roads and budgets behind validated operations.

Co-owns a :class:`CityRegistry`, an :class:`AdjacencyStore` and a
:class:`BudgetLedger` and keeps them at the same dimension.

INVARIANT: Every mutating method validates all of its preconditions
first and only then mutates. A raised :class:`NetworkError` therefore
means nothing changed. The invariants checked by :meth:`check_invariants`
hold before and after every call.
"""

from __future__ import annotations

import logging
import math

from roadledger.domain.errors import (
    CityNotFoundError,
    DuplicateRoadError,
    NegativeBudgetError,
    NoRoadError,
    SelfLoopError,
)
from roadledger.domain.seed import SEED_CITIES, SEED_ROADS
from roadledger.domain.types import City
from roadledger.domain.view import NetworkView
from roadledger.infrastructure.matrices import AdjacencyStore, BudgetLedger
from roadledger.infrastructure.registry import CityRegistry

logger = logging.getLogger(__name__)


class InfrastructureGraph:
    """The road network the rest of the system talks to."""

    def __init__(self) -> None:
        self._registry = CityRegistry()
        self._roads = AdjacencyStore()
        self._budgets = BudgetLedger()

    @classmethod
    def seeded(cls) -> InfrastructureGraph:
        """Build a network pre-loaded with the fixed seed cities and roads."""
        network = cls()
        for name in SEED_CITIES:
            network.add_city(name)
        for first, second, budget in SEED_ROADS:
            network.add_road(first, second)
            network.set_budget(first, second, budget)
        logger.debug(
            "Loaded seed data: %d cities, %d roads", network.city_count, network.road_count
        )
        return network

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_city(self, name: str) -> City:
        """Register *name* and grow both matrices by one row and column."""
        self._registry.ensure_available(name)
        self._roads.grow()
        self._budgets.grow()
        index = self._registry.add_city(name)
        return City(index=index, name=name)

    def rename_city(self, old_name: str, new_name: str) -> City:
        """Rename a city. Matrix positions follow the index, so nothing moves."""
        return self._registry.rename(old_name, new_name)

    def add_road(self, first: str, second: str) -> tuple[City, City]:
        """Connect two distinct, existing, not-yet-connected cities."""
        if first == second:
            msg = f"A road cannot connect {first!r} to itself"
            raise SelfLoopError(msg, city=first)
        a, b = self._resolve_pair(first, second)
        if self._roads.has_road(a.position, b.position):
            msg = f"Road between {first!r} and {second!r} already exists"
            raise DuplicateRoadError(msg, first=first, second=second)
        self._roads.connect(a.position, b.position)
        return a, b

    def set_budget(self, first: str, second: str, amount: float) -> tuple[City, City]:
        """Set (or overwrite) the budget of an existing road."""
        if not math.isfinite(amount) or amount < 0:
            msg = f"Budget must be a finite non-negative number, got {amount}"
            raise NegativeBudgetError(msg, amount=amount)
        a, b = self._resolve_pair(first, second)
        if not self._roads.has_road(a.position, b.position):
            msg = f"No road exists between {first!r} and {second!r}"
            raise NoRoadError(msg, first=first, second=second)
        # + 0.0 folds -0.0 into 0.0
        self._budgets.assign(a.position, b.position, float(amount) + 0.0)
        return a, b

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def city_count(self) -> int:
        return self._registry.count()

    @property
    def road_count(self) -> int:
        return self._roads.count()

    @property
    def dimension(self) -> int:
        return self._roads.dimension

    def cities(self) -> tuple[City, ...]:
        return self._registry.all()

    def find_by_index(self, index: int) -> City | None:
        return self._registry.find(index)

    def find_city(self, name: str) -> City | None:
        return self._registry.get(name)

    def has_road(self, first: str, second: str) -> bool:
        a = self._registry.get(first)
        b = self._registry.get(second)
        if a is None or b is None:
            return False
        return self._roads.has_road(a.position, b.position)

    def budget(self, first: str, second: str) -> float | None:
        """Budget of the road between two cities, or None if there is no road."""
        if not self.has_road(first, second):
            return None
        a = self._registry.get(first)
        b = self._registry.get(second)
        assert a is not None and b is not None
        return self._budgets.get(a.position, b.position)

    def adjacency(self) -> tuple[tuple[int, ...], ...]:
        return self._roads.frozen()

    def budgets(self) -> tuple[tuple[float, ...], ...]:
        return self._budgets.frozen()

    def view(self) -> NetworkView:
        """Immutable snapshot of the current state for collaborators."""
        return NetworkView(
            cities=self._registry.all(),
            adjacency=self._roads.frozen(),
            budgets=self._budgets.frozen(),
        )

    def check_invariants(self) -> list[str]:
        """Return a description of every violated structural invariant."""
        problems: list[str] = []
        size = self._registry.count()
        if self._roads.dimension != size or self._budgets.dimension != size:
            problems.append(
                f"dimension mismatch: {size} cities, adjacency {self._roads.dimension}, "
                f"budgets {self._budgets.dimension}"
            )
            return problems
        for k, city in enumerate(self._registry):
            if city.index != k + 1:
                problems.append(f"city {city.name!r} at position {k} has index {city.index}")
        for i in range(size):
            if self._roads.get(i, i) != 0:
                problems.append(f"self-road at position {i}")
            for j in range(size):
                if self._roads.get(i, j) != self._roads.get(j, i):
                    problems.append(f"asymmetric road entry at ({i}, {j})")
                if self._budgets.get(i, j) != self._budgets.get(j, i):
                    problems.append(f"asymmetric budget entry at ({i}, {j})")
                if self._budgets.get(i, j) != 0 and self._roads.get(i, j) != 1:
                    problems.append(f"budget without road at ({i}, {j})")
        return problems

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _resolve_pair(self, first: str, second: str) -> tuple[City, City]:
        a = self._registry.get(first)
        b = self._registry.get(second)
        missing = [name for name, city in ((first, a), (second, b)) if city is None]
        if missing:
            names = ", ".join(repr(name) for name in missing)
            msg = f"City not found: {names}"
            raise CityNotFoundError(msg, missing=missing)
        assert a is not None and b is not None
        return a, b
