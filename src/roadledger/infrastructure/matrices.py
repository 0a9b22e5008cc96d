"""Square matrices over city positions: road existence and budgets.

Both matrices only ever grow, one row and one column at a time, and
are grown together by :class:`~roadledger.infrastructure.network.InfrastructureGraph`.
Every write goes through :meth:`_SquareMatrix._set_symmetric`, so
``m[i][j] == m[j][i]`` holds by construction.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class _SquareMatrix(Generic[T]):
    """Growable N x N list-of-lists with symmetric writes."""

    __slots__ = ("_rows",)

    _absent: T

    def __init__(self) -> None:
        self._rows: list[list[T]] = []

    @property
    def dimension(self) -> int:
        return len(self._rows)

    def grow(self) -> None:
        """Append one row and one column filled with the absent value.

        The new row is allocated before any existing row is touched.
        """
        size = len(self._rows) + 1
        new_row = [self._absent] * size
        for row in self._rows:
            row.append(self._absent)
        self._rows.append(new_row)

    def get(self, i: int, j: int) -> T:
        return self._rows[i][j]

    def _set_symmetric(self, i: int, j: int, value: T) -> None:
        self._rows[i][j] = value
        self._rows[j][i] = value

    def frozen(self) -> tuple[tuple[T, ...], ...]:
        """Immutable copy of the whole matrix."""
        return tuple(tuple(row) for row in self._rows)


class AdjacencyStore(_SquareMatrix[int]):
    """0/1 road-existence matrix. The diagonal is always 0."""

    __slots__ = ()

    _absent = 0

    def has_road(self, i: int, j: int) -> bool:
        return self._rows[i][j] == 1

    def connect(self, i: int, j: int) -> None:
        if i == j:
            msg = f"Cannot connect position {i} to itself"
            raise ValueError(msg)
        self._set_symmetric(i, j, 1)

    def iter_pairs(self) -> Iterator[tuple[int, int]]:
        """Yield ``(i, j)`` with ``i < j`` for every road, row-major."""
        for i, row in enumerate(self._rows):
            for j in range(i + 1, len(row)):
                if row[j] == 1:
                    yield i, j

    def count(self) -> int:
        return sum(1 for _ in self.iter_pairs())


class BudgetLedger(_SquareMatrix[float]):
    """Budget per road. Non-zero entries only where a road exists."""

    __slots__ = ()

    _absent = 0.0

    def assign(self, i: int, j: int, amount: float) -> None:
        self._set_symmetric(i, j, float(amount))
