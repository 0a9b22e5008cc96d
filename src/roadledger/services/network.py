"""NetworkService: one method per operator command.

Mutations (``add_city``, ``add_cities``, ``add_road``, ``set_budget``,
``rename_city``) persist a snapshot after they succeed. Queries never
touch the filesystem. No method raises for invalid input: every
rejected precondition comes back as a failed :class:`ServiceResult`.
"""

from __future__ import annotations

from typing import Any

import structlog

from roadledger.domain.errors import NetworkError
from roadledger.domain.types import City, ErrorCode, RoadEntry
from roadledger.services.base import BaseService
from roadledger.services.result import ServiceError, ServiceResult

log = structlog.get_logger(__name__)


def _city(city: City) -> dict[str, Any]:
    return {"index": city.index, "name": city.name}


def _road(road: RoadEntry) -> dict[str, Any]:
    return {
        "number": road.number,
        "road": road.label,
        "first": road.first.name,
        "second": road.second.name,
        "budget": road.budget,
    }


class NetworkService(BaseService):
    """Cities, roads and budgets of the workspace network."""

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_city(self, name: str) -> ServiceResult:
        """Register a new city and assign it the next index."""
        try:
            city = self._network.add_city(name)
        except NetworkError as exc:
            return self._failure("add_city", exc)
        log.info("city.added", index=city.index, name=city.name)

        warnings: list[str] = []
        files = self._persist(warnings)
        return ServiceResult(
            ok=True,
            op="add_city",
            data={**_city(city), "files": files},
            warnings=warnings,
        )

    def add_cities(self, names: list[str]) -> ServiceResult:
        """Add several cities, each one all-or-nothing on its own.

        Rejected names are reported in ``data["errors"]`` and as warnings.
        The batch fails only when no city at all was added.
        """
        added: list[dict[str, Any]] = []
        errors: list[dict[str, Any]] = []
        warnings: list[str] = []
        for name in names:
            try:
                city = self._network.add_city(name)
            except NetworkError as exc:
                errors.append({"name": name, "code": str(exc.code), "message": exc.message})
                warnings.append(exc.message)
                continue
            log.info("city.added", index=city.index, name=city.name)
            added.append(_city(city))

        if names and not added:
            return ServiceResult(
                ok=False,
                op="add_cities",
                error=ServiceError(
                    code=str(ErrorCode.DUPLICATE_NAME),
                    message="No city was added",
                    detail={"errors": errors},
                ),
            )

        files = self._persist(warnings) if added else []
        return ServiceResult(
            ok=True,
            op="add_cities",
            data={"count": len(added), "added": added, "errors": errors, "files": files},
            warnings=warnings,
        )

    def add_road(self, first: str, second: str) -> ServiceResult:
        """Connect two cities with an (initially unbudgeted) road."""
        try:
            a, b = self._network.add_road(first, second)
        except NetworkError as exc:
            return self._failure("add_road", exc)
        log.info("road.added", first=a.name, second=b.name)

        warnings: list[str] = []
        files = self._persist(warnings)
        return ServiceResult(
            ok=True,
            op="add_road",
            data={
                "road": f"{a.name}-{b.name}",
                "first": a.name,
                "second": b.name,
                "files": files,
            },
            warnings=warnings,
        )

    def set_budget(self, first: str, second: str, amount: float) -> ServiceResult:
        """Set or overwrite the budget of an existing road."""
        try:
            a, b = self._network.set_budget(first, second, amount)
        except NetworkError as exc:
            return self._failure("set_budget", exc)
        log.info("budget.set", first=a.name, second=b.name, budget=amount)

        warnings: list[str] = []
        files = self._persist(warnings)
        return ServiceResult(
            ok=True,
            op="set_budget",
            data={
                "road": f"{a.name}-{b.name}",
                "budget": self._network.budget(a.name, b.name),
                "currency": self._workspace.settings.display.currency,
                "files": files,
            },
            warnings=warnings,
        )

    def rename_city(self, old_name: str, new_name: str) -> ServiceResult:
        """Rename a city; its index and roads are unchanged."""
        try:
            city = self._network.rename_city(old_name, new_name)
        except NetworkError as exc:
            return self._failure("rename_city", exc)
        log.info("city.renamed", index=city.index, old_name=old_name, name=new_name)

        warnings: list[str] = []
        files = self._persist(warnings)
        return ServiceResult(
            ok=True,
            op="rename_city",
            data={**_city(city), "old_name": old_name, "files": files},
            warnings=warnings,
        )

    def write_snapshot(self) -> ServiceResult:
        """Write the snapshot files now, regardless of autosave."""
        try:
            paths = self._workspace.persist()
        except OSError as exc:
            log.warning("snapshot.failed", error=str(exc))
            return ServiceResult(
                ok=False,
                op="snapshot",
                error=ServiceError(
                    code=str(ErrorCode.SNAPSHOT_FAILED),
                    message=f"Snapshot not written: {exc}",
                    detail={"directory": str(self._workspace.snapshots.directory)},
                ),
            )
        return ServiceResult(ok=True, op="snapshot", data={"files": [str(p) for p in paths]})

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_city(self, index: int) -> ServiceResult:
        city = self._network.find_by_index(index)
        if city is None:
            return ServiceResult(
                ok=False,
                op="find_city",
                error=ServiceError(
                    code=str(ErrorCode.NOT_FOUND),
                    message=f"City with index {index} not found",
                    detail={"index": index},
                ),
            )
        return ServiceResult(ok=True, op="find_city", data=_city(city))

    def list_cities(self) -> ServiceResult:
        items = [_city(c) for c in self._network.cities()]
        return ServiceResult(ok=True, op="list_cities", data={"count": len(items), "items": items})

    def list_roads(self) -> ServiceResult:
        items = [_road(r) for r in self._network.view().iter_roads()]
        return ServiceResult(ok=True, op="list_roads", data={"count": len(items), "items": items})

    def road_matrix(self) -> ServiceResult:
        """The 0/1 adjacency matrix, labelled by city index."""
        return ServiceResult(ok=True, op="road_matrix", data=self._road_matrix_data())

    def budget_matrix(self) -> ServiceResult:
        """The budget matrix, labelled by city index."""
        return ServiceResult(ok=True, op="budget_matrix", data=self._budget_matrix_data())

    def show_all(self) -> ServiceResult:
        """Cities, both matrices, and the numbered road list in one payload."""
        view = self._network.view()
        roads = [_road(r) for r in view.iter_roads()]
        return ServiceResult(
            ok=True,
            op="show_all",
            data={
                "cities": [_city(c) for c in view.cities],
                "roads": roads,
                "road_count": len(roads),
                "road_matrix": self._road_matrix_data(),
                "budget_matrix": self._budget_matrix_data(),
            },
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _road_matrix_data(self) -> dict[str, Any]:
        return {
            "indices": [c.index for c in self._network.cities()],
            "matrix": [list(row) for row in self._network.adjacency()],
        }

    def _budget_matrix_data(self) -> dict[str, Any]:
        display = self._workspace.settings.display
        return {
            "indices": [c.index for c in self._network.cities()],
            "matrix": [list(row) for row in self._network.budgets()],
            "currency": display.currency,
            "precision": display.precision,
        }
