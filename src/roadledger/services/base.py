"""BaseService: shared plumbing for roadledger services.

Every service receives a :class:`Workspace` at construction time.
Mutating operations call :meth:`BaseService._persist` after they
succeed; persistence failures are warnings, never errors, and never
roll the mutation back.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from roadledger.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from roadledger.domain.errors import NetworkError
    from roadledger.infrastructure.network import InfrastructureGraph
    from roadledger.infrastructure.workspace import Workspace

log = structlog.get_logger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class NetworkService(BaseService):
            def add_road(self, first: str, second: str) -> ServiceResult:
                try:
                    self._network.add_road(first, second)
                except NetworkError as exc:
                    return self._failure("add_road", exc)
                warnings: list[str] = []
                files = self._persist(warnings)
                ...
    """

    def __init__(self, workspace: Workspace) -> None:
        self._workspace = workspace

    @property
    def _network(self) -> InfrastructureGraph:
        return self._workspace.network

    @staticmethod
    def _failure(op: str, exc: NetworkError) -> ServiceResult:
        """Convert a typed network error into a failed result."""
        log.info("op.rejected", op=op, code=str(exc.code), reason=exc.message)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=str(exc.code), message=exc.message, detail=exc.detail),
        )

    def _persist(self, warnings: list[str]) -> list[str]:
        """Write a snapshot if autosave is on. Returns written paths.

        INVARIANT: I/O failures become warnings; the in-memory change stays.
        """
        if not self._workspace.autosave:
            return []
        try:
            paths = self._workspace.persist()
        except OSError as exc:
            log.warning("snapshot.failed", error=str(exc))
            warnings.append(f"Snapshot not written: {exc}")
            return []
        log.debug("snapshot.written", files=[str(p) for p in paths])
        return [str(p) for p in paths]
