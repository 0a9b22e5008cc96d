"""Workspace: the single dependency injected into every service.

Owns the in-memory :class:`InfrastructureGraph` and the
:class:`SnapshotWriter` configured for this invocation. The network
always starts from the seed data (or empty with seeding disabled);
snapshots are never read back.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from roadledger.infrastructure.network import InfrastructureGraph
from roadledger.infrastructure.snapshot import SnapshotWriter

if TYPE_CHECKING:
    from pathlib import Path

    from roadledger.config.settings import RoadSettings

logger = logging.getLogger(__name__)


class Workspace:
    """Network state plus persistence for one CLI invocation or shell session."""

    def __init__(
        self,
        settings: RoadSettings,
        *,
        network: InfrastructureGraph | None = None,
    ) -> None:
        self.settings = settings
        if network is None:
            if settings.seed_enabled:
                network = InfrastructureGraph.seeded()
            else:
                network = InfrastructureGraph()
        self.network = network
        self.snapshots = SnapshotWriter(
            settings.snapshot_dir,
            city_file=settings.snapshot.city_file,
            road_file=settings.snapshot.road_file,
        )

    @property
    def autosave(self) -> bool:
        """Whether services persist a snapshot after each successful mutation."""
        return self.settings.snapshot_enabled

    def persist(self) -> list[Path]:
        """Write the current state to the snapshot files. Raises OSError."""
        return self.snapshots.write(self.network.view())
