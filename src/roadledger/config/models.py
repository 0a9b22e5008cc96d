"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, ``roadledger.toml`` only
contains overrides. An empty (or absent) file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- roadledger.toml sections ---


class SnapshotConfig(BaseModel):
    """[snapshot] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    directory: str = "."
    city_file: str = "cities.txt"
    road_file: str = "roads.txt"


class SeedConfig(BaseModel):
    """[seed] section."""

    model_config = {"frozen": True}

    enabled: bool = True


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    currency: str = "billion RWF"
    precision: int = Field(default=1, ge=0, le=6)

