"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs:   CLI flags passed by Click
  2. Env vars:      ``ROADLEDGER_*`` prefix, ``__`` for nested sections
  3. TOML file:     ``roadledger.toml`` discovered via walk-up
  4. Code defaults: baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from roadledger.config.discovery import find_config
from roadledger.config.models import DisplayConfig, SeedConfig, SnapshotConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``roadledger.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# TOML path handed to settings_customise_sources during construction.
_tls = threading.local()


class RoadSettings(BaseSettings):
    """Frozen settings for one roadledger invocation.

    Attributes:
        base_root: Directory relative snapshot paths resolve against
            (parent of ``roadledger.toml``, or CWD if none was found).
        config_path: The TOML file in effect, if any.
        output_dir: ``--output-dir`` override for the snapshot directory.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ROADLEDGER_",
        "env_nested_delimiter": "__",
    }

    base_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None
    output_dir: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    no_seed: bool = False
    no_snapshot: bool = False

    # --- TOML sections ---
    snapshot: SnapshotConfig = Field(default_factory=SnapshotConfig)
    seed: SeedConfig = Field(default_factory=SeedConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        base_root: Path | None = None,
        **cli_flags: Any,
    ) -> RoadSettings:
        """Construct settings from a CLI invocation.

        Discovers ``roadledger.toml`` via walk-up (or explicit *config_path*)
        and merges CLI flags as highest-priority overrides. ``None`` flag
        values are dropped so they never mask env or TOML values.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(base_root)

        resolved_root = base_root
        if resolved_root is None:
            resolved_root = toml_path.parent if toml_path else Path.cwd()

        flags = {key: value for key, value in cli_flags.items() if value is not None}
        _tls.toml_path = toml_path
        try:
            return cls(base_root=resolved_root, config_path=toml_path, **flags)
        finally:
            _tls.toml_path = None

    # --- Derived values ---

    @property
    def seed_enabled(self) -> bool:
        return self.seed.enabled and not self.no_seed

    @property
    def snapshot_enabled(self) -> bool:
        return self.snapshot.enabled and not self.no_snapshot

    @property
    def snapshot_dir(self) -> Path:
        """Resolved snapshot directory (``--output-dir`` wins over ``[snapshot]``)."""
        directory = self.output_dir
        if directory is None:
            directory = Path(self.snapshot.directory)
        if directory.is_absolute():
            return directory
        return self.base_root / directory
