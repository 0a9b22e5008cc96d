"""Tests for RoadSettings: unified settings with TOML source."""

from __future__ import annotations

from pathlib import Path

import click
import pytest

from roadledger.config.settings import RoadSettings


class TestRoadSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = RoadSettings.from_cli(base_root=tmp_path)
        assert settings.base_root == tmp_path
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.snapshot.enabled is True
        assert settings.snapshot.city_file == "cities.txt"
        assert settings.display.currency == "billion RWF"
        assert settings.seed_enabled is True
        assert settings.snapshot_enabled is True
        assert settings.snapshot_dir == tmp_path

    def test_frozen(self, tmp_path: Path) -> None:
        settings = RoadSettings.from_cli(base_root=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]

    def test_none_flags_are_dropped(self, tmp_path: Path) -> None:
        settings = RoadSettings.from_cli(base_root=tmp_path, output_dir=None, quiet=True)
        assert settings.output_dir is None
        assert settings.quiet is True


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "roadledger.toml").write_text(
            '[display]\ncurrency = "million USD"\n[seed]\nenabled = false\n'
        )
        settings = RoadSettings.from_cli(base_root=tmp_path)
        assert settings.display.currency == "million USD"
        assert settings.display.precision == 1  # default preserved
        assert settings.seed_enabled is False
        assert settings.config_path == (tmp_path / "roadledger.toml").resolve()

    def test_empty_toml_uses_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "roadledger.toml").write_text("")
        settings = RoadSettings.from_cli(base_root=tmp_path)
        assert settings.snapshot.directory == "."

    def test_walk_up_discovery(self, tmp_path: Path) -> None:
        (tmp_path / "roadledger.toml").write_text("[snapshot]\nenabled = false\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        settings = RoadSettings.from_cli(base_root=nested)
        assert settings.snapshot_enabled is False

    def test_explicit_config_path_sets_base_root(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[snapshot]\ndirectory = "out"\n')
        settings = RoadSettings.from_cli(config_path=str(custom))
        assert settings.config_path == custom
        assert settings.base_root == custom.parent
        assert settings.snapshot_dir == custom.parent / "out"

    def test_missing_explicit_config_is_ignored(self, tmp_path: Path) -> None:
        settings = RoadSettings.from_cli(
            config_path=str(tmp_path / "nope.toml"), base_root=tmp_path
        )
        assert settings.config_path is None

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "roadledger.toml").write_text("[display\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            RoadSettings.from_cli(base_root=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "roadledger.toml").write_text('[display]\ncurrency = "from toml"\n')
        monkeypatch.setenv("ROADLEDGER_DISPLAY__CURRENCY", "from env")
        settings = RoadSettings.from_cli(base_root=tmp_path)
        assert settings.display.currency == "from env"

    def test_cli_flag_overrides_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ROADLEDGER_QUIET", "false")
        settings = RoadSettings.from_cli(base_root=tmp_path, quiet=True)
        assert settings.quiet is True


class TestSnapshotDir:
    def test_output_dir_wins(self, tmp_path: Path) -> None:
        (tmp_path / "roadledger.toml").write_text('[snapshot]\ndirectory = "toml-dir"\n')
        settings = RoadSettings.from_cli(base_root=tmp_path, output_dir="cli-dir")
        assert settings.snapshot_dir == tmp_path / "cli-dir"

    def test_absolute_directory_kept(self, tmp_path: Path) -> None:
        target = tmp_path / "elsewhere"
        settings = RoadSettings.from_cli(base_root=tmp_path / "root", output_dir=str(target))
        assert settings.snapshot_dir == target

    def test_no_snapshot_flag(self, tmp_path: Path) -> None:
        settings = RoadSettings.from_cli(base_root=tmp_path, no_snapshot=True)
        assert settings.snapshot.enabled is True
        assert settings.snapshot_enabled is False
