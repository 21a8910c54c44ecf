"""Tests for StandSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest
from pydantic import ValidationError

from lemonctl.config.settings import StandSettings


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = StandSettings.from_cli(stand_root=tmp_path)
        assert settings.stand_root == tmp_path
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.server.host == "127.0.0.1"
        assert settings.server.port == 8080
        assert settings.database.path is None

    def test_frozen(self, tmp_path: Path) -> None:
        settings = StandSettings.from_cli(stand_root=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "lemonctl.toml").write_text('[server]\nhost = "0.0.0.0"\nport = 9000\n')
        settings = StandSettings.from_cli(stand_root=tmp_path)
        assert settings.server.host == "0.0.0.0"
        assert settings.server.port == 9000
        assert settings.config_path == tmp_path / "lemonctl.toml"

    def test_root_from_config_parent(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "lemonctl.toml").write_text("")
        child = tmp_path / "sub"
        child.mkdir()
        monkeypatch.chdir(child)
        settings = StandSettings.from_cli()
        assert settings.stand_root == tmp_path.resolve()

    def test_root_defaults_to_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        settings = StandSettings.from_cli()
        assert settings.stand_root == Path.cwd()

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "conf" / "stand.toml"
        custom.parent.mkdir()
        custom.write_text('[database]\npath = "drawer.db"\n')
        settings = StandSettings.from_cli(config_path=str(custom), stand_root=tmp_path)
        assert settings.config_path == custom
        assert settings.database.path == Path("drawer.db")

    def test_invalid_toml_raises_click_exception(self, tmp_path: Path) -> None:
        (tmp_path / "lemonctl.toml").write_text("[server\nport = ")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            StandSettings.from_cli(stand_root=tmp_path)

    def test_out_of_range_port_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "lemonctl.toml").write_text("[server]\nport = 0\n")
        with pytest.raises(ValidationError, match="port"):
            StandSettings.from_cli(stand_root=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "lemonctl.toml").write_text("[server]\nport = 9000\n")
        monkeypatch.setenv("LEMONCTL_SERVER__PORT", "9100")
        settings = StandSettings.from_cli(stand_root=tmp_path)
        assert settings.server.port == 9100

    def test_cli_flags_override_env(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("LEMONCTL_QUIET", "false")
        settings = StandSettings.from_cli(stand_root=tmp_path, quiet=True)
        assert settings.quiet is True
