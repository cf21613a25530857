"""Tests for cdelta init command."""

from pathlib import Path

import yaml
from click.testing import CliRunner

from codedelta.cli.main import cli

runner = CliRunner()


class TestInitCommand:
    """cdelta init command tests."""

    def test_given_dir_when_init_then_writes_config(self, tmp_path: Path) -> None:
        """Init creates .codedelta/config.yaml."""
        # When
        result = runner.invoke(cli, ["init", str(tmp_path)])

        # Then
        assert result.exit_code == 0
        config_path = tmp_path / ".codedelta" / "config.yaml"
        assert config_path.is_file()
        assert set(yaml.safe_load(config_path.read_text())) == {
            "analysis",
            "refactoring",
            "logging",
        }

    def test_given_existing_config_when_init_then_keeps_it(self, tmp_path: Path) -> None:
        """Init without --force leaves an existing config alone."""
        # Given
        config_path = tmp_path / ".codedelta" / "config.yaml"
        config_path.parent.mkdir()
        config_path.write_text("analysis:\n  default_depth: basic\n")

        # When
        result = runner.invoke(cli, ["init", str(tmp_path)])

        # Then
        assert result.exit_code == 0
        assert config_path.read_text() == "analysis:\n  default_depth: basic\n"

    def test_given_force_when_init_then_overwrites(self, tmp_path: Path) -> None:
        """Init --force rewrites the config."""
        # Given
        config_path = tmp_path / ".codedelta" / "config.yaml"
        config_path.parent.mkdir()
        config_path.write_text("analysis:\n  default_depth: basic\n")

        # When
        result = runner.invoke(cli, ["init", str(tmp_path), "--force"])

        # Then
        assert result.exit_code == 0
        assert "# codedelta configuration" in config_path.read_text()

    def test_given_missing_dir_when_init_then_fails(self, tmp_path: Path) -> None:
        """Init rejects a path that does not exist."""
        result = runner.invoke(cli, ["init", str(tmp_path / "nope")])
        assert result.exit_code != 0
