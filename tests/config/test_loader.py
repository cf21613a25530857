"""Tests for config/loader.py module.

Covers:
- _load_yaml() function
- _deep_merge() function
- load_config() precedence and validation
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest

from codedelta.config import loader
from codedelta.config.loader import _deep_merge, _load_yaml, load_config, repo_config_path
from codedelta.config.models import AnalysisConfig
from codedelta.core.errors import ConfigError, ErrorCode


def _write_repo_config(root: Path, text: str) -> None:
    path = repo_config_path(root)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)


class TestLoadYaml:
    """Tests for _load_yaml function."""

    def test_returns_empty_dict_for_missing_file(self, tmp_path: Path) -> None:
        """Returns empty dict when file doesn't exist."""
        assert _load_yaml(tmp_path / "nonexistent.yaml") == {}

    def test_loads_valid_yaml(self, tmp_path: Path) -> None:
        """Loads valid YAML content."""
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("analysis:\n  default_depth: basic\n")

        assert _load_yaml(yaml_file) == {"analysis": {"default_depth": "basic"}}

    def test_returns_empty_for_empty_file(self, tmp_path: Path) -> None:
        """Returns empty dict for empty file."""
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")

        assert _load_yaml(yaml_file) == {}

    def test_raises_config_error_for_invalid_yaml(self, tmp_path: Path) -> None:
        """Raises ConfigError for invalid YAML syntax."""
        yaml_file = tmp_path / "invalid.yaml"
        yaml_file.write_text("logging:\n  level:\n    - invalid: [unclosed")

        with pytest.raises(ConfigError) as exc_info:
            _load_yaml(yaml_file)
        assert exc_info.value.code == ErrorCode.CONFIG_PARSE_ERROR

    def test_raises_config_error_for_non_mapping(self, tmp_path: Path) -> None:
        """A top-level list is not a config."""
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigError):
            _load_yaml(yaml_file)


class TestDeepMerge:
    """Tests for _deep_merge function."""

    def test_override_wins(self) -> None:
        """Override values replace base values."""
        assert _deep_merge({"a": 1, "b": 2}, {"b": 3}) == {"a": 1, "b": 3}

    def test_nested_merge(self) -> None:
        """Nested dicts are merged recursively."""
        base = {"analysis": {"default_depth": "basic", "rename_threshold": 0.8}}
        override = {"analysis": {"default_depth": "comprehensive"}}
        assert _deep_merge(base, override) == {
            "analysis": {"default_depth": "comprehensive", "rename_threshold": 0.8}
        }

    def test_override_replaces_non_dict(self) -> None:
        """Non-dict override replaces dict base."""
        base: dict[str, Any] = {"a": {"nested": 1}}
        override: dict[str, Any] = {"a": "simple"}
        assert _deep_merge(base, override) == {"a": "simple"}

    def test_does_not_mutate_base(self) -> None:
        """Base dict is not mutated."""
        base = {"a": 1}
        _deep_merge(base, {"b": 2})
        assert base == {"a": 1}


class TestLoadConfig:
    """Tests for load_config function."""

    def test_returns_default_config_when_no_files(self, tmp_path: Path) -> None:
        """Returns default config when no config files exist."""
        config = load_config(tmp_path)

        assert config.logging.level == "WARNING"
        assert config.analysis.default_depth == "detailed"
        assert config.refactoring.preserve_logic is True
        assert config.refactoring.create_backups is True

    def test_loads_repo_config(self, tmp_path: Path) -> None:
        """Loads config from repo .codedelta directory."""
        _write_repo_config(tmp_path, "analysis:\n  default_depth: basic\n")

        assert load_config(tmp_path).analysis.default_depth == "basic"

    def test_repo_overrides_global(self, tmp_path: Path) -> None:
        """Repo YAML wins over global YAML, key by key."""
        loader.GLOBAL_CONFIG_PATH.write_text(
            "analysis:\n  default_depth: basic\n  rename_threshold: 0.8\n"
        )
        _write_repo_config(tmp_path, "analysis:\n  default_depth: comprehensive\n")

        config = load_config(tmp_path)

        assert config.analysis.default_depth == "comprehensive"
        assert config.analysis.rename_threshold == 0.8

    def test_env_vars_override_yaml(self, tmp_path: Path) -> None:
        """Environment variables override YAML config."""
        _write_repo_config(tmp_path, "refactoring:\n  create_backups: true\n")

        with patch.dict(os.environ, {"CODEDELTA__REFACTORING__CREATE_BACKUPS": "false"}):
            config = load_config(tmp_path)

        assert config.refactoring.create_backups is False

    def test_kwargs_override_all(self, tmp_path: Path) -> None:
        """Keyword arguments override everything."""
        _write_repo_config(tmp_path, "analysis:\n  default_depth: comprehensive\n")

        with patch.dict(os.environ, {"CODEDELTA__ANALYSIS__DEFAULT_DEPTH": "detailed"}):
            config = load_config(tmp_path, analysis=AnalysisConfig(default_depth="basic"))

        assert config.analysis.default_depth == "basic"

    def test_commented_out_section_is_ignored(self, tmp_path: Path) -> None:
        """A section with every option commented out parses as null."""
        _write_repo_config(tmp_path, "analysis:\n  # default_depth: basic\n")

        assert load_config(tmp_path).analysis.default_depth == "detailed"

    def test_raises_config_error_for_invalid_value(self, tmp_path: Path) -> None:
        """Raises ConfigError for invalid config values."""
        _write_repo_config(tmp_path, "analysis:\n  rename_threshold: 1.5\n")

        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path)

        assert exc_info.value.code == ErrorCode.CONFIG_INVALID_VALUE
        assert "rename_threshold" in exc_info.value.details["field"]

    def test_raises_config_error_for_unknown_depth(self, tmp_path: Path) -> None:
        _write_repo_config(tmp_path, "analysis:\n  default_depth: deep\n")

        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_defaults_to_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        _write_repo_config(tmp_path, "refactoring:\n  strict_rules: true\n")
        monkeypatch.chdir(tmp_path)

        assert load_config().refactoring.strict_rules is True


class TestRepoConfigPath:
    """Tests for repo_config_path."""

    def test_under_codedelta_dir(self, tmp_path: Path) -> None:
        assert repo_config_path(tmp_path) == tmp_path / ".codedelta" / "config.yaml"
