"""Tests for config/loader.py module.

Covers:
- _load_yaml() function
- _deep_merge() function
- load_config() precedence: defaults < global < project < env < kwargs
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from semdiffstat.config.loader import (
    GLOBAL_CONFIG_PATH,
    PROJECT_CONFIG_NAME,
    _deep_merge,
    _load_yaml,
    load_config,
)
from semdiffstat.config.models import LoggingConfig, SemDiffStatConfig
from semdiffstat.core.errors import ConfigError, ErrorCode


class TestLoadYaml:
    """Tests for _load_yaml function."""

    def test_returns_empty_dict_for_missing_file(self, tmp_path: Path) -> None:
        """Returns empty dict when file doesn't exist."""
        assert _load_yaml(tmp_path / "nonexistent.yaml") == {}

    def test_loads_valid_yaml(self, tmp_path: Path) -> None:
        """Loads valid YAML content."""
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("output:\n  sort: kind\n")

        assert _load_yaml(yaml_file) == {"output": {"sort": "kind"}}

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
        """A YAML list at the top level is rejected."""
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- go\n- python\n")

        with pytest.raises(ConfigError, match="mapping"):
            _load_yaml(yaml_file)


class TestDeepMerge:
    """Tests for _deep_merge function."""

    def test_nested_merge(self) -> None:
        """Nested dicts are merged key by key."""
        base = {"output": {"color": "auto", "sort": "name"}}
        override = {"output": {"sort": "kind"}}
        assert _deep_merge(base, override) == {"output": {"color": "auto", "sort": "kind"}}

    def test_override_replaces_non_dict(self) -> None:
        """Non-dict values are replaced wholesale."""
        assert _deep_merge({"a": {"b": 1}}, {"a": 2}) == {"a": 2}

    def test_does_not_mutate_base(self) -> None:
        """Base dict is left untouched."""
        base = {"a": {"b": 1}}
        _deep_merge(base, {"a": {"c": 2}})
        assert base == {"a": {"b": 1}}


class TestLoadConfig:
    """Tests for load_config function."""

    def test_returns_default_config_when_no_files(self, tmp_path: Path) -> None:
        """Returns default config when no config files exist."""
        with patch("semdiffstat.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "none.yaml"):
            config = load_config(tmp_path)
        assert config == SemDiffStatConfig()
        assert config.logging.level == "WARNING"
        assert config.output.sort == "name"
        assert config.diff.default_language == "go"

    def test_loads_project_config(self, tmp_path: Path) -> None:
        """Loads config from the project file in the working directory."""
        (tmp_path / PROJECT_CONFIG_NAME).write_text("diff:\n  default_language: python\n")

        with patch("semdiffstat.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "none.yaml"):
            config = load_config(tmp_path)
        assert config.diff.default_language == "python"

    def test_project_overrides_global(self, tmp_path: Path) -> None:
        """Project config wins over the global config, key by key."""
        global_file = tmp_path / "global.yaml"
        global_file.write_text("output:\n  color: never\n  sort: magnitude\n")
        (tmp_path / PROJECT_CONFIG_NAME).write_text("output:\n  sort: kind\n")

        with patch("semdiffstat.config.loader.GLOBAL_CONFIG_PATH", global_file):
            config = load_config(tmp_path)
        assert config.output.color == "never"
        assert config.output.sort == "kind"

    def test_env_vars_override_yaml(self, tmp_path: Path) -> None:
        """Environment variables override YAML config."""
        (tmp_path / PROJECT_CONFIG_NAME).write_text("logging:\n  level: INFO\n")

        with (
            patch("semdiffstat.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "none.yaml"),
            patch.dict(os.environ, {"SEMDIFFSTAT__LOGGING__LEVEL": "ERROR"}),
        ):
            config = load_config(tmp_path)
        assert config.logging.level == "ERROR"

    def test_kwargs_override_all(self, tmp_path: Path) -> None:
        """Keyword arguments override everything."""
        with patch("semdiffstat.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "none.yaml"):
            config = load_config(tmp_path, logging=LoggingConfig(level="DEBUG"))
        assert config.logging.level == "DEBUG"

    def test_level_is_case_insensitive(self, tmp_path: Path) -> None:
        """Lower-case log levels are normalized."""
        (tmp_path / PROJECT_CONFIG_NAME).write_text("logging:\n  level: debug\n")

        with patch("semdiffstat.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "none.yaml"):
            config = load_config(tmp_path)
        assert config.logging.level == "DEBUG"

    def test_raises_config_error_for_invalid_value(self, tmp_path: Path) -> None:
        """Raises ConfigError for invalid config values."""
        (tmp_path / PROJECT_CONFIG_NAME).write_text("output:\n  sort: size\n")

        with (
            patch("semdiffstat.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "none.yaml"),
            pytest.raises(ConfigError) as exc_info,
        ):
            load_config(tmp_path)
        assert exc_info.value.code == ErrorCode.CONFIG_INVALID_VALUE
        assert "sort" in exc_info.value.details["field"]


class TestGlobalConfigPath:
    """Tests for GLOBAL_CONFIG_PATH constant."""

    def test_is_in_user_config(self) -> None:
        assert isinstance(GLOBAL_CONFIG_PATH, Path)
        assert "semdiffstat" in str(GLOBAL_CONFIG_PATH)
