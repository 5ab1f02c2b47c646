"""Configuration loading with pydantic-settings.

Sources, lowest to highest precedence:
1. Built-in defaults
2. Global config (~/.config/semdiffstat/config.yaml)
3. Project config (.semdiffstat.yaml in the working directory)
4. Environment variables (SEMDIFFSTAT__SECTION__KEY)
5. Direct kwargs
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from semdiffstat.config.models import (
    DiffConfig,
    LoggingConfig,
    OutputConfig,
    SemDiffStatConfig,
)
from semdiffstat.core.errors import ConfigError

GLOBAL_CONFIG_PATH = Path("~/.config/semdiffstat/config.yaml").expanduser()
PROJECT_CONFIG_NAME = ".semdiffstat.yaml"


def _load_yaml(path: Path) -> dict[str, Any]:
    """Mapping stored in ``path``; empty if the file is missing or empty."""
    if not path.is_file():
        return {}
    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ConfigError.parse_error(str(path), str(e)) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError.parse_error(str(path), "top-level value must be a mapping")
    return data


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = _deep_merge(current, value)
        else:
            merged[key] = value
    return merged


class _YamlFilesSource(PydanticBaseSettingsSource):
    """Settings source over YAML files; later files override earlier ones."""

    def __init__(self, settings_cls: type[BaseSettings], paths: list[Path]) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        for path in paths:
            self._data = _deep_merge(self._data, _load_yaml(path))

    def get_field_value(
        self,
        field: Any,  # noqa: ARG002
        field_name: str,
    ) -> tuple[Any, str, bool]:
        value = self._data.get(field_name)
        return value, field_name, value is not None

    def __call__(self) -> dict[str, Any]:
        return self._data


def _settings_for(paths: list[Path]) -> type[BaseSettings]:
    """Settings class bound to a list of YAML files."""

    class SemDiffStatSettings(BaseSettings):
        model_config = SettingsConfigDict(
            env_prefix="SEMDIFFSTAT__",
            env_nested_delimiter="__",
            case_sensitive=False,
        )

        logging: LoggingConfig = LoggingConfig()
        output: OutputConfig = OutputConfig()
        diff: DiffConfig = DiffConfig()

        @classmethod
        def settings_customise_sources(
            cls,
            settings_cls: type[BaseSettings],
            init_settings: PydanticBaseSettingsSource,
            env_settings: PydanticBaseSettingsSource,
            dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
            file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        ) -> tuple[PydanticBaseSettingsSource, ...]:
            # First wins: kwargs, then env, then YAML
            return (init_settings, env_settings, _YamlFilesSource(settings_cls, paths))

    return SemDiffStatSettings


def load_config(cwd: Path | None = None, **kwargs: Any) -> SemDiffStatConfig:
    """Resolve the configuration for a run started in ``cwd``.

    Args:
        cwd: Directory searched for the project config file.
             Defaults to current working directory.
        **kwargs: Section overrides (highest precedence).

    Raises:
        ConfigError: On unreadable YAML or values that fail validation.
    """
    paths = [GLOBAL_CONFIG_PATH, (cwd or Path.cwd()) / PROJECT_CONFIG_NAME]
    try:
        settings = _settings_for(paths)(**kwargs)
        return SemDiffStatConfig.model_validate(settings.model_dump())
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(loc) for loc in err["loc"])
        raise ConfigError.invalid_value(field, err.get("input"), err["msg"]) from e
