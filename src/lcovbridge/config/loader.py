"""Load lcovbridge configuration.

Sources, strongest first:
1. kwargs passed to load_config()
2. LCOVBRIDGE__SECTION__KEY environment variables
3. .lcovbridge.yaml in the project directory
4. model defaults
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from lcovbridge.config.models import CoverageConfig, LcovBridgeConfig, LoggingConfig
from lcovbridge.core.errors import ConfigError

CONFIG_FILE_NAME = ".lcovbridge.yaml"


def _load_yaml(path: Path) -> dict[str, Any]:
    """Read a YAML mapping; a missing or empty file is an empty mapping."""
    if not path.is_file():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError.parse_error(str(path), str(e)) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError.parse_error(str(path), "top-level value must be a mapping")
    return data


class _ProjectFileSource(PydanticBaseSettingsSource):
    """Feeds the sections of .lcovbridge.yaml to the settings model."""

    def __init__(self, settings_cls: type[BaseSettings], sections: dict[str, Any]) -> None:
        super().__init__(settings_cls)
        self.sections = sections

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:  # noqa: ARG002
        value = self.sections.get(field_name)
        return value, field_name, isinstance(value, dict)

    def __call__(self) -> dict[str, Any]:
        return {k: v for k, v in self.sections.items() if k in self.settings_cls.model_fields}


class _Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="LCOVBRIDGE__",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    logging: LoggingConfig = LoggingConfig()
    coverage: CoverageConfig = CoverageConfig()


def _settings_for(sections: dict[str, Any]) -> type[_Settings]:
    class ProjectSettings(_Settings):
        @classmethod
        def settings_customise_sources(
            cls,
            settings_cls: type[BaseSettings],
            init_settings: PydanticBaseSettingsSource,
            env_settings: PydanticBaseSettingsSource,
            dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
            file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        ) -> tuple[PydanticBaseSettingsSource, ...]:
            return (init_settings, env_settings, _ProjectFileSource(settings_cls, sections))

    return ProjectSettings


def load_config(project_dir: Path | None = None, **kwargs: Any) -> LcovBridgeConfig:
    """Resolve the configuration for a project directory.

    Args:
        project_dir: Directory holding .lcovbridge.yaml (default: cwd).
        **kwargs: Section overrides, e.g. ``coverage={"output_name": "x"}``.

    Raises:
        ConfigError: If the YAML is malformed or a value fails validation.
    """
    sections = _load_yaml((project_dir or Path.cwd()) / CONFIG_FILE_NAME)

    try:
        settings = _settings_for(sections)(**kwargs)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        raise ConfigError.invalid_value(field, first.get("input"), first["msg"]) from e

    return LcovBridgeConfig(logging=settings.logging, coverage=settings.coverage)
