"""Configuration loading with pydantic-settings.

Supports loading configuration from multiple sources with precedence:
1. Direct kwargs (highest priority)
2. Environment variables (LCOVDIFF__SECTION__KEY)
3. Repo config (.lcovdiff.yaml)
4. Built-in defaults (lowest priority)
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from lcovdiff.config.models import DiffConfig, LcovDiffConfig, LoggingConfig
from lcovdiff.core.errors import ConfigError

CONFIG_FILENAME = ".lcovdiff.yaml"


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with path.open() as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError.parse_error(str(path), str(e)) from e
    if not isinstance(data, dict):
        raise ConfigError.parse_error(str(path), "top level must be a mapping")
    return data


class _YamlSource(PydanticBaseSettingsSource):
    """Settings source that reads from pre-loaded YAML config."""

    def __init__(self, settings_cls: type[BaseSettings], yaml_config: dict[str, Any]) -> None:
        super().__init__(settings_cls)
        self._yaml_config = yaml_config

    def get_field_value(
        self,
        field: Any,  # noqa: ARG002
        field_name: str,
    ) -> tuple[Any, str, bool]:
        val = self._yaml_config.get(field_name)
        return val, field_name, val is not None

    def __call__(self) -> dict[str, Any]:
        return self._yaml_config


def _make_settings_class(yaml_config: dict[str, Any]) -> type[BaseSettings]:
    """Create a Settings class with instance-based YAML source."""

    class LcovDiffSettings(BaseSettings):
        """Root config. Env vars: LCOVDIFF__LOGGING__LEVEL, LCOVDIFF__DIFF__DROP_ZEROS, etc."""

        model_config = SettingsConfigDict(
            env_prefix="LCOVDIFF__",
            env_nested_delimiter="__",
            case_sensitive=False,
        )

        logging: LoggingConfig = LoggingConfig()
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
            # Precedence (first wins): init kwargs > env vars > yaml file
            return (init_settings, env_settings, _YamlSource(settings_cls, yaml_config))

    return LcovDiffSettings


def load_config(config_dir: Path | None = None, **kwargs: Any) -> LcovDiffConfig:
    """Load config: defaults < .lcovdiff.yaml < env vars < kwargs.

    Args:
        config_dir: Directory holding .lcovdiff.yaml.
                    Defaults to current working directory.
        **kwargs: Override values (highest precedence), e.g.
                  ``diff={"drop_zeros": True}``.

    Returns:
        Fully resolved configuration object.

    Raises:
        ConfigError: On invalid YAML syntax, validation errors, or an
            explicit config_dir that does not exist.
    """
    if config_dir is None:
        config_dir = Path.cwd()
    elif not config_dir.is_dir():
        raise ConfigError.file_not_found(str(config_dir))
    yaml_config = _load_yaml(config_dir / CONFIG_FILENAME)

    settings_cls = _make_settings_class(yaml_config)
    try:
        settings = settings_cls(**kwargs)
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(loc) for loc in err["loc"])
        raise ConfigError.invalid_value(field, err.get("input"), err["msg"]) from e
    return LcovDiffConfig.model_validate(settings.model_dump())
