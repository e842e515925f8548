# pyright: reportExplicitAny=false, reportAny=false, reportUnknownVariableType=false, reportUnknownArgumentType=false
"""Configuration container with typed access.

This module provides the main Config class that serves as the primary
interface for accessing podrepo configuration values.
"""

from pathlib import Path
from typing import Any, ClassVar, Self, TypeVar, overload

import tomli_w
from pydantic import BaseModel, ConfigDict, PrivateAttr, ValidationError

from podrepo.config._defaults import DEFAULT_CONFIG
from podrepo.config._loader import (
    copy_value,
    deep_merge,
    parse_env_vars,
    read_toml_file,
)
from podrepo.config._models._common import ConfigSource, ConfigSourceName
from podrepo.config._models._lint import LintConfiguration
from podrepo.config._models._logging import LoggingConfig
from podrepo.config._models._sources import SourcesConfiguration

T = TypeVar("T")
SectionT = TypeVar("SectionT", bound=BaseModel)


def _parse_section(
    model: type[SectionT], data: dict[str, Any], *, strict: bool
) -> SectionT:
    """Parse one configuration section, falling back to defaults when lenient.

    Args:
        model: Section model class.
        data: Raw section dictionary.
        strict: Re-raise pydantic errors instead of falling back.

    Returns:
        Parsed section model.
    """
    try:
        return model.model_validate(data)
    except ValidationError:
        if strict:
            raise
        return model()


class Config(BaseModel):
    """Configuration container with typed access.

    Immutable. Use the factory methods (from_dict(), from_file(), load())
    rather than the constructor.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    _data: dict[str, Any] = PrivateAttr(default_factory=dict)
    _config_sources: tuple[ConfigSource, ...] = PrivateAttr(default=())
    _lint: LintConfiguration = PrivateAttr(default_factory=LintConfiguration)
    _logging: LoggingConfig = PrivateAttr(default_factory=LoggingConfig)
    _sources: SourcesConfiguration = PrivateAttr(default_factory=SourcesConfiguration)

    def __init__(
        self,
        *,
        _data: dict[str, Any] | None = None,
        _config_sources: tuple[ConfigSource, ...] = (),
    ) -> None:
        """Initialize configuration container from a merged dictionary.

        Args:
            _data: The complete merged configuration dictionary. Sections are
                expected to be valid; invalid sections fall back to defaults.
            _config_sources: Sources that contributed to this configuration.
        """
        super().__init__()
        self._data = _data if _data is not None else copy_value(DEFAULT_CONFIG)
        self._config_sources = _config_sources
        self._lint = _parse_section(
            LintConfiguration, self._data.get("lint", {}), strict=False
        )
        self._logging = _parse_section(
            LoggingConfig, self._data.get("logging", {}), strict=False
        )
        self._sources = _parse_section(
            SourcesConfiguration, self._data.get("sources", {}), strict=False
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any], *, validate: bool = True) -> Self:
        """Create configuration from a dictionary.

        Args:
            data: Dictionary of configuration values.
            validate: Whether to validate the configuration.

        Returns:
            Configuration object from the dictionary.

        Raises:
            ConfigValidationError: If validation fails (when validate=True).
        """
        from podrepo.config._validation import (  # noqa: PLC0415
            raise_if_validation_errors,
            validate_config,
        )

        merged = deep_merge(DEFAULT_CONFIG, data)
        if validate:
            raise_if_validation_errors(validate_config(merged))
        return cls(_data=merged)

    @classmethod
    def from_file(cls, path: Path, *, validate: bool = True) -> Self:
        """Load configuration from a specific file.

        Args:
            path: Path to the TOML config file.
            validate: Whether to validate the loaded config.

        Returns:
            Configuration object from the specified file only.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConfigLoadError: If the file cannot be parsed.
            ConfigValidationError: If validation fails.
        """
        from podrepo.config._validation import (  # noqa: PLC0415
            raise_if_validation_errors,
            validate_config,
        )

        data = read_toml_file(path)
        source = ConfigSource(
            name=ConfigSourceName.USER, path=path, exists=True, values=data
        )

        merged = deep_merge(DEFAULT_CONFIG, data)
        if validate:
            raise_if_validation_errors(validate_config(merged), source=str(path))
        return cls(_data=merged, _config_sources=(source,))

    @classmethod
    def load(
        cls,
        *,
        user_config_path: Path | None = None,
        include_env: bool = True,
        cli_overrides: dict[str, Any] | None = None,
    ) -> Self:
        """Load merged configuration from all sources.

        Sources merge in precedence order (defaults -> user -> env -> cli).

        Args:
            user_config_path: Override for the user config file location.
            include_env: Include PODREPO_* environment variables as a source.
            cli_overrides: Dict of CLI argument overrides.

        Returns:
            Merged configuration object.

        Raises:
            ConfigLoadError: If config files cannot be loaded.
            ConfigValidationError: If merged config fails validation.
        """
        from podrepo.config._discovery import discover_sources  # noqa: PLC0415
        from podrepo.config._validation import (  # noqa: PLC0415
            raise_if_validation_errors,
            validate_config,
        )

        sources = discover_sources(
            user_config_path=user_config_path,
            include_env=include_env,
            cli_overrides=cli_overrides,
        )

        merged: dict[str, Any] = {}
        loaded_sources: list[ConfigSource] = []

        # Discovery order is highest-to-lowest; merge lowest first
        for source in reversed(sources):
            values = source.values
            if source.name == ConfigSourceName.ENV:
                values = parse_env_vars()
            elif source.path is not None and source.exists:
                values = read_toml_file(source.path)

            loaded_sources.append(
                ConfigSource(
                    name=source.name,
                    path=source.path,
                    exists=source.exists,
                    values=values,
                )
            )
            if values:
                merged = deep_merge(merged, values)

        raise_if_validation_errors(validate_config(merged))
        return cls(_data=merged, _config_sources=tuple(reversed(loaded_sources)))

    @property
    def config_sources(self) -> list[ConfigSource]:
        """Return the sources that contributed to this configuration."""
        return list(self._config_sources)

    @property
    def lint(self) -> LintConfiguration:
        """Return the lint configuration section."""
        return self._lint

    @property
    def logging(self) -> LoggingConfig:
        """Return the logging configuration section."""
        return self._logging

    @property
    def sources(self) -> SourcesConfiguration:
        """Return the spec repo sources configuration section."""
        return self._sources

    @overload
    def get(self, key: str) -> Any: ...

    @overload
    def get(self, key: str, default: T) -> T: ...

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-notation key.

        Args:
            key: Dot-notation key (e.g., "sources.repos_dir").
            default: Default value if key not found.

        Returns:
            The configuration value, or default if not found.

        Examples:
            >>> config.get("logging.level")
            'info'
            >>> config.get("nonexistent", "fallback")
            'fallback'
        """
        current: Any = self._data
        for part in key.split("."):
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]
        return current

    def to_dict(self) -> dict[str, Any]:
        """Return a deep copy of the merged configuration dictionary."""
        return copy_value(self._data)

    def to_toml(self) -> str:
        """Render the merged configuration as TOML."""
        return tomli_w.dumps(self.to_dict())
