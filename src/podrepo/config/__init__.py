"""podrepo configuration.

This module provides the public API for podrepo configuration management,
including loading, validation, and typed access to configuration values.

Example:
    >>> from podrepo.config import Config
    >>> config = Config.load()
    >>> config.sources.repos_dir
    '~/.cocoapods/repos'
"""

from podrepo.exceptions import (
    ConfigLoadError,
    ConfigurationError,
    ConfigValidationError,
)

from ._defaults import DEFAULT_CONFIG
from ._discovery import discover_sources, get_user_config_path
from ._load import safe_load_config
from ._loader import (
    deep_merge,
    parse_env_vars,
    parse_string_value,
    read_toml_file,
    set_nested_key,
)
from ._models import (
    MASTER_REPO_URLS,
    Config,
    ConfigSource,
    ConfigSourceName,
    LintConfiguration,
    LogFormat,
    LoggingConfig,
    LogLevel,
    SourcesConfiguration,
)
from ._validation import ValidationIssue, raise_if_validation_errors, validate_config

__all__ = [
    "DEFAULT_CONFIG",
    "MASTER_REPO_URLS",
    "Config",
    "ConfigLoadError",
    "ConfigSource",
    "ConfigSourceName",
    "ConfigValidationError",
    "ConfigurationError",
    "LintConfiguration",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "SourcesConfiguration",
    "ValidationIssue",
    "deep_merge",
    "discover_sources",
    "get_user_config_path",
    "parse_env_vars",
    "parse_string_value",
    "raise_if_validation_errors",
    "read_toml_file",
    "safe_load_config",
    "set_nested_key",
    "validate_config",
]
