"""Configuration models."""

from podrepo.config._models._common import (
    ConfigSource,
    ConfigSourceName,
    LogFormat,
    LogLevel,
)
from podrepo.config._models._config import Config
from podrepo.config._models._lint import LintConfiguration
from podrepo.config._models._logging import LoggingConfig
from podrepo.config._models._sources import MASTER_REPO_URLS, SourcesConfiguration

__all__ = [
    "MASTER_REPO_URLS",
    "Config",
    "ConfigSource",
    "ConfigSourceName",
    "LintConfiguration",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "SourcesConfiguration",
]
