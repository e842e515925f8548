"""Shared utilities for podrepo."""

from ._exec import (
    CommandConfig,
    CommandResult,
    run_command,
    truncate_output,
)
from ._logging import create_cli_logger, create_null_logger
from ._paths import get_podrepo_cli_log_file, get_podrepo_log_dir
from ._text import pluralize

__all__ = [
    "CommandConfig",
    "CommandResult",
    "create_cli_logger",
    "create_null_logger",
    "get_podrepo_cli_log_file",
    "get_podrepo_log_dir",
    "pluralize",
    "run_command",
    "truncate_output",
]
