"""Shared CLI utilities for commands."""

from enum import IntEnum
from typing import Never

from rich.console import Console
from rich.markup import escape

from podrepo.exceptions import (
    ConfigurationError,
    InputError,
    PodRepoError,
    RepositoryStateError,
    SpecValidationError,
)

__all__ = [
    "ExitCode",
    "exit_code_for_exception",
    "exit_with_error",
    "get_error_console",
]


class ExitCode(IntEnum):
    """Standard exit codes for podrepo CLI commands."""

    SUCCESS = 0
    CONFIG_ERROR = 1
    INPUT_ERROR = 2
    VALIDATION_ERROR = 3
    REPOSITORY_ERROR = 4
    INTERNAL_ERROR = 5


def exit_code_for_exception(error: PodRepoError) -> ExitCode:
    """Map a podrepo exception to its exit code."""
    match error:
        case ConfigurationError():
            return ExitCode.CONFIG_ERROR
        case InputError():
            return ExitCode.INPUT_ERROR
        case SpecValidationError():
            return ExitCode.VALIDATION_ERROR
        case RepositoryStateError():
            return ExitCode.REPOSITORY_ERROR
        case _:
            return ExitCode.INTERNAL_ERROR


def get_error_console() -> Console:
    """Get a Rich console configured for error output to stderr."""
    return Console(stderr=True)


def exit_with_error(
    message: str,
    code: ExitCode = ExitCode.INTERNAL_ERROR,
    *,
    console: Console | None = None,
) -> Never:
    """Print an error message and exit with the specified code.

    Args:
        message: The error message to display.
        code: The exit code to use (defaults to INTERNAL_ERROR).
        console: Optional Rich console for output. If not provided,
            a new stderr console will be created.

    Raises:
        SystemExit: Always raised with the specified exit code.
    """
    if console is None:
        console = get_error_console()

    console.print(f"[red]Error:[/red] {escape(message)}")
    raise SystemExit(code)
