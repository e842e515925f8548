"""podrepo exceptions."""

from pathlib import Path
from typing import Any


class PodRepoError(Exception):
    """Base exception for podrepo errors."""


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationError(PodRepoError):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigurationError):
    """Raised when configuration cannot be loaded or parsed."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column


class ConfigValidationError(ConfigurationError):
    """Raised when configuration fails validation."""

    def __init__(
        self,
        message: str,
        *,
        key: str,
        value: Any,  # pyright: ignore[reportAny,reportExplicitAny]
        expected: str,
        source: str | None = None,
    ) -> None:
        """Initialize with error message and validation context."""
        super().__init__(message)
        self.key: str = key
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.expected: str = expected
        self.source: str | None = source


class SourceNotFoundError(ConfigurationError):
    """Raised when a spec repo cannot be resolved by name or URL.

    Attributes:
        repo: The name or URL that was looked up.
    """

    def __init__(self, message: str, *, repo: str) -> None:
        """Initialize with error message and the unresolved repo.

        Args:
            message: Human-readable error message.
            repo: The name or URL that was looked up.
        """
        super().__init__(message)
        self.repo: str = repo


class ProtectedSourceError(ConfigurationError):
    """Raised when the resolved spec repo points at a protected remote."""


class RepositoryNotFoundError(ConfigurationError):
    """Raised when a spec repo directory is not a git working tree."""


# =============================================================================
# Input Exceptions
# =============================================================================


class InputError(PodRepoError):
    """Base exception for invalid user input."""


class SpecFileNotFoundError(InputError, FileNotFoundError):
    """Raised when no podspec file can be found to publish."""


class SpecParseError(InputError, ValueError):
    """Raised when a podspec file cannot be parsed.

    Attributes:
        path: The file that failed to parse.
    """

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        """Initialize with error message and file context.

        Args:
            message: Human-readable error message.
            path: The file that failed to parse.
        """
        super().__init__(message)
        self.path: Path | None = path


# =============================================================================
# Validation Exceptions
# =============================================================================


class SpecValidationError(PodRepoError):
    """Raised when a podspec does not pass validation.

    Attributes:
        path: The podspec file that failed validation.
    """

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        """Initialize with error message and file context.

        Args:
            message: Human-readable error message.
            path: The podspec file that failed validation.
        """
        super().__init__(message)
        self.path: Path | None = path


class ValidatorExecutionError(SpecValidationError):
    """Raised when an external lint command cannot be executed."""


# =============================================================================
# Repository State Exceptions
# =============================================================================


class RepositoryStateError(PodRepoError):
    """Base exception for spec repo state errors."""


class RepositoryDirtyError(RepositoryStateError):
    """Raised when the spec repo working tree has uncommitted changes.

    Attributes:
        root: The working tree that is not clean.
    """

    def __init__(self, message: str, *, root: Path) -> None:
        """Initialize with error message and repository context.

        Args:
            message: Human-readable error message.
            root: The working tree that is not clean.
        """
        super().__init__(message)
        self.root: Path = root
