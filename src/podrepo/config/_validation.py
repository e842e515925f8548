# pyright: reportAny=false, reportExplicitAny=false
"""Configuration validation using Pydantic schemas.

The section models are lenient (unknown keys ignored); validation reports
type and value errors for the keys podrepo knows about.
"""

from dataclasses import dataclass
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic_core import ErrorDetails

from podrepo.config._models._lint import LintConfiguration
from podrepo.config._models._logging import LoggingConfig
from podrepo.config._models._sources import SourcesConfiguration
from podrepo.exceptions import ConfigValidationError


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """Represents a configuration validation issue.

    Attributes:
        key: Dotted path to the configuration key (e.g., "logging.level").
        message: Human-readable description of the issue.
        expected: Description of the expected value or type, if available.
        actual: The actual value that caused the issue.
    """

    key: str
    message: str
    expected: str | None
    actual: Any


class ConfigSchema(BaseModel):
    """Pydantic schema for the root configuration."""

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="ignore")

    lint: LintConfiguration = LintConfiguration()
    logging: LoggingConfig = LoggingConfig()
    sources: SourcesConfiguration = SourcesConfiguration()


def _issue_from_error(error: ErrorDetails) -> ValidationIssue:
    ctx = error.get("ctx") or {}
    expected = ctx.get("expected")
    return ValidationIssue(
        key=".".join(str(part) for part in error["loc"]),
        message=error["msg"],
        expected=str(expected) if expected is not None else None,
        actual=error.get("input"),
    )


def validate_config(data: dict[str, Any]) -> list[ValidationIssue]:
    """Validate a merged configuration dictionary.

    Args:
        data: Configuration dictionary.

    Returns:
        List of issues; empty when the configuration is valid.
    """
    try:
        _ = ConfigSchema.model_validate(data)
    except ValidationError as e:
        return [_issue_from_error(error) for error in e.errors()]
    return []


def raise_if_validation_errors(
    issues: list[ValidationIssue],
    *,
    source: str | None = None,
) -> None:
    """Raise ConfigValidationError for the first issue, if any.

    Args:
        issues: Issues returned by validate_config().
        source: Name of the config source, included in the message.

    Raises:
        ConfigValidationError: If issues is not empty.
    """
    if not issues:
        return

    issue = issues[0]
    location = f" in {source}" if source else ""
    msg = f"Invalid value for '{issue.key}'{location}: {issue.message}"
    raise ConfigValidationError(
        msg,
        key=issue.key,
        value=issue.actual,
        expected=issue.expected or "",
        source=source,
    )
