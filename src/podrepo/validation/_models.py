"""Lint result models."""

from dataclasses import dataclass
from enum import StrEnum


class ResultType(StrEnum):
    """Severity of a lint result."""

    ERROR = "error"
    WARNING = "warning"
    NOTE = "note"


@dataclass(frozen=True, slots=True)
class LintResult:
    """A single finding reported by a validator.

    Attributes:
        type: Severity of the finding.
        attribute: Podspec attribute the finding concerns.
        message: Human-readable description.
        public_only: Whether the finding only applies to public spec repos.
    """

    type: ResultType
    attribute: str
    message: str
    public_only: bool = False

    def __str__(self) -> str:
        return f"{self.type.value.upper()} | [{self.attribute}] {self.message}"


@dataclass(frozen=True, slots=True)
class ValidationOptions:
    """Switches applied to every validator of a run.

    Attributes:
        allow_warnings: Accept specs whose only findings are warnings.
        use_frameworks: Lint with frameworks rather than static libraries.
        ignore_public_only_results: Skip findings that only matter for
            public spec repos.
    """

    allow_warnings: bool = False
    use_frameworks: bool = True
    ignore_public_only_results: bool = True
