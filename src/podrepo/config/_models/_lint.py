"""Lint configuration model."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field


class LintConfiguration(BaseModel):
    """Podspec lint section.

    Attributes:
        command: External lint command (e.g. ``pod spec lint``). Empty selects
            the built-in linter.
        timeout_ms: Timeout for the external lint command in milliseconds.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    command: str = ""
    timeout_ms: int = Field(default=600_000, gt=0)
