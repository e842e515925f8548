"""Validator protocol."""

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Protocol, TypeAlias, runtime_checkable

from podrepo.validation._models import LintResult


@runtime_checkable
class ValidatorProtocol(Protocol):
    """Lints one podspec file.

    Validators are configured through their attributes, then ``validate()``
    is called once. ``validated`` is only meaningful afterwards.
    """

    allow_warnings: bool
    use_frameworks: bool
    ignore_public_only_results: bool

    @property
    def results(self) -> list[LintResult]:
        """Findings of the last validate() call."""
        ...

    @property
    def validated(self) -> bool:
        """Whether the spec passed with the configured options."""
        ...

    def validate(self) -> None:
        """Lint the spec.

        Raises:
            Exception: Any failure to perform the lint itself. Lint findings
                are reported through ``results``, never raised.
        """
        ...


ValidatorFactory: TypeAlias = Callable[[Path, Sequence[str]], ValidatorProtocol]
"""Builds a validator from a podspec path and the dependency source URLs."""
