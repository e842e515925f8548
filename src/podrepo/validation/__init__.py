"""Podspec validation.

Validators lint one podspec each; validate_spec_files runs them over every
file of a publication before the spec repo is modified.
"""

from podrepo.validation._command import CommandValidator
from podrepo.validation._linter import MAX_SUMMARY_LENGTH, SpecLinter
from podrepo.validation._models import LintResult, ResultType, ValidationOptions
from podrepo.validation._protocol import ValidatorFactory, ValidatorProtocol
from podrepo.validation._step import validate_spec_files

__all__ = [
    "MAX_SUMMARY_LENGTH",
    "CommandValidator",
    "LintResult",
    "ResultType",
    "SpecLinter",
    "ValidationOptions",
    "ValidatorFactory",
    "ValidatorProtocol",
    "validate_spec_files",
]
