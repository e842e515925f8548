"""Validation step of the publication pipeline."""

from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from structlog.typing import FilteringBoundLogger

from podrepo.exceptions import SpecValidationError
from podrepo.utils import pluralize
from podrepo.validation._models import ValidationOptions
from podrepo.validation._protocol import ValidatorFactory


def validate_spec_files(
    files: Sequence[Path],
    *,
    factory: ValidatorFactory,
    source_urls: Sequence[str],
    options: ValidationOptions,
    console: Console,
    logger: FilteringBoundLogger,
) -> None:
    """Validate every podspec file, stopping at the first failure.

    Runs before anything touches the spec repo: either all files validate
    or the pipeline ends here.

    Args:
        files: Podspec files in publication order.
        factory: Builds a validator for a file and the source URLs.
        source_urls: Spec repos dependencies are resolved against.
        options: Switches applied to each validator.
        console: Console for progress output.
        logger: Structured logger.

    Raises:
        SpecValidationError: If a validator fails to run or a spec does not
            validate.
    """
    console.print(
        f"\n[yellow]Validating {pluralize('spec', len(files))}[/yellow]"
    )

    for path in files:
        validator = factory(path, source_urls)
        validator.allow_warnings = options.allow_warnings
        validator.use_frameworks = options.use_frameworks
        validator.ignore_public_only_results = options.ignore_public_only_results

        try:
            validator.validate()
        except Exception as e:
            logger.warning("spec_validation_failed", path=str(path), error=str(e))
            msg = f"The `{path}` specification does not validate.\n\n{e}"
            raise SpecValidationError(msg, path=path) from e

        console.print(f" -> {escape(path.name)}")
        for result in validator.results:
            console.print(f"    - {escape(str(result))}")

        if not validator.validated:
            logger.warning(
                "spec_validation_failed",
                path=str(path),
                results=[str(result) for result in validator.results],
            )
            msg = f"The `{path}` specification does not validate."
            raise SpecValidationError(msg, path=path)

        logger.info("spec_validated", path=str(path))
