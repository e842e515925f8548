# pyright: reportAny=false
"""Built-in podspec linter.

SpecLinter checks the declarative content of a podspec: required attributes,
version and URL shapes, and that dependencies can be found in the selected
spec repos. It never builds or installs the pod.
"""

import re
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Final

from podrepo.sources import Source, SourcesManager
from podrepo.specification import Specification
from podrepo.validation._models import LintResult, ResultType

MAX_SUMMARY_LENGTH: Final = 140

_VERSION_RE: Final = re.compile(
    r"^\d+(?:\.\d+)*(?:[-.][0-9A-Za-z]+(?:\.[0-9A-Za-z]+)*)?$"
)
_HTTP_RE: Final = re.compile(r"^https?://", re.IGNORECASE)
_SOURCE_LOCATIONS: Final = ("git", "http", "path")
_REQUIRED_ATTRIBUTES: Final = ("summary", "authors", "homepage", "source")


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, Mapping | list | tuple):
        return not value
    return False


def _is_local_git_url(url: str) -> bool:
    return url.startswith(("/", "~", ".", "file://"))


class SpecLinter:
    """Lints the content of a single podspec file.

    Attributes:
        path: The podspec file.
        source_urls: URLs of the spec repos dependencies are resolved against.
        allow_warnings: Accept the spec when it only has warnings.
        use_frameworks: Recorded for parity with external linters; the
            built-in checks do not depend on it.
        ignore_public_only_results: Skip checks that only apply to public
            spec repos.
    """

    def __init__(
        self,
        path: Path,
        source_urls: Sequence[str],
        *,
        sources: SourcesManager | None = None,
    ) -> None:
        self.path: Path = path
        self.source_urls: list[str] = list(source_urls)
        self.allow_warnings: bool = False
        self.use_frameworks: bool = True
        self.ignore_public_only_results: bool = False
        self._sources: SourcesManager | None = sources
        self._results: list[LintResult] = []
        self._validated: bool = False

    @property
    def results(self) -> list[LintResult]:
        return list(self._results)

    @property
    def validated(self) -> bool:
        return self._validated

    @property
    def errors(self) -> list[LintResult]:
        """Errors that count against the spec with the current options."""
        return [r for r in self._counted() if r.type is ResultType.ERROR]

    @property
    def warnings(self) -> list[LintResult]:
        """Warnings that count against the spec with the current options."""
        return [r for r in self._counted() if r.type is ResultType.WARNING]

    def validate(self) -> None:
        """Parse and lint the podspec.

        Raises:
            SpecParseError: If the podspec cannot be parsed.
        """
        spec = Specification.from_file(self.path)
        self._results = []

        self._check_required(spec.attributes)
        self._check_version(spec.version)
        self._check_homepage(spec.attributes.get("homepage"))
        self._check_source(spec.attributes.get("source"))
        self._check_summary(spec.attributes)
        self._check_license(spec.attributes.get("license"))
        self._check_dependencies(spec)

        self._validated = not self.errors and (
            self.allow_warnings or not self.warnings
        )

    # =========================================================================
    # Checks
    # =========================================================================

    def _check_required(self, attributes: Mapping[str, Any]) -> None:
        for attribute in _REQUIRED_ATTRIBUTES:
            if _is_blank(attributes.get(attribute)):
                self._error(attribute, f"The `{attribute}` attribute is required.")

    def _check_version(self, version: str) -> None:
        if not _VERSION_RE.match(version):
            self._error("version", f"The version `{version}` is not valid.")
            return
        numeric = version.split("-", 1)[0].split(".")
        if all(part.isdigit() and int(part) == 0 for part in numeric):
            self._error("version", "The version of the spec should be higher than 0.")

    def _check_homepage(self, homepage: Any) -> None:
        if _is_blank(homepage):
            return
        if not isinstance(homepage, str) or not _HTTP_RE.match(homepage):
            self._error("homepage", "The homepage must be an http or https URL.")

    def _check_source(self, source: Any) -> None:
        if _is_blank(source):
            return
        if not isinstance(source, Mapping) or not any(
            isinstance(source.get(key), str) and source.get(key)
            for key in _SOURCE_LOCATIONS
        ):
            self._error(
                "source", "The source must specify a `git`, `http` or `path` location."
            )
            return
        git = source.get("git")
        if isinstance(git, str) and _is_local_git_url(git):
            self._error(
                "source",
                "The git source should be a remote URL, not a local path.",
                public_only=True,
            )

    def _check_summary(self, attributes: Mapping[str, Any]) -> None:
        summary = attributes.get("summary")
        if not isinstance(summary, str):
            return
        if len(summary) > MAX_SUMMARY_LENGTH:
            self._warning(
                "summary",
                "The summary should be a short version of `description` "
                f"(max {MAX_SUMMARY_LENGTH} characters).",
            )
        description = attributes.get("description")
        if isinstance(description, str) and description.strip() == summary.strip():
            self._warning("description", "The description is equal to the summary.")

    def _check_license(self, license_: Any) -> None:
        if _is_blank(license_):
            self._warning("license", "Missing license type.", public_only=True)

    def _check_dependencies(self, spec: Specification) -> None:
        if self._sources is None:
            return
        sources = self._sources.sources_for_urls(self.source_urls)
        for name in spec.dependencies:
            root = name.split("/", 1)[0]
            if root == spec.root_name:
                continue
            if not _provides(sources, root):
                self._error(
                    "dependencies",
                    f"Unable to find a specification for `{name}` "
                    "in the selected sources.",
                )

    # =========================================================================
    # Helpers
    # =========================================================================

    def _counted(self) -> list[LintResult]:
        if not self.ignore_public_only_results:
            return self._results
        return [r for r in self._results if not r.public_only]

    def _error(
        self, attribute: str, message: str, *, public_only: bool = False
    ) -> None:
        self._results.append(
            LintResult(ResultType.ERROR, attribute, message, public_only=public_only)
        )

    def _warning(
        self, attribute: str, message: str, *, public_only: bool = False
    ) -> None:
        self._results.append(
            LintResult(ResultType.WARNING, attribute, message, public_only=public_only)
        )


def _provides(sources: list[Source], name: str) -> bool:
    return any(source.has_pod(name) for source in sources)
