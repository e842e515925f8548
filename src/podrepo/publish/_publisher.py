"""Publication pipeline.

SpecPublisher runs one publication from start to finish:

    resolve repo -> editor prompt -> protected guard -> discover specs
    -> validate all -> clean check -> pull -> write and commit each spec
    -> push

Every step before the first write can end the run with a PodRepoError.
Pull and push failures are reported but do not raise.
"""

import shutil
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final, TypeAlias

from rich.console import Console
from rich.markup import escape
from structlog.typing import FilteringBoundLogger

from podrepo.config import MASTER_REPO_URLS
from podrepo.exceptions import (
    ProtectedSourceError,
    RepositoryDirtyError,
    SourceNotFoundError,
)
from podrepo.publish._editor import prompt_commit_message
from podrepo.publish._message import resolve_commit_message
from podrepo.publish._request import PublishRequest
from podrepo.repository import GitSpecRepository, SpecRepositoryProtocol, SyncResult
from podrepo.sources import Source, SourcesManager
from podrepo.specification import (
    JSON_PODSPEC_EXTENSION,
    Specification,
    discover_spec_files,
)
from podrepo.utils import create_null_logger, pluralize
from podrepo.validation import ValidationOptions, ValidatorFactory, validate_spec_files

RepositoryFactory: TypeAlias = Callable[[Path], SpecRepositoryProtocol]
EditorPrompt: TypeAlias = Callable[[str], str | None]

PROTECTED_SOURCE_MESSAGE: Final = (
    "To push to the CocoaPods master repo use the `pod trunk push` command."
    "\n\nIf you are using a fork of the master repo for private purposes we "
    "recommend to migrate to a clean private repo. To disable this check "
    "remove the remote pointing to the CocoaPods master repo."
)


@dataclass(frozen=True, slots=True)
class PublishResult:
    """Outcome of a publication run.

    Attributes:
        source: The spec repo published to.
        committed: Spec labels mapped to the SHA of their commit.
        unchanged: Labels of specs identical to what the repo held.
        pulled: Result of updating the repo before writing.
        pushed: Result of pushing, None when the run was local-only.
    """

    source: Source
    committed: Mapping[str, str] = field(default_factory=dict)
    unchanged: tuple[str, ...] = ()
    pulled: SyncResult | None = None
    pushed: SyncResult | None = None


class SpecPublisher:
    """Publishes podspecs into a local spec repo and its remote.

    All collaborators are passed in; the publisher reads no environment
    variables and does not depend on the process working directory.

    Example:
        >>> publisher = SpecPublisher(
        ...     PublishRequest(repo="private", local_only=True),
        ...     sources=SourcesManager(repos_dir),
        ...     validator_factory=lambda path, urls: SpecLinter(path, urls),
        ...     console=Console(),
        ...     cwd=Path.cwd(),
        ... )
        >>> result = publisher.run()
    """

    def __init__(  # noqa: PLR0913
        self,
        request: PublishRequest,
        *,
        sources: SourcesManager,
        validator_factory: ValidatorFactory,
        console: Console,
        cwd: Path,
        repository_factory: RepositoryFactory = GitSpecRepository,
        protected_urls: Iterable[str] = MASTER_REPO_URLS,
        logger: FilteringBoundLogger | None = None,
        editor_prompt: EditorPrompt = prompt_commit_message,
    ) -> None:
        self._request: PublishRequest = request
        self._sources: SourcesManager = sources
        self._validator_factory: ValidatorFactory = validator_factory
        self._console: Console = console
        self._cwd: Path = cwd
        self._repository_factory: RepositoryFactory = repository_factory
        self._protected_urls: tuple[str, ...] = tuple(protected_urls)
        self._logger: FilteringBoundLogger = logger or create_null_logger()
        self._editor_prompt: EditorPrompt = editor_prompt

    def run(self) -> PublishResult:
        """Run the pipeline.

        Returns:
            What was committed, pulled and pushed.

        Raises:
            SourceNotFoundError: If the repo cannot be resolved.
            RepositoryNotFoundError: If the repo is not a git working tree.
            ProtectedSourceError: If the repo points at a protected remote.
            SpecFileNotFoundError: If there is no podspec to publish.
            SpecValidationError: If any podspec fails validation.
            RepositoryDirtyError: If the repo has uncommitted changes.
            SpecParseError: If a podspec cannot be parsed.
            OSError: If a spec cannot be written into the repo.
        """
        request = self._request
        source = self._resolve_source()
        message = self._commit_message()

        repo = self._repository_factory(source.repo_dir)
        try:
            self._check_protected(repo)
            files = discover_spec_files(request.podspec, cwd=self._cwd)
            validate_spec_files(
                files,
                factory=self._validator_factory,
                source_urls=self._source_urls(),
                options=ValidationOptions(
                    allow_warnings=request.allow_warnings,
                    use_frameworks=request.use_frameworks,
                    ignore_public_only_results=request.private,
                ),
                console=self._console,
                logger=self._logger,
            )
            self._check_clean(repo, source)
            pulled = self._update(repo)
            committed, unchanged = self._add_specs(repo, source, files, message)
            pushed = None if request.local_only else self._push(repo)
        finally:
            repo.close()

        return PublishResult(
            source=source,
            committed=committed,
            unchanged=unchanged,
            pulled=pulled,
            pushed=pushed,
        )

    # =========================================================================
    # Guards
    # =========================================================================

    def _resolve_source(self) -> Source:
        source = self._sources.lookup(self._request.repo)
        if source is None or not source.repo_dir.is_dir():
            msg = (
                f"Unable to find the `{self._request.repo}` repo. If it has not "
                f"yet been cloned, clone it into {self._sources.repos_dir}."
            )
            raise SourceNotFoundError(msg, repo=self._request.repo)
        self._logger.debug("source_resolved", repo=source.name, url=source.url)
        return source

    def _commit_message(self) -> str | None:
        request = self._request
        if not request.wants_editor or request.editor is None:
            return request.commit_message
        message = self._editor_prompt(request.editor)
        self._logger.debug("commit_message_prompted", empty=message is None)
        return message

    def _check_protected(self, repo: SpecRepositoryProtocol) -> None:
        if repo.is_protected(self._protected_urls):
            self._logger.warning("protected_repo_refused", remotes=repo.remote_urls)
            raise ProtectedSourceError(PROTECTED_SOURCE_MESSAGE)

    def _check_clean(self, repo: SpecRepositoryProtocol, source: Source) -> None:
        status = repo.get_status()
        if not status.is_clean:
            self._logger.warning(
                "repo_not_clean",
                repo=source.name,
                changed=sorted(str(path) for path in status.changed),
            )
            msg = f"The repo `{self._request.repo}` at {source.repo_dir} is not clean"
            raise RepositoryDirtyError(msg, root=repo.root)

    def _source_urls(self) -> list[str]:
        """Resolve ``--sources`` entries to URLs; names map to their origin."""
        if not self._request.source_urls:
            return self._sources.all_urls()
        urls: list[str] = []
        for value in self._request.source_urls:
            source = self._sources.lookup(value)
            urls.append(source.url if source is not None and source.url else value)
        return urls

    # =========================================================================
    # Repository Steps
    # =========================================================================

    def _update(self, repo: SpecRepositoryProtocol) -> SyncResult:
        self._console.print(
            f"[yellow]Updating the `{escape(self._request.repo)}' repo[/yellow]\n"
        )
        result = repo.pull()
        self._print_output(result)
        if result.success:
            self._logger.info("repo_pulled", repo=self._request.repo)
        else:
            self._logger.warning(
                "repo_pull_failed", repo=self._request.repo, output=result.output
            )
        return result

    def _add_specs(
        self,
        repo: SpecRepositoryProtocol,
        source: Source,
        files: list[Path],
        explicit: str | None,
    ) -> tuple[dict[str, str], tuple[str, ...]]:
        self._console.print(
            f"\n[yellow]Adding the {pluralize('spec', len(files))} to the "
            f"`{escape(self._request.repo)}' repo[/yellow]\n"
        )

        committed: dict[str, str] = {}
        unchanged: list[str] = []
        for path in files:
            spec = Specification.from_file(path)
            pod_dir = source.pod_path(spec.name)
            target = pod_dir / spec.version
            message = resolve_commit_message(spec, target, explicit)

            target.mkdir(parents=True, exist_ok=True)
            written = self._write_spec(spec, path, target)
            self._logger.debug("spec_written", spec=str(spec), path=str(written))

            relative = pod_dir.relative_to(source.repo_dir)
            result = repo.commit_if_changed(relative, message)
            if result.no_changes or result.sha is None:
                self._console.print(f" - [No change] {spec}", markup=False)
                self._logger.info("spec_unchanged", spec=str(spec))
                unchanged.append(str(spec))
                continue

            self._console.print(f" - {message}", markup=False)
            self._logger.info(
                "spec_committed", spec=str(spec), sha=result.sha, message=message
            )
            committed[str(spec)] = result.sha

        return committed, tuple(unchanged)

    def _write_spec(self, spec: Specification, path: Path, target: Path) -> Path:
        if self._request.use_json:
            destination = target / f"{spec.name}{JSON_PODSPEC_EXTENSION}"
            _ = destination.write_text(spec.to_pretty_json(), encoding="utf-8")
            return destination
        destination = target / f"{spec.name}{spec.extension}"
        _ = shutil.copyfile(path, destination)
        return destination

    def _push(self, repo: SpecRepositoryProtocol) -> SyncResult:
        self._console.print(
            f"\n[yellow]Pushing the `{escape(self._request.repo)}' repo[/yellow]\n"
        )
        result = repo.push()
        self._print_output(result)
        if result.success:
            self._logger.info("repo_pushed", repo=self._request.repo)
        else:
            self._logger.warning(
                "repo_push_failed", repo=self._request.repo, output=result.output
            )
        return result

    def _print_output(self, result: SyncResult) -> None:
        if result.output.strip():
            self._console.print(result.output.rstrip(), markup=False, highlight=False)
