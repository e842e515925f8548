"""Spec repo protocol for type-safe dependency injection.

GitSpecRepository and FakeSpecRepository both satisfy this runtime-checkable
Protocol, so the publishing pipeline can run against either.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Protocol, runtime_checkable

from podrepo.repository._models import CommitResult, SpecRepoStatus, SyncResult


@runtime_checkable
class SpecRepositoryProtocol(Protocol):
    """Protocol for the spec repo operations used by the publisher.

    Example:
        >>> def publish(repo: SpecRepositoryProtocol, name: str) -> None:
        ...     result = repo.commit_if_changed(Path(name), f"[Add] {name}")
        ...     if not result.no_changes:
        ...         repo.push()
    """

    @property
    def root(self) -> Path:
        """Absolute path to the working tree root."""
        ...

    @property
    def remote_urls(self) -> tuple[str, ...]:
        """URLs of every configured remote."""
        ...

    def close(self) -> None:
        """Release resources held by the repository."""
        ...

    def get_status(self) -> SpecRepoStatus:
        """Return the current staged, modified and untracked files."""
        ...

    def is_clean(self) -> bool:
        """True iff there are no staged, unstaged or untracked changes."""
        ...

    def changed_paths(self, relative_path: Path | None = None) -> frozenset[Path]:
        """Return changed files, optionally restricted to a subtree.

        Args:
            relative_path: Subtree relative to root. None means everything.

        Returns:
            Absolute paths of changed files.
        """
        ...

    def is_protected(self, protected_urls: Iterable[str]) -> bool:
        """True iff any remote URL is one of ``protected_urls``."""
        ...

    def pull(self) -> SyncResult:
        """Update from ``origin``; failures are reported, not raised."""
        ...

    def commit_if_changed(self, relative_path: Path, message: str) -> CommitResult:
        """Stage the changed files under ``relative_path`` and commit them.

        No commit is created when nothing under ``relative_path`` changed.

        Args:
            relative_path: Subtree relative to root.
            message: Commit message.

        Returns:
            CommitResult; ``no_changes`` is True when nothing was committed.
        """
        ...

    def push(self) -> SyncResult:
        """Push the current branch to ``origin``; failures are reported, not raised."""
        ...
