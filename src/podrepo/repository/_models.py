"""Spec repo models.

This module defines data structures for representing spec repo state and
the outcome of repository operations.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class SpecRepoStatus:
    """File status snapshot for a spec repo.

    Attributes:
        staged: Files that are staged for commit.
        modified: Files that are modified but not staged.
        untracked: Files that are not tracked by git.
    """

    staged: frozenset[Path]
    modified: frozenset[Path]
    untracked: frozenset[Path]

    @property
    def changed(self) -> frozenset[Path]:
        """All files with uncommitted changes."""
        return self.staged | self.modified | self.untracked

    @property
    def is_clean(self) -> bool:
        """True when nothing is staged, modified or untracked."""
        return not self.changed


@dataclass(frozen=True, slots=True)
class CommitResult:
    """Result of a commit operation.

    Attributes:
        sha: Commit SHA hex string, None if no_changes.
        files: Files included in commit (absolute paths).
        no_changes: True if nothing was committed.
    """

    sha: str | None
    files: frozenset[Path]
    no_changes: bool


@dataclass(frozen=True, slots=True)
class SyncResult:
    """Result of a pull or push against the remote.

    Attributes:
        success: Whether the operation completed.
        output: Progress and error text reported by the transport.
    """

    success: bool
    output: str = ""
