"""Fake spec repo for testing.

FakeSpecRepository implements SpecRepositoryProtocol without git. It tracks
a snapshot of committed file contents under ``root`` and derives changes by
comparing the files on disk against it, so code that writes real files and
then commits behaves as it would against a git working tree.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from types import TracebackType
from typing import Self

from podrepo.repository._models import CommitResult, SpecRepoStatus, SyncResult
from podrepo.repository._remotes import is_protected_remote


@dataclass(frozen=True, slots=True)
class FakeCommit:
    """A commit recorded by FakeSpecRepository."""

    sha: str
    message: str
    files: frozenset[Path]


@dataclass(slots=True)
class FakeSpecRepository:
    """In-memory spec repo over a real directory.

    The fake maintains state that tests can inspect or manipulate:
    - ``committed`` maps absolute paths to their committed contents
    - ``staged``/``modified``/``untracked`` add status entries on top of the
      on-disk comparison (e.g. to simulate a dirty working tree)
    - ``commits``, ``pull_calls`` and ``push_calls`` record activity

    Example:
        >>> repo = FakeSpecRepository(root=tmp_path)
        >>> (tmp_path / "Foo").mkdir()
        >>> (tmp_path / "Foo" / "Foo.podspec").write_text("...")
        >>> repo.commit_if_changed(Path("Foo"), "[Add] Foo (1.0)").no_changes
        False
    """

    root: Path = field(default_factory=lambda: Path("/fake/spec-repo"))
    remote_urls: tuple[str, ...] = ("https://example.com/specs.git",)
    committed: dict[Path, bytes] = field(default_factory=dict)
    staged: set[Path] = field(default_factory=set)
    modified: set[Path] = field(default_factory=set)
    untracked: set[Path] = field(default_factory=set)
    commits: list[FakeCommit] = field(default_factory=list)
    pull_result: SyncResult = field(default_factory=lambda: SyncResult(True, ""))
    push_result: SyncResult = field(default_factory=lambda: SyncResult(True, ""))
    pull_calls: int = 0
    push_calls: int = 0

    # =========================================================================
    # Context Manager Protocol
    # =========================================================================

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the repository (no-op for fake)."""

    # =========================================================================
    # Test Helpers
    # =========================================================================

    def snapshot(self) -> None:
        """Record every file currently under root as committed."""
        self.committed = {
            path: path.read_bytes() for path in self._working_files()
        }

    def _working_files(self) -> list[Path]:
        if not self.root.is_dir():
            return []
        return [
            path
            for path in self.root.rglob("*")
            if path.is_file() and ".git" not in path.relative_to(self.root).parts
        ]

    def _disk_changes(self) -> tuple[set[Path], set[Path]]:
        """Return (modified, untracked) derived from the disk snapshot."""
        modified: set[Path] = set()
        untracked: set[Path] = set()
        on_disk = self._working_files()
        for path in on_disk:
            if path not in self.committed:
                untracked.add(path)
            elif path.read_bytes() != self.committed[path]:
                modified.add(path)
        modified.update(path for path in self.committed if path not in on_disk)
        return modified, untracked

    # =========================================================================
    # SpecRepositoryProtocol Methods
    # =========================================================================

    def get_status(self) -> SpecRepoStatus:
        modified, untracked = self._disk_changes()
        return SpecRepoStatus(
            staged=frozenset(self.staged),
            modified=frozenset(modified | self.modified),
            untracked=frozenset(untracked | self.untracked),
        )

    def is_clean(self) -> bool:
        return self.get_status().is_clean

    def changed_paths(self, relative_path: Path | None = None) -> frozenset[Path]:
        changed = self.get_status().changed
        if relative_path is None:
            return changed
        scope = self.root / relative_path
        return frozenset(path for path in changed if path.is_relative_to(scope))

    def is_protected(self, protected_urls: Iterable[str]) -> bool:
        return is_protected_remote(self.remote_urls, protected_urls)

    def pull(self) -> SyncResult:
        self.pull_calls += 1
        return self.pull_result

    def commit_if_changed(self, relative_path: Path, message: str) -> CommitResult:
        changed = self.changed_paths(relative_path)
        if not changed:
            return CommitResult(sha=None, files=frozenset(), no_changes=True)

        for path in changed:
            if path.exists():
                self.committed[path] = path.read_bytes()
            else:
                _ = self.committed.pop(path, None)
            self.staged.discard(path)
            self.modified.discard(path)
            self.untracked.discard(path)

        sha = f"fake{len(self.commits) + 1:08d}"
        self.commits.append(FakeCommit(sha=sha, message=message, files=changed))
        return CommitResult(sha=sha, files=changed, no_changes=False)

    def push(self) -> SyncResult:
        self.push_calls += 1
        return self.push_result
