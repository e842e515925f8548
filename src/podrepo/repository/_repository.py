"""Git-backed spec repo.

This module provides GitSpecRepository, the implementation of
SpecRepositoryProtocol over a local working tree. Status, staging, commits and
remote configuration go through dulwich. Pull and push run the git command
line so that the user's credential helpers, SSH setup and merge behavior
apply exactly as they would in a shell.
"""

from collections.abc import Iterable
from pathlib import Path
from types import TracebackType
from typing import Final, Self

from dulwich import porcelain
from dulwich.repo import Repo

from podrepo.exceptions import RepositoryStateError
from podrepo.repository._git import (
    decode_bytes,
    get_current_branch,
    get_remote_urls,
    get_status_paths,
    get_worktree_dir,
    open_repo,
)
from podrepo.repository._models import CommitResult, SpecRepoStatus, SyncResult
from podrepo.repository._remotes import is_protected_remote
from podrepo.utils import CommandConfig, CommandResult, run_command

_REMOTE_NAME: Final = "origin"

# Identity used when neither the repository nor the user config sets one.
_DEFAULT_NAME: Final = "podrepo"
_DEFAULT_EMAIL: Final = "podrepo@localhost"


def _output(result: CommandResult) -> str:
    if result.error:
        return result.error
    parts = (result.stdout, result.stderr)
    return "\n".join(part.rstrip() for part in parts if part.strip())


class GitSpecRepository:
    """Spec repo backed by a local git working tree.

    The class implements the context manager protocol; the underlying dulwich
    Repo is closed when exiting the context.

    Attributes:
        root: The resolved path to the working tree root.
    """

    __slots__: Final = ("_remote", "_repo", "_root")
    _root: Path
    _repo: Repo
    _remote: str

    def __init__(self, root: Path, *, remote: str = _REMOTE_NAME) -> None:
        """Open the repository at ``root``.

        Args:
            root: Working tree root of the spec repo, or a directory inside it.
            remote: Name of the remote used for pull and push.

        Raises:
            RepositoryNotFoundError: If ``root`` is not inside a git working tree.
        """
        self._repo = open_repo(root)
        self._root = get_worktree_dir(self._repo)
        self._remote = remote

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
        """Release file handles held by the dulwich Repo."""
        self._repo.close()

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def root(self) -> Path:
        """Get the resolved root path of the working tree."""
        return self._root

    @property
    def remote_urls(self) -> tuple[str, ...]:
        """Get the fetch and push URLs of every configured remote."""
        return get_remote_urls(self._repo)

    # =========================================================================
    # Status Methods
    # =========================================================================

    def get_status(self) -> SpecRepoStatus:
        """Get the current status of the working tree.

        Returns:
            Status with absolute paths of staged, modified and untracked files.

        Raises:
            RepositoryStateError: If the index or working tree cannot be read.
        """
        try:
            staged, modified, untracked = get_status_paths(self._repo)
        except OSError as e:
            msg = f"Unable to read the status of {self._root}: {e}"
            raise RepositoryStateError(msg) from e

        return SpecRepoStatus(
            staged=self._to_absolute_paths(staged),
            modified=self._to_absolute_paths(modified),
            untracked=self._to_absolute_paths(untracked),
        )

    def is_clean(self) -> bool:
        """Check that nothing is staged, modified or untracked."""
        return self.get_status().is_clean

    def changed_paths(self, relative_path: Path | None = None) -> frozenset[Path]:
        """Get changed files, optionally restricted to a subtree of the root."""
        changed = self.get_status().changed
        if relative_path is None:
            return changed
        scope = self._root / relative_path
        return frozenset(path for path in changed if path.is_relative_to(scope))

    def is_protected(self, protected_urls: Iterable[str]) -> bool:
        """Check whether any configured remote is a protected URL."""
        return is_protected_remote(self.remote_urls, protected_urls)

    # =========================================================================
    # Mutating Methods
    # =========================================================================

    def commit_if_changed(self, relative_path: Path, message: str) -> CommitResult:
        """Stage the changes under ``relative_path`` and commit them.

        The commit records the whole index, so callers check that the tree was
        clean before writing. Pre-commit hooks are skipped; podspecs are linted
        before they get here.

        Args:
            relative_path: Subtree relative to the root.
            message: Commit message.

        Returns:
            CommitResult with the new commit SHA, or ``no_changes`` set when
            nothing under the subtree changed.

        Raises:
            RepositoryStateError: If staging or committing fails.
        """
        changed = self.changed_paths(relative_path)
        if not changed:
            return CommitResult(sha=None, files=frozenset(), no_changes=True)

        present = sorted(str(path) for path in changed if path.exists())
        removed = self._indexed(path for path in changed if not path.exists())
        author = self._format_author_line()
        try:
            if present:
                _ = porcelain.add(self._repo, paths=present)
            if removed:
                porcelain.remove(self._repo, paths=removed, cached=True)
            sha: bytes = porcelain.commit(
                self._repo,
                message=message.encode(),
                author=author,
                committer=author,
                no_verify=True,
            )
        except (OSError, porcelain.Error) as e:
            msg = f"Unable to commit {relative_path.as_posix()} in {self._root}: {e}"
            raise RepositoryStateError(msg) from e

        return CommitResult(sha=decode_bytes(sha), files=changed, no_changes=False)

    def pull(self) -> SyncResult:
        """Pull the active branch from the remote.

        Failures are captured in the result text instead of raised.
        """
        return self._sync("pull", "--no-edit", "--no-rebase")

    def push(self) -> SyncResult:
        """Push the active branch to the remote.

        Failures are captured in the result text instead of raised.
        """
        return self._sync("push")

    # =========================================================================
    # Helpers
    # =========================================================================

    def _sync(self, command: str, *options: str) -> SyncResult:
        branch = get_current_branch(self._repo)
        if branch is None:
            return SyncResult(success=False, output="HEAD is not on a branch")
        args = ["git", "-C", str(self._root), command, *options, self._remote, branch]
        result = run_command(CommandConfig(args=args))
        if result.command_not_found:
            return SyncResult(success=False, output="git is not installed")
        return SyncResult(success=result.ok, output=_output(result))

    def _indexed(self, paths: Iterable[Path]) -> list[str]:
        index = self._repo.open_index()
        return sorted(
            str(path)
            for path in paths
            if path.relative_to(self._root).as_posix().encode() in index
        )

    def _format_author_line(self) -> bytes:
        """Build the author identity from git config.

        Falls back to "podrepo <podrepo@localhost>" for unset values.
        """
        config = self._repo.get_config_stack()
        values: dict[bytes, str] = {}
        for key in (b"name", b"email"):
            try:
                values[key] = decode_bytes(config.get((b"user",), key)).strip()
            except KeyError:
                values[key] = ""
        name = values[b"name"] or _DEFAULT_NAME
        email = values[b"email"] or _DEFAULT_EMAIL
        return f"{name} <{email}>".encode()

    def _to_absolute_paths(self, paths: Iterable[str]) -> frozenset[Path]:
        return frozenset(self._root / path for path in paths)
