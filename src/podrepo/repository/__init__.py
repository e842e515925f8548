"""Spec repo access.

This package provides the spec repo abstraction used by the publisher.

Classes:
    SpecRepositoryProtocol: Runtime-checkable protocol for dependency injection.
    GitSpecRepository: Implementation over a dulwich working tree.
    FakeSpecRepository: In-memory implementation for tests.

Models:
    SpecRepoStatus: Status snapshot of the working tree.
    CommitResult: Result of commit_if_changed().
    SyncResult: Result of pull() and push().

Example:
    >>> from podrepo.repository import GitSpecRepository
    >>> root = Path("~/.cocoapods/repos/private").expanduser()
    >>> with GitSpecRepository(root) as repo:
    ...     if repo.is_clean():
    ...         print(repo.pull().output)
"""

from podrepo.repository._fake import FakeCommit, FakeSpecRepository
from podrepo.repository._git import read_remote_url
from podrepo.repository._models import CommitResult, SpecRepoStatus, SyncResult
from podrepo.repository._protocol import SpecRepositoryProtocol
from podrepo.repository._remotes import is_protected_remote, normalize_remote_url
from podrepo.repository._repository import GitSpecRepository

__all__ = [
    "CommitResult",
    "FakeCommit",
    "FakeSpecRepository",
    "GitSpecRepository",
    "SpecRepoStatus",
    "SpecRepositoryProtocol",
    "SyncResult",
    "is_protected_remote",
    "normalize_remote_url",
    "read_remote_url",
]
