"""Helpers over dulwich repositories.

Paths and config values come back from dulwich as bytes or str depending on
the call; everything here hands plain strings to callers.
"""

# ruff: noqa: TC002  # Repo needed at runtime
from pathlib import Path

from dulwich import porcelain
from dulwich.errors import NotGitRepository
from dulwich.repo import Repo

from podrepo.exceptions import RepositoryNotFoundError


def decode_bytes(value: bytes | str) -> str:
    """Decode bytes to str if needed."""
    if isinstance(value, bytes):
        return value.decode()
    return value


def open_repo(path: Path) -> Repo:
    """Open the working tree that contains ``path``.

    Raises:
        RepositoryNotFoundError: If ``path`` is not inside a non-bare repository.
    """
    msg = f"{path} is not a git repository"
    if not path.is_dir():
        raise RepositoryNotFoundError(msg)
    try:
        repo = Repo.discover(str(path.resolve()))
    except NotGitRepository as e:
        raise RepositoryNotFoundError(msg) from e
    if repo.bare:
        repo.close()
        raise RepositoryNotFoundError(msg)
    return repo


def get_worktree_dir(repo: Repo) -> Path:
    """Get the resolved working tree directory of ``repo``."""
    path = Path(decode_bytes(repo.path))
    if path.name == ".git":
        path = path.parent
    return path.resolve()


def get_remote_urls(repo: Repo) -> tuple[str, ...]:
    """Get every ``remote.*.url`` and ``remote.*.pushurl`` value.

    Remotes are visited in config order; each URL appears once.
    """
    config = repo.get_config()
    urls: list[str] = []
    for section in config.sections():
        if len(section) != 2 or section[0] != b"remote":  # noqa: PLR2004
            continue
        for key in (b"url", b"pushurl"):
            try:
                value = decode_bytes(config.get(section, key)).strip()
            except KeyError:
                continue
            if value and value not in urls:
                urls.append(value)
    return tuple(urls)


def get_current_branch(repo: Repo) -> str | None:
    """Get the checked out branch name, or None when HEAD is detached."""
    head_ref = repo.refs.get_symrefs().get(b"HEAD")
    if head_ref is None:
        return None
    head_ref_str = decode_bytes(head_ref)
    if head_ref_str.startswith("refs/heads/"):
        return head_ref_str[11:]
    return None


def get_status_paths(repo: Repo) -> tuple[set[str], set[str], set[str]]:
    """Collect repository-relative paths from ``porcelain.status``.

    Returns:
        Tuple of (staged, modified, untracked) paths.
    """
    raw = porcelain.status(repo, untracked_files="all")

    staged: set[str] = set()
    staged_dict = raw.staged  # pyright: ignore[reportUnknownMemberType,reportUnknownVariableType]
    for change_type in ("add", "delete", "modify"):
        files: list[bytes] = staged_dict.get(change_type, [])  # pyright: ignore[reportUnknownMemberType,reportUnknownVariableType]
        staged.update(decode_bytes(f) for f in files)  # pyright: ignore[reportUnknownArgumentType,reportUnknownVariableType]

    modified = {decode_bytes(f) for f in raw.unstaged}  # pyright: ignore[reportUnknownMemberType,reportUnknownArgumentType,reportUnknownVariableType]
    untracked = {decode_bytes(f) for f in raw.untracked}  # pyright: ignore[reportUnknownMemberType,reportUnknownArgumentType,reportUnknownVariableType]
    return staged, modified, untracked


def read_remote_url(root: Path, remote: str = "origin") -> str:
    """Return the URL of ``remote``, empty when it is not configured."""
    try:
        repo = Repo(str(root))
    except NotGitRepository:
        return ""
    try:
        value = repo.get_config().get((b"remote", remote.encode()), b"url")
    except KeyError:
        return ""
    finally:
        repo.close()
    return decode_bytes(value).strip()
