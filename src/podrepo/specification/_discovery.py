"""Podspec file discovery."""

from pathlib import Path

from podrepo.exceptions import SpecFileNotFoundError
from podrepo.specification._models import JSON_PODSPEC_EXTENSION, PODSPEC_EXTENSION


def discover_spec_files(
    explicit_path: Path | None = None, *, cwd: Path
) -> list[Path]:
    """Find the podspec files to publish.

    Files are only located here, never parsed.

    Args:
        explicit_path: A podspec named on the command line, relative to cwd.
        cwd: Directory searched for ``*.podspec`` and ``*.podspec.json``.

    Returns:
        The explicit path, or every matching file in cwd sorted by name.

    Raises:
        SpecFileNotFoundError: If the explicit path does not exist, or no
            podspec is found in cwd.
    """
    if explicit_path is not None:
        path = explicit_path if explicit_path.is_absolute() else cwd / explicit_path
        if not path.exists():
            msg = f"Couldn't find {explicit_path}"
            raise SpecFileNotFoundError(msg)
        return [path]

    files = sorted(
        {
            *cwd.glob(f"*{PODSPEC_EXTENSION}"),
            *cwd.glob(f"*{JSON_PODSPEC_EXTENSION}"),
        }
    )
    if not files:
        msg = "No podspec files found in current directory"
        raise SpecFileNotFoundError(msg)
    return files
