"""Interactive commit message prompt."""

import shlex
import subprocess
import tempfile
from pathlib import Path

from podrepo.exceptions import InputError


def prompt_commit_message(editor: str) -> str | None:
    """Open ``editor`` on an empty file and return what was written.

    Blocks until the editor exits.

    Args:
        editor: Editor command line, e.g. ``vim`` or ``code --wait``.

    Returns:
        The stripped file contents, or None if nothing was written.

    Raises:
        InputError: If the editor cannot be started.
    """
    with tempfile.NamedTemporaryFile(
        "w", prefix="podrepo-", suffix=".txt", delete=False
    ) as handle:
        path = Path(handle.name)

    try:
        _ = subprocess.run(  # noqa: S603
            [*shlex.split(editor), str(path)], check=False
        )
        text = path.read_text(encoding="utf-8").strip()
    except OSError as e:
        msg = f"Unable to open editor `{editor}`: {e}"
        raise InputError(msg) from e
    finally:
        path.unlink(missing_ok=True)

    return text or None
