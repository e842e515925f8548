from collections.abc import Callable
from pathlib import Path

import pytest
from rich.console import Console

from podrepo.cli import create_app


@pytest.fixture
def config_file(tmp_path: Path, repos_dir: Path) -> Path:
    """Write a config file pointing at the test repos directory."""
    path = tmp_path / "config.toml"
    log_file = tmp_path / "logs" / "cli.log"
    _ = path.write_text(
        f"""[sources]
repos_dir = "{repos_dir.as_posix()}"

[logging]
level = "debug"
file = "{log_file.as_posix()}"
"""
    )
    return path


@pytest.fixture
def podrepo_cli(console: Console) -> Callable[..., None]:
    """Create CLI app for testing.

    Returns a callable that runs the CLI and suppresses SystemExit.
    Use podrepo_cli_with_exit_code when you need to check the exit code.
    """
    app = create_app(console=console, error_console=console)

    def _run(*args: str) -> None:
        try:
            app.meta(list(args))
        except SystemExit:
            pass

    return _run


@pytest.fixture
def podrepo_cli_with_exit_code(console: Console) -> Callable[..., int]:
    """Create CLI app for testing that returns the exit code."""
    app = create_app(console=console, error_console=console)

    def _run(*args: str) -> int:
        try:
            app.meta(list(args))
        except SystemExit as e:
            if e.code is None:
                return 0
            return e.code if isinstance(e.code, int) else 1
        else:
            return 0

    return _run
