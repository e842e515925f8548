"""podrepo CLI commands."""
# pyright: reportUnusedCallResult=false

from cyclopts import App

from ._config import app as config_app
from ._context import CLIContext, OutputFormat
from ._repo import app as repo_app
from ._shared import ExitCode, exit_code_for_exception, exit_with_error

__all__ = [
    "CLIContext",
    "ExitCode",
    "OutputFormat",
    "config_app",
    "exit_code_for_exception",
    "exit_with_error",
    "repo_app",
]


def register_commands(app: App) -> None:
    app.command(config_app)
    app.command(repo_app)
