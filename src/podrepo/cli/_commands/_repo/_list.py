# pyright: reportUnusedCallResult=false, reportUnusedFunction=false
# ruff: noqa: D415, A002
"""Repo list command."""

from typing import Annotated

import orjson
from cyclopts import Parameter
from rich.table import Table

from podrepo.cli._commands._context import CLIContext, OutputFormat
from podrepo.cli._commands._shared import ExitCode, exit_with_error

from ._app import app
from ._helpers import get_sources_manager


@app.command(name="list")
def _list(
    *,
    format: Annotated[
        OutputFormat,
        Parameter(name=["--format", "-f"], help="Output format (table, json)"),
    ] = OutputFormat.TABLE,
) -> None:
    """List the spec repos in the repos directory"""
    ctx = CLIContext.get_current()
    manager = get_sources_manager(ctx.config)
    sources = manager.all()

    match format:
        case OutputFormat.JSON:
            data = [
                {"name": s.name, "url": s.url, "path": str(s.repo_dir)}
                for s in sources
            ]
            output = orjson.dumps(data, option=orjson.OPT_INDENT_2).decode("utf-8")
            ctx.console.print(output, markup=False, highlight=False)
        case OutputFormat.TABLE:
            if not sources:
                ctx.console.print(f"[dim]No spec repos in {manager.repos_dir}[/dim]")
                return
            table = Table("Name", "URL", "Path")
            for source in sources:
                table.add_row(source.name, source.url or "-", str(source.repo_dir))
            ctx.console.print(table)
        case _:
            exit_with_error(
                f"Unsupported format: {format}",
                ExitCode.INPUT_ERROR,
                console=ctx.error_console,
            )
