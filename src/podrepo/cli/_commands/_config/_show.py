# pyright: reportUnusedCallResult=false, reportUnusedFunction=false
# pyright: reportAny=false
# ruff: noqa: D415, A002
"""Config show command."""

from typing import Annotated

import orjson
import tomli_w
from cyclopts import Parameter

from podrepo.cli._commands._context import CLIContext, OutputFormat
from podrepo.cli._commands._shared import ExitCode, exit_with_error

from ._app import app


@app.command(name="show")
def _show(
    *,
    format: Annotated[
        OutputFormat,
        Parameter(name=["--format", "-f"], help="Output format (toml, json)"),
    ] = OutputFormat.TOML,
    section: Annotated[
        str | None,
        Parameter(
            name=["--section"],
            help="Show specific section only (e.g., logging, sources)",
        ),
    ] = None,
) -> None:
    """Display merged configuration

    Args:
        format: Output format (toml, json).
        section: Specific section to show.
    """
    ctx = CLIContext.get_current()
    data = ctx.config.to_dict()

    if section is not None:
        if not isinstance(data.get(section), dict):
            exit_with_error(
                f"Section '{section}' not found",
                ExitCode.INPUT_ERROR,
                console=ctx.error_console,
            )
        data = {section: data[section]}

    match format:
        case OutputFormat.JSON:
            output = orjson.dumps(data, option=orjson.OPT_INDENT_2).decode("utf-8")
        case OutputFormat.TOML:
            output = tomli_w.dumps(data)
        case _:
            exit_with_error(
                f"Unsupported format: {format}",
                ExitCode.INPUT_ERROR,
                console=ctx.error_console,
            )

    if ctx.config_error:
        ctx.error_console.print(f"[yellow]Warning:[/yellow] {ctx.config_error}")
    ctx.console.print(output.rstrip(), markup=False, highlight=False)
