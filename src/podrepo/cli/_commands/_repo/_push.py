# pyright: reportUnusedCallResult=false, reportUnusedFunction=false
# ruff: noqa: D415, FBT002, TC003
"""Repo push command."""

import os
from pathlib import Path
from typing import Annotated

from cyclopts import Parameter

from podrepo.cli._commands._context import CLIContext
from podrepo.cli._commands._shared import (
    ExitCode,
    exit_code_for_exception,
    exit_with_error,
)
from podrepo.exceptions import PodRepoError
from podrepo.publish import PublishRequest, SpecPublisher
from podrepo.utils import create_null_logger

from ._app import app
from ._helpers import get_sources_manager, get_validator_factory, split_sources


@app.command(name="push")
def _push(
    repo: str,
    podspec: Path | None = None,
    /,
    *,
    allow_warnings: Annotated[
        bool,
        Parameter(
            name="--allow-warnings",
            help="Allows pushing even if there are warnings",
        ),
    ] = False,
    use_libraries: Annotated[
        bool,
        Parameter(
            name="--use-libraries",
            help="Linter uses static libraries to install the spec",
        ),
    ] = False,
    sources: Annotated[
        str | None,
        Parameter(
            name="--sources",
            help="Comma-delimited spec repos (names or URLs) dependent pods are "
            "resolved from. Defaults to all available repos.",
        ),
    ] = None,
    local_only: Annotated[
        bool,
        Parameter(
            name="--local-only",
            help="Does not perform the step of pushing REPO to its remote",
        ),
    ] = False,
    private: Annotated[
        bool,
        Parameter(
            name="--private",
            negative="--no-private",
            help="Skip lint checks that apply only to public repos",
        ),
    ] = True,
    commit_message: Annotated[
        str | None,
        Parameter(
            name="--commit-message",
            help="Custom commit message. Pass an empty value "
            "(--commit-message=) to write it in $EDITOR.",
        ),
    ] = None,
    use_json: Annotated[
        bool,
        Parameter(name="--use-json", help="Push JSON spec to repo"),
    ] = False,
) -> None:
    """Push new specifications to a spec repo

    Validates NAME.podspec or every podspec in the current directory, copies
    each into <name>/<version>/ of the local clone of REPO, commits the ones
    that changed and pushes REPO to its remote.

    Args:
        repo: Name or URL of the spec repo.
        podspec: Podspec to push. Defaults to every podspec in the current
            directory.
        allow_warnings: Accept specs that only have lint warnings.
        use_libraries: Lint with static libraries instead of frameworks.
        sources: Spec repos dependencies are resolved against.
        local_only: Commit without pushing.
        private: Ignore lint results that only apply to public repos.
        commit_message: Commit message for every spec; empty opens the editor.
        use_json: Write specs as JSON.
    """
    ctx = CLIContext.get_current()
    logger = ctx.logger or create_null_logger()
    manager = get_sources_manager(ctx.config)

    request = PublishRequest(
        repo=repo,
        podspec=podspec,
        allow_warnings=allow_warnings,
        use_libraries=use_libraries,
        source_urls=split_sources(sources),
        local_only=local_only,
        private=private,
        commit_message=commit_message,
        use_json=use_json,
        editor=os.environ.get("EDITOR") or None,
    )
    publisher = SpecPublisher(
        request,
        sources=manager,
        validator_factory=get_validator_factory(ctx.config, manager),
        console=ctx.console,
        cwd=Path.cwd(),
        protected_urls=ctx.config.sources.protected_urls,
        logger=logger,
    )

    logger.info("repo_push_started", repo=repo, podspec=str(podspec or ""))
    try:
        result = publisher.run()
    except PodRepoError as e:
        logger.error("repo_push_failed", repo=repo, error=str(e))
        exit_with_error(str(e), exit_code_for_exception(e), console=ctx.error_console)
    except OSError as e:
        logger.error("repo_push_failed", repo=repo, error=str(e))
        exit_with_error(str(e), ExitCode.REPOSITORY_ERROR, console=ctx.error_console)

    logger.info(
        "repo_push_finished",
        repo=repo,
        committed=len(result.committed),
        unchanged=len(result.unchanged),
        pushed=result.pushed is not None and result.pushed.success,
    )
