"""External lint command validator."""

import shlex
from collections.abc import Sequence
from pathlib import Path

from podrepo.exceptions import ValidatorExecutionError
from podrepo.utils import CommandConfig, CommandResult, run_command
from podrepo.validation._models import LintResult, ResultType


class CommandValidator:
    """Validates a podspec by running an external lint command.

    The command (e.g. ``pod spec lint``) receives the podspec path followed
    by ``--sources=``, ``--allow-warnings``, ``--use-libraries`` and
    ``--private`` according to the configured options. Exit status 0 means
    the spec validated.

    Attributes:
        path: The podspec file.
        source_urls: URLs of the spec repos passed to ``--sources``.
        command: Command line of the lint tool.
        timeout_ms: Timeout for the lint run in milliseconds.
    """

    def __init__(
        self,
        path: Path,
        source_urls: Sequence[str],
        *,
        command: str,
        timeout_ms: int = 600_000,
    ) -> None:
        self.path: Path = path
        self.source_urls: list[str] = list(source_urls)
        self.command: str = command
        self.timeout_ms: int = timeout_ms
        self.allow_warnings: bool = False
        self.use_frameworks: bool = True
        self.ignore_public_only_results: bool = False
        self._results: list[LintResult] = []
        self._validated: bool = False
        self.output: str = ""

    @property
    def results(self) -> list[LintResult]:
        return list(self._results)

    @property
    def validated(self) -> bool:
        return self._validated

    def build_args(self) -> list[str]:
        """Build the argument vector for the lint command."""
        args = [*shlex.split(self.command), str(self.path)]
        if self.source_urls:
            args.append(f"--sources={','.join(self.source_urls)}")
        if self.allow_warnings:
            args.append("--allow-warnings")
        if not self.use_frameworks:
            args.append("--use-libraries")
        if self.ignore_public_only_results:
            args.append("--private")
        return args

    def validate(self) -> None:
        """Run the lint command.

        Raises:
            ValidatorExecutionError: If the command is not configured, cannot
                be started or times out.
        """
        if not self.command.strip():
            msg = "No lint command configured"
            raise ValidatorExecutionError(msg, path=self.path)

        result = run_command(
            CommandConfig(
                args=self.build_args(),
                cwd=self.path.parent,
                timeout_ms=self.timeout_ms,
            )
        )
        self._raise_for_execution(result)

        self.output = (result.stdout + result.stderr).strip()
        self._validated = result.exit_code == 0
        self._results = []
        if not self._validated:
            detail = self.output or f"exited with status {result.exit_code}"
            self._results.append(LintResult(ResultType.ERROR, "lint", detail))

    def _raise_for_execution(self, result: CommandResult) -> None:
        if result.success:
            return
        if result.command_not_found:
            msg = f"Lint command not found: {self.command}"
        elif result.timed_out:
            msg = f"Lint command `{self.command}` timed out: {result.error}"
        else:
            msg = f"Unable to run lint command `{self.command}`: {result.error}"
        raise ValidatorExecutionError(msg, path=self.path)
