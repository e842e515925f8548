"""Unit tests for external command execution."""

import subprocess
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from podrepo.utils import CommandConfig, CommandResult, run_command, truncate_output


class TestCommandConfig:
    def test_default_values(self) -> None:
        config = CommandConfig(args=["true"])
        assert config.cwd is None
        assert config.env == {}
        assert config.timeout_ms == 600_000

    def test_frozen(self) -> None:
        config = CommandConfig(args=["true"])
        with pytest.raises(AttributeError):
            config.timeout_ms = 1  # pyright: ignore[reportAttributeAccessIssue]


class TestCommandResult:
    def test_ok_requires_zero_exit(self) -> None:
        assert CommandResult(success=True, exit_code=0).ok is True
        assert CommandResult(success=True, exit_code=1).ok is False

    def test_failed_execution_is_not_ok(self) -> None:
        assert CommandResult(success=False, error="boom").ok is False


class TestTruncateOutput:
    def test_empty_string(self) -> None:
        assert truncate_output("") == ""

    def test_short_string_unchanged(self) -> None:
        assert truncate_output("hello", max_bytes=10) == "hello"

    def test_truncates_long_string(self) -> None:
        result = truncate_output("a" * 20, max_bytes=10)
        assert result == "a" * 10 + "\n... [output truncated]"

    def test_preserves_utf8(self) -> None:
        # each character is three bytes, the cut lands mid-character
        result = truncate_output("日本語", max_bytes=4)
        assert result.startswith("日")
        assert "�" not in result


class TestRunCommand:
    def test_captures_stdout(self) -> None:
        result = run_command(CommandConfig(args=["echo", "hello"]))
        assert result.ok is True
        assert result.stdout.strip() == "hello"

    def test_captures_exit_code(self) -> None:
        result = run_command(CommandConfig(args=["false"]))
        assert result.success is True
        assert result.exit_code != 0
        assert result.ok is False

    def test_returns_error_without_args(self) -> None:
        result = run_command(CommandConfig(args=[]))
        assert result.success is False
        assert result.error == "No command specified"

    def test_passes_environment_variables(self) -> None:
        config = CommandConfig(
            args=["sh", "-c", "echo $PODREPO_TEST_VAR"],
            env={"PODREPO_TEST_VAR": "value"},
        )
        result = run_command(config)
        assert result.stdout.strip() == "value"

    def test_uses_cwd(self, tmp_path: Path) -> None:
        result = run_command(CommandConfig(args=["pwd"], cwd=tmp_path))
        assert Path(result.stdout.strip()).resolve() == tmp_path.resolve()

    def test_handles_command_not_found(self) -> None:
        result = run_command(CommandConfig(args=["podrepo-no-such-binary-xyz"]))
        assert result.success is False
        assert result.command_not_found is True

    def test_handles_timeout(self, mocker: MockerFixture) -> None:
        _ = mocker.patch(
            "podrepo.utils._exec.subprocess.run",
            side_effect=subprocess.TimeoutExpired(cmd="sleep", timeout=0.1),
        )
        result = run_command(CommandConfig(args=["sleep", "5"], timeout_ms=100))
        assert result.timed_out is True
        assert result.error == "Command timed out after 0.1s"

    def test_handles_os_error(self, mocker: MockerFixture) -> None:
        _ = mocker.patch(
            "podrepo.utils._exec.subprocess.run",
            side_effect=PermissionError("denied"),
        )
        result = run_command(CommandConfig(args=["x"]))
        assert result.success is False
        assert result.command_not_found is False
        assert result.error == "denied"
