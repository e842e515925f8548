"""Shared test fixtures for podrepo tests."""

import subprocess
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import orjson
import pytest
from rich.console import Console

from podrepo.cli import CLIContext


@dataclass(frozen=True, slots=True)
class SpecRepo:
    """Paths for a spec repo clone and its bare remote."""

    repos_dir: Path
    root: Path
    origin: Path

    @property
    def name(self) -> str:
        return self.root.name


def run_git(cwd: Path, *args: str) -> str:
    """Run a git command and return stdout."""
    result = subprocess.run(  # noqa: S603 - Safe: running git in tests
        ["git", *args],  # noqa: S607
        cwd=str(cwd),
        capture_output=True,
        text=True,
        check=False,
    )
    if result.returncode != 0:
        msg = f"git {' '.join(args)} failed: {result.stderr}"
        raise RuntimeError(msg)
    return result.stdout


def init_git_repo(root: Path, *, origin: str | None = None) -> Path:
    """Create a git repository with one commit at ``root``."""
    root.mkdir(parents=True, exist_ok=True)
    _ = run_git(root, "init", "-b", "master")
    _ = run_git(root, "config", "user.name", "Test User")
    _ = run_git(root, "config", "user.email", "test@example.com")
    _ = run_git(root, "config", "commit.gpgsign", "false")
    (root / "README.md").write_text("# Specs\n")
    _ = run_git(root, "add", "README.md")
    _ = run_git(root, "commit", "-m", "Initial commit")
    if origin is not None:
        _ = run_git(root, "remote", "add", "origin", origin)
    return root


def commit_log(root: Path, ref: str = "HEAD") -> list[str]:
    """Return commit subjects, newest first."""
    return run_git(root, "log", "--format=%s", ref).splitlines()


# ---------------------------------------------------------------------------
# Podspec helpers
# ---------------------------------------------------------------------------


def podspec_attributes(name: str, version: str, **overrides: Any) -> dict[str, Any]:
    """Attributes of a podspec that passes the built-in linter."""
    attributes: dict[str, Any] = {
        "name": name,
        "version": version,
        "summary": f"A short summary of {name}.",
        "description": f"{name} does something useful for testing purposes.",
        "homepage": f"https://example.com/{name}",
        "license": "MIT",
        "authors": {"Test User": "test@example.com"},
        "source": {"git": f"https://example.com/{name}.git", "tag": version},
    }
    attributes.update(overrides)
    return {key: value for key, value in attributes.items() if value is not None}


def write_json_podspec(
    directory: Path, name: str = "Foo", version: str = "1.0.0", **overrides: Any
) -> Path:
    """Write ``<name>.podspec.json`` into ``directory``."""
    path = directory / f"{name}.podspec.json"
    data = podspec_attributes(name, version, **overrides)
    path.write_bytes(orjson.dumps(data, option=orjson.OPT_INDENT_2))
    return path


def write_ruby_podspec(
    directory: Path, name: str = "Foo", version: str = "1.0.0", body: str = ""
) -> Path:
    """Write ``<name>.podspec`` into ``directory``."""
    path = directory / f"{name}.podspec"
    path.write_text(f"""Pod::Spec.new do |s|
  s.name         = '{name}'
  s.version      = '{version}'
  s.summary      = 'A short summary of {name}.'
  s.description  = '{name} does something useful for testing purposes.'
  s.homepage     = 'https://example.com/{name}'
  s.license      = {{ :type => 'MIT' }}
  s.author       = {{ 'Test User' => 'test@example.com' }}
  s.source = {{ :git => 'https://example.com/{name}.git', :tag => s.version.to_s }}
{body}end
""")
    return path


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def console() -> Console:
    return Console(
        width=200,
        force_terminal=True,
        highlight=False,
        color_system=None,
        legacy_windows=False,
        record=True,
    )


@pytest.fixture
def work_dir(tmp_path: Path) -> Path:
    """Directory holding the podspecs to publish."""
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture
def repos_dir(tmp_path: Path) -> Path:
    path = tmp_path / "repos"
    path.mkdir()
    return path


@pytest.fixture
def spec_repo(tmp_path: Path, repos_dir: Path) -> SpecRepo:
    """Create a spec repo clone with a bare remote.

    Structure:
        tmp_path/
            origin.git/          # bare remote
            repos/
                private/         # clone with origin -> origin.git
                    README.md
    """
    root = init_git_repo(repos_dir / "private")
    origin = tmp_path / "origin.git"
    _ = run_git(tmp_path, "clone", "--bare", str(root), str(origin))
    _ = run_git(root, "remote", "add", "origin", str(origin))
    _ = run_git(root, "fetch", "origin")
    return SpecRepo(repos_dir=repos_dir, root=root, origin=origin)


@pytest.fixture
def git() -> Callable[..., str]:
    """Return run_git for tests that inspect repositories directly."""
    return run_git


@pytest.fixture
def make_git_repo() -> Callable[..., Path]:
    return init_git_repo


@pytest.fixture
def git_log() -> Callable[..., list[str]]:
    return commit_log


@pytest.fixture
def make_json_podspec() -> Callable[..., Path]:
    """Return a factory writing a lint-clean ``<name>.podspec.json``."""
    return write_json_podspec


@pytest.fixture
def make_ruby_podspec() -> Callable[..., Path]:
    """Return a factory writing a lint-clean ``<name>.podspec``."""
    return write_ruby_podspec


@pytest.fixture
def spec_attributes() -> Callable[..., dict[str, Any]]:
    return podspec_attributes


@pytest.fixture(autouse=True)
def _reset_cli_context() -> None:
    CLIContext.reset()
