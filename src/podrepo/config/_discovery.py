"""Configuration source discovery."""

from pathlib import Path
from typing import Any

import platformdirs

from ._defaults import DEFAULT_CONFIG
from ._models._common import ConfigSource, ConfigSourceName


def get_user_config_path() -> Path:
    r"""Get platform-specific user config file path.

    - Linux: ``~/.config/podrepo/config.toml``
    - macOS: ``~/Library/Application Support/podrepo/config.toml``
    - Windows: ``%APPDATA%\podrepo\config.toml``

    The path is returned whether or not the file exists.

    Returns:
        Path to the user config file for the current platform.
    """
    return platformdirs.user_config_path("podrepo") / "config.toml"


def _file_exists(path: Path) -> bool:
    """Check if a file exists, treating permission errors as absence."""
    try:
        return path.is_file()
    except OSError:
        return False


def discover_sources(
    *,
    user_config_path: Path | None = None,
    include_env: bool = True,
    cli_overrides: dict[str, Any] | None = None,  # pyright: ignore[reportExplicitAny]
) -> list[ConfigSource]:
    """Discover configuration sources, highest precedence first.

    File and environment sources are returned unloaded (empty values);
    Config.load() reads them.

    Args:
        user_config_path: Override for the user config file location.
        include_env: Include the environment source.
        cli_overrides: CLI overrides; included only when not empty.

    Returns:
        List of ConfigSource objects in precedence order.
    """
    sources: list[ConfigSource] = []

    if cli_overrides:
        sources.append(
            ConfigSource(
                name=ConfigSourceName.CLI,
                path=None,
                exists=True,
                values=cli_overrides,
            )
        )

    if include_env:
        sources.append(
            ConfigSource(name=ConfigSourceName.ENV, path=None, exists=True, values={})
        )

    user_path = user_config_path or get_user_config_path()
    sources.append(
        ConfigSource(
            name=ConfigSourceName.USER,
            path=user_path,
            exists=_file_exists(user_path),
            values={},
        )
    )

    sources.append(
        ConfigSource(
            name=ConfigSourceName.DEFAULT,
            path=None,
            exists=True,
            values=DEFAULT_CONFIG,
        )
    )
    return sources
