from pathlib import Path

import platformdirs


def get_podrepo_log_dir() -> Path:
    """Get the platform log directory for podrepo."""
    return platformdirs.user_log_path("podrepo")


def get_podrepo_cli_log_file() -> Path:
    """Get the path to the CLI log file inside the log directory."""
    return get_podrepo_log_dir() / "cli.log"
