"""Default configuration values.

DEFAULT_CONFIG is a plain dict so it can be fed to deep_merge, which always
returns copies.
"""

from typing import Any, Final

MASTER_REPO_URLS: Final = (
    "git@github.com:CocoaPods/Specs.git",
    "https://github.com/CocoaPods/Specs.git",
)

DEFAULT_CONFIG: dict[str, Any] = {  # pyright: ignore[reportExplicitAny]
    "logging": {
        "level": "info",
        "format": "json",
        "file": "",
    },
    "sources": {
        "repos_dir": "~/.cocoapods/repos",
        "protected_urls": list(MASTER_REPO_URLS),
    },
    "lint": {
        "command": "",
        "timeout_ms": 600_000,
    },
}
