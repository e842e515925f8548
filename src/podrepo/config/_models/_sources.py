"""Spec repo sources configuration model."""

from pathlib import Path
from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from podrepo.config._defaults import MASTER_REPO_URLS


class SourcesConfiguration(BaseModel):
    """Spec repo sources section.

    Attributes:
        repos_dir: Directory holding the local clones of spec repos.
        protected_urls: Remote URLs that must never be pushed to directly.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    repos_dir: str = "~/.cocoapods/repos"
    protected_urls: tuple[str, ...] = MASTER_REPO_URLS

    @property
    def repos_path(self) -> Path:
        """The repos directory with ``~`` expanded."""
        return Path(self.repos_dir).expanduser()
