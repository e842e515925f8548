"""Spec repo source lookup.

SourcesManager resolves spec repo names and URLs to the local clones found in
the configured repos directory.
"""

from collections.abc import Iterable
from pathlib import Path

from podrepo.exceptions import PodRepoError, SourceNotFoundError
from podrepo.repository import normalize_remote_url, read_remote_url
from podrepo.sources._models import Source


class SourcesManager:
    """Index of the spec repos cloned under ``repos_dir``."""

    def __init__(self, repos_dir: Path) -> None:
        self.repos_dir: Path = repos_dir

    def all(self) -> list[Source]:
        """Return every git clone directly under the repos directory, by name."""
        if not self.repos_dir.is_dir():
            return []

        sources: list[Source] = []
        for child in sorted(self.repos_dir.iterdir()):
            if not child.is_dir() or not (child / ".git").exists():
                continue
            url = read_remote_url(child)
            sources.append(Source(name=child.name, repo_dir=child, url=url))
        return sources

    def source_with_name(self, name: str) -> Source:
        """Find the source whose directory is called ``name``.

        Raises:
            SourceNotFoundError: If no such clone exists.
        """
        for source in self.all():
            if source.name == name:
                return source
        msg = f"Unable to find a source named: `{name}`"
        raise SourceNotFoundError(msg, repo=name)

    def source_with_url(self, url: str) -> Source:
        """Find the source whose ``origin`` is ``url``.

        Raises:
            SourceNotFoundError: If no clone has that remote.
        """
        wanted = normalize_remote_url(url)
        for source in self.all():
            if source.url and normalize_remote_url(source.url) == wanted:
                return source
        msg = f"Unable to find a source with URL: `{url}`"
        raise SourceNotFoundError(msg, repo=url)

    def source_with_name_or_url(self, name_or_url: str) -> Source:
        """Find a source by name first, then by URL.

        Raises:
            SourceNotFoundError: If neither lookup succeeds.
        """
        try:
            return self.source_with_name(name_or_url)
        except SourceNotFoundError:
            return self.source_with_url(name_or_url)

    def lookup(self, name_or_url: str) -> Source | None:
        """Resolve ``name_or_url``, returning None instead of raising.

        Invalid names and unknown names collapse into the same outcome so the
        caller can report one "unable to find" message.
        """
        try:
            return self.source_with_name_or_url(name_or_url)
        except (PodRepoError, OSError):
            return None

    def sources_for_urls(self, urls: Iterable[str]) -> list[Source]:
        """Return the sources whose ``origin`` matches one of ``urls``."""
        wanted = {normalize_remote_url(url) for url in urls}
        return [
            source
            for source in self.all()
            if source.url and normalize_remote_url(source.url) in wanted
        ]

    def all_urls(self) -> list[str]:
        """Return the ``origin`` URLs of every source that has one."""
        return [source.url for source in self.all() if source.url]
