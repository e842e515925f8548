"""Helpers shared by the repo commands."""

from podrepo.config import Config
from podrepo.sources import SourcesManager
from podrepo.validation import CommandValidator, SpecLinter, ValidatorFactory


def get_sources_manager(config: Config) -> SourcesManager:
    """Build a SourcesManager over the configured repos directory."""
    return SourcesManager(config.sources.repos_path)


def get_validator_factory(config: Config, sources: SourcesManager) -> ValidatorFactory:
    """Select the validator from the ``[lint]`` configuration.

    An empty ``lint.command`` selects the built-in SpecLinter.
    """
    lint = config.lint
    if lint.command:
        return lambda path, urls: CommandValidator(
            path, urls, command=lint.command, timeout_ms=lint.timeout_ms
        )
    return lambda path, urls: SpecLinter(path, urls, sources=sources)


def split_sources(value: str | None) -> tuple[str, ...]:
    """Split a comma-delimited ``--sources`` value, dropping empty entries."""
    if value is None:
        return ()
    return tuple(part.strip() for part in value.split(",") if part.strip())
