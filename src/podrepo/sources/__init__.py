"""Spec repo sources: local clones resolved by name or URL."""

from podrepo.sources._manager import SourcesManager
from podrepo.sources._models import Source

__all__ = ["Source", "SourcesManager"]
