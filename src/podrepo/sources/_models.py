"""Spec repo source records."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class Source:
    """A local clone of a spec repo.

    Attributes:
        name: Directory name of the clone, used as the repo name.
        repo_dir: Working tree of the clone.
        url: URL of the ``origin`` remote, empty when none is configured.
    """

    name: str
    repo_dir: Path
    url: str = ""

    @property
    def specs_dir(self) -> Path:
        """Directory holding the pods: ``Specs/`` when present, else the root."""
        specs = self.repo_dir / "Specs"
        return specs if specs.is_dir() else self.repo_dir

    def pod_path(self, name: str) -> Path:
        """Directory holding every version of the pod ``name``."""
        return self.specs_dir / name

    def has_pod(self, name: str) -> bool:
        """Check whether the source contains any version of ``name``."""
        return self.pod_path(name).is_dir()
