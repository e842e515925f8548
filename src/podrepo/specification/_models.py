# pyright: reportExplicitAny=false, reportAny=false
"""Podspec model."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Final, Self

import orjson

PODSPEC_EXTENSION: Final = ".podspec"
JSON_PODSPEC_EXTENSION: Final = ".podspec.json"


@dataclass(frozen=True, slots=True)
class Specification:
    """A parsed podspec.

    Identity is (name, version); ``attributes`` holds whatever declarative
    content the parser extracted and is what JSON serialization writes.

    Attributes:
        name: Pod name.
        version: Pod version string.
        attributes: Parsed podspec attributes, in JSON podspec layout.
        path: File the spec was read from, if any.
    """

    name: str
    version: str
    attributes: Mapping[str, Any] = field(default_factory=dict, hash=False)
    path: Path | None = None

    def __str__(self) -> str:
        return f"{self.name} ({self.version})"

    @classmethod
    def from_file(cls, path: Path) -> Self:
        """Parse a ``.podspec`` or ``.podspec.json`` file.

        Raises:
            SpecParseError: If the file cannot be read or lacks name/version.
        """
        from podrepo.specification._parser import parse_spec_file  # noqa: PLC0415

        name, version, attributes = parse_spec_file(path)
        return cls(name=name, version=version, attributes=attributes, path=path)

    @property
    def extension(self) -> str:
        """Extension of the source file, ``.podspec`` when unknown."""
        if self.path is not None and self.path.name.endswith(JSON_PODSPEC_EXTENSION):
            return JSON_PODSPEC_EXTENSION
        return PODSPEC_EXTENSION

    @property
    def root_name(self) -> str:
        """Pod name without any subspec component."""
        return self.name.split("/", 1)[0]

    @property
    def dependencies(self) -> dict[str, list[str]]:
        """Dependency names mapped to their version requirements."""
        raw = self.attributes.get("dependencies", {})
        if not isinstance(raw, Mapping):
            return {}
        return {
            str(name): [str(req) for req in reqs or []] for name, reqs in raw.items()
        }

    def to_pretty_json(self) -> str:
        """Serialize the attributes as indented JSON with a trailing newline."""
        data = {"name": self.name, "version": self.version, **self.attributes}
        data.update(name=self.name, version=self.version)
        return orjson.dumps(data, option=orjson.OPT_INDENT_2).decode("utf-8") + "\n"
