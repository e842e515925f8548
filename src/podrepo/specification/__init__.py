"""Podspec discovery and parsing."""

from podrepo.specification._discovery import discover_spec_files
from podrepo.specification._models import (
    JSON_PODSPEC_EXTENSION,
    PODSPEC_EXTENSION,
    Specification,
)
from podrepo.specification._parser import (
    parse_json_podspec,
    parse_ruby_podspec,
    parse_spec_file,
)

__all__ = [
    "JSON_PODSPEC_EXTENSION",
    "PODSPEC_EXTENSION",
    "Specification",
    "discover_spec_files",
    "parse_json_podspec",
    "parse_ruby_podspec",
    "parse_spec_file",
]
