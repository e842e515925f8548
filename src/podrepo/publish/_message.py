"""Commit message derivation."""

from enum import StrEnum
from pathlib import Path

from podrepo.specification import Specification


class TargetKind(StrEnum):
    """How a spec relates to what the spec repo already holds."""

    FIX = "Fix"
    UPDATE = "Update"
    ADD = "Add"


def classify_target(target_path: Path) -> TargetKind:
    """Classify a version directory before anything is written to it.

    Args:
        target_path: ``<specs_dir>/<name>/<version>``.

    Returns:
        FIX if the version already exists, UPDATE if only the pod exists,
        ADD otherwise.
    """
    if target_path.exists():
        return TargetKind.FIX
    if target_path.parent.is_dir():
        return TargetKind.UPDATE
    return TargetKind.ADD


def resolve_commit_message(
    spec: Specification, target_path: Path, explicit: str | None = None
) -> str:
    """Return the commit message for publishing ``spec`` to ``target_path``.

    A non-empty explicit message is used verbatim. Otherwise the message is
    ``[Fix]``, ``[Update]`` or ``[Add]`` followed by the spec label.

    Example:
        >>> resolve_commit_message(spec, Path("Specs/Foo/1.0"))
        '[Add] Foo (1.0)'
    """
    if explicit:
        return explicit
    return f"[{classify_target(target_path)}] {spec}"
