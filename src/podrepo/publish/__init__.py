"""Podspec publication.

Example:
    >>> from podrepo.publish import PublishRequest, SpecPublisher
    >>> request = PublishRequest(repo="private", local_only=True)
"""

from podrepo.publish._editor import prompt_commit_message
from podrepo.publish._message import TargetKind, classify_target, resolve_commit_message
from podrepo.publish._publisher import (
    PROTECTED_SOURCE_MESSAGE,
    EditorPrompt,
    PublishResult,
    RepositoryFactory,
    SpecPublisher,
)
from podrepo.publish._request import PublishRequest

__all__ = [
    "PROTECTED_SOURCE_MESSAGE",
    "EditorPrompt",
    "PublishRequest",
    "PublishResult",
    "RepositoryFactory",
    "SpecPublisher",
    "TargetKind",
    "classify_target",
    "prompt_commit_message",
    "resolve_commit_message",
]
