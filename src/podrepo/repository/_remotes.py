"""Remote URL helpers."""

from collections.abc import Iterable


def normalize_remote_url(url: str) -> str:
    """Normalize a remote URL for comparison.

    Strips surrounding whitespace, a trailing slash and a trailing ``.git``.

    Example:
        >>> normalize_remote_url("https://github.com/CocoaPods/Specs.git/")
        'https://github.com/CocoaPods/Specs'
    """
    normalized = url.strip().rstrip("/")
    return normalized.removesuffix(".git")


def is_protected_remote(
    remote_urls: Iterable[str], protected_urls: Iterable[str]
) -> bool:
    """Check whether any remote URL is one of the protected URLs.

    Args:
        remote_urls: URLs configured on the repository.
        protected_urls: URLs that must not be published to directly.

    Returns:
        True if the sets intersect after normalization.
    """
    protected = {normalize_remote_url(url) for url in protected_urls}
    return any(normalize_remote_url(url) in protected for url in remote_urls)
