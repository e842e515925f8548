"""Text helpers for console output."""


def pluralize(word: str, count: int) -> str:
    """Return ``word`` with an ``s`` appended unless ``count`` is one.

    Example:
        >>> pluralize("spec", 2)
        'specs'
    """
    return word if count == 1 else f"{word}s"
