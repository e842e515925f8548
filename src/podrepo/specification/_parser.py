# pyright: reportExplicitAny=false, reportAny=false
"""Podspec file parsing.

JSON podspecs are loaded as-is. Ruby podspecs are read declaratively: only
literal assignments on the root spec variable are understood (strings,
booleans, arrays, hashes, heredocs, ``dependency`` and ``subspec`` lines and
references to the spec's own name or version). Anything computed is skipped.
"""

import re
from collections.abc import Iterator
from pathlib import Path
from typing import Any, Final

import orjson

from podrepo.exceptions import SpecParseError
from podrepo.specification._models import JSON_PODSPEC_EXTENSION

_SPEC_BLOCK_RE: Final = re.compile(
    r"Pod::Spec(?:ification)?\.new\s+do\s*\|\s*(\w+)\s*\|"
)
_HEREDOC_RE: Final = re.compile(r"^<<[-~]?\s*['\"]?(\w+)['\"]?")
_INTERPOLATION_RE: Final = re.compile(r"#\{\s*(\w+)\.(name|version)(?:\.to_s)?\s*\}")
_KEY_VALUE_RE: Final = re.compile(
    r"^(?::(\w+)|(['\"])(.*?)\2|(\w+):)\s*(?:=>)?\s*(.*)$", re.S
)

_PLATFORMS: Final = ("ios", "osx", "macos", "tvos", "watchos", "visionos")

# Singular DSL attributes stored under their JSON podspec key
_JSON_KEYS: Final = {
    "author": "authors",
    "framework": "frameworks",
    "library": "libraries",
    "weak_framework": "weak_frameworks",
    "swift_version": "swift_versions",
}

_UNPARSED: Final = object()


def parse_spec_file(path: Path) -> tuple[str, str, dict[str, Any]]:
    """Parse a podspec file into (name, version, attributes).

    Args:
        path: A ``.podspec`` or ``.podspec.json`` file.

    Returns:
        Tuple of name, version and the attribute dictionary.

    Raises:
        SpecParseError: If the file cannot be read or parsed, or lacks a
            string name or version.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Unable to read podspec `{path}`: {e}"
        raise SpecParseError(msg, path=path) from e

    if path.name.endswith(JSON_PODSPEC_EXTENSION):
        attributes = parse_json_podspec(content, path=path)
    else:
        attributes = parse_ruby_podspec(content, path=path)

    name = attributes.get("name")
    version = attributes.get("version")
    if not isinstance(name, str) or not name:
        msg = f"The podspec `{path}` does not declare a name"
        raise SpecParseError(msg, path=path)
    if not isinstance(version, str | int | float) or not str(version):
        msg = f"The podspec `{path}` does not declare a version"
        raise SpecParseError(msg, path=path)
    return name, str(version), attributes


def parse_json_podspec(content: str, *, path: Path | None = None) -> dict[str, Any]:
    """Load a JSON podspec.

    Raises:
        SpecParseError: If the content is not a JSON object.
    """
    try:
        data = orjson.loads(content)
    except orjson.JSONDecodeError as e:
        msg = f"Invalid JSON podspec `{path}`: {e}"
        raise SpecParseError(msg, path=path) from e
    if not isinstance(data, dict):
        msg = f"Invalid JSON podspec `{path}`: expected an object"
        raise SpecParseError(msg, path=path)
    return data


def parse_ruby_podspec(content: str, *, path: Path | None = None) -> dict[str, Any]:
    """Extract the literal attributes of a Ruby podspec.

    Args:
        content: Ruby source of the podspec.
        path: Source file, used in error messages.

    Returns:
        Attributes in JSON podspec layout (``name`` and ``version`` first).

    Raises:
        SpecParseError: If no ``Pod::Spec.new`` block is found.
    """
    block = _SPEC_BLOCK_RE.search(content)
    if block is None:
        msg = f"The podspec `{path}` does not contain a `Pod::Spec.new` block"
        raise SpecParseError(msg, path=path)

    var = block.group(1)
    lines = [
        line
        for line in content[block.end() :].splitlines()
        if not line.lstrip().startswith("#")
    ]
    statements = list(_statements(lines, var))

    # name and version first: other values may interpolate them
    context: dict[str, str] = {}
    for attr, value_text in statements:
        if attr in ("name", "version"):
            value = _parse_value(value_text, var, context)
            if isinstance(value, str):
                context[attr] = value

    attributes: dict[str, Any] = dict(context)
    for attr, value_text in statements:
        if attr in ("name", "version"):
            continue
        _apply_statement(attributes, attr, value_text, var, context)
    return attributes


def _statements(lines: list[str], var: str) -> Iterator[tuple[str, str]]:
    """Yield (attribute, value text) for each top-level statement on ``var``."""
    platforms = "|".join(_PLATFORMS)
    statement_re = re.compile(
        rf"^\s*{re.escape(var)}\.((?:(?:{platforms})\.)?\w+)(\s*=\s*|\s+)(.*)$"
    )
    index = 0
    while index < len(lines):
        match = statement_re.match(lines[index])
        index += 1
        if match is None:
            continue
        attr, separator = match.group(1), match.group(2)
        value_text = _strip_comment(match.group(3).strip())
        if "=" not in separator and attr not in ("dependency", "subspec"):
            continue

        heredoc = _HEREDOC_RE.match(value_text)
        if heredoc is not None:
            terminator = heredoc.group(1)
            body: list[str] = []
            while index < len(lines) and lines[index].strip() != terminator:
                body.append(lines[index])
                index += 1
            index += 1
            yield attr, _quote(_dedent(body))
            continue

        while _depth(value_text) > 0 and index < len(lines):
            value_text += "\n" + _strip_comment(lines[index].strip())
            index += 1
        yield attr, value_text


def _apply_statement(
    attributes: dict[str, Any],
    attr: str,
    value_text: str,
    var: str,
    context: dict[str, str],
) -> None:
    if attr == "dependency":
        args = [
            _parse_value(part, var, context) for part in _split_top_level(value_text)
        ]
        if args and isinstance(args[0], str):
            requirements = [arg for arg in args[1:] if isinstance(arg, str)]
            attributes.setdefault("dependencies", {})[args[0]] = requirements
        return

    if attr == "subspec":
        head = value_text.split(" do", 1)[0]
        name = _UNPARSED
        if head.strip():
            name = _parse_value(_split_top_level(head)[0], var, context)
        if isinstance(name, str):
            attributes.setdefault("subspecs", []).append({"name": name})
        return

    if attr == "platform":
        parts = [
            _parse_value(part, var, context) for part in _split_top_level(value_text)
        ]
        if parts and isinstance(parts[0], str):
            target = parts[1] if len(parts) > 1 and isinstance(parts[1], str) else None
            attributes.setdefault("platforms", {})[parts[0]] = target
        return

    platform, _, leaf = attr.rpartition(".")
    if platform and leaf == "deployment_target":
        value = _parse_value(value_text, var, context)
        if isinstance(value, str):
            attributes.setdefault("platforms", {})[platform] = value
        return
    if platform:
        return

    value = _parse_value(value_text, var, context)
    if value is not _UNPARSED:
        attributes[_JSON_KEYS.get(attr, attr)] = value


# =============================================================================
# Literal parsing
# =============================================================================


def _parse_value(text: str, var: str, context: dict[str, str]) -> Any:
    """Parse a Ruby literal; returns _UNPARSED for anything else."""
    text = text.strip().removesuffix(".freeze").strip()
    if not text:
        return _UNPARSED

    if len(text) >= 2 and text[0] == text[-1] == "'":  # noqa: PLR2004
        return text[1:-1].replace("\\'", "'").replace("\\\\", "\\")
    if len(text) >= 2 and text[0] == text[-1] == '"':  # noqa: PLR2004
        return _interpolate(text[1:-1], var, context)

    reference = re.fullmatch(rf"{re.escape(var)}\.(name|version)(?:\.to_s)?", text)
    if reference is not None:
        return context.get(reference.group(1), _UNPARSED)

    if text in ("true", "false"):
        return text == "true"
    if text.startswith(":") and text[1:].isidentifier():
        return text[1:]
    if re.fullmatch(r"-?\d+", text):
        return int(text)

    if text[0] == "[" and text[-1] == "]":
        items = [
            _parse_value(item, var, context) for item in _split_top_level(text[1:-1])
        ]
        if any(item is _UNPARSED for item in items):
            return _UNPARSED
        return items

    if text[0] == "{" and text[-1] == "}":
        return _parse_hash(text[1:-1], var, context)

    return _UNPARSED


def _parse_hash(body: str, var: str, context: dict[str, str]) -> Any:
    result: dict[str, Any] = {}
    for pair in _split_top_level(body):
        match = _KEY_VALUE_RE.match(pair.strip())
        if match is None:
            return _UNPARSED
        key = match.group(1) or match.group(3) or match.group(4)
        value = _parse_value(match.group(5), var, context)
        if key is None or value is _UNPARSED:
            continue
        result[key] = value
    return result


def _interpolate(text: str, var: str, context: dict[str, str]) -> Any:
    unresolved = False

    def _replace(match: re.Match[str]) -> str:
        nonlocal unresolved
        if match.group(1) != var or match.group(2) not in context:
            unresolved = True
            return match.group(0)
        return context[match.group(2)]

    value = _INTERPOLATION_RE.sub(_replace, text).replace('\\"', '"')
    if unresolved or "#{" in value:
        return _UNPARSED
    return value


def _split_top_level(text: str) -> list[str]:
    """Split on commas outside of quotes, brackets and braces."""
    parts: list[str] = []
    current: list[str] = []
    depth = 0
    quote: str | None = None
    escaped = False
    for char in text:
        if quote is not None:
            current.append(char)
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == quote:
                quote = None
            continue
        if char in "'\"":
            quote = char
        elif char in "[{(":
            depth += 1
        elif char in "]})":
            depth -= 1
        elif char == "," and depth == 0:
            parts.append("".join(current).strip())
            current = []
            continue
        current.append(char)
    tail = "".join(current).strip()
    if tail:
        parts.append(tail)
    return parts


def _unquoted(text: str) -> Iterator[tuple[int, str]]:
    """Yield (position, character) for characters outside of quotes."""
    quote: str | None = None
    escaped = False
    for position, char in enumerate(text):
        if quote is not None:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == quote:
                quote = None
            continue
        if char in "'\"":
            quote = char
        yield position, char


def _strip_comment(text: str) -> str:
    """Drop a trailing ``#`` comment that is not inside a string."""
    for position, char in _unquoted(text):
        if char == "#":
            return text[:position].rstrip()
    return text


def _depth(text: str) -> int:
    """Count unclosed brackets and braces outside of quotes and comments."""
    depth = 0
    for _, char in _unquoted(_strip_comment(text)):
        if char in "[{":
            depth += 1
        elif char in "]}":
            depth -= 1
    return depth


def _dedent(lines: list[str]) -> str:
    indents = [len(line) - len(line.lstrip()) for line in lines if line.strip()]
    margin = min(indents, default=0)
    return "\n".join(line[margin:] for line in lines).strip()


def _quote(text: str) -> str:
    return "'" + text.replace("\\", "\\\\").replace("'", "\\'") + "'"
