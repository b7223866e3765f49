"""Case conversions between application and module identifiers."""

from __future__ import annotations

import re

__all__ = ["camelize", "underscore"]


_WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def _capitalize_first(word: str) -> str:
    return word[:1].upper() + word[1:]


def camelize(value: str) -> str:
    """Convert an underscored identifier into a module name.

    Every ``_`` separated word has its first character upper-cased while the
    remainder is kept untouched, so ``"hello_world"`` becomes
    ``"HelloWorld"``. Slashes separate namespaces and are turned into dots:
    ``"foo/bar_baz"`` becomes ``"Foo.BarBaz"``.
    """

    segments = []
    for segment in value.split("/"):
        words = [word for word in segment.split("_") if word]
        segments.append("".join(_capitalize_first(word) for word in words))
    return ".".join(segments)


def underscore(value: str) -> str:
    """Convert a module name into a filename friendly path.

    ``"HelloWorld"`` becomes ``"hello_world"`` and nested modules map to
    directories, so ``"Foo.Bar"`` becomes ``"foo/bar"``.
    """

    segments = []
    for segment in value.split("."):
        segments.append(_WORD_BOUNDARY.sub("_", segment).lower())
    return "/".join(segments)
