"""Minimal templating with interpolation and conditional blocks.

Two constructs are understood:

``<%= key %>``
    Replaced by the string form of ``context[key]``.

``<%= if key do %> ... <% end %>``
    The enclosed text is kept, with interpolation applied, only when
    ``context[key]`` is neither ``None`` nor ``False``. Otherwise the block
    and its markers are dropped. Whitespace around markers is preserved.

Any other tag is rejected with :class:`TemplateSyntaxError`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Mapping, Union

from .skeleton import TEMPLATES

__all__ = [
    "Conditional",
    "Interpolation",
    "TemplateRenderer",
    "TemplateRenderingError",
    "TemplateSyntaxError",
    "Text",
    "compile_template",
    "render",
]


_TAG_PATTERN = re.compile(r"<%(?P<output>=?)\s*(?P<body>.*?)\s*%>", re.DOTALL)
_KEY_PATTERN = re.compile(r"[A-Za-z_]\w*", re.ASCII)
_IF_PATTERN = re.compile(r"if\s+(?P<key>[A-Za-z_]\w*)\s+do", re.ASCII)
_KEYWORDS = frozenset({"if", "do", "end"})


class TemplateRenderingError(RuntimeError):
    """Raised when the context does not provide a value a template needs."""


class TemplateSyntaxError(ValueError):
    """Raised when a template contains an unsupported or unbalanced tag."""


def _lookup(context: Mapping[str, Any], key: str) -> Any:
    try:
        return context[key]
    except KeyError as exc:
        raise TemplateRenderingError(f"missing value for '{key}'") from exc


@dataclass(frozen=True, slots=True)
class Text:
    value: str

    def render(self, context: Mapping[str, Any], out: list[str]) -> None:
        out.append(self.value)


@dataclass(frozen=True, slots=True)
class Interpolation:
    key: str

    def render(self, context: Mapping[str, Any], out: list[str]) -> None:
        value = _lookup(context, self.key)
        out.append("" if value is None else str(value))


@dataclass(frozen=True, slots=True)
class Conditional:
    """A block rendered only when ``key`` holds a truthy value."""

    key: str
    body: tuple["Node", ...]

    def render(self, context: Mapping[str, Any], out: list[str]) -> None:
        value = _lookup(context, self.key)
        if value is None or value is False:
            return
        for node in self.body:
            node.render(context, out)


Node = Union[Text, Interpolation, Conditional]


def _line_of(source: str, position: int) -> int:
    return source.count("\n", 0, position) + 1


@lru_cache(maxsize=64)
def compile_template(source: str) -> tuple[Node, ...]:
    """Parse ``source`` into a tuple of nodes.

    Raises :class:`TemplateSyntaxError` for unknown tags, nested or unclosed
    conditionals and stray ``end`` tags.
    """

    root: list[Node] = []
    block: list[Node] | None = None
    block_key = ""
    block_line = 0
    position = 0

    for match in _TAG_PATTERN.finditer(source):
        nodes = root if block is None else block
        if match.start() > position:
            nodes.append(Text(source[position : match.start()]))
        position = match.end()

        line = _line_of(source, match.start())
        body = match.group("body")
        is_output = bool(match.group("output"))
        opener = _IF_PATTERN.fullmatch(body) if is_output else None

        if opener is not None and opener.group("key") not in _KEYWORDS:
            if block is not None:
                raise TemplateSyntaxError(f"line {line}: nested conditional blocks are not supported")
            block, block_key, block_line = [], opener.group("key"), line
        elif not is_output and body == "end":
            if block is None:
                raise TemplateSyntaxError(f"line {line}: 'end' without a matching 'if'")
            root.append(Conditional(block_key, tuple(block)))
            block = None
        elif is_output and _KEY_PATTERN.fullmatch(body) and body not in _KEYWORDS:
            nodes.append(Interpolation(body))
        else:
            raise TemplateSyntaxError(f"line {line}: unsupported tag {match.group(0)!r}")

    if block is not None:
        raise TemplateSyntaxError(f"line {block_line}: conditional on '{block_key}' is never closed")
    if position < len(source):
        root.append(Text(source[position:]))
    return tuple(root)


def render(source: str, context: Mapping[str, Any]) -> str:
    """Render ``source`` with ``context``. Performs no I/O."""

    out: list[str] = []
    for node in compile_template(source):
        node.render(context, out)
    return "".join(out)


@dataclass(slots=True)
class TemplateRenderer:
    """Render templates from a fixed registry of named sources."""

    templates: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.templates:
            self.templates = TEMPLATES

    def render_string(self, template: str, context: Mapping[str, Any]) -> str:
        """Render an inline ``template`` using ``context``."""

        return render(template, context)

    def render(self, name: str, context: Mapping[str, Any]) -> str:
        """Render the registered template ``name`` using ``context``."""

        try:
            source = self.templates[name]
        except KeyError as exc:
            raise TemplateRenderingError(f"unknown template '{name}'") from exc
        return render(source, context)
