"""URI template compilation, variable extraction and completion.

Supported grammar::

    template   := segment+
    segment    := literal | "{" name "}" | "{?" name ("," name)* "}"
    name       := [A-Za-z_][A-Za-z0-9_]*

At most one query-variable list may appear and it must be the last segment.
Path variables bind one URI substring that contains no ``/``, ``?`` or ``#``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Mapping, Union
from urllib.parse import parse_qsl, quote, unquote, urlencode

_TOKEN_RE = re.compile(r"\{(\??)([^{}]*)\}")
_NAME_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

Variables = dict[str, Union[str, list[str]]]


class MalformedTemplateError(ValueError):
    """Raised when a template string does not follow the template grammar."""

    def __init__(self, pattern: str, reason: str):
        super().__init__(f"Malformed URI template {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


@dataclass(frozen=True, slots=True)
class LiteralSegment:
    text: str


@dataclass(frozen=True, slots=True)
class PathVariable:
    name: str


@dataclass(frozen=True, slots=True)
class QueryVariables:
    names: tuple[str, ...]


Segment = Union[LiteralSegment, PathVariable, QueryVariables]


def parse_template(pattern: str) -> tuple[Segment, ...]:
    """Compile ``pattern`` into its ordered segment list."""
    if not pattern:
        raise MalformedTemplateError(pattern, "template is empty")

    segments: list[Segment] = []
    position = 0
    for token in _TOKEN_RE.finditer(pattern):
        _append_literal(segments, pattern, pattern[position : token.start()])
        if segments and isinstance(segments[-1], QueryVariables):
            if token.group(1):
                raise MalformedTemplateError(pattern, "more than one query-variable list")
            raise MalformedTemplateError(pattern, "query-variable list must be the last segment")

        if token.group(1):
            names = tuple(name.strip() for name in token.group(2).split(","))
            for name in names:
                _validate_name(pattern, name)
            if len(set(names)) != len(names):
                raise MalformedTemplateError(pattern, "duplicate name in query-variable list")
            segments.append(QueryVariables(names))
        else:
            _validate_name(pattern, token.group(2))
            if segments and isinstance(segments[-1], PathVariable):
                raise MalformedTemplateError(pattern, "adjacent path variables are ambiguous")
            segments.append(PathVariable(token.group(2)))
        position = token.end()

    tail = pattern[position:]
    if tail and segments and isinstance(segments[-1], QueryVariables):
        raise MalformedTemplateError(pattern, "query-variable list must be the last segment")
    _append_literal(segments, pattern, tail)
    return tuple(segments)


def _append_literal(segments: list[Segment], pattern: str, text: str) -> None:
    if not text:
        return
    if "{" in text or "}" in text:
        raise MalformedTemplateError(pattern, "unbalanced or nested braces")
    segments.append(LiteralSegment(text))


def _validate_name(pattern: str, name: str) -> None:
    if not _NAME_RE.fullmatch(name):
        raise MalformedTemplateError(pattern, f"invalid variable name {name!r}")


class UriTemplate:
    """Immutable compiled URI template."""

    __slots__ = ("_pattern", "_segments", "_regex", "_groups", "_query")

    def __init__(self, pattern: str):
        segments = parse_template(pattern)
        groups: list[tuple[str, str]] = []
        parts: list[str] = []
        query: QueryVariables | None = None
        for segment in segments:
            if isinstance(segment, LiteralSegment):
                parts.append(re.escape(segment.text))
            elif isinstance(segment, PathVariable):
                group = f"v{len(groups)}"
                groups.append((group, segment.name))
                parts.append(rf"(?P<{group}>[^/?#]+)")
            else:
                query = segment
                parts.append(r"(?:\?(?P<query>[^#]*))?")

        object.__setattr__(self, "_pattern", pattern)
        object.__setattr__(self, "_segments", segments)
        object.__setattr__(self, "_regex", re.compile("".join(parts)))
        object.__setattr__(self, "_groups", tuple(groups))
        object.__setattr__(self, "_query", query)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("UriTemplate is immutable")

    def __repr__(self) -> str:
        return f"UriTemplate({self._pattern!r})"

    def __str__(self) -> str:
        return self._pattern

    def __eq__(self, other: object) -> bool:
        return isinstance(other, UriTemplate) and other._pattern == self._pattern

    def __hash__(self) -> int:
        return hash(self._pattern)

    @property
    def pattern(self) -> str:
        return self._pattern

    @property
    def segments(self) -> tuple[Segment, ...]:
        return self._segments

    @property
    def path_variables(self) -> tuple[str, ...]:
        return tuple(dict.fromkeys(name for _, name in self._groups))

    @property
    def query_variables(self) -> tuple[str, ...]:
        return self._query.names if self._query else ()

    @property
    def variable_names(self) -> tuple[str, ...]:
        return tuple(dict.fromkeys(self.path_variables + self.query_variables))

    def match(self, uri: str) -> Variables | None:
        """Bind template variables from ``uri``; ``None`` when literals do not align.

        A name bound once maps to a string; a name bound several times maps to
        the list of every value in URI order. Query keys outside the template's
        list are ignored.
        """
        found = self._regex.fullmatch(uri)
        if found is None:
            return None

        bound: dict[str, list[str]] = {}
        for group, name in self._groups:
            bound.setdefault(name, []).append(unquote(found.group(group)))

        raw_query = found.group("query") if self._query else None
        if raw_query:
            allowed = set(self._query.names)
            for key, value in parse_qsl(raw_query, keep_blank_values=True):
                if key in allowed:
                    bound.setdefault(key, []).append(value)

        return {name: values[0] if len(values) == 1 else values for name, values in bound.items()}

    def complete(self, name: str, partial: str, candidates: Iterable[Any]) -> Iterator[str]:
        """Lazily yield candidate values containing ``partial``, case-insensitively.

        Unknown variable names yield nothing.
        """
        if name not in self.variable_names:
            return iter(())
        needle = (partial or "").lower()
        return (text for text in map(str, candidates) if needle in text.lower())

    def expand(self, variables: Mapping[str, Any]) -> str:
        """Render a concrete URI; every path variable must be supplied."""
        rendered: list[str] = []
        for segment in self._segments:
            if isinstance(segment, LiteralSegment):
                rendered.append(segment.text)
            elif isinstance(segment, PathVariable):
                if variables.get(segment.name) is None:
                    raise KeyError(segment.name)
                rendered.append(quote(str(variables[segment.name]), safe=""))
            else:
                pairs = [
                    (name, value)
                    for name in segment.names
                    for value in _as_list(variables.get(name))
                ]
                if pairs:
                    rendered.append("?" + urlencode(pairs))
        return "".join(rendered)


def _as_list(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


__all__ = [
    "LiteralSegment",
    "MalformedTemplateError",
    "PathVariable",
    "QueryVariables",
    "Segment",
    "UriTemplate",
    "Variables",
    "parse_template",
]
