"""Template — an immutable, declarative description of a URL shape.

A template lists the path segments a URL must have, in order, and the
query parameters it requires or accepts::

    template = (
        Template()
        .term("display")
        .string("type")
        .query(optional_str("user"), required_bool("accept"))
    )

Every builder call returns a new Template, so templates can be module
or class constants shared freely between recognizers and threads.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TypeAlias
from urllib.parse import quote

from deeplink.errors import BuildError, ConfigurationError
from deeplink.params import Value, ValueKind, format_value, kind_of

_RESERVED_QUERY_CHARS = frozenset("&=#")


@dataclass(frozen=True, slots=True)
class Term:
    """A path segment that must equal *symbol* exactly."""

    symbol: str

    def __str__(self) -> str:
        return self.symbol


@dataclass(frozen=True, slots=True)
class Capture:
    """A named path segment converted to *kind*."""

    name: str
    kind: ValueKind = ValueKind.STR

    def __str__(self) -> str:
        return f"{{{self.name}:{self.kind.value}}}"


PathPart: TypeAlias = Term | Capture


@dataclass(frozen=True, slots=True)
class QueryParam:
    """A named, typed query string parameter.

    Identity is the name: a template holds at most one parameter per name.
    Use the ``required_*`` / ``optional_*`` factories rather than
    constructing these directly.
    """

    name: str
    kind: ValueKind
    required: bool

    def __post_init__(self) -> None:
        if not self.name:
            msg = "Query parameter name must not be empty."
            raise ConfigurationError(msg)
        if _RESERVED_QUERY_CHARS.intersection(self.name):
            msg = f"Query parameter name {self.name!r} contains one of '&', '=', '#'."
            raise ConfigurationError(msg)

    def __str__(self) -> str:
        marker = "" if self.required else "?"
        return f"{{{self.name}:{self.kind.value}{marker}}}"


def required_int(name: str) -> QueryParam:
    return QueryParam(name, ValueKind.INT, required=True)


def optional_int(name: str) -> QueryParam:
    return QueryParam(name, ValueKind.INT, required=False)


def required_bool(name: str) -> QueryParam:
    return QueryParam(name, ValueKind.BOOL, required=True)


def optional_bool(name: str) -> QueryParam:
    return QueryParam(name, ValueKind.BOOL, required=False)


def required_float(name: str) -> QueryParam:
    return QueryParam(name, ValueKind.FLOAT, required=True)


def optional_float(name: str) -> QueryParam:
    return QueryParam(name, ValueKind.FLOAT, required=False)


def required_str(name: str) -> QueryParam:
    return QueryParam(name, ValueKind.STR, required=True)


def optional_str(name: str) -> QueryParam:
    return QueryParam(name, ValueKind.STR, required=False)


@dataclass(frozen=True, slots=True)
class Template:
    """Ordered path parts plus a set of query parameters.

    The host of a ``scheme://host/a/b`` URL is the first path segment,
    so ``Template().term("host").term("a").term("b")`` matches it.
    """

    parts: tuple[PathPart, ...] = ()
    params: tuple[QueryParam, ...] = ()

    # -- builder ---------------------------------------------------------

    def _appending(self, part: PathPart) -> "Template":
        if isinstance(part, Term) and not part.symbol:
            msg = "Path term must not be empty; empty segments never match."
            raise ConfigurationError(msg)
        if isinstance(part, Capture):
            if not part.name:
                msg = "Path capture name must not be empty."
                raise ConfigurationError(msg)
            if part.name in self.capture_names:
                msg = f"Duplicate path capture name {part.name!r} in template {self}."
                raise ConfigurationError(msg)
        return Template(parts=(*self.parts, part), params=self.params)

    def term(self, symbol: str) -> "Template":
        """A matching URL has exactly *symbol* at this position."""
        return self._appending(Term(symbol))

    def string(self, name: str) -> "Template":
        """A matching URL has any text at this position, stored as ``name``."""
        return self._appending(Capture(name, ValueKind.STR))

    def integer(self, name: str) -> "Template":
        """A matching URL has an integer at this position, stored as ``name``."""
        return self._appending(Capture(name, ValueKind.INT))

    def double(self, name: str) -> "Template":
        """A matching URL has a floating point number at this position."""
        return self._appending(Capture(name, ValueKind.FLOAT))

    def boolean(self, name: str) -> "Template":
        """A matching URL has ``true`` or ``false`` at this position."""
        return self._appending(Capture(name, ValueKind.BOOL))

    def query(self, *params: QueryParam) -> "Template":
        """Replace the query parameter set with *params*.

        Not additive: ``t.query(a).query(b)`` declares only ``b``.
        Raises ``ConfigurationError`` if two parameters share a name.
        """
        seen: set[str] = set()
        for param in params:
            if param.name in seen:
                msg = f"Duplicate query parameter name {param.name!r}."
                raise ConfigurationError(msg)
            seen.add(param.name)
        return Template(parts=self.parts, params=tuple(params))

    # -- introspection ---------------------------------------------------

    @property
    def capture_names(self) -> tuple[str, ...]:
        return tuple(p.name for p in self.parts if isinstance(p, Capture))

    @property
    def parameters(self) -> dict[str, QueryParam]:
        """Query parameters keyed by name."""
        return {p.name: p for p in self.params}

    def __str__(self) -> str:
        text = "/".join(str(p) for p in self.parts)
        if self.params:
            text += "?" + "&".join(str(p) for p in self.params)
        return text

    # -- URL building ----------------------------------------------------

    def build_url(
        self,
        scheme: str,
        path: Mapping[str, Value] | None = None,
        query: Mapping[str, Value] | None = None,
        fragment: str | None = None,
    ) -> str:
        """Build a URL this template matches, the inverse of extraction.

        String values are percent-encoded. Optional query parameters
        missing from *query* are left out.

        Raises ``BuildError`` for missing captures, missing required
        parameters, unknown names, or values of the wrong kind.
        """
        path = path or {}
        query = query or {}

        unknown = set(path) - set(self.capture_names)
        if unknown:
            msg = f"Unknown path values {sorted(unknown)} for template {self}."
            raise BuildError(msg)
        unknown = set(query) - set(self.parameters)
        if unknown:
            msg = f"Unknown query values {sorted(unknown)} for template {self}."
            raise BuildError(msg)

        segments: list[str] = []
        for part in self.parts:
            if isinstance(part, Term):
                segments.append(quote(part.symbol, safe=""))
                continue
            if part.name not in path:
                msg = f"Missing path value {part.name!r} for template {self}."
                raise BuildError(msg)
            text = _render(part.name, path[part.name], part.kind)
            if not text:
                msg = f"Path value {part.name!r} renders to an empty segment."
                raise BuildError(msg)
            segments.append(text)

        pairs: list[str] = []
        for param in self.params:
            if param.name not in query:
                if param.required:
                    msg = f"Missing required query value {param.name!r} for template {self}."
                    raise BuildError(msg)
                continue
            pairs.append(f"{param.name}={_render(param.name, query[param.name], param.kind)}")

        url = f"{scheme}://" + "/".join(segments)
        if pairs:
            url += "?" + "&".join(pairs)
        if fragment is not None:
            url += "#" + fragment
        return url

    # Spelled like the URL value kinds; defined last so the builtins stay
    # visible to everything above in the class body.
    int = integer
    bool = boolean


def _render(name: str, value: Value, kind: ValueKind) -> str:
    actual = kind_of(value)
    if kind is ValueKind.FLOAT and actual is ValueKind.INT:
        value = float(value)
        actual = ValueKind.FLOAT
    if actual is not kind:
        found = actual.value if actual else type(value).__name__
        msg = f"Value for {name!r} must be {kind.value}, got {found}."
        raise BuildError(msg)
    text = format_value(value)
    if kind is ValueKind.STR:
        return quote(text, safe="")
    # numeric and bool text is read back undecoded, so it goes out as-is
    return text
