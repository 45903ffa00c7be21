"""Value kinds, text converters, and percent-decoding.

Built-in converters for path captures like ``{index:int}`` and for
typed query parameters. Parsing is strict: a converter either accepts
the whole text or raises ``ValueError``.
"""

import re
from collections.abc import Callable
from enum import Enum
from typing import TypeAlias
from urllib.parse import unquote

# A single extracted value. bool is listed before int on purpose: bool
# is an int subclass and must be checked first.
Value: TypeAlias = bool | int | float | str


class ValueKind(Enum):
    """The type a capture or query parameter converts its text to."""

    STR = "str"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"


def _to_bool(text: str) -> bool:
    return text == "true"


# (regex_pattern, converter) for each supported kind
CONVERTERS: dict[ValueKind, tuple[str, Callable[[str], Value]]] = {
    ValueKind.STR: (r"(?s:.*)", str),
    ValueKind.INT: (r"[+-]?[0-9]+", int),
    ValueKind.FLOAT: (
        r"[+-]?(?:(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|(?i:inf|infinity|nan))",
        float,
    ),
    ValueKind.BOOL: (r"true|false", _to_bool),
}

_COMPILED: dict[ValueKind, re.Pattern[str]] = {
    kind: re.compile(pattern) for kind, (pattern, _) in CONVERTERS.items()
}

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def convert_value(text: str, kind: ValueKind) -> Value:
    """Convert *text* to the Python value for *kind*.

    Raises ``ValueError`` if the text is not in the kind's textual form.
    Unlike ``int()`` and ``float()``, surrounding whitespace and digit
    underscores are rejected.
    """
    if _COMPILED[kind].fullmatch(text) is None:
        msg = f"{text!r} is not a valid {kind.value}"
        raise ValueError(msg)
    _, converter = CONVERTERS[kind]
    return converter(text)


def kind_of(value: object) -> ValueKind | None:
    """Return the kind a Python value belongs to, or None if unsupported."""
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, int):
        return ValueKind.INT
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STR
    return None


def format_value(value: Value) -> str:
    """Render a value in the textual form its converter accepts back."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def percent_decode(text: str) -> str:
    """Percent-decode *text*, returning ``""`` if it is not decodable.

    Malformed escapes (``%zz``, a trailing ``%``) and escapes that do not
    form valid UTF-8 both count as undecodable. ``+`` is left alone.
    """
    if _BAD_ESCAPE.search(text):
        return ""
    try:
        return unquote(text, errors="strict")
    except UnicodeDecodeError:
        return ""
