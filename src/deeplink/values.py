"""Extracted values — the typed result of matching a URL against a template.

``ValueMap`` implements ``Mapping[str, Value]`` with narrow typed
accessors, so a link type can read exactly the kind its template
promised and fail loudly when it reads something else.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from deeplink.errors import ValueLookupError
from deeplink.params import Value, ValueKind, kind_of


class ValueMap(Mapping[str, Value]):
    """Immutable name -> value mapping.

    ``get_<kind>`` returns *default* when the name is missing.
    ``require_<kind>`` raises ``ValueLookupError`` when it is missing.
    Both raise ``ValueLookupError`` when the stored value is of another kind.
    """

    _data: dict[str, Value]

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Value] | None = None) -> None:
        self._data = dict(data or {})

    def __getitem__(self, key: str) -> Value:
        return self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {v!r}" for k, v in self._data.items())
        return f"ValueMap({{{items}}})"

    def _lookup(self, name: str, kind: ValueKind, *, required: bool, default: Any) -> Any:
        if name not in self._data:
            if required:
                raise ValueLookupError(name, "no such value")
            return default
        value = self._data[name]
        actual = kind_of(value)
        if actual is not kind:
            found = actual.value if actual else type(value).__name__
            raise ValueLookupError(name, f"expected {kind.value}, found {found}")
        return value

    def get_int(self, name: str, default: int | None = None) -> int | None:
        """Return the int stored under *name*, or *default* if missing."""
        return self._lookup(name, ValueKind.INT, required=False, default=default)

    def get_bool(self, name: str, default: bool | None = None) -> bool | None:
        """Return the bool stored under *name*, or *default* if missing."""
        return self._lookup(name, ValueKind.BOOL, required=False, default=default)

    def get_float(self, name: str, default: float | None = None) -> float | None:
        """Return the float stored under *name*, or *default* if missing."""
        return self._lookup(name, ValueKind.FLOAT, required=False, default=default)

    def get_str(self, name: str, default: str | None = None) -> str | None:
        """Return the string stored under *name*, or *default* if missing."""
        return self._lookup(name, ValueKind.STR, required=False, default=default)

    def require_int(self, name: str) -> int:
        return self._lookup(name, ValueKind.INT, required=True, default=None)

    def require_bool(self, name: str) -> bool:
        return self._lookup(name, ValueKind.BOOL, required=True, default=None)

    def require_float(self, name: str) -> float:
        return self._lookup(name, ValueKind.FLOAT, required=True, default=None)

    def require_str(self, name: str) -> str:
        return self._lookup(name, ValueKind.STR, required=True, default=None)


@dataclass(frozen=True, slots=True)
class ExtractedValues:
    """Values extracted from a URL by a template.

    Attributes:
        path: Captured path values, keyed by capture name.
        query: Resolved query parameters, keyed by parameter name.
        fragment: Text after ``#``, undecoded, or None if the URL has none.
    """

    path: ValueMap = field(default_factory=ValueMap)
    query: ValueMap = field(default_factory=ValueMap)
    fragment: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Plain-dict form, suitable for JSON output."""
        return {
            "path": dict(self.path),
            "query": dict(self.query),
            "fragment": self.fragment,
        }
