"""Value extraction — match one template against one URL.

Pure functions. Each returns the extracted values on success and
``None`` when the URL does not fit the template; a non-match is an
ordinary outcome here, not an exception.
"""

from dataclasses import dataclass
from urllib.parse import urlsplit

from deeplink.params import Value, ValueKind, convert_value, percent_decode
from deeplink.template import QueryParam, Template, Term
from deeplink.values import ExtractedValues, ValueMap


@dataclass(frozen=True, slots=True)
class ParsedURL:
    """A URL split into the pieces templates are matched against.

    Attributes:
        scheme: URL scheme, as written.
        segments: Host (if any) followed by path segments, percent-decoded.
            Empty segments are dropped; undecodable ones become ``""``.
        query: Raw text after ``?``, or None if the URL has no ``?``.
        fragment: Raw text after ``#``, or None if the URL has no ``#``.
    """

    scheme: str
    segments: tuple[str, ...]
    query: str | None
    fragment: str | None


def _host(netloc: str) -> str:
    """Strip userinfo and port from an authority component."""
    host = netloc.rpartition("@")[2]
    if host.startswith("["):
        end = host.find("]")
        return host[: end + 1] if end != -1 else host
    return host.partition(":")[0]


def parse_url(url: str) -> ParsedURL:
    """Split *url* into scheme, decoded segments, query, and fragment.

    Examples::

        "app://select/tab/1"    -> segments ("select", "tab", "1")
        "app://a/b/?x=1#top"    -> segments ("a", "b"), query "x=1", fragment "top"
        "app://Billy%20Bob"     -> segments ("Billy Bob",)
        "app://show/photo?"     -> query ""  (present but empty)
    """
    text = str(url)
    rest, hash_sign, fragment = text.partition("#")
    rest, question_mark, query = rest.partition("?")
    parts = urlsplit(rest)

    raw: list[str] = []
    host = _host(parts.netloc)
    if host:
        raw.append(host)
    raw.extend(parts.path.split("/"))

    return ParsedURL(
        scheme=parts.scheme,
        segments=tuple(percent_decode(seg) for seg in raw if seg),
        query=query if question_mark else None,
        fragment=fragment if hash_sign else None,
    )


def parse_query(query: str) -> dict[str, str]:
    """Split ``a=b&c=d`` into ``{"a": "b", "c": "d"}``.

    Each pair splits on its first ``=``. Pairs without ``=`` are dropped.
    A repeated key keeps its last value. Keys and values stay raw.
    """
    result: dict[str, str] = {}
    for pair in query.split("&"):
        key, equals, value = pair.partition("=")
        if not equals:
            continue
        result[key] = value
    return result


def extract_path_values(template: Template, url: ParsedURL) -> dict[str, Value] | None:
    """Align the URL's segments with the template's path parts.

    Returns capture name -> typed value, or None if the segment count
    differs, a term differs, or a typed capture does not convert.
    """
    if len(url.segments) != len(template.parts):
        return None

    values: dict[str, Value] = {}
    for part, segment in zip(template.parts, url.segments, strict=True):
        if isinstance(part, Term):
            if part.symbol != segment:
                return None
            continue
        try:
            values[part.name] = convert_value(segment, part.kind)
        except ValueError:
            return None
    return values


def _query_value(param: QueryParam, raw: dict[str, str]) -> Value | None:
    if param.name not in raw:
        return None
    text = raw[param.name]
    if param.kind is ValueKind.STR:
        return percent_decode(text)
    try:
        return convert_value(text, param.kind)
    except ValueError:
        return None


def extract_query_values(
    template: Template,
    query: str | None,
    *,
    strict: bool = True,
) -> dict[str, Value] | None:
    """Resolve the template's query parameters against a raw query string.

    A required parameter that is missing or does not convert fails the
    match. An optional one in the same state is left out. When the
    template declares no parameters and *strict* is set, any query
    string at all fails the match.
    """
    if not template.params:
        if query is None or not strict:
            return {}
        return None

    required = [p for p in template.params if p.required]
    optional = [p for p in template.params if not p.required]

    if query is None:
        return None if required else {}

    raw = parse_query(query)
    values: dict[str, Value] = {}

    for param in required:
        value = _query_value(param, raw)
        if value is None:
            return None
        values[param.name] = value

    for param in optional:
        value = _query_value(param, raw)
        if value is not None:
            values[param.name] = value

    return values


def extract_values(
    template: Template,
    url: str | ParsedURL,
    *,
    strict_query: bool = True,
) -> ExtractedValues | None:
    """Match *url* against *template*, returning all extracted values or None."""
    parsed = url if isinstance(url, ParsedURL) else parse_url(url)

    path_values = extract_path_values(template, parsed)
    if path_values is None:
        return None
    query_values = extract_query_values(template, parsed.query, strict=strict_query)
    if query_values is None:
        return None

    return ExtractedValues(
        path=ValueMap(path_values),
        query=ValueMap(query_values),
        fragment=parsed.fragment,
    )
