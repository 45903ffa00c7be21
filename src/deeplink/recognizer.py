"""Recognizer — try link types in order, build the first that matches.

Link types are registered once, at construction, and never change.
Matching is a pure function of (link types, URL), so one recognizer
can serve any number of concurrent callers.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar, Protocol

from deeplink.config import RecognizerConfig
from deeplink.errors import ConfigurationError
from deeplink.extraction import ParsedURL, extract_values, parse_url
from deeplink.template import Template
from deeplink.values import ExtractedValues

logger = logging.getLogger("deeplink.recognizer")


class DeepLink(Protocol):
    """A type whose instances are built from values extracted from a URL.

    Implementations declare a class-level ``template`` and accept the
    extracted values in their constructor::

        class SelectTab:
            template = Template().term("select").term("tab").int("index")

            def __init__(self, values: ExtractedValues) -> None:
                self.index = values.path.require_int("index")

    A class may instead provide a ``from_values`` classmethod, which
    takes precedence over the constructor. This suits dataclasses::

        @dataclass(frozen=True, slots=True)
        class ShowPhoto:
            template: ClassVar[Template] = (
                Template().term("show").term("photo").query(required_str("name"))
            )
            name: str

            @classmethod
            def from_values(cls, values: ExtractedValues) -> "ShowPhoto":
                return cls(name=values.query.require_str("name"))
    """

    template: ClassVar[Template]

    def __init__(self, values: ExtractedValues) -> None: ...


@dataclass(frozen=True, slots=True)
class LinkMatch[L]:
    """Result of a successful match, before the link type is built."""

    link_type: type[L]
    values: ExtractedValues

    def build(self) -> L:
        """Construct the matched link type from the extracted values."""
        factory = getattr(self.link_type, "from_values", None)
        if factory is not None:
            return factory(self.values)
        return self.link_type(self.values)  # type: ignore[call-arg]


class Recognizer[L: DeepLink]:
    """Matches URLs against an ordered list of link types.

    Usage::

        recognizer = Recognizer([SelectTab, ShowPhoto])
        match recognizer.match("demoapp://select/tab/1"):
            case SelectTab(index=index):
                ...
            case ShowPhoto(name=name):
                ...
            case None:
                ...

    When two templates both fit a URL, the one registered first wins.
    """

    __slots__ = ("_config", "_link_types")

    def __init__(
        self,
        link_types: Iterable[type[L]],
        config: RecognizerConfig | None = None,
    ) -> None:
        types = tuple(link_types)
        for link_type in types:
            template = getattr(link_type, "template", None)
            if not isinstance(template, Template):
                name = getattr(link_type, "__qualname__", repr(link_type))
                msg = (
                    f"{name} has no usable 'template' attribute "
                    f"(expected Template, got {type(template).__name__})."
                )
                raise ConfigurationError(msg)
        self._link_types = types
        self._config = config or RecognizerConfig()

    @property
    def link_types(self) -> tuple[type[L], ...]:
        """Registered link types, in match order."""
        return self._link_types

    @property
    def config(self) -> RecognizerConfig:
        return self._config

    def resolve(self, url: str) -> LinkMatch[L] | None:
        """Find the first link type whose template matches *url*.

        Returns a ``LinkMatch`` holding the type and its extracted values,
        or None if no registered template matches.
        """
        try:
            parsed = parse_url(url)
        except ValueError as exc:
            logger.debug("Cannot parse %r as a URL: %s", url, exc)
            return self._miss(url)

        if not self._config.accepts_scheme(parsed.scheme):
            logger.debug("Scheme %r of %r is not accepted", parsed.scheme, url)
            return self._miss(url)

        for link_type in self._link_types:
            values = self._try(link_type, parsed)
            if values is not None:
                logger.debug("%r matched %s", url, link_type.__qualname__)
                return LinkMatch(link_type=link_type, values=values)

        return self._miss(url)

    def match(self, url: str) -> L | None:
        """Return a new instance of the first link type matching *url*, or None.

        Exceptions raised while constructing the link type propagate:
        they signal a link type that disagrees with its own template.
        """
        found = self.resolve(url)
        if found is None:
            return None
        return found.build()

    def _try(self, link_type: type[L], parsed: ParsedURL) -> ExtractedValues | None:
        values = extract_values(
            link_type.template,
            parsed,
            strict_query=self._config.strict_query,
        )
        if values is None:
            logger.debug("No match: %s (%s)", link_type.__qualname__, link_type.template)
        return values

    def _miss(self, url: str) -> None:
        if self._config.log_misses:
            logger.info("Unable to match URL: %s", url)
        return None

    def __repr__(self) -> str:
        names = ", ".join(t.__qualname__ for t in self._link_types)
        return f"Recognizer([{names}])"
