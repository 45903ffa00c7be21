"""Demo — a tabbed app that navigates in response to deep links.

Demonstrates link types as dataclasses, a scheme-filtered recognizer,
and dispatching on the matched link with a ``match`` statement.

Try:
    PYTHONPATH=. deeplink templates app:recognizer
    PYTHONPATH=. deeplink match app:recognizer "demoapp://select/tab/1"
    PYTHONPATH=. deeplink match app:recognizer "demoapp://show/photo?name=dog"
"""

import logging
from dataclasses import dataclass, field
from typing import ClassVar

from deeplink import (
    ExtractedValues,
    Recognizer,
    RecognizerConfig,
    Template,
    optional_float,
    required_str,
)

logger = logging.getLogger("demo")


@dataclass(frozen=True, slots=True)
class SelectTab:
    """demoapp://select/tab/1"""

    template: ClassVar[Template] = Template().term("select").term("tab").int("index")

    index: int

    @classmethod
    def from_values(cls, values: ExtractedValues) -> "SelectTab":
        return cls(index=values.path.require_int("index"))


@dataclass(frozen=True, slots=True)
class ShowPhoto:
    """demoapp://show/photo?name=cat&zoom=1.5"""

    template: ClassVar[Template] = (
        Template()
        .term("show")
        .term("photo")
        .query(required_str("name"), optional_float("zoom"))
    )

    name: str
    zoom: float = 1.0

    @classmethod
    def from_values(cls, values: ExtractedValues) -> "ShowPhoto":
        return cls(
            name=values.query.require_str("name"),
            zoom=values.query.get_float("zoom", 1.0),
        )


recognizer = Recognizer(
    [SelectTab, ShowPhoto],
    RecognizerConfig(schemes=frozenset({"demoapp"}), log_misses=True),
)


@dataclass
class TabBar:
    """Stand-in for the app's UI: a row of tabs and a photo viewer."""

    tabs: tuple[str, ...] = ("red", "orange", "green")
    selected: int = 0
    photos: frozenset[str] = frozenset({"cat", "dog"})
    presented: list[tuple[str, float]] = field(default_factory=list)

    def open_url(self, url: str) -> bool:
        """Navigate to whatever *url* points at. Returns False if it can't."""
        match recognizer.match(url):
            case SelectTab(index=index):
                return self.select_tab(index)
            case ShowPhoto(name=name, zoom=zoom):
                return self.show_photo(name, zoom)
            case None:
                return False

    def select_tab(self, index: int) -> bool:
        if not 0 <= index < len(self.tabs):
            logger.warning("No tab at index %d", index)
            return False
        self.selected = index
        return True

    def show_photo(self, name: str, zoom: float) -> bool:
        if name not in self.photos:
            logger.warning("No photo named %r", name)
            return False
        self.presented.append((name, zoom))
        return True
