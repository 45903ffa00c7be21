"""Recognizer configuration.

RecognizerConfig is a frozen dataclass — immutable after creation,
safe to share between recognizers.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RecognizerConfig:
    """Recognizer configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RecognizerConfig(schemes=frozenset({"demoapp"}), log_misses=True)
    """

    # Only URLs with one of these schemes are considered (empty = any scheme)
    schemes: frozenset[str] = frozenset()

    # A template without query parameters rejects URLs that carry a query string
    strict_query: bool = True

    # Log URLs that match no registered link type at INFO
    log_misses: bool = False

    def accepts_scheme(self, scheme: str) -> bool:
        """Return True if *scheme* passes the configured scheme filter."""
        if not self.schemes:
            return True
        return scheme.lower() in {s.lower() for s in self.schemes}
