"""Assertion helpers for deeplink tests.

Convenience functions to verify what a recognizer does with a URL.
Each assertion produces a clear error message on failure.
"""

from typing import Any

from deeplink.recognizer import Recognizer


def assert_matches[L](recognizer: Recognizer[Any], url: str, link_type: type[L]) -> L:
    """Assert *url* is recognized as *link_type* and return the built link."""
    found = recognizer.resolve(url)
    assert found is not None, (
        f"Expected {url!r} to match {link_type.__qualname__}, but nothing matched.\n"
        f"Registered: {recognizer!r}"
    )
    assert found.link_type is link_type, (
        f"Expected {url!r} to match {link_type.__qualname__}, "
        f"matched {found.link_type.__qualname__} instead."
    )
    return found.build()


def assert_no_match(recognizer: Recognizer[Any], url: str) -> None:
    """Assert no registered link type matches *url*."""
    found = recognizer.resolve(url)
    assert found is None, (
        f"Expected {url!r} to match nothing, matched {found.link_type.__qualname__} "
        f"with {found.values.as_dict()!r}"
    )
