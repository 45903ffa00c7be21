"""deeplink exception hierarchy.

Shared across Template, Recognizer, and the CLI so every module
raises and catches the same types. A URL that matches nothing is not
an error and never raises.
"""


class DeepLinkError(Exception):
    """Base for all deeplink-specific errors."""


class ConfigurationError(DeepLinkError):
    """Raised when a template or recognizer is declared incorrectly.

    Typically raised while building a ``Template`` or constructing a
    ``Recognizer``, never while matching.
    """


class ValueLookupError(DeepLinkError, KeyError):
    """A typed lookup on extracted values failed.

    The key was missing or held a value of a different kind. Usually
    means a link type reads a value its own template does not declare.
    """

    def __init__(self, name: str, detail: str) -> None:
        super().__init__(name)
        self.name = name
        self.detail = detail

    def __str__(self) -> str:
        return f"{self.name!r}: {self.detail}"


class BuildError(DeepLinkError):
    """Values passed to ``Template.build_url()`` do not satisfy the template."""
