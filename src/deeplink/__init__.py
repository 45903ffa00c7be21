"""deeplink — recognize URL shapes and extract typed values from them.

Declare a template per link type, register the types in order, and let
the recognizer build the first one that fits::

    from deeplink import Recognizer, Template, required_str

    class ShowPhoto:
        template = Template().term("show").term("photo").query(required_str("name"))

        def __init__(self, values):
            self.name = values.query.require_str("name")

    recognizer = Recognizer([ShowPhoto])
    link = recognizer.match("demoapp://show/photo?name=dog")
"""

import importlib

__version__ = "0.1.0"
__all__ = [
    "BuildError",
    "Capture",
    "ConfigurationError",
    "DeepLink",
    "DeepLinkError",
    "ExtractedValues",
    "LinkMatch",
    "QueryParam",
    "Recognizer",
    "RecognizerConfig",
    "Template",
    "Term",
    "ValueKind",
    "ValueLookupError",
    "ValueMap",
    "extract_values",
    "optional_bool",
    "optional_float",
    "optional_int",
    "optional_str",
    "required_bool",
    "required_float",
    "required_int",
    "required_str",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "BuildError": "deeplink.errors",
    "ConfigurationError": "deeplink.errors",
    "DeepLinkError": "deeplink.errors",
    "ValueLookupError": "deeplink.errors",
    "Capture": "deeplink.template",
    "QueryParam": "deeplink.template",
    "Template": "deeplink.template",
    "Term": "deeplink.template",
    "optional_bool": "deeplink.template",
    "optional_float": "deeplink.template",
    "optional_int": "deeplink.template",
    "optional_str": "deeplink.template",
    "required_bool": "deeplink.template",
    "required_float": "deeplink.template",
    "required_int": "deeplink.template",
    "required_str": "deeplink.template",
    "DeepLink": "deeplink.recognizer",
    "LinkMatch": "deeplink.recognizer",
    "Recognizer": "deeplink.recognizer",
    "ExtractedValues": "deeplink.values",
    "ValueMap": "deeplink.values",
    "RecognizerConfig": "deeplink.config",
    "ValueKind": "deeplink.params",
    "extract_values": "deeplink.extraction",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import deeplink`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(importlib.import_module(module_name), name)
