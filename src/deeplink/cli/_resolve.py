"""Locate the recognizer a CLI command works on."""

import importlib
from typing import Any

from deeplink.recognizer import Recognizer


def resolve_recognizer(target: str) -> Recognizer[Any]:
    """Import ``"package.module:name"`` and return the Recognizer it names.

    *name* defaults to ``recognizer``. If it names a zero-argument
    function instead, the function is called and must return one.

    Raises ``ModuleNotFoundError`` or ``AttributeError`` when the target
    does not exist, and ``TypeError`` when it is not a Recognizer.
    """
    module_path, _, attr_name = target.partition(":")
    obj = getattr(importlib.import_module(module_path), attr_name or "recognizer")

    if not isinstance(obj, Recognizer) and callable(obj):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"{target!r} could not build a recognizer: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, Recognizer):
        msg = f"{target!r} is a {type(obj).__name__}, not a deeplink.Recognizer"
        raise TypeError(msg)
    return obj
