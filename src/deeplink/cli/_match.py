"""``deeplink match`` — recognize one URL and print its values as JSON."""

import argparse
import json
import logging
import sys

from deeplink.cli._resolve import resolve_recognizer

logger = logging.getLogger("deeplink.cli")


def run_match(args: argparse.Namespace) -> None:
    """Match ``args.url`` against the recognizer at ``args.target``.

    Prints ``{"link": ..., "path": ..., "query": ..., "fragment": ...}``
    on success. Exits 1 when nothing matches.
    """
    try:
        recognizer = resolve_recognizer(args.target)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    found = recognizer.resolve(args.url)
    if found is None:
        logger.info("No link type in %r matches %s", recognizer, args.url)
        print(f"No match: {args.url}", file=sys.stderr)
        raise SystemExit(1)

    payload = {"link": found.link_type.__qualname__, **found.values.as_dict()}
    print(json.dumps(payload, indent=2))
