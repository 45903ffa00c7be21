"""``deeplink templates`` — list registered link types.

Resolves an import string to a Recognizer and prints its link types in
match order with their template patterns.
"""

import argparse
import sys

from deeplink.cli._resolve import resolve_recognizer


def run_templates(args: argparse.Namespace) -> None:
    """Print a table of ORDER, LINK and TEMPLATE for ``args.target``."""
    try:
        recognizer = resolve_recognizer(args.target)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if not recognizer.link_types:
        print("No link types registered.")
        return

    rows = [
        (str(i), link_type.__qualname__, str(link_type.template) or "(empty)")
        for i, link_type in enumerate(recognizer.link_types, start=1)
    ]

    max_order = max(max(len(r[0]) for r in rows), 5)  # "ORDER" header
    max_link = max(max(len(r[1]) for r in rows), 4)  # "LINK" header

    fmt = f"{{:<{max_order}}}  {{:<{max_link}}}  {{}}"
    print(fmt.format("ORDER", "LINK", "TEMPLATE"))
    sep_len = max_order + max_link + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for order, link, template in rows:
        print(fmt.format(order, link, template))
