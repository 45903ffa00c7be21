"""deeplink CLI — try URLs against a recognizer from the command line.

Entry point registered as ``deeplink`` in ``pyproject.toml``::

    [project.scripts]
    deeplink = "deeplink.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``deeplink`` command."""
    parser = argparse.ArgumentParser(
        prog="deeplink",
        description="deeplink — recognize URL shapes and extract typed values.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every template tried (DEBUG level)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- deeplink match ---------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Match a URL and print its values")
    match_parser.add_argument(
        "target",
        help="Import string of a Recognizer (e.g. myapp.links:recognizer)",
    )
    match_parser.add_argument("url", help="URL to recognize")

    # -- deeplink templates -----------------------------------------------
    templates_parser = subparsers.add_parser(
        "templates", help="List registered link types and their templates"
    )
    templates_parser.add_argument(
        "target",
        help="Import string of a Recognizer (e.g. myapp.links:recognizer)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command == "match":
        from deeplink.cli._match import run_match

        run_match(args)
    elif args.command == "templates":
        from deeplink.cli._templates import run_templates

        run_templates(args)
