#!/usr/bin/env python3
"""
esxml-py CLI Entry Point

Renders esxml or SXML trees stored as JSON documents to markup.
"""

import argparse
import json
import logging
import sys
from typing import Any, List, Optional

from .errors import InvalidNodeError
from .json_input import from_json, sxml_from_json
from .serialize.xml import to_markup
from .sxml import sxml_to_esxml

logger = logging.getLogger(__name__)


def load_document(source: str) -> Any:
    """Read a JSON document from a file path, or stdin for '-'"""
    if source == "-":
        return json.load(sys.stdin)
    with open(source, encoding="utf-8") as handle:
        return json.load(handle)


def cmd_render(args: argparse.Namespace) -> int:
    """Render a JSON-encoded tree and print the markup"""
    try:
        data = load_document(args.file)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {args.file}: {e}", file=sys.stderr)
        return 1
    except FileNotFoundError:
        print(f"Error: File not found: {args.file}", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Cannot read {args.file}: {e}", file=sys.stderr)
        return 1

    try:
        if args.format == "sxml":
            tree = sxml_to_esxml(sxml_from_json(data))
        else:
            tree = from_json(data)
        markup = to_markup(tree)
    except InvalidNodeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.debug(f"Rendered {len(markup)} characters from {args.file}")
    print(markup)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point"""
    parser = argparse.ArgumentParser(
        description="Render esxml trees to markup",
        prog="esxml_py"
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 1.0.0"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # render command
    render_parser = subparsers.add_parser("render", help="Render a JSON-encoded tree")
    render_parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="JSON file to render (default: stdin)"
    )
    render_parser.add_argument(
        "--format", "-f",
        default="esxml",
        choices=["esxml", "sxml"],
        help="Tree notation of the input (default: esxml)"
    )

    args = parser.parse_args(argv)

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    if args.command == "render":
        return cmd_render(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
