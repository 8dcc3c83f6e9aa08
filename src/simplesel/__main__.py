#!/usr/bin/env python3
"""Command-line interface for simplesel."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import Any, NoReturn

from .errors import SelectorError
from .selector import Selector, SelectorRegistry


def _get_version() -> str:
    try:
        return version("simplesel")
    except PackageNotFoundError:  # pragma: no cover
        return "dev"


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="simplesel",
        description="Tokenize simple CSS selectors and list the attributes they depend on.",
        epilog=(
            "Examples:\n"
            "  simplesel 'a.external[href^=\"http\"]'\n"
            "  simplesel ':not(.hidden)' --format json\n"
            "  cat selectors.txt | simplesel - --attributes\n"
            "\n"
            "If you don't have the 'simplesel' command available, use:\n"
            "  python -m simplesel ...\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "selector",
        nargs="?",
        help="Selector to tokenize, or '-' to read one selector per line from stdin",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--attributes",
        action="store_true",
        help="Only output the attribute names each selector depends on",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug messages to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"simplesel {_get_version()}",
    )

    args = parser.parse_args(argv)

    if not args.selector:
        parser.print_help(sys.stderr)
        raise SystemExit(1)

    return args


def _read_sources(selector: str) -> list[str]:
    if selector == "-":
        return [line for line in sys.stdin.read().splitlines() if line.strip()]

    return [selector]


def _selector_to_dict(selector: Selector) -> dict[str, Any]:
    return {
        "source": selector.source,
        "tokens": [
            {
                "kind": token.kind,
                "value": token.value,
                "negated": token.negated,
                "attribute": token.attribute,
                "operator": token.operator,
                "operand": token.operand,
            }
            for token in selector.tokens
        ],
        "attributes": sorted(selector.attributes),
    }


def _format_text(selector: Selector) -> str:
    lines = [
        f"{token.kind}\t{token.value}\t{'negated' if token.negated else '-'}\t{token.attribute or '-'}"
        for token in selector.tokens
    ]
    lines.append("attributes: " + " ".join(sorted(selector.attributes)))
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> NoReturn | None:
    args = _parse_args(sys.argv[1:] if argv is None else argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            stream=sys.stderr,
        )

    registry = SelectorRegistry(thread_safe=False)
    try:
        selectors = [registry.get(source) for source in _read_sources(args.selector)]
    except SelectorError as e:
        print(str(e), file=sys.stderr)
        raise SystemExit(2) from e

    if args.attributes:
        names = sorted({name for selector in selectors for name in selector.attributes})
        if names:
            sys.stdout.write("\n".join(names))
            sys.stdout.write("\n")
        return None

    if args.format == "json":
        sys.stdout.write(json.dumps([_selector_to_dict(selector) for selector in selectors], indent=2))
        sys.stdout.write("\n")
        return None

    sys.stdout.write("\n\n".join(_format_text(selector) for selector in selectors))
    sys.stdout.write("\n")
    return None


if __name__ == "__main__":
    main()
