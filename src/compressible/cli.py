"""Command line interface for the compressibility classifier."""

import argparse
import json
import logging
import sys
from dataclasses import asdict

from . import __version__
from .classifier import Classification, classify

logger = logging.getLogger("compressible.cli")

EXIT_ALL_COMPRESSIBLE = 0
EXIT_NOT_COMPRESSIBLE = 1


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="compressible",
        description="Check whether content types are worth compressing",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  compressible text/html                      # prints "text/html<TAB>true"
  compressible --explain image/svg+xml video/mp4
  compressible --json "application/json; charset=utf-8"
  cut -f2 types.tsv | compressible -          # read types from stdin
  compressible --serve                        # run the HTTP daemon

Exit status is 0 when every content type is compressible, 1 otherwise.
        """,
    )

    parser.add_argument(
        "content_types",
        nargs="*",
        metavar="CONTENT_TYPE",
        help="Content types to classify ('-' or none reads one per line from stdin)",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as a JSON array",
    )

    parser.add_argument(
        "--explain",
        action="store_true",
        help="Include the rule that decided each result",
    )

    parser.add_argument(
        "--serve",
        action="store_true",
        help="Run the classification daemon instead",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    args = parser.parse_args(argv)
    if args.serve and args.content_types:
        parser.error("--serve does not take content types")
    return args


def read_content_types(args: argparse.Namespace) -> list[str]:
    """Collect content types from arguments, expanding '-' to stdin lines."""
    if not args.content_types:
        return _read_stdin()

    content_types = []
    for value in args.content_types:
        if value == "-":
            content_types.extend(_read_stdin())
        else:
            content_types.append(value)
    return content_types


def _read_stdin() -> list[str]:
    return [line.strip() for line in sys.stdin if line.strip()]


def format_text(results: list[Classification], explain: bool = False) -> str:
    """Format results as tab separated lines."""
    lines = []
    for r in results:
        verdict = "true" if r.compressible else "false"
        if explain:
            lines.append(f"{r.content_type}\t{verdict}\t{r.reason.value}")
        else:
            lines.append(f"{r.content_type}\t{verdict}")
    return "\n".join(lines)


def format_json(results: list[Classification]) -> str:
    """Format results as a JSON array."""
    payload = []
    for r in results:
        item = asdict(r)
        item["reason"] = r.reason.value
        payload.append(item)
    return json.dumps(payload, indent=2)


def main(argv: list[str] | None = None) -> int:
    """Run the CLI."""
    args = parse_args(argv)

    # The daemon configures its own logging on import
    if args.serve:
        from .daemon import main as serve

        serve()
        return 0

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s - %(levelname)s - %(message)s",
    )

    content_types = read_content_types(args)
    if not content_types:
        logger.warning("No content types given")
        return EXIT_NOT_COMPRESSIBLE

    results = [classify(ct) for ct in content_types]
    for r in results:
        logger.debug(f"{r.content_type!r} -> essence={r.essence!r} reason={r.reason.value}")

    if args.json:
        print(format_json(results))
    else:
        print(format_text(results, explain=args.explain))

    if all(r.compressible for r in results):
        return EXIT_ALL_COMPRESSIBLE
    return EXIT_NOT_COMPRESSIBLE


if __name__ == "__main__":
    sys.exit(main())
