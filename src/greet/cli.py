"""CLI entry point for greet"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .greeter import GreetError, Greeter
from .models import GreetRequest, QuoteStyle

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the greet command."""
    parser = argparse.ArgumentParser(
        prog="greet",
        description="A customizable greeter",
        epilog="Demonstrating how argument parsing works",
        allow_abbrev=False,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    # Both flags share one destination, so a single quote style is kept
    quote_group = parser.add_mutually_exclusive_group()
    quote_group.add_argument(
        "--single-quote",
        dest="quote_style",
        action="store_const",
        const=QuoteStyle.SINGLE,
        help="Wrap output in single quotes",
    )
    quote_group.add_argument(
        "--double-quote",
        dest="quote_style",
        action="store_const",
        const=QuoteStyle.DOUBLE,
        help="Wrap output in double quotes",
    )
    parser.set_defaults(quote_style=QuoteStyle.NONE)

    parser.add_argument(
        "-p",
        "--points",
        type=int,
        help="Number of exclamation points. Defaults to 1. Max 5.",
    )
    parser.add_argument(
        "--name",
        nargs="+",
        default=[],
        help='Name to greet. Defaults to "World".',
    )
    parser.add_argument(
        "content",
        nargs="*",
        default=[],
        help='Custom introduction text. Defaults to "Hello"',
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments, allowing options between content words.

    Everything after the first "--" is content, even words starting with a dash.
    """
    if argv is None:
        argv = sys.argv[1:]
    argv = list(argv)

    trailing = []
    if "--" in argv:
        split = argv.index("--")
        argv, trailing = argv[:split], argv[split + 1 :]

    args = build_parser().parse_intermixed_args(argv)
    args.content = list(args.content) + trailing
    return args


def build_request(args: argparse.Namespace) -> GreetRequest:
    """Build a GreetRequest from parsed arguments."""
    return GreetRequest(
        content=args.content,
        name=args.name,
        quote_style=args.quote_style,
        points=args.points,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.WARNING)

    request = build_request(args)

    try:
        Greeter().run(request)
    except GreetError as e:
        logger.debug(f"Greeting failed: {e!r}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
