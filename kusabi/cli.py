import argparse
import json
import logging
import sys

from kusabi.errors import ParseError
from kusabi.node import print_tree
from kusabi.parser import parse
from kusabi.source import DocumentSource


logger = logging.getLogger(__name__)

DEFAULT_RECURSION_LIMIT = 5000
MIN_RECURSION_LIMIT = 1000
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def recursion_limit(value: str) -> int:
    number = int(value)
    if number < MIN_RECURSION_LIMIT:
        raise argparse.ArgumentTypeError(
            "must be at least {}: {}".format(MIN_RECURSION_LIMIT, value)
        )
    return number


def build_argparser() -> argparse.ArgumentParser:
    argparser = argparse.ArgumentParser(
        prog="kusabi",
        description="Parse a small markup document and print its node tree."
    )
    argparser.add_argument(
        "location",
        help="path, file:// URL, data: URL, or - for stdin"
    )
    argparser.add_argument("--format", choices=["tree", "json"], default="tree")
    argparser.add_argument(
        "--recursion-limit",
        type=recursion_limit,
        default=DEFAULT_RECURSION_LIMIT,
        help="raise for deeply nested documents"
    )
    argparser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        default="WARNING"
    )
    return argparser


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    logging.basicConfig(level=args.log_level)

    # recursion limit increase for deeply nested documents
    previous_limit = sys.getrecursionlimit()
    sys.setrecursionlimit(args.recursion_limit)
    try:
        return run(args)
    finally:
        sys.setrecursionlimit(previous_limit)


def run(args: argparse.Namespace) -> int:
    try:
        source = DocumentSource.parse(args.location)
        document = source.read()
    except (OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    logger.info("parsing %d characters from %s", len(document), args.location)
    try:
        root = parse(document)
    except ParseError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.format == "json":
        print(json.dumps(root.to_dict(), indent=2, ensure_ascii=False))
    else:
        print_tree(root)
    return 0
