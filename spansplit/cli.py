#!/usr/bin/env python3
"""
Command-line interface for spansplit.

Reads whitespace-separated tokens from a file or stdin and prints the spans
they split into, one span per line.

Usage:
    echo 1 2 5 6 7 11 13 14 15 | spansplit
    spansplit --mode equal-length words.txt
    spansplit --mode gap --gap 3 --lengths numbers.txt
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Callable, Iterable, Iterator, List, Optional, TextIO, Tuple

from tqdm import tqdm

from spansplit.core.constants import (
    DEFAULT_GAP,
    DEFAULT_MODE,
    LENGTH_LINE_FORMAT,
    MODE_CONSECUTIVE,
    MODE_EQUAL_LENGTH,
    MODE_GAP,
    MODES,
    PROGRESS_DESC,
    PROGRESS_UNIT,
    SPAN_LINE_FORMAT,
)
from spansplit.core.splitter import SpanSplitter, spans_by_key
from spansplit.utils.iteration import collect_spans, span_lengths
from spansplit.utils.predicates import equal, identity, successor, within

logger = logging.getLogger(__name__)


def iter_tokens(stream: TextIO) -> Iterator[str]:
    """Yield whitespace-separated tokens from a text stream, line by line."""
    for line in stream:
        yield from line.split()


def parse_int_token(token: str) -> int:
    """
    Convert a token to an integer.

    Raises:
        ValueError: If the token is not an integer
    """
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"Expected an integer token, got {token!r}") from None


def build_rule(mode: str, gap: int) -> Tuple[Callable[[str], Any], Callable[[Any], Any], Callable[[Any, Any], bool]]:
    """
    Select the item parser, key projection and adjacency predicate for a mode.

    Args:
        mode: One of the MODES constants
        gap: Maximum step for the gap mode

    Returns:
        A (parse, key_fn, adjacent_fn) tuple

    Raises:
        ValueError: If the mode is unknown or the gap is negative
    """
    if mode == MODE_CONSECUTIVE:
        return parse_int_token, identity, successor
    if mode == MODE_EQUAL_LENGTH:
        return str, len, equal
    if mode == MODE_GAP:
        return parse_int_token, identity, within(gap)
    raise ValueError(f"Unknown mode: {mode}. Choose from {list(MODES)}")


def split_tokens(
    tokens: Iterable[str], mode: str = DEFAULT_MODE, gap: int = DEFAULT_GAP
) -> SpanSplitter[Any, Any]:
    """
    Split raw tokens into spans according to a CLI mode.

    Tokens are parsed lazily as the spans are read.

    Args:
        tokens: The raw tokens
        mode: One of the MODES constants
        gap: Maximum step for the gap mode

    Returns:
        A SpanSplitter over the parsed tokens
    """
    parse, key_fn, adjacent_fn = build_rule(mode, gap)
    return spans_by_key((parse(token) for token in tokens), key_fn, adjacent_fn)


def format_spans(splitter: SpanSplitter[Any, Any], lengths: bool = False) -> Iterator[str]:
    """Yield one output line per span."""
    if lengths:
        for length in span_lengths(splitter):
            yield LENGTH_LINE_FORMAT.format(length=length)
    else:
        for items in collect_spans(splitter):
            yield SPAN_LINE_FORMAT.format(items=items)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the spansplit command."""
    parser = argparse.ArgumentParser(
        description="Split a sequence of tokens into contiguous spans"
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        default=None,
        help="File of whitespace-separated tokens (default: stdin)",
    )
    parser.add_argument(
        "--mode",
        type=str,
        default=DEFAULT_MODE,
        choices=list(MODES),
        help="Rule joining consecutive tokens into a span",
    )
    parser.add_argument(
        "--gap",
        type=int,
        default=None,
        help=f"Largest step between joined integers, only valid with --mode gap (default: {DEFAULT_GAP})",
    )
    parser.add_argument("--lengths", action="store_true", help="Print span lengths only")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar on stderr")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def run(args: argparse.Namespace, stream: TextIO, out: TextIO) -> None:
    """Split the tokens of a stream and write the spans to out."""
    tokens: Iterable[str] = iter_tokens(stream)
    tokens = tqdm(tokens, desc=PROGRESS_DESC, unit=PROGRESS_UNIT, disable=not args.progress)
    try:
        splitter = split_tokens(tokens, mode=args.mode, gap=args.gap)
        for line in format_spans(splitter, lengths=args.lengths):
            out.write(line + "\n")
    finally:
        tokens.close()


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the spansplit command.

    Args:
        argv: Command-line arguments, defaults to sys.argv[1:]

    Returns:
        The process exit status
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.verbose:
        logging.getLogger("spansplit").setLevel(logging.DEBUG)

    if args.gap is None:
        args.gap = DEFAULT_GAP
    elif args.mode != MODE_GAP:
        parser.error(f"--gap is only valid with --mode {MODE_GAP}")
    if args.gap < 0:
        parser.error(f"--gap must be non-negative, got {args.gap}")

    source = args.input if args.input is not None else "stdin"

    try:
        if args.input is None:
            run(args, sys.stdin, sys.stdout)
        else:
            logger.debug("Reading tokens from %s", args.input)
            with open(args.input, "r", encoding="utf-8") as f:
                run(args, f, sys.stdout)
    except FileNotFoundError:
        print(f"Error: input file not found: {args.input}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: cannot read input file {args.input}: {e.strerror}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        print(f"Error: cannot decode {source} as UTF-8: {e.reason}", file=sys.stderr)
        return 1
    except ValueError as e:
        parser.error(str(e))

    return 0


if __name__ == "__main__":
    sys.exit(main())
