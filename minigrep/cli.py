#!/usr/bin/env python3
"""
CLI for minigrep - print lines of a file that contain a query

Usage:
  minigrep safe poem.txt                  # Lines containing "safe"
  minigrep -i SAFE poem.txt               # Case-insensitive
  minigrep safe poem.txt -n               # Prefix "LINE: " (flags may follow positionals)
  minigrep -v safe poem.txt               # Lines NOT containing "safe"
  minigrep -w rust notes.txt              # "rust" as a whole word only

Environment:
  MINIGREP_LOG_LEVEL   Log level for stderr diagnostics (default: WARNING)
  MINIGREP_ENCODING    Text encoding of the searched file (default: utf-8)
"""

import argparse
import logging
import os
import sys
from collections.abc import Sequence
from typing import Optional

from . import __version__
from .container import Container
from .core import ArgumentError, MinigrepError, SearchConfig
from .formatters import format_error, format_matches

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_log_level() -> int:
    """Get log level from env or use fallback"""
    name = os.environ.get("MINIGREP_LOG_LEVEL", "WARNING").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def get_encoding() -> str:
    """Get file encoding from env or use fallback"""
    return os.environ.get("MINIGREP_ENCODING", "utf-8")


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises ArgumentError instead of exiting"""

    def error(self, message):
        raise ArgumentError(message, usage=self.format_usage())


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="minigrep",
        description="Print lines of FILE that contain QUERY"
    )
    parser.add_argument("query", help="Substring to search for")
    parser.add_argument("path", help="Text file to search")
    parser.add_argument(
        "-i", "--ignore-case",
        action="store_true",
        help="Ignore case distinctions in query and lines"
    )
    parser.add_argument(
        "-n", "--line-number",
        action="store_true",
        help="Prefix each output line with its 1-based line number"
    )
    parser.add_argument(
        "-v", "--invert-match",
        action="store_true",
        help="Print lines that do NOT contain the query"
    )
    parser.add_argument(
        "-w", "--word-regexp", "--whole-word",
        dest="whole_word",
        action="store_true",
        help="Only match the query as a whole word"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def resolve_config(argv: Optional[Sequence[str]] = None) -> SearchConfig:
    """Parse command-line arguments into a SearchConfig.

    Flags may appear before, between or after the positionals.
    Raises ArgumentError on missing or malformed input.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.query:
        raise ArgumentError("query must not be empty", usage=parser.format_usage())

    return SearchConfig(
        query=args.query,
        path=args.path,
        ignore_case=args.ignore_case,
        line_number=args.line_number,
        invert_match=args.invert_match,
        whole_word=args.whole_word,
    )


def search_command(config: SearchConfig, encoding: str) -> int:
    """Search one file and print matches"""
    container = Container(encoding=encoding)
    matches = container.search_file.execute(config)

    for line in format_matches(matches, config.line_number):
        print(line)

    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    logging.basicConfig(level=get_log_level(), format=LOG_FORMAT, stream=sys.stderr)

    try:
        config = resolve_config(argv)
        logger.debug("resolved %s", config)
        return search_command(config, get_encoding())
    except ArgumentError as e:
        logger.debug("argument error: %s", e)
        sys.stderr.write(e.usage)
        print(format_error(e), file=sys.stderr)
        return e.exit_code
    except MinigrepError as e:
        logger.debug("search failed: %r", e.__cause__)
        print(format_error(e), file=sys.stderr)
        return e.exit_code
    except BrokenPipeError:
        # Reader went away (e.g. piped into head); stop quietly
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        os.close(devnull)
        return 0


if __name__ == "__main__":
    sys.exit(main())
