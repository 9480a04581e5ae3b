"""
Output formatters for search results

Turn SearchMatch values into the text lines printed by the CLI.
"""
from collections.abc import Iterable, Iterator

from .core.domain import SearchMatch


def format_match(match: SearchMatch, line_number: bool = False) -> str:
    """Format one match.

    Example output:
        safe, fast, productive.      (default)
        2: safe, fast, productive.   (line_number=True)
    """
    if line_number:
        return f"{match.line_number}: {match.line}"
    return match.line


def format_matches(matches: Iterable[SearchMatch], line_number: bool = False) -> Iterator[str]:
    """Format matches lazily, one output line per match"""
    for match in matches:
        yield format_match(match, line_number)


def format_error(error: Exception) -> str:
    return f"minigrep: {error}"
