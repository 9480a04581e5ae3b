"""
Line Search Adapter

Implements LineSearcher port with an in-memory substring scan.
"""
import re
from collections.abc import Iterator

from ..core.domain import Document, SearchConfig, SearchMatch
from ..core.ports import LineSearcher


class SubstringSearcher(LineSearcher):
    """Plain substring containment, optionally case-folded or word-bounded"""

    def search(self, document: Document, config: SearchConfig) -> Iterator[SearchMatch]:
        """Yield lines passing the containment test, in document order"""
        matches = self._matcher(config)

        for line_number, line in enumerate(document.lines, 1):
            # -v flips the selection
            if matches(line) != config.invert_match:
                yield SearchMatch(line_number=line_number, line=line)

    def _matcher(self, config: SearchConfig):
        """Build the per-line predicate for this config"""
        query = config.query.lower() if config.ignore_case else config.query

        def fold(line: str) -> str:
            return line.lower() if config.ignore_case else line

        if config.whole_word:
            # Query text is escaped; only the word boundaries are pattern syntax
            bounded = re.compile(rf"\b{re.escape(query)}\b")
            return lambda line: bounded.search(fold(line)) is not None

        return lambda line: query in fold(line)
