"""
Application Services - Use cases that orchestrate domain logic

These are the entry points to the core. They coordinate between
domain models and ports, but contain no infrastructure concerns.
"""
import logging
from collections.abc import Iterator

from .domain import SearchConfig, SearchMatch
from .ports import DocumentRepository, LineSearcher

logger = logging.getLogger(__name__)


class SearchFileService:
    """Use case: Search one file for lines containing a query"""

    def __init__(
        self,
        repository: DocumentRepository,
        searcher: LineSearcher
    ):
        self.repository = repository
        self.searcher = searcher

    def execute(self, config: SearchConfig) -> Iterator[SearchMatch]:
        """
        Load the file named by config.path and scan it.

        The document is read before this returns, so a DocumentReadError
        surfaces before any match is produced. The returned iterator is lazy
        and can only be consumed once.
        """
        document = self.repository.load(config.path)
        logger.debug("loaded %s (%d lines)", document.path, document.total_lines)
        return self._counted(self.searcher.search(document, config), config)

    def _counted(self, matches: Iterator[SearchMatch], config: SearchConfig) -> Iterator[SearchMatch]:
        count = 0
        for match in matches:
            count += 1
            yield match
        logger.debug("search for %r in %s finished: %d matches", config.query, config.path, count)
