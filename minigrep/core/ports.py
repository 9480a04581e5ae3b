"""
Ports - Interfaces for external dependencies

These define HOW the core interacts with the outside world,
but NOT the implementation details.
"""
from abc import ABC, abstractmethod
from collections.abc import Iterator
from pathlib import Path

from .domain import Document, SearchConfig, SearchMatch


class DocumentRepository(ABC):
    """Port for loading documents to search"""

    @abstractmethod
    def load(self, path: str | Path) -> Document:
        """Read the whole file, raise DocumentReadError if it can't be read"""
        pass


class LineSearcher(ABC):
    """Port for scanning a loaded document"""

    @abstractmethod
    def search(self, document: Document, config: SearchConfig) -> Iterator[SearchMatch]:
        """Yield matching lines in document order"""
        pass
