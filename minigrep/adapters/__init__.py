"""
Adapters - External implementations of ports

This package contains implementations of the core ports:
- filesystem.py: Local file reader
- search.py: In-memory substring searcher
"""
from .filesystem import FilesystemRepository
from .search import SubstringSearcher

__all__ = [
    "FilesystemRepository",
    "SubstringSearcher",
]
