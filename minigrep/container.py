"""
Dependency Injection Container

Wires together the hexagonal architecture by creating and injecting dependencies.
"""
from .adapters import FilesystemRepository, SubstringSearcher
from .core import SearchFileService


class Container:
    """Dependency injection container for the application"""

    def __init__(self, encoding: str = "utf-8"):
        # Adapters (infrastructure)
        self.repository = FilesystemRepository(encoding)
        self.searcher = SubstringSearcher()

        # Services (use cases)
        self.search_file = SearchFileService(
            repository=self.repository,
            searcher=self.searcher
        )
