"""
Core - Domain logic and ports

This package contains:
- domain.py: Pure domain models
- errors.py: Exception hierarchy
- ports.py: Port interfaces (abstractions for external dependencies)
- services.py: Application services (use cases)
"""
from .domain import SearchConfig, Document, SearchMatch
from .errors import MinigrepError, ArgumentError, DocumentReadError
from .ports import DocumentRepository, LineSearcher
from .services import SearchFileService

__all__ = [
    # Domain models
    "SearchConfig",
    "Document",
    "SearchMatch",
    # Errors
    "MinigrepError",
    "ArgumentError",
    "DocumentReadError",
    # Ports
    "DocumentRepository",
    "LineSearcher",
    # Services
    "SearchFileService",
]
