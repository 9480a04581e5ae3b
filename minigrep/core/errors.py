"""
Errors raised by the core and adapters

The CLI is the only place these are turned into messages and exit codes.
"""
from pathlib import Path


class MinigrepError(Exception):
    """Base class for all minigrep failures"""

    exit_code = 1


class ArgumentError(MinigrepError):
    """Malformed or missing command-line input"""

    exit_code = 2

    def __init__(self, message: str, usage: str = ""):
        super().__init__(message)
        self.message = message
        self.usage = usage


class DocumentReadError(MinigrepError):
    """The target file could not be opened, read or decoded"""

    def __init__(self, path: str | Path, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = Path(path)
        self.reason = reason
