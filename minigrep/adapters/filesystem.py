"""
Filesystem Document Adapter

Implements DocumentRepository port by reading files from local disk.
"""
from pathlib import Path

from ..core.domain import Document
from ..core.errors import DocumentReadError
from ..core.ports import DocumentRepository


class FilesystemRepository(DocumentRepository):
    """Reads whole text files into memory"""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def load(self, path: str | Path) -> Document:
        """Read file and split it into lines"""
        path = Path(path)
        try:
            # newline="" keeps a lone \r inside its line
            with path.open(encoding=self.encoding, newline="") as f:
                text = f.read()
        except LookupError as e:
            raise DocumentReadError(path, f"unknown encoding {self.encoding}") from e
        except FileNotFoundError as e:
            raise DocumentReadError(path, "No such file or directory") from e
        except IsADirectoryError as e:
            raise DocumentReadError(path, "Is a directory") from e
        except PermissionError as e:
            raise DocumentReadError(path, "Permission denied") from e
        except UnicodeDecodeError as e:
            raise DocumentReadError(path, f"not valid {self.encoding} text ({e.reason} at byte {e.start})") from e
        except OSError as e:
            raise DocumentReadError(path, e.strerror or str(e)) from e

        return Document.from_text(path, text)
