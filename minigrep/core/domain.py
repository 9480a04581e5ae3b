"""
Domain Models - Pure search entities

No external dependencies. These represent the core search concepts.
"""
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SearchConfig:
    """A resolved search invocation"""
    query: str
    path: str
    ignore_case: bool = False
    line_number: bool = False
    invert_match: bool = False
    whole_word: bool = False


@dataclass(frozen=True)
class Document:
    """Full text of a file, split into lines"""
    path: Path
    lines: tuple[str, ...]

    @classmethod
    def from_text(cls, path: Path, text: str) -> "Document":
        """Split text on newlines; a trailing newline does not add an empty line"""
        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        return cls(path=path, lines=tuple(line.removesuffix("\r") for line in lines))

    @property
    def total_lines(self) -> int:
        return len(self.lines)


@dataclass(frozen=True)
class SearchMatch:
    """A matching line within a document"""
    line_number: int  # 1-based
    line: str
