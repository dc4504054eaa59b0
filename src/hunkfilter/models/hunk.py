"""Core data models for diff lines and hunks."""

from dataclasses import dataclass, field
from enum import Enum


class Polarity(Enum):
    """Whether a matching pattern keeps or drops a hunk."""

    INCLUDE = "in"
    EXCLUDE = "out"


class MatchKind(Enum):
    """How a pattern is compared against a line."""

    LITERAL = "literal"
    REGEX = "regex"


class LineKind(Enum):
    """Classification of a single line of diff input."""

    HUNK_START = "hunk-start"
    FILE_HEADER = "file-header"
    RANGE_MARKER = "range-marker"
    ADDED = "added"
    REMOVED = "removed"
    CONTEXT = "context"
    OTHER = "other"

    @property
    def is_boundary(self) -> bool:
        """True if a line of this kind begins a new hunk."""
        return self in (LineKind.HUNK_START, LineKind.OTHER)


@dataclass(frozen=True)
class Line:
    """A raw input line and whether patterns may be matched against it."""

    raw: bytes  # includes the trailing newline, if any
    significant: bool

    @property
    def text(self) -> str:
        """Decoded text used for matching only."""
        return self.raw.decode("utf-8", errors="surrogateescape")


@dataclass
class Hunk:
    """An ordered run of lines between two boundaries."""

    lines: list[Line] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self):
        return iter(self.lines)
