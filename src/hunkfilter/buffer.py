"""Accumulation of classified lines into hunks."""

import logging
from dataclasses import dataclass

from hunkfilter.evaluator import HunkEvaluator
from hunkfilter.models import Hunk, Line

logger = logging.getLogger(__name__)


@dataclass
class BufferStats:
    """Counts of hunks seen by a buffer."""

    kept: int = 0
    discarded: int = 0

    @property
    def total(self) -> int:
        return self.kept + self.discarded

    def __add__(self, other: "BufferStats") -> "BufferStats":
        return BufferStats(self.kept + other.kept, self.discarded + other.discarded)


class HunkBuffer:
    """Pending lines of the current hunk.

    Lines are appended as they are classified. A boundary line flushes the
    open hunk to the evaluator and starts the next one; lines collected before
    the first boundary are dropped. close() always flushes whatever is left.
    """

    def __init__(self, evaluator: HunkEvaluator):
        self.evaluator = evaluator
        self.pending: list[Line] = []
        self.open = False
        self.stats = BufferStats()

    def append(self, line: Line) -> None:
        self.pending.append(line)

    def start(self, line: Line) -> None:
        """Begin a new hunk with a boundary line."""
        if self.open:
            self.flush()
        elif self.pending:
            if self.evaluator.config.verbose:
                logger.debug(f"Dropping {len(self.pending)} lines before first hunk")
            self.pending = []
        self.pending.append(line)
        self.open = True

    def flush(self) -> None:
        """Hand the pending lines to the evaluator and clear them.

        An empty buffer is still evaluated but not counted as a hunk.
        """
        hunk = Hunk(lines=self.pending)
        self.pending = []
        kept = self.evaluator.process(hunk)
        if not hunk.lines:
            return
        if kept:
            self.stats.kept += 1
        else:
            self.stats.discarded += 1

    def close(self) -> BufferStats:
        """Flush the trailing hunk at end of stream.

        Returns:
            Stats for every hunk this buffer flushed
        """
        self.flush()
        self.open = False
        return self.stats
