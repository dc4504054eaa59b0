"""Reading diff streams and feeding them through the hunk pipeline."""

import logging
from pathlib import Path
from typing import BinaryIO, Iterable, Sequence

from hunkfilter.buffer import BufferStats, HunkBuffer
from hunkfilter.classifier import make_line
from hunkfilter.errors import InputOpenError
from hunkfilter.evaluator import HunkEvaluator
from hunkfilter.models import FilterConfig
from hunkfilter.protocols import PatternMatcher

logger = logging.getLogger(__name__)


def filter_stream(
    stream: BinaryIO,
    matchers: Sequence[PatternMatcher],
    config: FilterConfig,
    output: BinaryIO,
) -> BufferStats:
    """Filter one diff stream, writing kept hunks to output.

    Args:
        stream: Binary stream of diff text
        matchers: Ordered matcher list
        config: Run configuration
        output: Binary stream that receives kept hunks

    Returns:
        Kept/discarded counts for this stream
    """
    buffer = HunkBuffer(HunkEvaluator(matchers, config, output))

    for raw in stream:
        kind, line = make_line(raw, config)
        if kind.is_boundary:
            buffer.start(line)
        else:
            buffer.append(line)

    return buffer.close()


def filter_paths(
    paths: Iterable[str | Path],
    matchers: Sequence[PatternMatcher],
    config: FilterConfig,
    stdin: BinaryIO,
    output: BinaryIO,
) -> BufferStats:
    """Filter each path in order, or stdin when no paths are given.

    Output written for earlier files is left in place if a later file
    cannot be opened.

    Raises:
        InputOpenError: If a path cannot be opened for reading
    """
    paths = list(paths)
    if not paths:
        if config.verbose:
            logger.debug("Reading standard input")
        return filter_stream(stdin, matchers, config, output)

    stats = BufferStats()
    for path in paths:
        try:
            f = open(path, "rb")
        except OSError as e:
            raise InputOpenError(str(path), e.strerror or "") from e
        if config.verbose:
            logger.debug(f"Reading {path}")
        with f:
            stats = stats + filter_stream(f, matchers, config, output)
    return stats
