"""Keep/discard decision for buffered hunks."""

import logging
from typing import BinaryIO, Sequence

from hunkfilter.models import FilterConfig, Hunk, Polarity
from hunkfilter.protocols import PatternMatcher

logger = logging.getLogger(__name__)


def evaluate(
    hunk: Hunk, matchers: Sequence[PatternMatcher], config: FilterConfig
) -> bool:
    """Decide whether a hunk survives the matcher list.

    Significant lines are scanned in order and, for each line, matchers in
    list order. The first matcher to match latches and decides the hunk;
    later lines never override it.

    - An Include matcher matched: keep.
    - An Exclude matcher matched: discard.
    - Nothing matched: discard if the list holds any Include matcher,
      otherwise keep.

    The Include check is made on the first significant line, so a hunk with
    no significant lines is always kept.

    Args:
        hunk: The buffered hunk
        matchers: Ordered matcher list
        config: Run configuration (verbose enables per-line diagnostics)

    Returns:
        True if the hunk should be written out
    """
    verbose = config.verbose
    no_match = len(matchers)
    first_match = no_match
    has_include = False
    seen_significant = False

    if verbose:
        logger.debug(f"Parsing hunk ({len(hunk)} lines)")

    for index, line in enumerate(hunk):
        if verbose:
            flag = "*" if line.significant else " "
            content = line.text.rstrip("\r\n")
            logger.debug(f"  {flag} {content}")
        if not line.significant:
            continue

        if not seen_significant:
            seen_significant = True
            has_include = any(m.polarity is Polarity.INCLUDE for m in matchers)

        if first_match != no_match:
            continue

        text = line.text
        for m_index, matcher in enumerate(matchers):
            if matcher.matches(text):
                first_match = m_index
                if verbose:
                    logger.debug(f"  line {index}: matched {matcher.description}")
                break

    if first_match == no_match:
        keep = not has_include
        reason = "no match, include patterns present" if has_include else "no match"
    else:
        matched = matchers[first_match]
        keep = matched.polarity is Polarity.INCLUDE
        reason = f"matched {matched.description}"

    if verbose:
        logger.debug(f"{'Keeping' if keep else 'Discarding'} hunk: {reason}")
    return keep


class HunkEvaluator:
    """Evaluates hunks and writes the kept ones to an output stream."""

    def __init__(
        self,
        matchers: Sequence[PatternMatcher],
        config: FilterConfig,
        output: BinaryIO,
    ):
        self.matchers = matchers
        self.config = config
        self.output = output

    def process(self, hunk: Hunk) -> bool:
        """Evaluate a hunk and write it verbatim if kept.

        Returns:
            True if the hunk was written
        """
        if not evaluate(hunk, self.matchers, self.config):
            return False
        for line in hunk:
            self.output.write(line.raw)
        self.output.flush()
        return True
