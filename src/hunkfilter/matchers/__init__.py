"""Construction of the ordered matcher list."""

from typing import Iterable

from hunkfilter.errors import NoMatchersError
from hunkfilter.matchers.pattern import Matcher
from hunkfilter.models import FilterConfig, MatchKind, Polarity


def build_matcher(polarity: Polarity, pattern: str, config: FilterConfig) -> Matcher:
    """Create a matcher of the kind selected by the run configuration.

    Args:
        polarity: Whether a match keeps or drops the hunk
        pattern: Literal text or regular expression
        config: Run configuration (match_raw selects literal matching)

    Raises:
        InvalidPatternError: If a regular expression does not compile
    """
    kind = MatchKind.LITERAL if config.match_raw else MatchKind.REGEX
    return Matcher(polarity=polarity, kind=kind, pattern=pattern)


def build_matchers(
    specs: Iterable[tuple[Polarity, str]], config: FilterConfig
) -> list[Matcher]:
    """Build matchers in command-line order.

    Args:
        specs: (polarity, pattern) pairs, in priority order
        config: Run configuration

    Returns:
        The ordered matcher list

    Raises:
        NoMatchersError: If no pattern was supplied
        InvalidPatternError: If a regular expression does not compile
    """
    specs = list(specs)
    if not specs:
        raise NoMatchersError()
    return [build_matcher(polarity, pattern, config) for polarity, pattern in specs]


__all__ = ["Matcher", "build_matcher", "build_matchers"]
