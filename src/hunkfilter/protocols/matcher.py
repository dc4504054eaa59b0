"""Protocol for hunk pattern matchers."""

from typing import Protocol, runtime_checkable

from hunkfilter.models import Polarity


@runtime_checkable
class PatternMatcher(Protocol):
    """Protocol for objects that decide whether a line matches a pattern.

    The evaluator only needs the polarity, a match test and a description,
    so custom matchers can be dropped in without inheriting from anything.
    """

    @property
    def polarity(self) -> Polarity:
        """Return whether a match keeps or drops the hunk."""
        ...

    @property
    def description(self) -> str:
        """Return a human readable form, e.g. '--in=foo'."""
        ...

    def matches(self, text: str) -> bool:
        """Check whether the pattern matches anywhere in the line text."""
        ...
