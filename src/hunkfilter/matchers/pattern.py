"""Literal and regular-expression pattern matchers."""

import re
from dataclasses import dataclass, field
from typing import Optional

from hunkfilter.errors import InvalidPatternError
from hunkfilter.models import MatchKind, Polarity


@dataclass(frozen=True)
class Matcher:
    """A single --in/--out pattern.

    Literal matchers test whether the pattern occurs in the line, like grep -F.
    Regex matchers are compiled once on construction and searched anywhere in
    the line.
    """

    polarity: Polarity
    kind: MatchKind
    pattern: str
    _regex: Optional[re.Pattern] = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self):
        if self.kind is MatchKind.REGEX:
            try:
                compiled = re.compile(self.pattern)
            except re.error as e:
                raise InvalidPatternError(self.pattern, str(e)) from e
            # frozen dataclass
            object.__setattr__(self, "_regex", compiled)

    @property
    def description(self) -> str:
        return f"--{self.polarity.value}={self.pattern}"

    def matches(self, text: str) -> bool:
        """Check whether this matcher's pattern is found in the line text."""
        if self.kind is MatchKind.LITERAL:
            return self.pattern in text
        return self._regex.search(text) is not None

    def __str__(self) -> str:
        return self.description
