"""Protocol definitions for extensible components."""

from hunkfilter.protocols.matcher import PatternMatcher

__all__ = ["PatternMatcher"]
