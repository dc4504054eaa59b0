"""Data models for hunkfilter."""

from hunkfilter.models.config import FilterConfig
from hunkfilter.models.hunk import Hunk, Line, LineKind, MatchKind, Polarity

__all__ = ["FilterConfig", "Hunk", "Line", "LineKind", "MatchKind", "Polarity"]
