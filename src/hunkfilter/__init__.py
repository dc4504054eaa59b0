"""hunkfilter - keep or drop diff hunks by pattern."""

from hunkfilter.driver import filter_paths, filter_stream
from hunkfilter.matchers import Matcher, build_matchers
from hunkfilter.models import FilterConfig, Polarity

__version__ = "0.1.0"

__all__ = [
    "FilterConfig",
    "Matcher",
    "Polarity",
    "build_matchers",
    "filter_paths",
    "filter_stream",
]
