"""Classification of diff lines into hunk boundaries and content."""

from hunkfilter.models import FilterConfig, Line, LineKind

_CHANGE_KINDS = {
    ord("+"): LineKind.ADDED,
    ord(">"): LineKind.ADDED,
    ord("-"): LineKind.REMOVED,
    ord("<"): LineKind.REMOVED,
}


def classify_line(raw: bytes, config: FilterConfig) -> tuple[LineKind, bool]:
    """Classify a raw diff line.

    Handles unified (``---``/``+++``/``@@``), context and RCS-style
    (numeric headers, ``<``/``>``) diffs. Every input line gets a kind;
    anything unrecognised is treated as the start of a new block.

    Args:
        raw: The line as read, including its newline
        config: Run configuration

    Returns:
        (kind, significant) where significant means patterns may match it
    """
    if raw.startswith(b"--- ") or raw[:1].isdigit():
        return LineKind.HUNK_START, config.match_headers
    if raw.startswith(b"+++ "):
        return LineKind.FILE_HEADER, config.match_headers
    if raw.startswith(b"@@ "):
        return LineKind.RANGE_MARKER, config.match_headers

    first = raw[0] if raw else None
    if first in _CHANGE_KINDS:
        return _CHANGE_KINDS[first], True
    if first == ord(" "):
        return LineKind.CONTEXT, config.match_context
    return LineKind.OTHER, config.match_headers


def make_line(raw: bytes, config: FilterConfig) -> tuple[LineKind, Line]:
    """Classify a raw line and wrap it as a Line."""
    kind, significant = classify_line(raw, config)
    return kind, Line(raw=raw, significant=significant)
