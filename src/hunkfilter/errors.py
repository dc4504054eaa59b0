"""Exceptions raised by hunkfilter, each mapped to a process exit code."""


class HunkFilterError(Exception):
    """Base class for fatal hunkfilter errors."""

    exit_code = 1


class InputOpenError(HunkFilterError):
    """A named input file could not be opened for reading."""

    exit_code = 2

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        message = f"Can't open {path} for reading"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class InvalidPatternError(HunkFilterError):
    """A regular expression pattern failed to compile."""

    exit_code = 3

    def __init__(self, pattern: str, reason: str = ""):
        self.pattern = pattern
        message = f"Invalid regexp {pattern}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class NoMatchersError(HunkFilterError):
    """No --in or --out pattern was given."""

    exit_code = 4

    def __init__(self):
        super().__init__("No matches")
