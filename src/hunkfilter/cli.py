"""CLI entry point for hunkfilter."""

import argparse
import logging
import os
import sys
from typing import Optional

from hunkfilter.driver import filter_paths
from hunkfilter.errors import HunkFilterError
from hunkfilter.matchers import build_matchers
from hunkfilter.models import FilterConfig, Polarity

DEFAULT_LOG_LEVEL = "WARNING"


def _log_level_from_env() -> str:
    """Read HUNK_LOG_LEVEL, falling back to WARNING for unknown names."""
    level = os.environ.get("HUNK_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(level), int):
        return DEFAULT_LOG_LEVEL
    return level


logging.basicConfig(
    level=_log_level_from_env(),
    format="%(message)s",
)
logger = logging.getLogger(__name__)


class _AppendMatcher(argparse.Action):
    """Collect --in/--out patterns into one list, keeping their order."""

    def __init__(self, option_strings, dest, polarity: Polarity, **kwargs):
        self.polarity = polarity
        super().__init__(option_strings, dest, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        specs = list(getattr(namespace, self.dest, None) or [])
        specs.append((self.polarity, values))
        setattr(namespace, self.dest, specs)


class _ArgumentParser(argparse.ArgumentParser):
    """Parser that exits with status 1 on bad options."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the hunk command."""
    parser = _ArgumentParser(
        prog="hunk",
        description="Filter diff hunks by matching their changed lines",
    )
    parser.add_argument(
        "--match-raw",
        "-r",
        action="store_true",
        help="Don't treat patterns as regexps",
    )
    parser.add_argument(
        "--match-context",
        "-c",
        action="store_true",
        help="Match patterns against context lines too",
    )
    parser.add_argument(
        "--match-headers",
        "-H",
        action="store_true",
        help="Match patterns against header and range lines too",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Print diagnostics to stderr",
    )
    parser.add_argument(
        "--in",
        "-i",
        dest="matchers",
        metavar="PATTERN",
        action=_AppendMatcher,
        polarity=Polarity.INCLUDE,
        help="Keep hunks that match this pattern (use --in=-x for patterns starting with '-')",
    )
    parser.add_argument(
        "--out",
        "-o",
        "-d",
        dest="matchers",
        metavar="PATTERN",
        action=_AppendMatcher,
        polarity=Polarity.EXCLUDE,
        help="Filter out hunks that match this pattern (use --out=-x for patterns starting with '-')",
    )
    parser.add_argument("files", nargs="*", help="Diff files (default: stdin)")
    parser.set_defaults(matchers=[])
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    # files may sit between options, as with getopt
    args = build_parser().parse_intermixed_args(argv)
    config = FilterConfig.from_args(args)

    if config.verbose:
        logging.getLogger("hunkfilter").setLevel(logging.DEBUG)

    try:
        matchers = build_matchers(args.matchers, config)
        if config.verbose:
            for matcher in matchers:
                logger.debug(f"Matcher: {matcher}")
        stats = filter_paths(
            args.files,
            matchers,
            config,
            stdin=sys.stdin.buffer,
            output=sys.stdout.buffer,
        )
    except HunkFilterError as e:
        logger.error(str(e))
        return e.exit_code

    if config.verbose:
        logger.debug(f"Kept {stats.kept} of {stats.total} hunks")
    return 0


if __name__ == "__main__":
    sys.exit(main())
