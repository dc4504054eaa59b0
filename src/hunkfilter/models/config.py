"""Run configuration shared by the classifier, evaluator and driver."""

import argparse
from dataclasses import dataclass


@dataclass(frozen=True)
class FilterConfig:
    """Flags set once from the command line and read-only afterwards."""

    match_raw: bool = False
    match_context: bool = False
    match_headers: bool = False
    verbose: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "FilterConfig":
        """Build a config from parsed CLI arguments."""
        return cls(
            match_raw=args.match_raw,
            match_context=args.match_context,
            match_headers=args.match_headers,
            verbose=args.verbose,
        )
