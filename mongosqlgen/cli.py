"""Command-line entry point."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

__all__ = ["main"]

_BANNER = "This is for the command line"


def _build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="mongosqlgen",
        description="Generate MongoDB shell queries from SQL statements.",
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command line and print the banner; extra arguments are ignored."""
    args = list(sys.argv[1:] if argv is None else argv)
    _build_parser().parse_known_args(args)
    sys.stdout.write(_BANNER + "\n")
    return 0