"""Command-line entry point: print the operations that sort the given integers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .parsing import ParseError, parse_arguments
from .sorting import solve

__all__ = ["main"]


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the arguments, sort them and print one operation per line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 1
    try:
        values = parse_arguments(args)
    except ParseError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{name}\n" for name in solve(values)))
    return 0


if __name__ == "__main__":
    sys.exit(main())