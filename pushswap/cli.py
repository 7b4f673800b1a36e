"""Command that prints the operations sorting the integers it is given."""

from __future__ import annotations

import sys
from typing import Sequence

from .args import ArgumentError, parse_arguments
from .sort import push_swap


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line; print ``Error`` and fail on bad input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
    except ArgumentError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{op.value}\n" for op in push_swap(values)))
    return 0


if __name__ == "__main__":
    sys.exit(main())