"""Command entry point: parse integers, sort small stacks, print stack a."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parsing import ParseError, parse_args
from pushswap.sorting import sort_five, sort_three
from pushswap.stack import Stack, sa

_ERROR = "Error\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program on the given arguments and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        sys.stderr.write(_ERROR)
        return 0
    try:
        a = parse_args(args)
    except ParseError:
        sys.stderr.write(_ERROR)
        return 0
    b = Stack()
    if not a.is_sorted():
        if len(a) == 2:
            sa(a)
        elif len(a) == 3:
            sort_three(a)
        elif len(a) == 5:
            sort_five(a, b)
    print(a.format())
    return 0


if __name__ == "__main__":
    sys.exit(main())