"""Command that reads integers from its arguments and lists them."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .parsing import ParseError, parse_numbers


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the arguments and print the values; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        numbers = parse_numbers(args)
    except ParseError as error:
        if error.report:
            print(error.report, flush=True)
        print("Error", file=sys.stderr)
        return 1
    print("Linked list values:")
    for value in numbers:
        print(value)
    return 0


if __name__ == "__main__":
    sys.exit(main())