# pushswap

Reads integers from command-line arguments, checks them, and prints them in
the order given.

Each argument may hold one number or several numbers separated by spaces.
The input is rejected when:

- an argument holds anything other than digits, spaces, `+` and `-`;
- a sign is not directly followed by a digit;
- an argument holds no number at all;
- a number is longer than 11 characters or does not fit in a signed 32-bit
  integer;
- a number appears more than once.

## Installation

```
pip install .
```

## Command line

```
pushswap 3 "1 -7" +42
```

prints

```
Linked list values:
3
1
-7
42
```

On bad input the command writes `Error` to standard error and exits with
status 1. For some failures a message also goes to standard output first:
`Error: not number` when an argument holds a character that is not allowed
or a sign not followed by a digit, and `Error` when a number is too long or
out of range. Empty arguments and repeated numbers fail with only the
standard error line. With no arguments the command prints nothing and exits
with status 0.

The command only reads and checks the numbers; it does not sort them or
print any sequence of stack operations.

## Library use

```python
from pushswap.parsing import ParseError, parse_numbers

numbers = parse_numbers(["3", "1 -7", "+42"])   # [3, 1, -7, 42]

try:
    parse_numbers(["1", "1"])
except ParseError as error:
    print(error.reason)   # "duplicate value: 1"
    print(error.report)   # None
```

`ParseError` is a subclass of `ValueError`. Its `reason` describes the
failure and its `report` holds the message the command prints to standard
output, or `None` when there is none.

`pushswap.cli.main(argv=None)` runs the command on the given list of
arguments (or on `sys.argv[1:]`) and returns the exit status.

The helpers in `pushswap.textutils` are also available:

- `atoi(text)` skips leading whitespace, reads an optional sign and the
  digits that follow, and stops at the first non-digit; a text with no
  digits reads as 0, and a negative value below the 32-bit minimum reads
  as the 64-bit minimum;
- `check_args(text)` tells whether a text holds only spaces, digits and
  signs, with every sign directly followed by a digit;
- `split(text, sep)` splits on a separator and drops empty pieces.

## Tests

```
pip install .[test]
pytest
```