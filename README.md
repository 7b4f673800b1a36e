# pushswap

Sort a list of integers using two stacks, `a` and `b`, and a fixed set of
eleven operations, and check whether a sequence of operations really sorts a
given list.

## Operations

| Name  | Effect                                         |
|-------|------------------------------------------------|
| `sa`  | swap the top two elements of `a`               |
| `sb`  | swap the top two elements of `b`               |
| `ss`  | `sa` and `sb` together                         |
| `pa`  | move the top of `b` onto `a`                   |
| `pb`  | move the top of `a` onto `b`                   |
| `ra`  | rotate `a` up (top goes to the bottom)         |
| `rb`  | rotate `b` up                                  |
| `rr`  | `ra` and `rb` together                         |
| `rra` | rotate `a` down (bottom goes to the top)       |
| `rrb` | rotate `b` down                                |
| `rrr` | `rra` and `rrb` together                       |

A push from an empty stack does nothing, and a swap of a stack with fewer
than two elements does nothing.

## Installing

```
pip install .
```

## Finding a sequence of operations

```
push-swap 3 2 1
```

prints one operation per line:

```
sa
rra
```

The numbers may also be given as a single space-separated argument:

```
push-swap "4 67 3 87 23"
```

Each argument must be an optional leading `+` or `-` followed by digits, its
value must fit in a 32-bit signed integer, and no argument may be written
twice. Otherwise `Error` is printed on standard error and the exit status is
1. With no arguments nothing is printed.

Up to five numbers are sorted with short fixed sequences; larger inputs are
pushed to `b` in chunks and brought back largest first.

## Checking a sequence

`checker` takes the same arguments and reads operations, one per line, from
standard input. Reading stops at the end of input or at the first empty line.
It prints `OK` when the operations leave `a` sorted and `b` empty, and `KO`
otherwise. A line that is not one of the eleven operations ends the run with
status 1 and prints nothing.

```
push-swap 3 2 1 | checker 3 2 1
OK
```

## Using it from Python

```python
from pushswap.sort import push_swap
from pushswap.checker import run_checker

ops = push_swap([5, -1, 42, 7, 0, 3])
print(run_checker([5, -1, 42, 7, 0, 3], [op.value for op in ops]))
```

- `pushswap.stacks` holds the `Stacks` pair (with `apply`, `is_sorted` and a
  `log` of applied operations) and the `Operation` enum.
- `pushswap.args` splits, validates and ranks command-line style arguments
  (`parse_arguments`, `validate_args`, `compress`), raising `ArgumentError`.
- `pushswap.sort` has `push_swap` and the individual sorting steps.
- `pushswap.checker` has `parse_command`, `run_checker` and `CommandError`.

The package also carries small helpers in `pushswap.libft` (character
classes, string utilities, output to streams, and `LineReader` for reading a
stream line by line) and a printf-style formatter in
`pushswap.printf.formatter` (`format_string`, `printf`) that supports the
`c s p d i u x X %` conversions with the `- 0 # + space` flags, width and
precision.

## Running the tests

```
pip install .[test]
pytest
```