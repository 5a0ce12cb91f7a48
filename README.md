# pushswap

A small two-stack sorting puzzle. Integers are read from the command line into
stack `a`. Stacks of two, three or five values are rearranged using only the
puzzle's stack operations, with stack `b` as the only extra storage. Stack `a`
is then printed from top to bottom.

## Installation

```
pip install .
```

## Command line

The numbers can be passed as separate arguments:

```
pushswap 3 1 2
```

They can also be passed as one space-separated argument:

```
pushswap "2 3 1"
```

Stack `a` is printed from top to bottom, each value followed by ` ->`, and
ending in `NULL`:

```
1 ->2 ->3 ->NULL
```

What happens depends on how many values are given, and only when they are
not already in ascending order:

- two values: the top two are swapped (`sa`);
- three values: `sort_three` puts them in ascending order;
- five values: `sort_five` runs (see below), which leaves only one value on
  stack `a`, so only that value is printed;
- any other count: the values are printed as given.

If any argument is not an integer (an optional sign followed by digits), lies
outside the 32-bit signed range or repeats an earlier value, `Error` is
written to standard error and nothing else is printed. Running the command with
no arguments does the same. The command exits with status 0 in every case.

## Library use

```python
from pushswap.stack import Stack, pa, pb, ra, bring_min_top
from pushswap.sorting import sort_three, sort_five
from pushswap.parsing import parse_args, ParseError

a = parse_args(["2", "3", "1"])
sort_three(a)
print(a.format())       # 1 ->2 ->3 ->NULL

a = Stack([5, 1, 4, 2, 3])
b = Stack([])
sort_five(a, b)
print(list(a))          # [5]
print(list(b))          # [4, 3, 2, 1]
```

`sort_five` moves the two smallest values from `a` to `b`, orders the three
left on `a`, and then moves the top two values of `a` onto `b`.

`parse_args` raises `ParseError` (a `ValueError`) for a bad or repeated value.
A single argument is split on spaces; several arguments are taken one value
each. `sort_three` raises `ValueError` if the stack holds fewer than three
values.

`Stack` keeps its top as its first element. It supports `len()`, iteration,
`prepend`, `append`, `pop`, `swap`, `rotate`, `reverse_rotate`, `minimum`,
`index_of`, `is_sorted` and `format`.

The stack operations in `pushswap.stack` are:

| Operation | Effect |
|---|---|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, of `b`, or of both |
| `pa(a, b)`, `pb(a, b)` | move the top element from `b` to `a`, or from `a` to `b` |
| `ra`, `rb`, `rr` | rotate up: the top element goes to the bottom |
| `rra`, `rrb`, `rrr` | rotate down: the bottom element goes to the top |

`bring_min_top` rotates the smallest value to the top, choosing the shorter
direction.

## What it does not do

The package does not print the list of operations it performs, and it has no
general sorting strategy: stacks of four values, or of more than five, are
left as they are.

## Running the tests

```
pip install .[test]
pytest
```