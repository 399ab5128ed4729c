# pushswap

A solver for the *push_swap* puzzle. You are given a list of distinct integers on
stack **a** and an empty stack **b**. Using only these operations, leave **a** in
ascending order (smallest on top):

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of a, b, or both |
| `pa`, `pb` | move the top of b onto a, or the top of a onto b |
| `ra`, `rb`, `rr` | rotate a, b, or both: the top element goes to the bottom |
| `rra`, `rrb`, `rrr` | reverse rotate a, b, or both: the bottom element goes to the top |

The program prints the operations it uses, one per line.

## Installation

```
pip install .
```

## Command line

```
push_swap 3 2 1
```

This prints:

```
sa
rra
```

The same entry point can be run as `python -m pushswap.cli 3 2 1`.

Numbers can be given as separate arguments or inside quoted arguments separated
by spaces, for example `push_swap "4 67 3" 87 23`. Each number must be a whole
decimal number with an optional sign and must fit in a 32-bit signed integer.

If any argument is empty, is not a number, is out of range, or appears twice,
`Error` is written to standard error and the exit status is 1. With no arguments
the program prints nothing and exits with status 1. Input that is already sorted
produces no output and exits with status 0.

Stacks of two to five elements are sorted with fixed sequences. Larger stacks
are split into chunks (5 chunks up to 100 elements, 11 beyond), pushed to b,
then brought back largest first, and finally a is rotated so its smallest
element is on top.

## Library use

```python
from pushswap.sorting import solve
from pushswap.stacks import Stacks
from pushswap.parsing import parse_arguments, ParseError

operations = solve([3, 2, 1])      # ["sa", "rra"]

values = parse_arguments(["4 67 3", "87", "23"])   # [4, 67, 3, 87, 23]
stacks = Stacks(values)
stacks.pb()
stacks.sa()
print(stacks.a_indexes(), stacks.b_indexes())
print(stacks.operations)           # names of the operations that acted
```

- `pushswap.stacks` holds `Stacks` (stacks `a` and `b` of `Element` values with
  their ranks, and the eleven operations as methods), plus `assign_indexes`,
  `is_sorted`, `min_index`, `max_index` and `get_index_position`. An operation
  that cannot act, such as `pa` with b empty, does nothing and is not recorded.
- `pushswap.sorting` holds the strategies `sort_three`, `sort_four`,
  `sort_five`, `chunk_sort`, `smart_push_back`, `rotate_to_min`, the dispatcher
  `sort_stack`, and `solve`.
- `pushswap.parsing` holds `parse_arguments`, `join_arguments`, `parse_int` and
  `check_duplicates`; each raises `ParseError` (a `ValueError`) on input the
  command would reject.

The package also carries small helper modules:

- `pushswap.chars`: ASCII classification and case conversion (`isalpha`,
  `isdigit`, `isalnum`, `isascii`, `isprint`, `toupper`, `tolower`).
- `pushswap.numbers`: `atoi` (32-bit), `atol` (64-bit, wrapping) and `itoa`.
- `pushswap.strings`: `strchr`, `strrchr`, `strncmp`, `strnstr`, `substr`,
  `strjoin`, `strtrim`, `split`, `strmapi`, `striteri`.
- `pushswap.memory`: byte-buffer helpers `memset`, `bzero`, `calloc`, `memcpy`,
  `memmove`, `memchr`, `memcmp`, `strlcpy`, `strlcat`.
- `pushswap.output`: `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`
  writing to a text stream.
- `pushswap.printf`: `format_string` and `printf` supporting the `c`, `s`, `p`,
  `d`, `i`, `u`, `x`, `X` and `%` conversions, with `format_address`,
  `format_hex` and `format_unsigned`.
- `pushswap.linereader`: `LineReader`, which returns a text or binary stream's
  lines one at a time, reading a fixed number of characters per read.

## What it does not do

There is no command that reads a list of operations and checks whether they
sort a given input. To check a sequence, apply its operations to a `Stacks`
object and inspect `a_indexes()` and `b_indexes()`.

## Running the tests

```
pip install .[test]
pytest
```