# puzzlekit

Compact, exact solutions to a set of classic introductory puzzles:
Gray codes, the Collatz chain, Tower of Hanoi moves, splitting `1..n`
into two equal-sum sets, counting bit strings, trailing zeros of `n!`,
the number spiral, palindrome reordering and more.

Every puzzle is a plain Python function, and the same puzzles can be
solved from the command line, reading their input from standard input.

## Installation

```
pip install puzzlekit
```

To run the test suite:

```
pip install "puzzlekit[test]"
pytest
```

## Library

Arguments out of range (for example a negative `n`) raise `ValueError`.

### Sequences: `puzzlekit.sequences`

| Function | What it gives |
| --- | --- |
| `gray_code(n)` | A list of all `2**n` bit strings of length `n`, starting from all zeros, each differing from the previous one in one bit (each step flips the leftmost bit that gives a new string) |
| `collatz(n)` | A generator of the chain from `n` down to and including `1`: even numbers are halved, odd `n` becomes `3n + 1` |
| `beautiful_permutation(n)` | A list holding a permutation of `1..n` with no two neighbours differing by 1 (odd numbers descending, then even numbers descending), or `None` for `n` of 2 or 3 |
| `split_two_sets(n)` | A pair of lists partitioning `1..n` into two sets of equal sum, or `None` when the total `n(n+1)/2` is odd |
| `hanoi_moves(n)` | The list of `2**n - 1` moves `(from_peg, to_peg)` that carry `n` disks from peg 1 to peg 3 |

```python
from puzzlekit.sequences import collatz, gray_code, split_two_sets

gray_code(2)          # ['00', '10', '11', '01']
list(collatz(3))      # [3, 10, 5, 16, 8, 4, 2, 1]
split_two_sets(7)     # ([7, 6, 1], [5, 4, 3, 2])
split_two_sets(6)     # None
```

### Arithmetic: `puzzlekit.arithmetic`

| Function | What it gives |
| --- | --- |
| `count_bit_strings(n)` | `2**n` modulo `10**9 + 7` (the constant `MOD`) |
| `trailing_zeros(n)` | The number of trailing zeros of `n!` |
| `two_knights(n)` | A list: for each board size `k = 1..n`, the ways to place two knights on a `k x k` board so that they do not attack each other |
| `can_empty_piles(a, b)` | Whether two piles can be emptied by moves that take 2 coins from one pile and 1 from the other |
| `spiral_value(row, col)` | The number at a cell of the infinite number spiral, row and column both counted from 1 |
| `missing_number(n, numbers)` | The one number of `1..n` absent from the `n - 1` given numbers; raises `ValueError` if the count is not `n - 1` |
| `increasing_array_moves(values)` | The fewest unit increments that make `values` non-decreasing (0 for an empty sequence) |

```python
from puzzlekit.arithmetic import can_empty_piles, spiral_value, trailing_zeros

trailing_zeros(20)       # 4
can_empty_piles(2, 1)    # True
can_empty_piles(2, 2)    # False
spiral_value(2, 3)       # 8
```

### Strings: `puzzlekit.strings`

| Function | What it gives |
| --- | --- |
| `distinct_permutations(text)` | Every distinct rearrangement of `text`, sorted (an empty list for an empty string) |
| `palindrome_reorder(text)` | A palindrome made of the letters of `text`, or `None` when no palindrome exists; raises `ValueError` for characters other than `A`–`Z` |
| `longest_repetition(text)` | The length of the longest run of one repeated character (0 for an empty string) |

```python
from puzzlekit.strings import distinct_permutations, longest_repetition, palindrome_reorder

distinct_permutations("aab")     # ['aab', 'aba', 'baa']
palindrome_reorder("AAAACACBA")  # 'AAACBCAAA'
palindrome_reorder("AB")         # None
longest_repetition("ATTCGGGA")   # 3
```

## Command line

Installing the package provides the `puzzlekit` command. It takes the
name of a puzzle, reads that puzzle's input as whitespace-separated
tokens from standard input, and prints the answer, one item per line.

```
puzzlekit --help
echo 3 | puzzlekit weird-algorithm
```

| Puzzle | Input | Output |
| --- | --- | --- |
| `gray-code` | `n` | the Gray code strings |
| `bit-strings` | `t`, then `t` values of `n` | `2**n mod 10**9+7` for each |
| `coin-piles` | `t` blocks, each a count `n` followed by `n` pairs `a b` | `YES` or `NO` for each pair |
| `creating-strings` | a word | the number of distinct rearrangements, then each one |
| `increasing-array` | `n`, then `n` integers | the fewest increments |
| `missing-number` | `n`, then `n - 1` integers | the missing number |
| `number-spiral` | `row col` | the value at that cell |
| `palindrome-reorder` | a word of `A`–`Z` | a palindrome, or `NO SOLUTION` |
| `permutations` | `n` | the permutation on one line, or `NO SOLUTION` |
| `repetitions` | a word | the longest run length |
| `tower-of-hanoi` | `n` | the number of moves, then one `from to` line per move |
| `trailing-zeros` | `t`, then `t` values of `n` | trailing zeros of `n!` for each |
| `two-knights` | `n` | one count per board size `1..n` |
| `two-sets` | `n` | `NO`, or `YES`, then the size and members of each set |
| `weird-algorithm` | `n` | the Collatz chain on one line |

If the input is cut short, is not a number where one is expected, or is
out of range, nothing is printed to standard output; the command writes
`error: <message>` to standard error and exits with status 1. On success
it exits with status 0.

The same entry point is available from Python as `puzzlekit.cli.main(argv)`,
which returns the exit status.

## What it does not do

Each command solves a single puzzle instance per run from standard
input; there is no interactive mode, no file options and no output
formats other than the plain lines shown above.