"""Command-line front end: each subcommand reads its puzzle from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator, Sequence

from puzzlekit.arithmetic import (
    can_empty_piles,
    count_bit_strings,
    increasing_array_moves,
    missing_number,
    spiral_value,
    trailing_zeros,
    two_knights,
)
from puzzlekit.sequences import (
    beautiful_permutation,
    collatz,
    gray_code,
    hanoi_moves,
    split_two_sets,
)
from puzzlekit.strings import (
    distinct_permutations,
    longest_repetition,
    palindrome_reorder,
)

NO_SOLUTION = "NO SOLUTION"


class InputError(ValueError):
    """Raised when standard input does not hold what a puzzle expects."""


class _Input:
    """Whitespace-separated tokens read from a block of text."""

    def __init__(self, text: str) -> None:
        self._tokens = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise InputError("unexpected end of input") from None

    def integer(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise InputError(f"expected an integer, got {token!r}") from None

    def integers(self, count: int) -> list[int]:
        return [self.integer() for _ in range(count)]


def _join(values: Sequence[int]) -> str:
    return " ".join(map(str, values))


def _gray_code(data: _Input) -> Iterator[str]:
    yield from gray_code(data.integer())


def _bit_strings(data: _Input) -> Iterator[str]:
    for _ in range(data.integer()):
        yield str(count_bit_strings(data.integer()))


def _coin_piles(data: _Input) -> Iterator[str]:
    for _ in range(data.integer()):
        for _ in range(data.integer()):
            a, b = data.integers(2)
            yield "YES" if can_empty_piles(a, b) else "NO"


def _creating_strings(data: _Input) -> Iterator[str]:
    words = distinct_permutations(data.word())
    yield str(len(words))
    yield from words


def _increasing_array(data: _Input) -> Iterator[str]:
    n = data.integer()
    yield str(increasing_array_moves(data.integers(n)))


def _missing_number(data: _Input) -> Iterator[str]:
    n = data.integer()
    if n < 1:
        raise InputError(f"n must be positive, got {n}")
    yield str(missing_number(n, data.integers(n - 1)))


def _number_spiral(data: _Input) -> Iterator[str]:
    row, col = data.integers(2)
    yield str(spiral_value(row, col))


def _palindrome_reorder(data: _Input) -> Iterator[str]:
    result = palindrome_reorder(data.word())
    yield NO_SOLUTION if result is None else result


def _permutations(data: _Input) -> Iterator[str]:
    result = beautiful_permutation(data.integer())
    yield NO_SOLUTION if result is None else _join(result)


def _repetitions(data: _Input) -> Iterator[str]:
    yield str(longest_repetition(data.word()))


def _tower_of_hanoi(data: _Input) -> Iterator[str]:
    moves = hanoi_moves(data.integer())
    yield str(len(moves))
    for source, target in moves:
        yield f"{source} {target}"


def _trailing_zeros(data: _Input) -> Iterator[str]:
    for _ in range(data.integer()):
        yield str(trailing_zeros(data.integer()))


def _two_knights(data: _Input) -> Iterator[str]:
    yield from map(str, two_knights(data.integer()))


def _two_sets(data: _Input) -> Iterator[str]:
    split = split_two_sets(data.integer())
    if split is None:
        yield "NO"
        return
    first, second = split
    yield "YES"
    yield str(len(first))
    yield _join(first)
    yield str(len(second))
    yield _join(second)


def _weird_algorithm(data: _Input) -> Iterator[str]:
    yield _join(list(collatz(data.integer())))


_PROBLEMS: dict[str, tuple[Callable[[_Input], Iterator[str]], str]] = {
    "gray-code": (_gray_code, "list a Gray code of n bits"),
    "bit-strings": (_bit_strings, "count bit strings of length n for t cases"),
    "coin-piles": (_coin_piles, "decide whether coin piles can be emptied"),
    "creating-strings": (_creating_strings, "list distinct rearrangements of a string"),
    "increasing-array": (_increasing_array, "fewest increments to sort an array"),
    "missing-number": (_missing_number, "find the number missing from 1..n"),
    "number-spiral": (_number_spiral, "value at a cell of the number spiral"),
    "palindrome-reorder": (_palindrome_reorder, "reorder letters into a palindrome"),
    "permutations": (_permutations, "permutation without adjacent neighbours"),
    "repetitions": (_repetitions, "longest run of one character"),
    "tower-of-hanoi": (_tower_of_hanoi, "moves solving the tower of Hanoi"),
    "trailing-zeros": (_trailing_zeros, "trailing zeros of n! for t cases"),
    "two-knights": (_two_knights, "non-attacking knight placements for k = 1..n"),
    "two-sets": (_two_sets, "split 1..n into two sets of equal sum"),
    "weird-algorithm": (_weird_algorithm, "the Collatz chain from n"),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="puzzlekit",
        description="Solve an introductory puzzle read from standard input.",
    )
    subparsers = parser.add_subparsers(dest="problem", metavar="PROBLEM", required=True)
    for name, (_, summary) in _PROBLEMS.items():
        subparsers.add_parser(name, help=summary, description=summary)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the chosen puzzle on standard input and print its answer."""
    args = _build_parser().parse_args(argv)
    handler, _ = _PROBLEMS[args.problem]
    data = _Input(sys.stdin.read())
    try:
        lines = list(handler(data))
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write("".join(f"{line}\n" for line in lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())