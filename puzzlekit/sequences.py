"""Sequence-building puzzles: Gray codes, Collatz chains, permutations, set splits, Hanoi."""

from __future__ import annotations

from collections.abc import Iterator


def _require_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")


def _require_positive(n: int) -> None:
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")


def gray_code(n: int) -> list[str]:
    """Return all 2**n bit strings of length n, each differing from the previous in one bit.

    Starting from all zeros, each step flips the leftmost bit that yields a
    string not produced yet.
    """
    _require_non_negative(n)
    current = "0" * n
    codes = [current]
    seen = {current}
    total = 2**n
    while len(codes) < total:
        for i, bit in enumerate(current):
            candidate = current[:i] + ("1" if bit == "0" else "0") + current[i + 1 :]
            if candidate not in seen:
                current = candidate
                codes.append(candidate)
                seen.add(candidate)
                break
        else:
            raise RuntimeError("no unvisited neighbour left")
    return codes


def collatz(n: int) -> Iterator[int]:
    """Yield the Collatz chain from n down to and including 1."""
    _require_positive(n)
    while n != 1:
        yield n
        n = n * 3 + 1 if n % 2 else n // 2
    yield 1


def beautiful_permutation(n: int) -> list[int] | None:
    """Return a permutation of 1..n with no adjacent values differing by 1, or None."""
    _require_non_negative(n)
    if n == 1:
        return [1]
    if n in (2, 3):
        return None
    odds = [i for i in range(n, 0, -1) if i % 2]
    evens = [i for i in range(n, 0, -1) if i % 2 == 0]
    return odds + evens


def split_two_sets(n: int) -> tuple[list[int], list[int]] | None:
    """Split 1..n into two sets of equal sum, or return None when that is impossible."""
    _require_positive(n)
    total = n * (n + 1)
    if total % 4:
        return None
    target = total // 4
    first: list[int] = []
    running = 0
    remainder = 0
    i = n
    while True:
        first.append(i)
        running += i
        i -= 1
        remainder = target - running
        if remainder == 0:
            break
        if remainder <= i:
            first.append(remainder)
            break
    second = [j for j in range(i, 0, -1) if j != remainder]
    return first, second


def hanoi_moves(n: int) -> list[tuple[int, int]]:
    """Return the moves (from_peg, to_peg) that carry n disks from peg 1 to peg 3."""
    _require_positive(n)
    moves: list[tuple[int, int]] = []

    def tower(count: int, source: int, target: int, spare: int) -> None:
        if count == 1:
            moves.append((source, target))
            return
        tower(count - 1, source, spare, target)
        moves.append((source, target))
        tower(count - 1, spare, target, source)

    tower(n, 1, 3, 2)
    return moves