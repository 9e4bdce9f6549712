"""Counting and closed-form arithmetic puzzles."""

from __future__ import annotations

from collections.abc import Iterable

MOD = 1_000_000_007


def count_bit_strings(n: int) -> int:
    """Return the number of bit strings of length n, modulo 10**9 + 7."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    return pow(2, n, MOD)


def trailing_zeros(n: int) -> int:
    """Return the number of trailing zeros of n!."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    count = 0
    power = 5
    while power <= n:
        count += n // power
        power *= 5
    return count


def two_knights(n: int) -> list[int]:
    """For k = 1..n, return the ways to place two non-attacking knights on a k x k board."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    result = []
    for k in range(1, n + 1):
        squares = k * k
        pairs = squares * (squares - 1) // 2
        attacking = 4 * (k - 1) * (k - 2)
        result.append(pairs - attacking)
    return result


def can_empty_piles(a: int, b: int) -> bool:
    """Tell whether two piles can be emptied by moves taking 2 from one and 1 from the other."""
    if a < 0 or b < 0:
        raise ValueError("pile sizes must be non-negative")
    small, large = sorted((a, b))
    if 2 * small < large:
        return False
    if 2 * small == large:
        return True
    return (small % 3, large % 3) in {(0, 0), (1, 2), (2, 1)}


def spiral_value(row: int, col: int) -> int:
    """Return the number at (row, col) of the infinite number spiral, both 1-based."""
    if row < 1 or col < 1:
        raise ValueError("row and col must be positive")
    if row >= col:
        if row % 2:
            return (row - 1) ** 2 + col
        return row * row - col + 1
    if col % 2:
        return col * col - row + 1
    return (col - 1) ** 2 + row


def missing_number(n: int, numbers: Iterable[int]) -> int:
    """Return the one number of 1..n absent from the n - 1 given numbers."""
    values = list(numbers)
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    if len(values) != n - 1:
        raise ValueError(f"expected {n - 1} numbers, got {len(values)}")
    return n * (n + 1) // 2 - sum(values)


def increasing_array_moves(values: Iterable[int]) -> int:
    """Return the fewest unit increments that make the sequence non-decreasing."""
    moves = 0
    highest: int | None = None
    for value in values:
        if highest is None or value > highest:
            highest = value
        else:
            moves += highest - value
    return moves