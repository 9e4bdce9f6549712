import pytest

from puzzlekit.sequences import (
    beautiful_permutation,
    collatz,
    gray_code,
    hanoi_moves,
    split_two_sets,
)


@pytest.mark.parametrize("n", [1, 2, 3, 4, 6])
def test_gray_code_properties(n):
    codes = gray_code(n)
    assert len(codes) == 2**n
    assert len(set(codes)) == len(codes)
    assert codes[0] == "0" * n
    assert all(len(c) == n and set(c) <= {"0", "1"} for c in codes)
    for a, b in zip(codes, codes[1:]):
        assert sum(x != y for x, y in zip(a, b)) == 1


def test_gray_code_two_bits_order():
    assert gray_code(2) == ["00", "10", "11", "01"]


def test_gray_code_negative():
    with pytest.raises(ValueError):
        gray_code(-1)


def test_collatz_example():
    assert list(collatz(3)) == [3, 10, 5, 16, 8, 4, 2, 1]


@pytest.mark.parametrize("n", [1, 7, 27, 100])
def test_collatz_chain(n):
    chain = list(collatz(n))
    assert chain[0] == n
    assert chain[-1] == 1
    assert chain.count(1) == 1
    for a, b in zip(chain, chain[1:]):
        assert b == (a // 2 if a % 2 == 0 else 3 * a + 1)


def test_collatz_rejects_zero():
    with pytest.raises(ValueError):
        list(collatz(0))


def test_beautiful_permutation_small():
    assert beautiful_permutation(1) == [1]
    assert beautiful_permutation(2) is None
    assert beautiful_permutation(3) is None


@pytest.mark.parametrize("n", range(4, 25))
def test_beautiful_permutation_valid(n):
    perm = beautiful_permutation(n)
    assert sorted(perm) == list(range(1, n + 1))
    assert all(abs(a - b) != 1 for a, b in zip(perm, perm[1:]))


def test_beautiful_permutation_negative():
    with pytest.raises(ValueError):
        beautiful_permutation(-3)


@pytest.mark.parametrize("n", range(1, 41))
def test_split_two_sets(n):
    result = split_two_sets(n)
    if n % 4 in (1, 2):
        assert result is None
    else:
        first, second = result
        assert sum(first) == sum(second)
        assert sorted(first + second) == list(range(1, n + 1))


def test_split_two_sets_rejects_zero():
    with pytest.raises(ValueError):
        split_two_sets(0)


def test_hanoi_single_disk():
    assert hanoi_moves(1) == [(1, 3)]


@pytest.mark.parametrize("n", [1, 2, 3, 5, 8])
def test_hanoi_moves_are_legal(n):
    moves = hanoi_moves(n)
    assert len(moves) == 2**n - 1
    pegs = {1: list(range(n, 0, -1)), 2: [], 3: []}
    for src, dst in moves:
        assert pegs[src]
        disk = pegs[src].pop()
        assert not pegs[dst] or pegs[dst][-1] > disk
        pegs[dst].append(disk)
    assert pegs[3] == list(range(n, 0, -1))
    assert pegs[1] == [] and pegs[2] == []


def test_hanoi_rejects_zero():
    with pytest.raises(ValueError):
        hanoi_moves(0)