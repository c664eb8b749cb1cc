from __future__ import annotations

import random

import pytest

from circular import CircularVec

SEEDS = range(20)


def _random_items(rng: random.Random) -> list[int]:
    return [rng.randrange(1_000) for _ in range(rng.randint(1, 12))]


@pytest.mark.parametrize("seed", SEEDS)
def test_ith_read_returns_item_at_i_mod_length(seed: int) -> None:
    rng = random.Random(seed)
    items = _random_items(rng)
    vec = CircularVec(items)

    for i in range(len(items) * 5 + rng.randrange(7)):
        assert vec.next() == items[i % len(items)]


@pytest.mark.parametrize("seed", SEEDS)
def test_cursor_stays_in_bounds_under_random_operations(seed: int) -> None:
    rng = random.Random(seed)
    items = _random_items(rng)
    vec = CircularVec(items)
    expected_cursor = 0

    for _ in range(500):
        op = rng.choice(("next", "next_mut", "skip"))
        if op == "next":
            vec.next()
            expected_cursor += 1
        elif op == "next_mut":
            vec.next_mut()
            expected_cursor += 1
        else:
            n = rng.randrange(50)
            vec.skip(n)
            expected_cursor += n
        assert 0 <= vec.cursor < len(items)
        assert vec.cursor == expected_cursor % len(items)
        assert len(vec) == len(items)


@pytest.mark.parametrize("seed", SEEDS)
def test_skip_matches_repeated_next(seed: int) -> None:
    rng = random.Random(seed)
    items = _random_items(rng)
    skipped = CircularVec(items)
    stepped = CircularVec(items)
    warmup = rng.randrange(20)
    skipped.skip(warmup)
    stepped.skip(warmup)

    n = rng.randrange(40)
    skipped.skip(n)
    last = None
    for _ in range(n + 1):
        last = stepped.next()

    assert skipped.next() == last
    assert skipped.cursor == stepped.cursor


@pytest.mark.parametrize("seed", SEEDS)
def test_indexing_is_independent_of_cursor_movement(seed: int) -> None:
    rng = random.Random(seed)
    items = _random_items(rng)
    vec = CircularVec(items)

    for _ in range(100):
        if rng.random() < 0.5:
            vec.next()
        else:
            vec.skip(rng.randrange(30))
        position = rng.randrange(len(items))
        assert vec[position] == items[position]
    assert vec[0 : len(items)] == tuple(items)


@pytest.mark.parametrize("seed", SEEDS)
def test_writes_through_slots_persist(seed: int) -> None:
    rng = random.Random(seed)
    items = _random_items(rng)
    vec = CircularVec(items)
    shadow = list(items)

    for _ in range(200):
        vec.skip(rng.randrange(5))
        slot = vec.next_mut()
        value = rng.randrange(1_000)
        slot.value = value
        shadow[slot.index] = value
        assert vec[slot.index] == value

    assert vec[:] == tuple(shadow)
    start = vec.cursor
    for i in range(len(shadow)):
        assert vec.next() == shadow[(start + i) % len(shadow)]


def test_stress_many_laps_keeps_order() -> None:
    length = 1024
    total = 50_000
    vec = CircularVec(range(length))
    last = -1
    for _ in range(total):
        last = vec.next()
    assert last == (total - 1) % length
    assert vec.cursor == total % length
