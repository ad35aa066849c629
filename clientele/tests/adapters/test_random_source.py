"""Tests for the random id source adapter."""

import random

import pytest

from clientele.adapters.ids.random_source import (
    DEFAULT_LOWER,
    DEFAULT_UPPER,
    RandomIdSource,
)
from clientele.core.id_pool import IdPool
from clientele.core.models import IdPoolExhaustedError


def test_draws_within_default_range() -> None:
    source = RandomIdSource(seed=1)
    for _ in range(500):
        assert DEFAULT_LOWER <= source.draw() < DEFAULT_UPPER


def test_same_seed_gives_same_sequence() -> None:
    a = RandomIdSource(seed=42)
    b = RandomIdSource(seed=42)
    assert [a.draw() for _ in range(20)] == [b.draw() for _ in range(20)]


def test_seeding_does_not_touch_global_random() -> None:
    random.seed(7)
    expected = random.random()
    random.seed(7)
    RandomIdSource(seed=1).draw()
    assert random.random() == expected


def test_small_range() -> None:
    source = RandomIdSource(lower=1, upper=3, seed=0)
    assert {source.draw() for _ in range(100)} == {1, 2}


@pytest.mark.parametrize(("lower", "upper"), [(0, 10), (-5, 10), (10, 10), (10, 5)])
def test_invalid_range_rejected(lower: int, upper: int) -> None:
    with pytest.raises(ValueError):
        RandomIdSource(lower=lower, upper=upper)


def test_pool_with_seeded_source_is_deterministic() -> None:
    """Two pools with equally seeded sources dispense the same ids."""
    a = IdPool(source=RandomIdSource(seed=3), initial=[1], batch_size=5)
    b = IdPool(source=RandomIdSource(seed=3), initial=[1], batch_size=5)
    assert [a.next() for _ in range(12)] == [b.next() for _ in range(12)]


def test_pool_exhausts_tiny_range() -> None:
    """A range with fewer ids than requested cannot fill a batch."""
    pool = IdPool(
        source=RandomIdSource(lower=1, upper=4, seed=0),
        batch_size=5,
        max_attempts_factor=10,
    )
    with pytest.raises(IdPoolExhaustedError):
        pool.next()
