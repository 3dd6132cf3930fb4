import random

import pytest

from handy.adapters.system_random import SystemRandomSource


def test_system_random_source():
    source = SystemRandomSource()
    for _ in range(100):
        value = source.random()
        assert 0 <= value < 1


def test_seed_is_deterministic():
    assert SystemRandomSource(seed=3).random() == SystemRandomSource(seed=3).random()


def test_wraps_given_generator():
    assert SystemRandomSource(source=random.Random(11)).random() == random.Random(11).random()


def test_reseed():
    source = SystemRandomSource(seed=1)
    first = source.random()
    source.reseed(1)
    assert source.random() == first


def test_seed_and_source_conflict():
    with pytest.raises(ValueError):
        SystemRandomSource(seed=1, source=random.Random())
