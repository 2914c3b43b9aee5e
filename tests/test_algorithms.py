"""Tests for shuffle algorithms and the random.Random adapter."""

from __future__ import annotations

import random
import secrets

import pytest
from grand import GRand, RandomAdapter, random_shuffle, shuffle
from grand.engine import MT19937
from hypothesis import given
from hypothesis import strategies as st

from tests.strategies import ScriptedGenerator, word_seeds


class TestShuffle:
    """Tests for shuffle() over uniform random bit generators."""

    @given(seed=word_seeds, items=st.lists(st.integers(), max_size=50))
    def test_is_permutation(self, seed: int, items: list[int]) -> None:
        shuffled = list(items)
        shuffle(shuffled, GRand(seed))
        assert sorted(shuffled) == sorted(items)

    def test_same_seed_same_order(self) -> None:
        first = list(range(52))
        second = list(range(52))
        shuffle(first, GRand(7))
        shuffle(second, GRand(7))
        assert first == second
        assert first != list(range(52))

    def test_accepts_bare_engine(self) -> None:
        with_engine = list(range(20))
        with_grand = list(range(20))
        shuffle(with_engine, MT19937(3))
        shuffle(with_grand, GRand(3))
        assert with_engine == with_grand

    def test_empty_and_single(self) -> None:
        empty: list[int] = []
        single = [1]
        shuffle(empty, GRand(1))
        shuffle(single, GRand(1))
        assert empty == []
        assert single == [1]

    def test_scripted_swaps(self) -> None:
        # max words always pick the top index, so nothing moves
        items = ['a', 'b', 'c', 'd']
        shuffle(items, ScriptedGenerator([2**32 - 1] * 3))
        assert items == ['a', 'b', 'c', 'd']

    def test_lazy_seed_on_first_draw(self, entropy_calls: list[int]) -> None:
        r = GRand()
        shuffle([1, 2, 3], r)
        assert entropy_calls == [12345]


class TestRandomShuffle:
    """Tests for random_shuffle() over rand(n) callables."""

    def test_with_grand(self) -> None:
        first = list(range(30))
        second = list(range(30))
        random_shuffle(first, GRand(11))
        random_shuffle(second, GRand(11))
        assert first == second
        assert sorted(first) == list(range(30))

    def test_with_plain_function(self) -> None:
        items = list(range(30))
        random_shuffle(items, secrets.randbelow)
        assert sorted(items) == list(range(30))

    def test_rand_receives_growing_counts(self) -> None:
        seen: list[int] = []

        def rand(n: int) -> int:
            seen.append(n)
            return 0

        items = ['a', 'b', 'c', 'd']
        random_shuffle(items, rand)
        assert seen == [2, 3, 4]
        assert items == ['d', 'a', 'b', 'c']


class TestRandomAdapter:
    """Tests for RandomAdapter."""

    def test_is_random_instance(self) -> None:
        assert isinstance(RandomAdapter(GRand(1)), random.Random)

    def test_generator_property(self) -> None:
        r = GRand(1)
        assert RandomAdapter(r).generator is r

    def test_stdlib_methods_reproduce(self) -> None:
        def draw(rnd: random.Random) -> list[object]:
            deck = list(range(52))
            rnd.shuffle(deck)
            return [deck, rnd.choice('abcdef'), rnd.sample(range(100), 5), rnd.randrange(10, 20), rnd.gauss(0.0, 1.0)]

        assert draw(RandomAdapter(GRand(5))) == draw(RandomAdapter(GRand(5)))

    def test_random_uses_canonical(self) -> None:
        rnd = RandomAdapter(ScriptedGenerator([0, 1 << 31]))
        assert rnd.random() == 0.5

    def test_getrandbits(self) -> None:
        assert RandomAdapter(GRand(5489)).getrandbits(32) == 3499211612
        assert RandomAdapter(GRand(5489)).getrandbits(8) == 208
        assert RandomAdapter(GRand(5489)).getrandbits(0) == 0

    def test_getrandbits_wide(self) -> None:
        value = RandomAdapter(GRand(5)).getrandbits(100)
        assert 0 <= value < 2**100

    def test_getrandbits_negative_raises(self) -> None:
        with pytest.raises(ValueError):
            RandomAdapter(GRand(5)).getrandbits(-1)

    def test_seed_forwards(self) -> None:
        rnd = RandomAdapter(GRand(1))
        rnd.seed(42)
        assert rnd.random() == RandomAdapter(GRand(42)).random()

    def test_seed_none_requests_entropy(self, entropy_calls: list[int]) -> None:
        r = GRand(1)
        RandomAdapter(r).seed()
        assert repr(r) == 'GRand(pending)'

    def test_seed_without_seed_method_raises(self) -> None:
        with pytest.raises(TypeError, match='cannot be reseeded'):
            RandomAdapter(ScriptedGenerator([])).seed(1)

    def test_state_round_trip(self) -> None:
        rnd = RandomAdapter(GRand(8))
        state = rnd.getstate()
        expected = [rnd.random() for _ in range(5)]
        rnd.setstate(state)
        assert [rnd.random() for _ in range(5)] == expected
