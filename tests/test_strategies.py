"""
Tests for the four buy behaviors.
"""

import random

import pytest

from monopoly_sim.board import Property
from monopoly_sim.exceptions import UnknownBehaviorError
from monopoly_sim.player import Player
from monopoly_sim.strategies import (
    Behavior,
    CautiousStrategy,
    DemandingStrategy,
    ImpulsiveStrategy,
    RandomStrategy,
    create_strategy,
)


class TestImpulsive:
    def test_always_buys(self, rng):
        strategy = ImpulsiveStrategy()
        player = Player(0, strategy)

        for _ in range(20):
            assert strategy.decide_to_buy(Property.random(rng=rng), player) is True


class TestDemanding:
    """Demanding buys only when rent is at least 50."""

    def test_declines_low_rent(self):
        strategy = DemandingStrategy()

        assert strategy.decide_to_buy(Property(100, 49), Player(1000, strategy)) is False

    def test_buys_high_rent(self):
        strategy = DemandingStrategy()

        assert strategy.decide_to_buy(Property(100, 50), Player(1000, strategy)) is True


class TestCautious:
    """Cautious buys only when 80 remains after paying."""

    def test_declines_when_reserve_too_small(self):
        player = Player(170, CautiousStrategy())

        assert player.decide_to_buy(Property(100, 50)) is False

    def test_buys_when_reserve_kept(self):
        player = Player(180, CautiousStrategy())

        assert player.decide_to_buy(Property(100, 50)) is True


class TestRandom:
    def test_returns_both_outcomes(self):
        strategy = RandomStrategy(random.Random(3))
        player = Player(300, strategy)
        property = Property(100, 50)

        decisions = {strategy.decide_to_buy(property, player) for _ in range(200)}

        assert decisions == {True, False}

    def test_roughly_half_of_decisions_buy(self):
        strategy = RandomStrategy(random.Random(4))
        player = Player(300, strategy)

        buys = sum(strategy.decide_to_buy(Property(100, 50), player) for _ in range(2000))

        assert 800 < buys < 1200


class TestCreateStrategy:
    """Tests for building strategies from behavior labels."""

    @pytest.mark.parametrize(
        "label, expected",
        [
            (Behavior.IMPULSIVE, ImpulsiveStrategy),
            ("demanding", DemandingStrategy),
            ("Cautious", CautiousStrategy),
            (" RANDOM ", RandomStrategy),
        ],
    )
    def test_known_labels(self, label, expected):
        strategy = create_strategy(label)

        assert isinstance(strategy, expected)
        assert strategy.behavior == expected.behavior

    def test_random_strategy_uses_given_rng(self, rng):
        strategy = create_strategy(Behavior.RANDOM, rng)

        assert strategy.rng is rng

    def test_unknown_label(self):
        with pytest.raises(UnknownBehaviorError):
            create_strategy("greedy")

    def test_behavior_order(self):
        assert [b.value for b in Behavior] == ["Impulsive", "Demanding", "Cautious", "Random"]
