"""Shared test fixtures for the simulator tests."""

import random

import pytest

from monopoly_sim import GameConfig, Player
from monopoly_sim.board import Board, Property
from monopoly_sim.settings import get_settings
from monopoly_sim.strategies import (
    CautiousStrategy,
    DemandingStrategy,
    ImpulsiveStrategy,
    RandomStrategy,
)


class FixedRoll(random.Random):
    """Random source whose die always shows the same face."""

    def __init__(self, face: int):
        super().__init__(0)
        self.face = face

    def randint(self, a, b):
        return self.face


@pytest.fixture
def rng():
    """Seeded random source for reproducible draws."""
    return random.Random(42)


@pytest.fixture
def game_config():
    """Default game configuration with fixed seed for reproducibility."""
    return GameConfig(seed=42)


@pytest.fixture
def four_players(rng):
    """One player per behavior, each starting with 300."""
    return [
        Player(300, ImpulsiveStrategy()),
        Player(300, DemandingStrategy()),
        Player(300, CautiousStrategy()),
        Player(300, RandomStrategy(rng)),
    ]


@pytest.fixture
def unaffordable_board():
    """Four properties nobody in the tests can afford."""
    return Board([Property(10_000, 10) for _ in range(4)])


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so environment changes are picked up."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
