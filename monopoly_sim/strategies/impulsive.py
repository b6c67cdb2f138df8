"""Impulsive strategy that buys everything it lands on."""

from monopoly_sim.strategies.base import Behavior, BuyStrategy


class ImpulsiveStrategy(BuyStrategy):
    """Always buys."""

    behavior = Behavior.IMPULSIVE

    def decide_to_buy(self, property, player) -> bool:
        return True
