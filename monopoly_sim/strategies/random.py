"""Random strategy that flips a coin for every purchase."""

import random
from typing import Optional

from monopoly_sim.strategies.base import Behavior, BuyStrategy


class RandomStrategy(BuyStrategy):
    """
    Buys with probability `buy_probability`, drawn independently per call.

    Pass the simulation's shared generator to keep batches reproducible.
    """

    behavior = Behavior.RANDOM
    buy_probability = 0.5

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def decide_to_buy(self, property, player) -> bool:
        return self.rng.random() < self.buy_probability
