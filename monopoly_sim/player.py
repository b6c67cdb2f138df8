"""
Player state and money movement.
"""

import random
from typing import TYPE_CHECKING, Optional

from monopoly_sim.exceptions import ConfigurationError

if TYPE_CHECKING:
    from monopoly_sim.board import Property
    from monopoly_sim.strategies.base import BuyStrategy


class Player:
    """
    A participant with a balance ledger and a fixed buy strategy.

    The balance is unbounded in both directions. A player whose balance
    drops below zero is inactive: it can no longer win and leaves the
    rotation at the start of the next round.
    """

    def __init__(self, balance: int, strategy: "BuyStrategy"):
        self._balance = balance
        self._strategy = strategy

    @property
    def strategy(self) -> "BuyStrategy":
        return self._strategy

    @property
    def is_active(self) -> bool:
        return self._balance >= 0

    def get_balance(self) -> int:
        return self._balance

    def increase_balance(self, amount: int) -> None:
        self._balance += amount

    def decrease_balance(self, amount: int) -> None:
        self._balance -= amount

    def decide_to_buy(self, property: "Property") -> bool:
        """Ask this player's strategy whether to buy an unowned property."""
        return self._strategy.decide_to_buy(property, self)

    def __repr__(self) -> str:
        return f"Player(behavior={self._strategy.behavior.value}, balance={self._balance})"


def transfer(payer: Player, payee: Player, amount: int) -> None:
    """
    Move money from payer to payee.

    The payee is credited at most the payer's current balance, while the
    payer is always debited the full amount. A payer who cannot cover the
    amount ends up below zero. Transfers to oneself do nothing.
    """
    if payer is payee:
        return
    payee.increase_balance(min(payer.get_balance(), amount))
    payer.decrease_balance(amount)


def roll_die(sides: int = 6, rng: Optional[random.Random] = None) -> int:
    """Roll a single die with faces 1..sides."""
    if sides <= 0:
        raise ConfigurationError(f"a die needs at least one side, got {sides}")
    rng = rng or random.Random()
    return rng.randint(1, sides)
