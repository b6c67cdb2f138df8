"""Cautious strategy that keeps a cash reserve after every purchase."""

from monopoly_sim.strategies.base import Behavior, BuyStrategy


class CautiousStrategy(BuyStrategy):
    """
    Buys only if at least `reserve` would be left after paying.

    With a sell cost of 100 a balance of 180 buys, 170 does not.
    """

    behavior = Behavior.CAUTIOUS
    reserve = 80

    def decide_to_buy(self, property, player) -> bool:
        return player.get_balance() >= property.sell_cost + self.reserve
