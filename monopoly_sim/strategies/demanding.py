"""Demanding strategy that only buys properties with high rent."""

from monopoly_sim.strategies.base import Behavior, BuyStrategy


class DemandingStrategy(BuyStrategy):
    """Buys when the property's rent is at least `min_rent_cost`."""

    behavior = Behavior.DEMANDING
    min_rent_cost = 50

    def decide_to_buy(self, property, player) -> bool:
        return property.rent_cost >= self.min_rent_cost
