from random import Random
from typing import Optional, Union

from monopoly_sim.exceptions import UnknownBehaviorError
from monopoly_sim.strategies.base import Behavior, BuyStrategy
from monopoly_sim.strategies.cautious import CautiousStrategy
from monopoly_sim.strategies.demanding import DemandingStrategy
from monopoly_sim.strategies.impulsive import ImpulsiveStrategy
from monopoly_sim.strategies.random import RandomStrategy


def create_strategy(
    behavior: Union[Behavior, str], rng: Optional[Random] = None
) -> BuyStrategy:
    """Build the strategy for a behavior label (case-insensitive)."""
    if not isinstance(behavior, Behavior):
        by_name = {b.value.lower(): b for b in Behavior}
        try:
            behavior = by_name[str(behavior).strip().lower()]
        except KeyError:
            raise UnknownBehaviorError(
                f"unknown behavior {behavior!r}, expected one of {[b.value for b in Behavior]}"
            ) from None

    if behavior is Behavior.IMPULSIVE:
        return ImpulsiveStrategy()
    if behavior is Behavior.DEMANDING:
        return DemandingStrategy()
    if behavior is Behavior.CAUTIOUS:
        return CautiousStrategy()
    return RandomStrategy(rng)


__all__ = [
    "Behavior",
    "BuyStrategy",
    "CautiousStrategy",
    "DemandingStrategy",
    "ImpulsiveStrategy",
    "RandomStrategy",
    "create_strategy",
]
