"""Base class and behavior labels for buy strategies."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from monopoly_sim.board import Property
    from monopoly_sim.player import Player


class Behavior(str, Enum):
    """The closed set of purchasing behaviors, in reporting order."""

    IMPULSIVE = "Impulsive"
    DEMANDING = "Demanding"
    CAUTIOUS = "Cautious"
    RANDOM = "Random"


class BuyStrategy(ABC):
    """
    Abstract base class for purchase decisions.

    A strategy is consulted only for unowned properties and never mutates
    anything; the game performs the purchase itself.

    Attributes:
        behavior: Label used to group win statistics.
    """

    behavior: Behavior

    @abstractmethod
    def decide_to_buy(self, property: "Property", player: "Player") -> bool:
        """
        Decide whether to buy an unowned property.

        Args:
            property: The property the player landed on.
            player: The player deciding.

        Returns:
            True when the player wants to buy.
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
