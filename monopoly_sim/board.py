"""
Properties and the board they are laid out on.
"""

import random
import weakref
from typing import List, Optional, Sequence

from monopoly_sim.exceptions import ConfigurationError
from monopoly_sim.player import Player


class Property:
    """
    A purchasable position on the board.

    The owner is held through a weak reference: a property records who
    owns it without keeping that player alive.
    """

    def __init__(self, sell_cost: int, rent_cost: int):
        self.sell_cost = sell_cost
        self.rent_cost = rent_cost
        self._owner_ref: Optional["weakref.ref[Player]"] = None

    @property
    def owner(self) -> Optional[Player]:
        """Current owner, or None if unowned or the owner no longer exists."""
        if self._owner_ref is None:
            return None
        return self._owner_ref()

    def is_owned(self) -> bool:
        return self.owner is not None

    def set_owner(self, player: Player) -> None:
        self._owner_ref = weakref.ref(player)

    def reset_ownership(self) -> None:
        """Release the property back to the bank."""
        self._owner_ref = None

    @classmethod
    def random(
        cls, max_sell_cost: int = 300, max_rent_cost: int = 80, rng: Optional[random.Random] = None
    ) -> "Property":
        """Property with costs drawn uniformly from 1..max_sell_cost and 1..max_rent_cost."""
        if max_sell_cost <= 0 or max_rent_cost <= 0:
            raise ConfigurationError(
                f"cost maxima must be positive, got sell={max_sell_cost} rent={max_rent_cost}"
            )
        rng = rng or random.Random()
        return cls(1 + rng.randrange(max_sell_cost), 1 + rng.randrange(max_rent_cost))

    def __repr__(self) -> str:
        return f"Property(sell_cost={self.sell_cost}, rent_cost={self.rent_cost}, owned={self.is_owned()})"


def change_ownership(property: Property, new_owner: Player) -> bool:
    """
    Sell a property to a player.

    Returns True if the player could afford the sell cost, in which case
    the cost is debited and ownership recorded. Returns False otherwise,
    leaving both untouched.
    """
    if new_owner.get_balance() < property.sell_cost:
        return False

    new_owner.decrease_balance(property.sell_cost)
    property.set_owner(new_owner)
    return True


class Board:
    """A fixed ring of properties, traversed in order and wrapping at the end."""

    def __init__(self, properties: Sequence[Property]):
        if not properties:
            raise ConfigurationError("a board needs at least one property")
        self._properties = tuple(properties)

    @property
    def properties(self) -> List[Property]:
        return list(self._properties)

    def __len__(self) -> int:
        return len(self._properties)

    def __iter__(self):
        return iter(self._properties)

    def get_property(self, position: int) -> Property:
        """Get the property at the given position, wrapping around the board."""
        return self._properties[position % len(self._properties)]

    def owned_by(self, player: Player) -> List[Property]:
        """All properties currently owned by player."""
        return [p for p in self._properties if p.owner is player]

    @classmethod
    def random(
        cls,
        num_properties: int = 20,
        max_sell_cost: int = 300,
        max_rent_cost: int = 80,
        rng: Optional[random.Random] = None,
    ) -> "Board":
        """Board of num_properties randomly priced properties."""
        if num_properties <= 0:
            raise ConfigurationError(f"num_properties must be positive, got {num_properties}")
        rng = rng or random.Random()
        return cls([Property.random(max_sell_cost, max_rent_cost, rng) for _ in range(num_properties)])
