"""
Game configuration settings.
"""

from dataclasses import dataclass
from typing import Optional

from monopoly_sim.exceptions import ConfigurationError


@dataclass
class GameConfig:
    """Configuration for a simulated game and the batch that repeats it."""

    starting_balance: int = 300
    lap_reward: int = 100

    num_properties: int = 20
    max_sell_cost: int = 300
    max_rent_cost: int = 80

    die_sides: int = 6
    max_num_turns: int = 1000

    seed: Optional[int] = None

    def __post_init__(self) -> None:
        for name in ("num_properties", "max_sell_cost", "max_rent_cost", "die_sides", "max_num_turns"):
            if getattr(self, name) <= 0:
                raise ConfigurationError(f"{name} must be positive, got {getattr(self, name)}")
        if self.starting_balance < 0:
            raise ConfigurationError(f"starting_balance must not be negative, got {self.starting_balance}")
        if self.lap_reward < 0:
            raise ConfigurationError(f"lap_reward must not be negative, got {self.lap_reward}")
