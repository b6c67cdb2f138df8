"""
Central simulation configuration using pydantic-settings.

Environment variables (prefix: SIM_):
    SIM_NUM_SIMULATIONS  - Number of games per batch (default: 300)
    SIM_STARTING_BALANCE - Balance every player starts with (default: 300)
    SIM_MAX_NUM_TURNS    - Turn cap before a game times out (default: 1000)
    SIM_SEED             - Optional seed for reproducible batches
    SIM_LOG_LEVEL        - Logging level for the CLI (default: INFO)
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from monopoly_sim.config import GameConfig


class SimulationSettings(BaseSettings):
    """Process-level defaults for batch simulations."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="SIM_",
    )

    num_simulations: int = Field(
        default=300,
        ge=0,
        description="Number of games to play in one batch.",
    )
    starting_balance: int = Field(
        default=300,
        gt=0,
        description="Balance each player starts a game with.",
    )
    max_num_turns: int = Field(
        default=1000,
        gt=0,
        description="Turns played before a game is resolved by the timeout fallback.",
    )
    seed: Optional[int] = Field(
        default=None,
        description="Seed for the shared random source; unseeded when omitted.",
    )
    log_level: str = Field(default="INFO")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Optional[str]) -> str:
        """Upper-case the level name and reject names logging does not know."""
        if not value:
            return "INFO"
        level = str(value).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level

    def to_game_config(self) -> GameConfig:
        """Build the game configuration these settings describe."""
        return GameConfig(
            starting_balance=self.starting_balance,
            max_num_turns=self.max_num_turns,
            seed=self.seed,
        )


@lru_cache
def get_settings() -> SimulationSettings:
    """Return cached simulation settings instance."""
    return SimulationSettings()
