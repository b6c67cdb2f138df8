"""
Buy Strategy Simulator

A simplified property-trading board game, played many times over to
compare how four fixed purchasing behaviors fare against each other.
"""

from .board import Board, Property, change_ownership
from .config import GameConfig
from .game import Game, create_game
from .player import Player, roll_die, transfer
from .runner import GameRunner, GameStatus, default_players_factory
from .strategies import Behavior, BuyStrategy, create_strategy

__all__ = [
    "Behavior",
    "Board",
    "BuyStrategy",
    "Game",
    "GameConfig",
    "GameRunner",
    "GameStatus",
    "Player",
    "Property",
    "change_ownership",
    "create_game",
    "create_strategy",
    "default_players_factory",
    "roll_die",
    "transfer",
]
