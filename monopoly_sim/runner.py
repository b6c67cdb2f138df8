"""
Batch runner: plays many independent games and aggregates their outcomes
by buy behavior.
"""

import logging
import math
import random
from dataclasses import dataclass, replace
from typing import Callable, Dict, List, Optional, Sequence

from monopoly_sim.config import GameConfig
from monopoly_sim.events import EventType
from monopoly_sim.exceptions import ConfigurationError
from monopoly_sim.game import Game, create_game
from monopoly_sim.player import Player
from monopoly_sim.schemas import SimulationReport
from monopoly_sim.strategies import Behavior, create_strategy

logger = logging.getLogger(__name__)

PlayersFactory = Callable[[], Sequence[Player]]


@dataclass(frozen=True)
class GameStatus:
    """Outcome of one finished game."""

    turns_played: int
    winner: Player
    timed_out: bool

    @property
    def winner_behavior(self) -> Behavior:
        return self.winner.strategy.behavior


def default_players_factory(
    starting_balance: int = 300, rng: Optional[random.Random] = None
) -> PlayersFactory:
    """Factory seating one player per behavior, in reporting order."""

    def factory() -> List[Player]:
        return [Player(starting_balance, create_strategy(behavior, rng)) for behavior in Behavior]

    return factory


class GameRunner:
    """
    Plays games built from a player factory and records how each ended.

    Games that reach `max_num_turns` without a single solvent player, or
    that run out of active players altogether, are awarded to the richest
    player, the first one in seating order on a tie.
    """

    def __init__(
        self,
        players_factory: PlayersFactory,
        max_num_turns: Optional[int] = None,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        config = config or GameConfig()
        if max_num_turns is not None:
            config = replace(config, max_num_turns=max_num_turns)
        self.config = config
        self.players_factory = players_factory
        self.rng = rng or random.Random(self.config.seed)
        self._game_status: Dict[Game, GameStatus] = {}

    @property
    def max_num_turns(self) -> int:
        return self.config.max_num_turns

    @property
    def statuses(self) -> List[GameStatus]:
        """Recorded outcomes, oldest first."""
        return list(self._game_status.values())

    @property
    def num_games(self) -> int:
        return len(self._game_status)

    @property
    def num_timed_out_games(self) -> int:
        return sum(1 for s in self._game_status.values() if s.turns_played == self.max_num_turns)

    @property
    def average_num_turns(self) -> float:
        """Mean turns per game, NaN before any game has been played."""
        if not self._game_status:
            return math.nan
        return sum(s.turns_played for s in self._game_status.values()) / len(self._game_status)

    def wins_per_behavior(self) -> Dict[Behavior, int]:
        wins = {behavior: 0 for behavior in Behavior}
        for status in self._game_status.values():
            wins[status.winner_behavior] += 1
        return wins

    @property
    def winning_percentage_per_behavior(self) -> Dict[Behavior, float]:
        """Share of all recorded games won by each behavior, NaN when none were recorded."""
        total = len(self._game_status)
        return {
            behavior: (wins / total if total else math.nan)
            for behavior, wins in self.wins_per_behavior().items()
        }

    @property
    def most_successful_behavior(self) -> Optional[Behavior]:
        """Behavior with the highest winning share; the earliest listed wins ties."""
        if not self._game_status:
            return None
        percentages = self.winning_percentage_per_behavior
        return max(percentages, key=percentages.get)

    def play_game(self) -> GameStatus:
        """Play one game to completion and record its outcome."""
        players = self.players_factory()
        game = create_game(players, self.config, self.rng)

        num_turns = 0
        while game.get_winner() is None and num_turns < self.max_num_turns:
            if not game.get_active_players():
                logger.warning("Game stalled after %d turns with no active players", num_turns)
                break
            game.turn()
            num_turns += 1

        winner = game.get_winner()
        if winner is None:
            winner = max(players, key=lambda p: p.get_balance())

        status = GameStatus(
            turns_played=num_turns,
            winner=winner,
            timed_out=num_turns == self.max_num_turns,
        )
        self._game_status[game] = status
        game.end(winner, timed_out=status.timed_out)

        logger.debug(
            "Game %d finished after %d turns, winner %s%s, %d purchases, %d bankruptcies",
            len(self._game_status),
            num_turns,
            winner,
            " (timed out)" if status.timed_out else "",
            game.event_log.count(EventType.PURCHASE),
            game.event_log.count(EventType.BANKRUPTCY),
        )
        # recorded games live as long as the runner; their events do not
        game.event_log.clear()
        return status

    def run(self, num_games: int) -> "GameRunner":
        """Play num_games games in sequence."""
        if num_games < 0:
            raise ConfigurationError(f"num_games must not be negative, got {num_games}")

        for _ in range(num_games):
            self.play_game()

        logger.info(
            "Played %d games, %d timed out, %.1f turns on average",
            num_games,
            self.num_timed_out_games,
            self.average_num_turns,
        )
        return self

    def report(self) -> SimulationReport:
        """Bundle the aggregate statistics for display or serialization."""
        best = self.most_successful_behavior
        return SimulationReport(
            num_games=self.num_games,
            max_num_turns=self.max_num_turns,
            num_timed_out_games=self.num_timed_out_games,
            average_num_turns=self.average_num_turns,
            winning_percentage_per_behavior={
                behavior.value: share for behavior, share in self.winning_percentage_per_behavior.items()
            },
            most_successful_behavior=best.value if best is not None else None,
        )
