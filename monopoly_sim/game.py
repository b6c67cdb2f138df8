"""
Main game engine: one match advanced turn by turn.
"""

import logging
import random
from typing import Dict, Iterator, List, Optional, Sequence

from monopoly_sim.board import Board, Property, change_ownership
from monopoly_sim.config import GameConfig
from monopoly_sim.events import EventLog, EventType
from monopoly_sim.exceptions import ConfigurationError, StalledRotationError
from monopoly_sim.player import Player, roll_die, transfer

logger = logging.getLogger(__name__)


class Game:
    """
    Represents the complete state of one match.

    The player sequence is shared with the caller, so balances read after
    the game reflect every change made during it. Turn order is computed
    in rounds: each round is the list of players active when the round
    begins, so a player who goes broke mid-round still takes its queued
    turn and is dropped from the next round on.
    """

    def __init__(
        self,
        players: Sequence[Player],
        board: Board,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config or GameConfig()
        self.rng = rng or random.Random(self.config.seed)
        self.players = players
        self.board = board
        self.event_log = EventLog()
        self.turn_number = 0

        self._index: Dict[Player, int] = {player: i for i, player in enumerate(players)}
        if len(self._index) != len(players):
            raise ConfigurationError("the same player cannot take part twice in one game")

        self._position: Dict[Player, int] = {player: 0 for player in players}
        self._rotation: Iterator[Player] = self._player_rotation()

        self.event_log.log(
            EventType.GAME_START,
            num_players=len(players),
            num_properties=len(board),
            behaviors=[p.strategy.behavior.value for p in players],
        )

    def get_position(self, player: Player) -> int:
        """Get the board index a player is standing on."""
        return self._position[player]

    def get_active_players(self) -> List[Player]:
        """Get all players with a non-negative balance, in seating order."""
        return [p for p in self.players if p.is_active]

    def _player_rotation(self) -> Iterator[Player]:
        while True:
            round_players = self.get_active_players()
            if not round_players:
                return
            yield from round_players

    def _reset_ownership_of_inactive_players_properties(self) -> None:
        for position, property in enumerate(self.board):
            owner = property.owner
            if owner is not None and not owner.is_active:
                property.reset_ownership()
                self.event_log.log(
                    EventType.OWNERSHIP_RESET,
                    self._index.get(owner),
                    position=position,
                )

    def _update_player_position(self, player: Player, squares_to_advance: int) -> None:
        """Advance a player, paying the lap reward when it wraps past the end."""
        old_position = self._position[player]
        new_position = old_position + squares_to_advance

        if new_position >= len(self.board):
            player.increase_balance(self.config.lap_reward)
            new_position %= len(self.board)
            self.event_log.log(
                EventType.PASS_GO,
                self._index[player],
                amount=self.config.lap_reward,
                new_balance=player.get_balance(),
            )

        self._position[player] = new_position
        self.event_log.log(
            EventType.MOVE,
            self._index[player],
            **{"from": old_position, "to": new_position, "spaces": squares_to_advance},
        )

    def _perform_player_interaction_with_property(self, player: Player, property: Property) -> None:
        """Buy the property if it is free and wanted, otherwise pay rent to its owner."""
        player_index = self._index[player]
        owner = property.owner

        if owner is None:
            if not player.decide_to_buy(property):
                self.event_log.log(
                    EventType.PURCHASE_DECLINED, player_index, sell_cost=property.sell_cost
                )
            elif change_ownership(property, player):
                self.event_log.log(
                    EventType.PURCHASE,
                    player_index,
                    sell_cost=property.sell_cost,
                    new_balance=player.get_balance(),
                )
            else:
                self.event_log.log(
                    EventType.PURCHASE_FAILED,
                    player_index,
                    sell_cost=property.sell_cost,
                    balance=player.get_balance(),
                )
            return

        was_active = {player: player.is_active, owner: owner.is_active}
        transfer(player, owner, property.rent_cost)

        self.event_log.log(
            EventType.RENT_PAYMENT,
            player_index,
            owner=self._index.get(owner),
            amount=property.rent_cost,
            payer_balance=player.get_balance(),
            owner_balance=owner.get_balance(),
        )

        for participant, active_before in was_active.items():
            if active_before and not participant.is_active:
                self.event_log.log(
                    EventType.BANKRUPTCY,
                    self._index.get(participant),
                    balance=participant.get_balance(),
                )
                logger.debug("Player %s went broke on turn %d", participant, self.turn_number)

    def turn(self) -> Player:
        """
        Play a single turn and return the player who moved.

        Raises:
            StalledRotationError: A new round began with no active players.
        """
        self._reset_ownership_of_inactive_players_properties()

        player = next(self._rotation, None)
        if player is None:
            raise StalledRotationError(f"no active players left on turn {self.turn_number}")

        self.turn_number += 1
        self.event_log.log(EventType.TURN_START, self._index[player], turn=self.turn_number)

        die_outcome = roll_die(self.config.die_sides, self.rng)
        self.event_log.log(EventType.DICE_ROLL, self._index[player], total=die_outcome)

        self._update_player_position(player, die_outcome)

        property = self.board.get_property(self._position[player])
        self._perform_player_interaction_with_property(player, property)

        logger.debug(
            "Turn %d: %s rolled %d, now at %d",
            self.turn_number,
            player,
            die_outcome,
            self._position[player],
        )
        return player

    def get_winner(self) -> Optional[Player]:
        """Get the only active player, or None while zero or several remain."""
        active_players = self.get_active_players()
        if len(active_players) == 1:
            return active_players[0]
        return None

    def end(self, winner: Player, timed_out: bool = False) -> None:
        """Record how the match was resolved."""
        self.event_log.log(
            EventType.GAME_END,
            self._index.get(winner),
            turns=self.turn_number,
            timed_out=timed_out,
            balances=[p.get_balance() for p in self.players],
        )


def create_game(
    players: Sequence[Player],
    config: Optional[GameConfig] = None,
    rng: Optional[random.Random] = None,
) -> Game:
    """Create a game on a freshly generated random board."""
    config = config or GameConfig()
    rng = rng or random.Random(config.seed)
    board = Board.random(config.num_properties, config.max_sell_cost, config.max_rent_cost, rng)
    return Game(players, board, config, rng)
