"""
In-memory event log for a single game.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class EventType(Enum):
    """Types of game events."""

    GAME_START = "game_start"
    TURN_START = "turn_start"
    DICE_ROLL = "dice_roll"
    MOVE = "move"
    PASS_GO = "pass_go"

    PURCHASE = "purchase"
    PURCHASE_DECLINED = "purchase_declined"
    PURCHASE_FAILED = "purchase_failed"

    RENT_PAYMENT = "rent_payment"
    OWNERSHIP_RESET = "ownership_reset"
    BANKRUPTCY = "bankruptcy"
    GAME_END = "game_end"


@dataclass
class GameEvent:
    """A logged event in the game."""

    event_type: EventType
    player_index: Optional[int] = None
    details: Dict[str, Any] = field(default_factory=dict)

    def __repr__(self) -> str:
        player_str = f"P{self.player_index}" if self.player_index is not None else "System"
        return f"[{player_str}] {self.event_type.value}: {self.details}"


class EventLog:
    """Manages the game event log."""

    def __init__(self):
        self.events: List[GameEvent] = []

    def log(self, event_type: EventType, player_index: Optional[int] = None, **details: Any) -> None:
        """Log a game event."""
        self.events.append(GameEvent(event_type, player_index, details))

    def get_events(self) -> List[GameEvent]:
        """Get all logged events."""
        return self.events.copy()

    def count(self, event_type: EventType) -> int:
        return sum(1 for e in self.events if e.event_type == event_type)

    def clear(self) -> None:
        """Clear the event log."""
        self.events.clear()
