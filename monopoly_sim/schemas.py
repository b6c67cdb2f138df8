from typing import Dict, Optional

from pydantic import BaseModel, Field


class SimulationReport(BaseModel):
    """Aggregate statistics over every game a runner has recorded."""

    num_games: int
    max_num_turns: int
    num_timed_out_games: int
    average_num_turns: float
    winning_percentage_per_behavior: Dict[str, float] = Field(default_factory=dict)
    most_successful_behavior: Optional[str] = None
