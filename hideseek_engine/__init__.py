"""Hide and seek grid game engine."""

from hideseek_engine.grid import GRID_SIZE, Direction, Position
from hideseek_engine.state import (
    HIDING_TICKS,
    MAX_TICKS,
    AgentState,
    MatchPhase,
    MatchState,
    Outcome,
    Role,
)

__all__ = [
    "GRID_SIZE",
    "MAX_TICKS",
    "HIDING_TICKS",
    "Direction",
    "Position",
    "AgentState",
    "MatchPhase",
    "MatchState",
    "Outcome",
    "Role",
]
