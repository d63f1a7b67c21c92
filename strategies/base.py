"""Base strategy interface for hide and seek players."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from hideseek_engine.grid import Direction, Position
    from hideseek_engine.state import Outcome, Role

SenseFn = Callable[[], dict[str, bool]]
RemainingFn = Callable[[], int]
MoveFn = Callable[["Direction | str"], None]


class Strategy(ABC):
    """Abstract base class for player strategies.

    A player plays both roles over a tournament. Each tick the engine calls
    exactly one of hider() or seeker() with the same four callbacks:

        sense_walls()      -> {"left", "right", "up", "down": bool}, grid edges
        sense_obstacles()  -> same keys, True where a step would be blocked
        remaining_ticks()  -> ticks left in the match
        move(direction)    -> request a step; blocked steps are ignored
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for this strategy."""
        ...

    @abstractmethod
    def hider(
        self,
        sense_walls: SenseFn,
        sense_obstacles: SenseFn,
        remaining_ticks: RemainingFn,
        move: MoveFn,
    ) -> None:
        """Decide one tick as the Hider."""
        ...

    @abstractmethod
    def seeker(
        self,
        sense_walls: SenseFn,
        sense_obstacles: SenseFn,
        remaining_ticks: RemainingFn,
        move: MoveFn,
    ) -> None:
        """Decide one tick as the Seeker."""
        ...

    def on_match_start(
        self, role: Role, grid_size: int, obstacles: frozenset[Position]
    ) -> None:
        """Called before the first tick of a match.

        Override to reset per-match state.

        Args:
            role: Role this strategy plays in the match.
            grid_size: Side length of the grid.
            obstacles: Obstacle cells for the match.
        """
        pass

    def on_match_end(self, role: Role, outcome: Outcome) -> None:
        """Called when a match ends, including aborted ones.

        Args:
            role: Role this strategy played.
            outcome: How the match ended.
        """
        pass
