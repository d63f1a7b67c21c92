"""Corner-running strategy.

The Hider runs to the bottom edge and then along it to the right; the Seeker
runs to the left edge and then up. It only looks at the grid edges, so an
obstacle in its path simply stalls it.
"""

from __future__ import annotations

from strategies.base import MoveFn, RemainingFn, SenseFn, Strategy


class CornerStrategy(Strategy):
    """Reference player that hugs the grid edges."""

    def __init__(self, name: str = "Corner"):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def hider(
        self,
        sense_walls: SenseFn,
        sense_obstacles: SenseFn,
        remaining_ticks: RemainingFn,
        move: MoveFn,
    ) -> None:
        walls = sense_walls()
        if not walls["down"]:
            move("down")
        elif not walls["right"]:
            move("right")

    def seeker(
        self,
        sense_walls: SenseFn,
        sense_obstacles: SenseFn,
        remaining_ticks: RemainingFn,
        move: MoveFn,
    ) -> None:
        walls = sense_walls()
        if not walls["left"]:
            move("left")
        elif not walls["up"]:
            move("up")
