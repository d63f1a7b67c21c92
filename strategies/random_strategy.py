"""Random strategy for baseline testing."""

from __future__ import annotations

import random

from strategies.base import MoveFn, RemainingFn, SenseFn, Strategy


class RandomStrategy(Strategy):
    """Strategy that steps in a uniformly random open direction.

    Useful as a baseline and for smoke testing.
    """

    def __init__(self, seed: int | None = None, name: str = "Random"):
        """Initialize the random strategy.

        Args:
            seed: Optional random seed for reproducibility.
            name: Display name, so several random players can be registered.
        """
        self._rng = random.Random(seed)
        self._seed = seed
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
        self._step(sense_obstacles, move)

    def seeker(
        self,
        sense_walls: SenseFn,
        sense_obstacles: SenseFn,
        remaining_ticks: RemainingFn,
        move: MoveFn,
    ) -> None:
        self._step(sense_obstacles, move)

    def _step(self, sense_obstacles: SenseFn, move: MoveFn) -> None:
        blocked = sense_obstacles()
        # Sorted so the choice only depends on the seed
        open_directions = sorted(d for d, is_blocked in blocked.items() if not is_blocked)
        if open_directions:
            move(self._rng.choice(open_directions))

    def reset_seed(self, seed: int | None = None) -> None:
        """Reset the random number generator with a new seed."""
        self._seed = seed
        self._rng = random.Random(seed)
