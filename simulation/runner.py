"""Match runner for hide and seek simulations."""

from __future__ import annotations

import logging
import time
import uuid
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from hideseek_engine.executor import abort, advance_phase, apply_move, can_move, resolve_tick
from hideseek_engine.grid import GRID_SIZE, Direction, sense_obstacles, sense_walls
from hideseek_engine.state import (
    HIDING_TICKS,
    MAX_TICKS,
    MatchState,
    Outcome,
    Role,
    create_initial_state,
)

if TYPE_CHECKING:
    from core.pacing import Pacer
    from hideseek_engine.grid import Position
    from strategies.base import Strategy

logger = logging.getLogger(__name__)

TickObserver = Callable[[MatchState, str], None]


@dataclass
class MatchResult:
    """Result of a completed match."""

    match_id: str
    hider: str
    seeker: str
    outcome: Outcome
    ticks_played: int
    hider_position: Position
    seeker_position: Position
    error: str | None
    duration_ms: float


class _TickControls:
    """Callbacks handed to the acting strategy for one tick.

    Sensing and moves are evaluated against the position at the start of
    the tick. Each unblocked request replaces the previous one, so the agent
    moves at most one cell.
    """

    def __init__(self, state: MatchState):
        self._state = state
        self.requested: Direction | None = None

    def sense_walls(self) -> dict[str, bool]:
        return sense_walls(self._state.acting_agent.position, self._state.grid_size)

    def sense_obstacles(self) -> dict[str, bool]:
        return sense_obstacles(
            self._state.acting_agent.position, self._state.obstacles, self._state.grid_size
        )

    def remaining_ticks(self) -> int:
        return self._state.remaining_ticks

    def move(self, direction: Direction | str) -> None:
        if not can_move(self._state, direction):
            logger.debug(f"Tick {self._state.tick}: blocked move {direction!r} ignored")
            return
        self.requested = Direction.parse(direction)


class MatchRunner:
    """Runs one hide and seek match between two strategies."""

    def __init__(
        self,
        hider: Strategy,
        seeker: Strategy,
        obstacles: frozenset[Position] = frozenset(),
        grid_size: int = GRID_SIZE,
        max_ticks: int = MAX_TICKS,
        hiding_ticks: int = HIDING_TICKS,
        on_tick: TickObserver | None = None,
        pacer: Pacer | None = None,
        tick_delay: float = 0.0,
        label: str = "",
    ):
        """Initialize the match runner.

        Args:
            hider: Strategy playing the Hider.
            seeker: Strategy playing the Seeker.
            obstacles: Blocking cells, fixed for the match.
            grid_size: Side length of the grid.
            max_ticks: Tick budget; the Hider wins if it runs out.
            hiding_ticks: Ticks before the Seeker starts acting.
            on_tick: Observer called after each tick, e.g. a live view.
            pacer: Pauses between ticks. None runs without pausing.
            tick_delay: Seconds passed to the pacer after each tick.
            label: Text passed to the observer to identify the match.
        """
        self.strategies = {Role.HIDER: hider, Role.SEEKER: seeker}
        self.obstacles = frozenset(obstacles)
        self.grid_size = grid_size
        self.max_ticks = max_ticks
        self.hiding_ticks = hiding_ticks
        self.on_tick = on_tick
        self.pacer = pacer
        self.tick_delay = tick_delay
        self.label = label

    def run_match(self) -> MatchResult:
        """Play the match to completion.

        Returns:
            MatchResult with the outcome. A strategy that raises, or lacks the
            capability for its role, produces Outcome.ERROR.
        """
        start_time = time.perf_counter()
        match_id = str(uuid.uuid4())
        hider, seeker = self.strategies[Role.HIDER], self.strategies[Role.SEEKER]

        state = create_initial_state(
            obstacles=self.obstacles,
            grid_size=self.grid_size,
            max_ticks=self.max_ticks,
            hiding_ticks=self.hiding_ticks,
        )

        error = self._missing_capability() or self._notify_start()
        if error:
            state = abort(state)
        ticks_played = 0

        # Match loop
        while not state.is_over:
            state = advance_phase(state)
            role = state.acting_role
            decide = getattr(self.strategies[role], role.capability)
            controls = _TickControls(state)
            ticks_played += 1

            try:
                decide(
                    controls.sense_walls,
                    controls.sense_obstacles,
                    controls.remaining_ticks,
                    controls.move,
                )
            except Exception as e:
                error = f"{type(e).__name__}: {e}"
                logger.warning(
                    f"{self.strategies[role].name} faulted as {role.name.lower()} "
                    f"on tick {state.tick} ({hider.name} vs {seeker.name}): {error}"
                )
                state = abort(state)
                if self.on_tick:
                    self.on_tick(state, self.label)
                break

            state = apply_move(state, controls.requested)
            state = resolve_tick(state)

            if self.on_tick:
                self.on_tick(state, self.label)
            if self.pacer:
                self.pacer.pause(self.tick_delay)

        self._notify_end(state.outcome)

        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.debug(
            f"Match {hider.name} (H) vs {seeker.name} (S): "
            f"{state.outcome.value} after {ticks_played} ticks"
        )

        return MatchResult(
            match_id=match_id,
            hider=hider.name,
            seeker=seeker.name,
            outcome=state.outcome,
            ticks_played=ticks_played,
            hider_position=state.hider.position,
            seeker_position=state.seeker.position,
            error=error,
            duration_ms=duration_ms,
        )

    def _missing_capability(self) -> str | None:
        for role, strategy in self.strategies.items():
            if not callable(getattr(strategy, role.capability, None)):
                logger.warning(f"{strategy.name} cannot play {role.name.lower()}")
                return f"missing capability: {role.capability}"
        return None

    def _notify_start(self) -> str | None:
        for role, strategy in self.strategies.items():
            try:
                strategy.on_match_start(role, self.grid_size, self.obstacles)
            except Exception as e:
                logger.warning(f"{strategy.name} failed to start as {role.name.lower()}: {e}")
                return f"{type(e).__name__}: {e}"
        return None

    def _notify_end(self, outcome: Outcome) -> None:
        for role, strategy in self.strategies.items():
            try:
                strategy.on_match_end(role, outcome)
            except Exception as e:
                # Outcome is already final here
                logger.warning(f"{strategy.name} on_match_end raised: {e}")


def run_match(
    hider: Strategy,
    seeker: Strategy,
    obstacles: frozenset[Position] = frozenset(),
    **kwargs,
) -> MatchResult:
    """Convenience wrapper around MatchRunner(...).run_match()."""
    return MatchRunner(hider, seeker, obstacles, **kwargs).run_match()
