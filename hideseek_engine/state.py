"""Immutable match state models for hide and seek."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, IntEnum, auto

from hideseek_engine.grid import GRID_SIZE, Position

MAX_TICKS = 90
HIDING_TICKS = 10


class Role(IntEnum):
    """Which side an agent plays in a match."""

    HIDER = auto()
    SEEKER = auto()

    @property
    def capability(self) -> str:
        """Name of the strategy method that plays this role."""
        return self.name.lower()


class MatchPhase(IntEnum):
    """Current phase of the match."""

    HIDING = auto()  # Only the Hider acts
    SEEKING = auto()  # Only the Seeker acts
    DONE = auto()  # Outcome decided


class Outcome(str, Enum):
    """How a match ended."""

    HIDER = "hider"  # Hider survived the full tick budget
    SEEKER = "seeker"  # Seeker reached the Hider's cell
    ERROR = "error"  # A strategy faulted; no score is attributed


@dataclass(frozen=True, slots=True)
class AgentState:
    """One agent on the grid.

    Attributes:
        role: HIDER or SEEKER
        position: Current cell
    """

    role: Role
    position: Position

    def with_position(self, position: Position) -> AgentState:
        """Return new agent at a different position."""
        return AgentState(role=self.role, position=position)


@dataclass(frozen=True, slots=True)
class MatchState:
    """Complete immutable match state.

    Attributes:
        hider: The hiding agent
        seeker: The seeking agent
        obstacles: Blocking cells, shared by every match in a tournament
        grid_size: Side length of the grid
        max_ticks: Tick budget for the whole match
        hiding_ticks: Number of ticks in the hiding phase
        tick: 0-based index of the tick being evaluated
        phase: Current phase
        outcome: Terminal outcome, None while the match is live
    """

    hider: AgentState
    seeker: AgentState
    obstacles: frozenset[Position]
    grid_size: int = GRID_SIZE
    max_ticks: int = MAX_TICKS
    hiding_ticks: int = HIDING_TICKS
    tick: int = 0
    phase: MatchPhase = MatchPhase.HIDING
    outcome: Outcome | None = None

    @property
    def is_over(self) -> bool:
        """Whether an outcome has been decided."""
        return self.outcome is not None

    @property
    def acting_role(self) -> Role:
        """Role allowed to move this tick."""
        return Role.SEEKER if self.phase == MatchPhase.SEEKING else Role.HIDER

    @property
    def acting_agent(self) -> AgentState:
        """Agent allowed to move this tick."""
        return self.agent(self.acting_role)

    @property
    def remaining_ticks(self) -> int:
        """Ticks left in the match, counting the current one."""
        return self.max_ticks - self.tick

    @property
    def is_capture(self) -> bool:
        """Hider and Seeker share a cell."""
        return self.hider.position == self.seeker.position

    def agent(self, role: Role) -> AgentState:
        """Agent playing the given role."""
        return self.hider if role == Role.HIDER else self.seeker

    def with_agent(self, agent: AgentState) -> MatchState:
        """Return new state with one agent replaced."""
        if agent.role == Role.HIDER:
            return replace(self, hider=agent)
        return replace(self, seeker=agent)

    def with_phase(self, phase: MatchPhase) -> MatchState:
        """Return new state with updated phase."""
        return replace(self, phase=phase)

    def with_tick(self, tick: int) -> MatchState:
        """Return new state with updated tick."""
        return replace(self, tick=tick)

    def with_outcome(self, outcome: Outcome) -> MatchState:
        """Return new state with the outcome set."""
        return replace(self, outcome=outcome, phase=MatchPhase.DONE)


def create_initial_state(
    obstacles: frozenset[Position] = frozenset(),
    grid_size: int = GRID_SIZE,
    max_ticks: int = MAX_TICKS,
    hiding_ticks: int = HIDING_TICKS,
) -> MatchState:
    """Create the opening state: Hider top-left, Seeker bottom-right, tick 0."""
    return MatchState(
        hider=AgentState(role=Role.HIDER, position=Position(0, 0)),
        seeker=AgentState(role=Role.SEEKER, position=Position(grid_size - 1, grid_size - 1)),
        obstacles=frozenset(obstacles),
        grid_size=grid_size,
        max_ticks=max_ticks,
        hiding_ticks=hiding_ticks,
    )
