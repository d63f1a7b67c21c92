"""Per-tick state transitions for hide and seek."""

from __future__ import annotations

from hideseek_engine.grid import Direction, is_blocked, move_position
from hideseek_engine.state import MatchPhase, MatchState, Outcome


class MatchOverError(Exception):
    """Raised when a transition is applied to a finished match."""

    pass


def advance_phase(state: MatchState) -> MatchState:
    """Switch from hiding to seeking once the hiding ticks are used up."""
    _check_live(state)
    if state.phase == MatchPhase.HIDING and state.tick >= state.hiding_ticks:
        return state.with_phase(MatchPhase.SEEKING)
    return state


def can_move(state: MatchState, direction: Direction | str) -> bool:
    """Whether the acting agent may step in direction."""
    if Direction.parse(direction) is None:
        return False
    destination = move_position(state.acting_agent.position, direction)
    return not is_blocked(destination, state.obstacles, state.grid_size)


def apply_move(state: MatchState, direction: Direction | str | None) -> MatchState:
    """Move the acting agent one step.

    A blocked destination, an unknown direction, or None leaves the state
    unchanged.
    """
    _check_live(state)
    if direction is None or not can_move(state, direction):
        return state
    agent = state.acting_agent
    return state.with_agent(agent.with_position(move_position(agent.position, direction)))


def resolve_tick(state: MatchState) -> MatchState:
    """Close out the current tick.

    Returns:
        The state with SEEKER set on a capture during seeking, HIDER set on the
        last tick of the budget, or the tick counter advanced otherwise.
    """
    _check_live(state)
    if state.phase == MatchPhase.SEEKING and state.is_capture:
        return state.with_outcome(Outcome.SEEKER)
    if state.tick >= state.max_ticks - 1:
        return state.with_outcome(Outcome.HIDER)
    return state.with_tick(state.tick + 1)


def abort(state: MatchState) -> MatchState:
    """End the match as invalid after a strategy fault."""
    _check_live(state)
    return state.with_outcome(Outcome.ERROR)


def _check_live(state: MatchState) -> None:
    if state.is_over:
        raise MatchOverError("Match is already over")
