"""Tests for the match runner."""

import pytest

from core.pacing import NullPacer
from hideseek_engine.grid import Position
from hideseek_engine.state import MatchPhase, Outcome, Role
from simulation.runner import MatchRunner, run_match
from strategies.base import Strategy
from strategies.corner import CornerStrategy
from strategies.random_strategy import RandomStrategy
from strategies.scripted import ScriptedStrategy


class IdleStrategy(Strategy):
    """Never moves."""

    @property
    def name(self):
        return "Idle"

    def hider(self, sense_walls, sense_obstacles, remaining_ticks, move):
        pass

    def seeker(self, sense_walls, sense_obstacles, remaining_ticks, move):
        pass


class FaultyStrategy(IdleStrategy):
    """Requests a move, then raises."""

    @property
    def name(self):
        return "Faulty"

    def hider(self, sense_walls, sense_obstacles, remaining_ticks, move):
        move("down")
        raise RuntimeError("hider crashed")

    def seeker(self, sense_walls, sense_obstacles, remaining_ticks, move):
        move("left")
        raise RuntimeError("seeker crashed")


class RecordingStrategy(IdleStrategy):
    """Records what the engine passes in, and optionally moves."""

    def __init__(self, direction=None):
        self.direction = direction
        self.calls = []
        self.events = []

    def _decide(self, role, sense_walls, sense_obstacles, remaining_ticks, move):
        self.calls.append((role, sense_walls(), sense_obstacles(), remaining_ticks()))
        if self.direction:
            move(self.direction)

    def hider(self, *args):
        self._decide("hider", *args)

    def seeker(self, *args):
        self._decide("seeker", *args)

    def on_match_start(self, role, grid_size, obstacles):
        self.events.append(("start", role))

    def on_match_end(self, role, outcome):
        self.events.append(("end", role, outcome))


class TestGoldenPath:
    def test_corner_vs_corner(self):
        result = run_match(
            CornerStrategy(name="h"),
            CornerStrategy(name="s"),
            obstacles=frozenset({Position(3, 3)}),
        )
        # Hider reaches (1, 9) on tick 9; Seeker walks left along row 9
        assert result.outcome == Outcome.SEEKER
        assert result.ticks_played == 18
        assert result.hider_position == Position(1, 9)
        assert result.seeker_position == Position(1, 9)
        assert result.error is None
        assert (result.hider, result.seeker) == ("h", "s")

    def test_reproducible(self):
        outcomes = {
            (r.outcome, r.ticks_played)
            for r in (
                run_match(CornerStrategy(), CornerStrategy(), frozenset({Position(3, 3)}))
                for _ in range(3)
            )
        }
        assert len(outcomes) == 1


class TestOutcomes:
    def test_idle_hider_survives_full_budget(self):
        result = run_match(IdleStrategy(), IdleStrategy())
        assert result.outcome == Outcome.HIDER
        assert result.ticks_played == 90
        assert result.hider_position == Position(0, 0)
        assert result.seeker_position == Position(9, 9)

    def test_custom_tick_budget(self):
        result = run_match(IdleStrategy(), IdleStrategy(), max_ticks=12, hiding_ticks=2)
        assert result.outcome == Outcome.HIDER
        assert result.ticks_played == 12

    def test_no_ticks_after_capture(self):
        seeker = RecordingStrategy(direction="left")
        result = run_match(
            ScriptedStrategy(hider_moves=["down"]),
            seeker,
            grid_size=2,
            hiding_ticks=1,
            max_ticks=10,
        )
        # Hider drops to (0, 1); the seeker's first step lands on it
        assert result.outcome == Outcome.SEEKER
        assert result.ticks_played == 2
        assert len(seeker.calls) == 1

    def test_seeker_catches_stationary_hider(self):
        result = run_match(
            IdleStrategy(),
            ScriptedStrategy(seeker_moves=["left", "up"]),
            grid_size=2,
            hiding_ticks=0,
            max_ticks=10,
        )
        assert result.outcome == Outcome.SEEKER
        assert result.ticks_played == 2
        assert result.seeker_position == Position(0, 0)

    def test_hider_walking_onto_seeker_while_hiding_is_not_capture(self):
        result = run_match(
            ScriptedStrategy(hider_moves=["right", "down"]),
            IdleStrategy(),
            grid_size=2,
            hiding_ticks=2,
            max_ticks=2,
        )
        assert result.hider_position == result.seeker_position == Position(1, 1)
        assert result.outcome == Outcome.HIDER

    def test_shared_cell_at_start_of_seeking_is_caught(self):
        result = run_match(
            ScriptedStrategy(hider_moves=["right", "down"]),
            IdleStrategy(),
            grid_size=2,
            hiding_ticks=2,
            max_ticks=10,
        )
        assert result.outcome == Outcome.SEEKER
        assert result.ticks_played == 3


class TestPhases:
    def test_only_phase_role_acts(self):
        hider = RecordingStrategy()
        seeker = RecordingStrategy()
        run_match(hider, seeker, max_ticks=15, hiding_ticks=10)
        assert [c[0] for c in hider.calls] == ["hider"] * 10
        assert [c[0] for c in seeker.calls] == ["seeker"] * 5

    def test_positions_frozen_outside_own_phase(self):
        states = []
        runner = MatchRunner(
            RandomStrategy(seed=1, name="h"),
            RandomStrategy(seed=2, name="s"),
            obstacles=frozenset({Position(4, 4), Position(5, 2)}),
            on_tick=lambda state, label: states.append(state),
        )
        runner.run_match()

        # Each recorded state carries the phase its tick was played in
        assert sum(1 for s in states if s.phase == MatchPhase.HIDING) == 10
        assert all(s.seeker.position == Position(9, 9) for s in states[:10])
        for before, after in zip(states, states[1:]):
            if after.phase == MatchPhase.HIDING:
                assert after.seeker.position == before.seeker.position
            else:
                assert after.hider.position == before.hider.position

    def test_ticks_stay_in_range(self):
        states = []
        MatchRunner(
            RandomStrategy(seed=4, name="h"),
            RandomStrategy(seed=5, name="s"),
            on_tick=lambda state, label: states.append(state),
        ).run_match()
        assert states
        assert all(0 <= s.tick < 90 for s in states)
        assert states[-1].is_over


class TestCallbacks:
    def test_sensing_and_remaining_ticks(self):
        hider = RecordingStrategy()
        run_match(hider, IdleStrategy(), obstacles=frozenset({Position(0, 1)}), max_ticks=12)
        role, walls, blocked, remaining = hider.calls[0]
        assert walls == {"left": True, "right": False, "up": True, "down": False}
        assert blocked == {"left": True, "right": False, "up": True, "down": True}
        assert remaining == 12
        assert hider.calls[1][3] == 11

    def test_blocked_move_ignored(self):
        hider = RecordingStrategy(direction="up")
        result = run_match(hider, IdleStrategy(), max_ticks=5, hiding_ticks=5)
        assert result.hider_position == Position(0, 0)
        assert result.outcome == Outcome.HIDER

    def test_last_accepted_move_wins(self):
        class DownThenRight(IdleStrategy):
            def hider(self, sense_walls, sense_obstacles, remaining_ticks, move):
                move("down")
                move("right")

        result = run_match(DownThenRight(), IdleStrategy(), max_ticks=1, hiding_ticks=1)
        assert result.hider_position == Position(1, 0)

    def test_one_step_per_tick(self):
        class DoubleStepper(IdleStrategy):
            def hider(self, sense_walls, sense_obstacles, remaining_ticks, move):
                move("down")
                move("right")

        result = run_match(DoubleStepper(), IdleStrategy(), max_ticks=3, hiding_ticks=3)
        assert result.hider_position == Position(3, 0)

    def test_blocked_request_does_not_replace_accepted_move(self):
        class RightThenWall(IdleStrategy):
            def hider(self, sense_walls, sense_obstacles, remaining_ticks, move):
                move("right")
                move("up")

        result = run_match(RightThenWall(), IdleStrategy(), max_ticks=1, hiding_ticks=1)
        assert result.hider_position == Position(1, 0)

    def test_wall_then_open_direction_moves(self):
        class TriesWallFirst(IdleStrategy):
            def hider(self, sense_walls, sense_obstacles, remaining_ticks, move):
                move("up")
                move("right")

        result = run_match(TriesWallFirst(), IdleStrategy(), max_ticks=1, hiding_ticks=1)
        assert result.hider_position == Position(1, 0)

    def test_lifecycle_hooks(self):
        hider, seeker = RecordingStrategy(), RecordingStrategy()
        run_match(hider, seeker, max_ticks=11)
        assert hider.events == [("start", Role.HIDER), ("end", Role.HIDER, Outcome.HIDER)]
        assert seeker.events == [("start", Role.SEEKER), ("end", Role.SEEKER, Outcome.HIDER)]

    def test_observer_and_pacer(self):
        labels = []
        pacer = NullPacer()
        MatchRunner(
            IdleStrategy(),
            IdleStrategy(),
            max_ticks=4,
            hiding_ticks=2,
            on_tick=lambda state, label: labels.append(label),
            pacer=pacer,
            tick_delay=0.25,
            label="m1",
        ).run_match()
        assert labels == ["m1"] * 4
        assert pacer.pauses == [0.25] * 4


class TestFaults:
    def test_hider_fault_on_first_call(self):
        result = run_match(FaultyStrategy(), IdleStrategy())
        assert result.outcome == Outcome.ERROR
        assert result.ticks_played == 1
        assert result.hider_position == Position(0, 0)
        assert result.seeker_position == Position(9, 9)
        assert "hider crashed" in result.error

    def test_seeker_fault_after_hiding(self):
        result = run_match(IdleStrategy(), FaultyStrategy(), max_ticks=20, hiding_ticks=3)
        assert result.outcome == Outcome.ERROR
        assert result.ticks_played == 4
        assert result.seeker_position == Position(9, 9)

    def test_observer_sees_aborted_state(self):
        seen = []
        MatchRunner(
            FaultyStrategy(),
            IdleStrategy(),
            on_tick=lambda state, label: seen.append(state),
        ).run_match()
        assert len(seen) == 1
        assert seen[0].is_over
        assert seen[0].outcome == Outcome.ERROR
        assert seen[0].hider.position == Position(0, 0)

    def test_fault_is_logged(self, caplog):
        run_match(FaultyStrategy(), IdleStrategy())
        assert any("Faulty" in r.getMessage() for r in caplog.records)

    def test_failing_start_hook_is_error(self):
        class BadStart(IdleStrategy):
            def on_match_start(self, role, grid_size, obstacles):
                raise ValueError("no")

        result = run_match(BadStart(), IdleStrategy())
        assert result.outcome == Outcome.ERROR
        assert result.ticks_played == 0

    def test_failing_end_hook_keeps_outcome(self):
        class BadEnd(IdleStrategy):
            def on_match_end(self, role, outcome):
                raise ValueError("no")

        assert run_match(BadEnd(), IdleStrategy(), max_ticks=2).outcome == Outcome.HIDER

    def test_missing_capability(self):
        strategy = IdleStrategy()
        strategy.seeker = None
        result = run_match(IdleStrategy(), strategy)
        assert result.outcome == Outcome.ERROR
        assert result.ticks_played == 0
        assert result.error == "missing capability: seeker"


@pytest.mark.parametrize("seed", range(5))
def test_random_matches_always_terminate(seed):
    result = run_match(RandomStrategy(seed=seed, name="a"), RandomStrategy(seed=seed + 100, name="b"))
    assert result.outcome in (Outcome.HIDER, Outcome.SEEKER)
    assert 1 <= result.ticks_played <= 90
