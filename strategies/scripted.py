"""Strategy that replays fixed move sequences."""

from __future__ import annotations

from typing import Sequence

from strategies.base import MoveFn, RemainingFn, SenseFn, Strategy


class ScriptedStrategy(Strategy):
    """Plays one scripted direction per tick in each role.

    None entries, and ticks past the end of a script, request no move.
    The scripts restart at every match.
    """

    def __init__(
        self,
        name: str = "Scripted",
        hider_moves: Sequence[str | None] = (),
        seeker_moves: Sequence[str | None] = (),
    ):
        self._name = name
        self._scripts = {"hider": list(hider_moves), "seeker": list(seeker_moves)}
        self._cursor = {"hider": 0, "seeker": 0}

    @property
    def name(self) -> str:
        return self._name

    def on_match_start(self, role, grid_size, obstacles) -> None:
        self._cursor = {"hider": 0, "seeker": 0}

    def hider(
        self,
        sense_walls: SenseFn,
        sense_obstacles: SenseFn,
        remaining_ticks: RemainingFn,
        move: MoveFn,
    ) -> None:
        self._play("hider", move)

    def seeker(
        self,
        sense_walls: SenseFn,
        sense_obstacles: SenseFn,
        remaining_ticks: RemainingFn,
        move: MoveFn,
    ) -> None:
        self._play("seeker", move)

    def _play(self, role: str, move: MoveFn) -> None:
        script = self._scripts[role]
        index = self._cursor[role]
        self._cursor[role] = index + 1
        if index < len(script) and script[index] is not None:
            move(script[index])
