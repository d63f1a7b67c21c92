"""Round-robin tournament for hide and seek strategies.

Every registered player hides against every other player once and seeks
against every other player once. Session standings are threaded through each
match explicitly and merged into the persisted cumulative record only when the
whole round is done.
"""

from __future__ import annotations

import logging
import random
import time
import uuid
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

from core.config import TournamentConfig
from core.match_log import MatchLog, MatchLogEntry
from core.score_store import ScoreRecord, ScoreStore
from hideseek_engine.grid import Position, generate_obstacles, layout_to_dict
from hideseek_engine.state import MatchState, Outcome
from simulation.runner import MatchResult, MatchRunner

if TYPE_CHECKING:
    from core.pacing import Pacer
    from strategies.registry import StrategyRegistry

logger = logging.getLogger(__name__)

Standings = dict[str, ScoreRecord]
ViewCallback = Callable[[MatchState, str, Standings, Standings], None]

_SEEKER_WIN = ScoreRecord(seeker_wins=1)
_HIDER_SURVIVAL = ScoreRecord(hider_survived=1)
_GAME = ScoreRecord(games_played=1)


@dataclass
class TournamentResult:
    """Results of one tournament run.

    Attributes:
        tournament_id: Identifier written to every log row.
        grid_size: Side length of the grid.
        obstacles: Obstacle layout shared by every match.
        matches: Match results in play order.
        session: Standings for this run only.
        cumulative: Persisted standings after merging this run.
        duration_seconds: Wall time of the run.
    """

    tournament_id: str
    grid_size: int
    obstacles: frozenset[Position]
    matches: list[MatchResult] = field(default_factory=list)
    session: Standings = field(default_factory=dict)
    cumulative: Standings = field(default_factory=dict)
    duration_seconds: float = 0.0

    @property
    def total_matches(self) -> int:
        return len(self.matches)

    def outcome_counts(self) -> dict[Outcome, int]:
        """Number of matches per outcome."""
        counts = {outcome: 0 for outcome in Outcome}
        for match in self.matches:
            counts[match.outcome] += 1
        return counts

    def standings(self) -> list[tuple[str, ScoreRecord]]:
        """Session standings, best first."""
        return rank_standings(self.session)

    def __str__(self) -> str:
        lines = [
            f"Tournament {self.tournament_id}",
            "=" * 50,
            "",
            "Standings:",
        ]
        for rank, (name, record) in enumerate(self.standings(), 1):
            lines.append(
                f"  {rank}. {name}: {record.seeker_wins} found, "
                f"{record.hider_survived} survived ({record.games_played} played)"
            )

        counts = self.outcome_counts()
        lines.append(
            f"\nTotal: {self.total_matches} matches "
            f"({counts[Outcome.SEEKER]} found, {counts[Outcome.HIDER]} survived, "
            f"{counts[Outcome.ERROR]} invalid) in {self.duration_seconds:.1f}s"
        )
        return "\n".join(lines)


def build_pairings(names: list[str]) -> list[tuple[str, str]]:
    """All ordered (hider, seeker) pairs of distinct players.

    n players give n * (n - 1) pairs; fewer than two give none.
    """
    return [(hider, seeker) for hider in names for seeker in names if hider != seeker]


def new_standings(names: list[str]) -> Standings:
    """Zeroed standings for a fresh session."""
    return {name: ScoreRecord() for name in names}


def record_outcome(
    standings: Standings,
    hider: str,
    seeker: str,
    outcome: Outcome,
) -> Standings:
    """Return standings updated with one match outcome.

    The input mapping is not modified. Both players are credited a game for
    every outcome, including ERROR, which scores nothing else.
    """
    updated = dict(standings)
    hider_delta = _GAME
    seeker_delta = _GAME

    match outcome:
        case Outcome.SEEKER:
            seeker_delta = seeker_delta + _SEEKER_WIN
        case Outcome.HIDER:
            hider_delta = hider_delta + _HIDER_SURVIVAL
        case Outcome.ERROR:
            pass
        case _:
            raise ValueError(f"Unknown outcome: {outcome!r}")

    updated[hider] = updated.get(hider, ScoreRecord()) + hider_delta
    updated[seeker] = updated.get(seeker, ScoreRecord()) + seeker_delta
    return updated


def merge_scores(cumulative: Standings, session: Standings) -> Standings:
    """Add session counters into the cumulative record, player by player.

    Players missing from the session keep their cumulative record unchanged.
    """
    merged = dict(cumulative)
    for name, record in session.items():
        merged[name] = merged.get(name, ScoreRecord()) + record
    return merged


def rank_standings(standings: Standings) -> list[tuple[str, ScoreRecord]]:
    """Sort by wins in either role, best first. Ties keep input order."""
    return sorted(standings.items(), key=lambda item: item[1].total_wins, reverse=True)


class TournamentRunner:
    """Runs a round-robin hide and seek tournament over a set of players."""

    def __init__(
        self,
        registry: StrategyRegistry,
        config: TournamentConfig | None = None,
        score_store: ScoreStore | None = None,
        match_log: MatchLog | None = None,
        pacer: Pacer | None = None,
        view: ViewCallback | None = None,
        tournament_id: str | None = None,
        obstacles: frozenset[Position] | None = None,
    ):
        """Initialize the tournament runner.

        Args:
            registry: Registered players, in pairing order.
            config: Tournament configuration (defaults if omitted).
            score_store: Cumulative score persistence; from config if omitted.
            match_log: Match log; from config if omitted.
            pacer: Pauses between ticks and matches. None runs without pausing.
            view: Live view called after every tick with both standings.
            tournament_id: Optional specific tournament ID.
            obstacles: Fixed obstacle layout; generated from config.seed if omitted.
        """
        self.registry = registry
        self.config = (config or TournamentConfig()).validate()
        self.score_store = score_store or ScoreStore(self.config.scores_path)
        self.match_log = match_log or MatchLog(self.config.log_path)
        self.pacer = pacer
        self.view = view
        self.tournament_id = tournament_id or f"tournament-{uuid.uuid4().hex[:12]}"
        self._obstacles = obstacles

    def generate_obstacles(self) -> frozenset[Position]:
        """Obstacle layout for this run, generated once and reused by every match."""
        if self._obstacles is None:
            rng = random.Random(self.config.seed)
            self._obstacles = generate_obstacles(
                self.config.grid_size, self.config.obstacle_count, rng
            )
        return self._obstacles

    def run(self) -> TournamentResult:
        """Play every pairing, log each match, then persist merged scores.

        Raises:
            OSError: If the match log or score file cannot be written. The
                run stops at that point.
        """
        start_time = time.perf_counter()
        names = self.registry.names()
        pairings = build_pairings(names)
        obstacles = self.generate_obstacles()

        cumulative = self.score_store.load()
        session = new_standings(names)
        result = TournamentResult(
            tournament_id=self.tournament_id,
            grid_size=self.config.grid_size,
            obstacles=obstacles,
        )

        logger.info(
            f"Starting {self.tournament_id}: {len(names)} players, "
            f"{len(pairings)} matches, obstacles {layout_to_dict(self.config.grid_size, obstacles)}"
        )
        if len(names) < 2:
            logger.info("Fewer than two players registered; no matches to play")

        self.match_log.ensure_header()

        for number, (hider, seeker) in enumerate(pairings, 1):
            label = (
                f"{self.tournament_id} | Match {number}/{len(pairings)}: "
                f"{hider} (H) vs {seeker} (S)"
            )
            match = self._play(hider, seeker, obstacles, label, session, cumulative)
            result.matches.append(match)
            session = record_outcome(session, hider, seeker, match.outcome)

            self.match_log.append(
                MatchLogEntry.from_outcome(
                    tournament_id=self.tournament_id,
                    hider=hider,
                    seeker=seeker,
                    outcome=match.outcome,
                    grid_size=self.config.grid_size,
                    obstacles=obstacles,
                )
            )
            logger.info(f"{label}: {match.outcome.value} after {match.ticks_played} ticks")

            if self.pacer:
                self.pacer.pause(self.config.match_delay)

        result.session = session
        result.cumulative = merge_scores(cumulative, session)
        self.score_store.save(result.cumulative)
        result.duration_seconds = time.perf_counter() - start_time

        logger.info(f"Finished {self.tournament_id} in {result.duration_seconds:.1f}s")
        return result

    def _play(
        self,
        hider: str,
        seeker: str,
        obstacles: frozenset[Position],
        label: str,
        session: Standings,
        cumulative: Standings,
    ) -> MatchResult:
        on_tick = None
        if self.view:
            view = self.view

            def on_tick(state: MatchState, match_label: str) -> None:
                view(state, match_label, session, cumulative)

        runner = MatchRunner(
            self.registry.get(hider),
            self.registry.get(seeker),
            obstacles=obstacles,
            grid_size=self.config.grid_size,
            max_ticks=self.config.max_ticks,
            hiding_ticks=self.config.hiding_ticks,
            on_tick=on_tick,
            pacer=self.pacer,
            tick_delay=self.config.tick_delay,
            label=label,
        )
        return runner.run_match()


def run_tournament(
    registry: StrategyRegistry,
    config: TournamentConfig | None = None,
    **kwargs,
) -> TournamentResult:
    """Run one round-robin tournament. See TournamentRunner for options."""
    return TournamentRunner(registry, config, **kwargs).run()
