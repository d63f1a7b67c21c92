"""Match and tournament running."""

from simulation.runner import (
    MatchResult,
    MatchRunner,
    run_match,
)
from simulation.tournament import (
    TournamentResult,
    TournamentRunner,
    build_pairings,
    merge_scores,
    new_standings,
    rank_standings,
    record_outcome,
    run_tournament,
)

__all__ = [
    # runner
    "MatchResult",
    "MatchRunner",
    "run_match",
    # tournament
    "TournamentResult",
    "TournamentRunner",
    "build_pairings",
    "merge_scores",
    "new_standings",
    "rank_standings",
    "record_outcome",
    "run_tournament",
]
