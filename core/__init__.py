"""Core infrastructure for the hide and seek tournament."""

from core.config import ConfigError, TournamentConfig
from core.match_log import MatchLog, MatchLogEntry
from core.pacing import NullPacer, Pacer, SleepPacer
from core.score_store import ScoreRecord, ScoreStore

__all__ = [
    "TournamentConfig",
    "ConfigError",
    "MatchLog",
    "MatchLogEntry",
    "Pacer",
    "SleepPacer",
    "NullPacer",
    "ScoreRecord",
    "ScoreStore",
]
