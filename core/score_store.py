"""Score records and the persisted cumulative score file."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoreRecord:
    """Counters for one player.

    Attributes:
        seeker_wins: Matches won as Seeker.
        hider_survived: Matches survived as Hider.
        games_played: Completed pairings, including invalid ones.
    """

    seeker_wins: int = 0
    hider_survived: int = 0
    games_played: int = 0

    @property
    def total_wins(self) -> int:
        """Wins in either role; used for ranking."""
        return self.seeker_wins + self.hider_survived

    def __add__(self, other: "ScoreRecord") -> "ScoreRecord":
        if not isinstance(other, ScoreRecord):
            return NotImplemented
        return ScoreRecord(
            seeker_wins=self.seeker_wins + other.seeker_wins,
            hider_survived=self.hider_survived + other.hider_survived,
            games_played=self.games_played + other.games_played,
        )

    def to_dict(self) -> dict[str, int]:
        return {
            "seekerWins": self.seeker_wins,
            "hiderSurvived": self.hider_survived,
            "gamesPlayed": self.games_played,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ScoreRecord":
        """Parse a persisted entry; counters that are not integers read as 0."""
        return cls(
            seeker_wins=_as_count(data.get("seekerWins")),
            hider_survived=_as_count(data.get("hiderSurvived")),
            games_played=_as_count(data.get("gamesPlayed")),
        )


def _as_count(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return value


class ScoreStore:
    """Reads and writes the cumulative score mapping as JSON.

    File layout: {player: {"seekerWins": n, "hiderSurvived": n, "gamesPlayed": n}}
    """

    def __init__(self, path: str | Path = "global_scores.json"):
        self.path = Path(path)

    def load(self) -> dict[str, ScoreRecord]:
        """Load cumulative scores.

        A missing or malformed file yields an empty mapping. Entries that are
        not mappings are reset to zero.

        Raises:
            OSError: If an existing file cannot be read.
        """
        if not self.path.exists():
            logger.warning(f"No score file at {self.path}, starting empty")
            return {}

        try:
            with open(self.path, encoding="utf-8") as f:
                raw = json.load(f)
        except ValueError as e:
            logger.warning(f"Could not read {self.path}, file may be corrupt: {e}")
            return {}

        if not isinstance(raw, dict):
            logger.warning(f"Score file {self.path} is not a mapping, ignoring it")
            return {}

        scores = {}
        for name, entry in raw.items():
            if isinstance(entry, dict):
                scores[str(name)] = ScoreRecord.from_dict(entry)
            else:
                logger.warning(f"Resetting malformed score entry for {name}")
                scores[str(name)] = ScoreRecord()
        return scores

    def save(self, scores: dict[str, ScoreRecord]) -> Path:
        """Overwrite the score file with the given mapping.

        Raises:
            OSError: If the file cannot be written.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = {name: record.to_dict() for name, record in scores.items()}
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        logger.info(f"Saved scores for {len(data)} players to {self.path}")
        return self.path
