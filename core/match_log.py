"""Append-only CSV log of completed pairings."""

from __future__ import annotations

import csv
import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from hideseek_engine.grid import Position, layout_to_dict
from hideseek_engine.state import Outcome

logger = logging.getLogger(__name__)

HEADER = (
    "timestamp",
    "tournament",
    "hider",
    "seeker",
    "result_hider",
    "result_seeker",
    "obstacles",
)


@dataclass
class MatchLogEntry:
    """One row of the match log."""

    timestamp: str
    tournament_id: str
    hider: str
    seeker: str
    result_hider: str  # "survived" | "found"
    result_seeker: str  # "found" | "missed"
    layout: dict[str, Any]

    @classmethod
    def from_outcome(
        cls,
        tournament_id: str,
        hider: str,
        seeker: str,
        outcome: Outcome,
        grid_size: int,
        obstacles: frozenset[Position],
        timestamp: str | None = None,
    ) -> "MatchLogEntry":
        """Build a row for a finished match.

        Only a HIDER outcome counts as survived and only SEEKER as found, so
        an ERROR match is logged as found / missed.
        """
        return cls(
            timestamp=timestamp or datetime.now(timezone.utc).isoformat(),
            tournament_id=tournament_id,
            hider=hider,
            seeker=seeker,
            result_hider="survived" if outcome == Outcome.HIDER else "found",
            result_seeker="found" if outcome == Outcome.SEEKER else "missed",
            layout=layout_to_dict(grid_size, obstacles),
        )

    def to_row(self) -> list[str]:
        return [
            self.timestamp,
            self.tournament_id,
            self.hider,
            self.seeker,
            self.result_hider,
            self.result_seeker,
            json.dumps(self.layout, separators=(",", ":")),
        ]


class MatchLog:
    """CSV match log. The header is written once, when the file is new."""

    def __init__(self, path: str | Path = "match_log.csv"):
        self.path = Path(path)

    def ensure_header(self) -> None:
        """Create the file with a header row if it is missing or empty.

        Raises:
            OSError: If the file cannot be written.
        """
        if self.path.exists() and self.path.stat().st_size > 0:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", newline="", encoding="utf-8") as f:
            csv.writer(f).writerow(HEADER)
        logger.info(f"Created match log {self.path}")

    def append(self, entry: MatchLogEntry) -> None:
        """Append one row.

        Raises:
            OSError: If the file cannot be written. Not retried.
        """
        self.ensure_header()
        with open(self.path, "a", newline="", encoding="utf-8") as f:
            csv.writer(f, quoting=csv.QUOTE_MINIMAL).writerow(entry.to_row())

    def read_entries(self) -> list[MatchLogEntry]:
        """Read every row back. A missing file reads as no entries."""
        if not self.path.exists():
            return []
        with open(self.path, newline="", encoding="utf-8") as f:
            rows = list(csv.DictReader(f))
        return [
            MatchLogEntry(
                timestamp=row["timestamp"],
                tournament_id=row["tournament"],
                hider=row["hider"],
                seeker=row["seeker"],
                result_hider=row["result_hider"],
                result_seeker=row["result_seeker"],
                layout=json.loads(row["obstacles"]),
            )
            for row in rows
        ]
