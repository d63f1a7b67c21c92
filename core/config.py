"""Tournament configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

from hideseek_engine.grid import GRID_SIZE
from hideseek_engine.state import HIDING_TICKS, MAX_TICKS

ENV_PREFIX = "HIDESEEK_"


class ConfigError(ValueError):
    """Raised for an invalid configuration value."""

    pass


@dataclass
class TournamentConfig:
    """Configuration for a hide and seek tournament run."""

    grid_size: int = GRID_SIZE
    max_ticks: int = MAX_TICKS
    hiding_ticks: int = HIDING_TICKS
    obstacle_count: int = 5
    tick_delay: float = 0.1  # Seconds between rendered ticks
    match_delay: float = 0.8  # Seconds between matches
    players_dir: str = "players"
    scores_path: str = "global_scores.json"
    log_path: str = "match_log.csv"
    seed: int | None = None

    def validate(self) -> "TournamentConfig":
        """Check value ranges.

        Raises:
            ConfigError: On the first invalid value found.
        """
        if self.grid_size < 2:
            raise ConfigError(f"grid_size must be at least 2, got {self.grid_size}")
        if self.max_ticks < 1:
            raise ConfigError(f"max_ticks must be positive, got {self.max_ticks}")
        if not 0 <= self.hiding_ticks < self.max_ticks:
            raise ConfigError(
                f"hiding_ticks must be in [0, max_ticks), got {self.hiding_ticks}"
            )
        if self.obstacle_count < 0:
            raise ConfigError(f"obstacle_count must be >= 0, got {self.obstacle_count}")
        if self.tick_delay < 0 or self.match_delay < 0:
            raise ConfigError("Delays must be >= 0")
        return self

    def to_dict(self) -> dict[str, Any]:
        return {
            "grid_size": self.grid_size,
            "max_ticks": self.max_ticks,
            "hiding_ticks": self.hiding_ticks,
            "obstacle_count": self.obstacle_count,
            "tick_delay": self.tick_delay,
            "match_delay": self.match_delay,
            "players_dir": self.players_dir,
            "scores_path": self.scores_path,
            "log_path": self.log_path,
            "seed": self.seed,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TournamentConfig":
        return cls(
            grid_size=data.get("grid_size", GRID_SIZE),
            max_ticks=data.get("max_ticks", MAX_TICKS),
            hiding_ticks=data.get("hiding_ticks", HIDING_TICKS),
            obstacle_count=data.get("obstacle_count", 5),
            tick_delay=data.get("tick_delay", 0.1),
            match_delay=data.get("match_delay", 0.8),
            players_dir=data.get("players_dir", "players"),
            scores_path=data.get("scores_path", "global_scores.json"),
            log_path=data.get("log_path", "match_log.csv"),
            seed=data.get("seed"),
        )

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "TournamentConfig":
        """Build a config from HIDESEEK_* environment variables.

        Unset variables keep their defaults. Call dotenv.load_dotenv() first
        to pick up a .env file.

        Raises:
            ConfigError: If a numeric variable cannot be parsed.
        """
        environ = os.environ if environ is None else environ
        data: dict[str, Any] = {}

        converters = {
            "grid_size": int,
            "max_ticks": int,
            "hiding_ticks": int,
            "obstacle_count": int,
            "tick_delay": float,
            "match_delay": float,
            "players_dir": str,
            "scores_path": str,
            "log_path": str,
            "seed": int,
        }
        for key, convert in converters.items():
            raw = environ.get(f"{ENV_PREFIX}{key.upper()}")
            if raw is None or raw == "":
                continue
            try:
                data[key] = convert(raw)
            except ValueError as e:
                raise ConfigError(f"Invalid {ENV_PREFIX}{key.upper()}={raw!r}") from e

        return cls.from_dict(data)
