"""Player registration and discovery.

Players are resolved once, at startup, into a StrategyRegistry keyed by name.
Anything that cannot play both roles is rejected here rather than failing in
the middle of a match.
"""

from __future__ import annotations

import importlib.util
import logging
from pathlib import Path
from types import ModuleType
from typing import Callable, Iterator

from strategies.base import MoveFn, RemainingFn, SenseFn, Strategy

logger = logging.getLogger(__name__)

CAPABILITIES = ("hider", "seeker")


class InvalidStrategyError(ValueError):
    """Raised when a player cannot be registered."""

    pass


class ModuleStrategy(Strategy):
    """Adapts a player module exposing top-level hider() and seeker() functions."""

    def __init__(
        self,
        name: str,
        hider_fn: Callable[..., None],
        seeker_fn: Callable[..., None],
        source: Path | None = None,
    ):
        self._name = name
        self._hider_fn = hider_fn
        self._seeker_fn = seeker_fn
        self.source = source

    @classmethod
    def from_module(cls, name: str, module: ModuleType) -> "ModuleStrategy":
        """Wrap a loaded module.

        Raises:
            InvalidStrategyError: If either capability is missing or not callable.
        """
        missing = [cap for cap in CAPABILITIES if not callable(getattr(module, cap, None))]
        if missing:
            raise InvalidStrategyError(
                f"Player '{name}' is missing required capabilities: {', '.join(missing)}"
            )
        source = getattr(module, "__file__", None)
        return cls(
            name=name,
            hider_fn=module.hider,
            seeker_fn=module.seeker,
            source=Path(source) if source else None,
        )

    @property
    def name(self) -> str:
        return self._name

    def hider(
        self,
        sense_walls: SenseFn,
        sense_obstacles: SenseFn,
        remaining_ticks: RemainingFn,
        move: MoveFn,
    ) -> None:
        self._hider_fn(sense_walls, sense_obstacles, remaining_ticks, move)

    def seeker(
        self,
        sense_walls: SenseFn,
        sense_obstacles: SenseFn,
        remaining_ticks: RemainingFn,
        move: MoveFn,
    ) -> None:
        self._seeker_fn(sense_walls, sense_obstacles, remaining_ticks, move)


class StrategyRegistry:
    """Ordered table of registered players, keyed by strategy name."""

    def __init__(self, strategies: list[Strategy] | None = None):
        self._strategies: dict[str, Strategy] = {}
        for strategy in strategies or []:
            self.register(strategy)

    def register(self, strategy: Strategy) -> Strategy:
        """Add a player.

        Raises:
            InvalidStrategyError: If the object is not a Strategy, lacks a
                callable capability, or its name is already taken.
        """
        if not isinstance(strategy, Strategy):
            raise InvalidStrategyError(f"Not a Strategy: {strategy!r}")

        name = strategy.name
        for cap in CAPABILITIES:
            if not callable(getattr(strategy, cap, None)):
                raise InvalidStrategyError(f"Player '{name}' has no callable '{cap}'")
        if name in self._strategies:
            raise InvalidStrategyError(f"Duplicate player name: {name}")

        self._strategies[name] = strategy
        logger.debug(f"Registered player {name}")
        return strategy

    def get(self, name: str) -> Strategy:
        """Look up a player by name (KeyError if unknown)."""
        return self._strategies[name]

    def names(self) -> list[str]:
        """Player names in registration order."""
        return list(self._strategies)

    def strategies(self) -> list[Strategy]:
        """Players in registration order."""
        return list(self._strategies.values())

    def __len__(self) -> int:
        return len(self._strategies)

    def __contains__(self, name: object) -> bool:
        return name in self._strategies

    def __iter__(self) -> Iterator[Strategy]:
        return iter(self._strategies.values())


def load_player_module(path: Path) -> ModuleStrategy:
    """Import a single player file and wrap it.

    Raises:
        InvalidStrategyError: If the file cannot be imported or is incomplete.
    """
    name = path.stem
    spec = importlib.util.spec_from_file_location(f"hideseek_players.{name}", path)
    if spec is None or spec.loader is None:
        raise InvalidStrategyError(f"Cannot load player file: {path}")

    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        raise InvalidStrategyError(f"Player '{name}' failed to import: {e}") from e

    return ModuleStrategy.from_module(name, module)


def load_player_modules(directory: str | Path) -> StrategyRegistry:
    """Discover every player file in a directory.

    Files are loaded in sorted order; names starting with '_' are skipped.
    Broken or incomplete players are logged and left out.

    Args:
        directory: Folder containing one .py file per player.

    Returns:
        Registry of the players that loaded cleanly.
    """
    registry = StrategyRegistry()
    directory = Path(directory)

    if not directory.is_dir():
        logger.warning(f"Players directory not found: {directory}")
        return registry

    for path in sorted(directory.glob("*.py")):
        if path.name.startswith("_"):
            continue
        try:
            registry.register(load_player_module(path))
        except InvalidStrategyError as e:
            logger.warning(f"Skipping player {path.name}: {e}")

    logger.info(f"Loaded {len(registry)} players from {directory}")
    return registry
