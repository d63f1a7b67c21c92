"""Player strategies for hide and seek."""

from strategies.base import Strategy
from strategies.corner import CornerStrategy
from strategies.random_strategy import RandomStrategy
from strategies.scripted import ScriptedStrategy
from strategies.registry import (
    InvalidStrategyError,
    ModuleStrategy,
    StrategyRegistry,
    load_player_modules,
)

__all__ = [
    "Strategy",
    "RandomStrategy",
    "CornerStrategy",
    "ScriptedStrategy",
    "ModuleStrategy",
    "StrategyRegistry",
    "InvalidStrategyError",
    "load_player_modules",
]
