"""Pacing between rendered ticks and between matches.

Pauses exist only so a human can follow the live view; they never affect
match outcomes, and non-interactive runs use NullPacer.
"""

from __future__ import annotations

import time
from typing import Protocol


class Pacer(Protocol):
    """Anything that can pause the run for a number of seconds."""

    def pause(self, seconds: float) -> None: ...


class SleepPacer:
    """Pacer backed by time.sleep."""

    def pause(self, seconds: float) -> None:
        if seconds > 0:
            time.sleep(seconds)


class NullPacer:
    """Pacer that returns immediately. Records requested pauses for inspection."""

    def __init__(self):
        self.pauses: list[float] = []

    def pause(self, seconds: float) -> None:
        self.pauses.append(seconds)
