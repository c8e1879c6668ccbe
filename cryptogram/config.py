"""Game constants, difficulty presets, and filesystem locations."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import date
from enum import StrEnum
from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parent  # cryptogram/
PROJECT_ROOT = PACKAGE_ROOT.parent
QUOTES_FILE = PACKAGE_ROOT / "data" / "quotes.json"

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def data_dir() -> Path:
    """Directory for high scores and stats (``$CRYPTOGRAM_DATA_DIR`` wins)."""
    override = os.environ.get("CRYPTOGRAM_DATA_DIR")
    if override:
        return Path(override).expanduser()
    return PROJECT_ROOT / "data"


# -- difficulty ---------------------------------------------------------------


class Difficulty(StrEnum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value: str | Difficulty | None) -> Difficulty:
        """Case-insensitive lookup; anything unknown is treated as medium."""
        if isinstance(value, Difficulty):
            return value
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.MEDIUM

    @property
    def preset(self) -> Preset:
        return PRESETS[self]


@dataclass(frozen=True)
class Preset:
    max_mistakes: int
    base_score: int
    reveal_interval: float


PRESETS: dict[Difficulty, Preset] = {
    Difficulty.EASY: Preset(max_mistakes=8, base_score=500, reveal_interval=10.0),
    Difficulty.MEDIUM: Preset(max_mistakes=5, base_score=1000, reveal_interval=8.0),
    Difficulty.HARD: Preset(max_mistakes=3, base_score=1500, reveal_interval=5.0),
}


# -- modes --------------------------------------------------------------------

DAILY_DIFFICULTY = Difficulty.MEDIUM
DAILY_MAX_MISTAKES = 5
INFINITE_MAX_MISTAKES = 999

# Every player's daily sequence is counted from this date.
LAUNCH_DATE = date(2024, 12, 17)

GATEWAY_BONUS_SECONDS = 2.0

STREAK_MAX_DAYS = 20
STREAK_BOOST_PER_DAY = 0.05
STREAK_MAX_MULTIPLIER = 2.0
