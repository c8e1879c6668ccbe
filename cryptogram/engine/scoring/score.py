"""Score calculation and the daily streak boost."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, timedelta

from cryptogram.config import (
    STREAK_BOOST_PER_DAY,
    STREAK_MAX_DAYS,
    STREAK_MAX_MULTIPLIER,
    Difficulty,
)

MIN_WIN_SCORE = 100

# (upper bound in seconds, multiplier); anything slower gets the fallback.
_TIME_BONUS: tuple[tuple[int, float], ...] = (
    (30, 1.5),
    (60, 1.3),
    (120, 1.2),
    (180, 1.1),
    (300, 1.0),
    (600, 0.9),
)
_SLOW_BONUS = 0.8

_MISTAKE_MULTIPLIER = (1.2, 1.0, 0.85, 0.7, 0.55)


class ScoreCalculator:
    """Stateless scorer — all methods are static."""

    @staticmethod
    def time_multiplier(seconds: int) -> float:
        for limit, bonus in _TIME_BONUS:
            if seconds < limit:
                return bonus
        return _SLOW_BONUS

    @staticmethod
    def mistake_multiplier(mistakes: int) -> float:
        if mistakes < len(_MISTAKE_MULTIPLIER):
            return _MISTAKE_MULTIPLIER[max(0, mistakes)]
        return max(0.4 - (mistakes - 5) * 0.1, 0.2)

    @staticmethod
    def calculate(
        difficulty: Difficulty | str,
        seconds: int,
        mistakes: int,
        won: bool = True,
    ) -> int:
        """Return the score for a finished game, or 0 if it was not won.

        The weighted score is rounded down to a multiple of ten and never
        drops below 100 for a win.
        """
        if not won:
            return 0
        base = Difficulty.parse(difficulty).preset.base_score
        raw = (
            base
            * ScoreCalculator.time_multiplier(seconds)
            * ScoreCalculator.mistake_multiplier(mistakes)
        )
        # Round first so float noise (e.g. 1000 * 1.1 * 0.7) cannot drop a step.
        rounded = int(round(raw, 6) // 10) * 10
        return max(MIN_WIN_SCORE, rounded)


class StreakBoost:
    """Bonus multiplier for consecutive days of completed daily challenges."""

    @staticmethod
    def multiplier(streak: int) -> float:
        days = min(max(streak, 0), STREAK_MAX_DAYS)
        return min(1.0 + days * STREAK_BOOST_PER_DAY, STREAK_MAX_MULTIPLIER)

    @staticmethod
    def percentage(streak: int) -> int:
        return int(round((StreakBoost.multiplier(streak) - 1.0) * 100))

    @staticmethod
    def apply(score: int, streak: int) -> int:
        return int(round(score * StreakBoost.multiplier(streak), 6))

    @staticmethod
    def display_text(streak: int) -> str | None:
        if streak <= 0:
            return None
        pct = StreakBoost.percentage(streak)
        if streak >= STREAK_MAX_DAYS:
            return f"+{pct}% MAX STREAK!"
        return f"+{pct}% ({streak} day streak)"

    @staticmethod
    def current_streak(completed: Iterable[date], today: date) -> int:
        """Count consecutive completed days ending today (or yesterday).

        An unplayed today does not break the streak until the day is over.
        """
        days = set(completed)
        cursor = today if today in days else today - timedelta(days=1)
        streak = 0
        while cursor in days:
            streak += 1
            cursor -= timedelta(days=1)
        return streak
