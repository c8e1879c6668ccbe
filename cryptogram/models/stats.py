"""Player statistics: lifetime totals, daily streaks, and timed-mode stats."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from datetime import date
from pathlib import Path

from cryptogram.engine.scoring import StreakBoost

logger = logging.getLogger(__name__)


@dataclass
class TimedStats:
    games_played: int = 0
    games_won: int = 0
    best_streak: int = 0
    gateway_bonuses: int = 0
    letters_revealed: int = 0
    letters_guessed: int = 0
    fastest_win: float | None = None

    @property
    def win_rate(self) -> float:
        if not self.games_played:
            return 0.0
        return self.games_won / self.games_played * 100

    @property
    def guess_efficiency(self) -> float:
        """Share of letters the player found before the timer gave them away."""
        total = self.letters_guessed + self.letters_revealed
        if not total:
            return 0.0
        return self.letters_guessed / total * 100

    def record(
        self,
        won: bool,
        elapsed: float,
        streak: int,
        gateway_bonuses: int,
        letters_revealed: int,
        letters_guessed: int,
    ) -> None:
        self.games_played += 1
        if won:
            self.games_won += 1
            if self.fastest_win is None or elapsed < self.fastest_win:
                self.fastest_win = elapsed
        self.best_streak = max(self.best_streak, streak)
        self.gateway_bonuses += gateway_bonuses
        self.letters_revealed += letters_revealed
        self.letters_guessed += letters_guessed


@dataclass
class PlayerStats:
    games_played: int = 0
    games_won: int = 0
    total_score: int = 0
    best_score: int = 0
    total_mistakes: int = 0
    total_time: int = 0
    daily_completed: list[str] = field(default_factory=list)
    best_streak: int = 0
    timed: TimedStats = field(default_factory=TimedStats)

    @property
    def win_rate(self) -> float:
        if not self.games_played:
            return 0.0
        return self.games_won / self.games_played * 100

    @property
    def average_score(self) -> float:
        if not self.games_won:
            return 0.0
        return self.total_score / self.games_won

    def current_streak(self, today: date | None = None) -> int:
        dates = {date.fromisoformat(d) for d in self.daily_completed}
        return StreakBoost.current_streak(dates, today or date.today())


class StatsManager:
    """Keeps a :class:`PlayerStats` in sync with a JSON file."""

    def __init__(self, filepath: Path) -> None:
        self.filepath = filepath
        self.stats = PlayerStats()
        self._load()

    # -- persistence ----------------------------------------------------------

    def _load(self) -> None:
        if not self.filepath.exists():
            return
        data = json.loads(self.filepath.read_text())
        timed = TimedStats(**data.pop("timed", {}))
        self.stats = PlayerStats(**data, timed=timed)

    def save(self) -> None:
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        self.filepath.write_text(json.dumps(asdict(self.stats), indent=2) + "\n")

    # -- updates --------------------------------------------------------------

    def record_game(self, won: bool, score: int, mistakes: int, seconds: int) -> None:
        s = self.stats
        s.games_played += 1
        s.total_mistakes += mistakes
        s.total_time += seconds
        if won:
            s.games_won += 1
            s.total_score += score
            s.best_score = max(s.best_score, score)
        self.save()

    def record_daily(self, day: date) -> int:
        """Mark *day*'s daily challenge complete and return the new streak."""
        key = day.isoformat()
        if key not in self.stats.daily_completed:
            self.stats.daily_completed.append(key)
            self.stats.daily_completed.sort()
        streak = self.stats.current_streak(day)
        self.stats.best_streak = max(self.stats.best_streak, streak)
        self.save()
        logger.info("Daily %s complete, streak %d", key, streak)
        return streak

    def has_completed(self, day: date) -> bool:
        return day.isoformat() in self.stats.daily_completed

    def record_timed(self, **kwargs) -> None:
        self.stats.timed.record(**kwargs)
        self.save()
