"""High score persistence, one table per game mode."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

MODES = ("easy", "medium", "hard", "daily", "timed")
MAX_ENTRIES = 50


@dataclass
class HighScoreEntry:
    score: int
    mistakes: int
    time: float
    date: str


class HighScoreManager:
    """Loads, saves, and queries high scores from a JSON file."""

    def __init__(self, filepath: Path) -> None:
        self.filepath = filepath
        self._scores: dict[str, list[HighScoreEntry]] = {}
        self._load()

    # -- persistence ----------------------------------------------------------

    def _load(self) -> None:
        if not self.filepath.exists():
            return
        data = json.loads(self.filepath.read_text())
        for mode, entries in data.items():
            self._scores[mode] = [HighScoreEntry(**e) for e in entries]

    def save(self) -> None:
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        data = {
            mode: [asdict(e) for e in entries]
            for mode, entries in self._scores.items()
        }
        self.filepath.write_text(json.dumps(data, indent=2) + "\n")

    # -- queries --------------------------------------------------------------

    def add_score(self, mode: str, entry: HighScoreEntry) -> int:
        """Record *entry* and return its 1-based rank within *mode*."""
        entries = self._scores.setdefault(mode, [])
        entries.append(entry)
        entries.sort(key=lambda e: (-e.score, e.time))
        del entries[MAX_ENTRIES:]
        self.save()
        rank = next((i for i, e in enumerate(entries, 1) if e is entry), 0)
        logger.info("Saved %s score %d (rank %d)", mode, entry.score, rank)
        return rank

    def get_scores(self, mode: str) -> list[HighScoreEntry]:
        return self._scores.get(mode, [])

    def best(self, mode: str) -> HighScoreEntry | None:
        entries = self.get_scores(mode)
        return entries[0] if entries else None

    def get_all_modes(self) -> list[str]:
        """Modes that have at least one score, in display order."""
        known = [m for m in MODES if self._scores.get(m)]
        extra = sorted(m for m in self._scores if m not in MODES and self._scores[m])
        return known + extra
