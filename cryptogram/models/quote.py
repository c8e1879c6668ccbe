"""Quotes and the quote packs they are loaded from."""

from __future__ import annotations

import json
import logging
import random
from dataclasses import dataclass
from pathlib import Path

from cryptogram.config import QUOTES_FILE
from cryptogram.errors import QuoteLibraryError

logger = logging.getLogger(__name__)

_LEVELS = {"easy": 0.0, "medium": 1.0, "hard": 2.0}


@dataclass(frozen=True)
class Quote:
    text: str
    author: str
    attribution: str | None = None
    difficulty: float = 1.0
    category: str = "classic"
    active: bool = True

    @staticmethod
    def estimate_difficulty(text: str) -> float:
        """Rate a quote 0.0 (easy), 1.0 (medium) or 2.0 (hard) from its shape."""
        unique_letters = len({ch for ch in text.lower() if ch.isalpha()})
        length = len(text)
        if unique_letters <= 12 and length <= 40:
            return 0.0
        if unique_letters <= 16 and length <= 60:
            return 1.0
        return 2.0

    @property
    def byline(self) -> str:
        if self.attribution:
            return f"{self.author}, {self.attribution}"
        return self.author


class QuoteLibrary:
    """Quotes loaded from a JSON quote pack.

    The pack format is::

        {"version": "1.0", "description": "...",
         "quotes": [{"text": "...", "author": "...", "attribution": null,
                     "difficulty": "easy", "category": "classic"}]}

    ``difficulty`` and ``category`` are optional; a missing difficulty is
    estimated from the text.
    """

    def __init__(self, quotes: list[Quote], version: str = "", description: str = "") -> None:
        self.version = version
        self.description = description
        self._quotes = [q for q in quotes if q.active]

    # -- loading --------------------------------------------------------------

    @classmethod
    def load(cls, filepath: Path | None = None) -> QuoteLibrary:
        filepath = filepath or QUOTES_FILE
        try:
            data = json.loads(Path(filepath).read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise QuoteLibraryError(f"Quote file not found: {filepath}") from exc
        except json.JSONDecodeError as exc:
            raise QuoteLibraryError(f"Quote file {filepath} is not valid JSON: {exc}") from exc

        items = data.get("quotes") if isinstance(data, dict) else None
        if not isinstance(items, list):
            raise QuoteLibraryError(f"Quote file {filepath} has no \"quotes\" list.")

        quotes: list[Quote] = []
        for item in items:
            text = item.get("text") if isinstance(item, dict) else None
            if not isinstance(text, str):
                logger.warning("Skipping malformed quote entry: %r", item)
                continue
            text = text.strip()
            if not any(ch.isalpha() and ch.isascii() for ch in text):
                logger.warning("Skipping quote without letters: %r", text)
                continue
            level = item.get("difficulty")
            if isinstance(level, str) and level.lower() in _LEVELS:
                difficulty = _LEVELS[level.lower()]
            elif isinstance(level, (int, float)):
                difficulty = float(level)
            else:
                difficulty = Quote.estimate_difficulty(text)
            quotes.append(
                Quote(
                    text=text,
                    author=str(item.get("author") or "Unknown"),
                    attribution=item.get("attribution"),
                    difficulty=difficulty,
                    category=item.get("category") or "classic",
                    active=item.get("active", True),
                )
            )

        library = cls(
            quotes,
            version=str(data.get("version", "")),
            description=data.get("description", ""),
        )
        if not library.count():
            raise QuoteLibraryError(f"No usable quotes in {filepath}")
        logger.debug("Loaded %d quotes from %s", library.count(), filepath)
        return library

    # -- queries --------------------------------------------------------------

    def count(self) -> int:
        return len(self._quotes)

    def all(self) -> list[Quote]:
        return list(self._quotes)

    def categories(self) -> list[str]:
        return sorted({q.category for q in self._quotes})

    def random_quote(
        self,
        rng: random.Random | None = None,
        categories: set[str] | None = None,
    ) -> Quote:
        """Pick a quote, optionally restricted to the given categories."""
        rng = rng or random.Random()
        pool = self._quotes
        if categories:
            pool = [q for q in pool if q.category in categories]
        if not pool:
            raise QuoteLibraryError(
                f"No quotes available in categories {sorted(categories or [])}"
            )
        return rng.choice(pool)

    def by_difficulty(self, level: float) -> list[Quote]:
        """Quotes within half a level of *level*."""
        low = max(0.0, level - 0.5)
        high = min(2.0, level + 0.5)
        return [q for q in self._quotes if low <= q.difficulty <= high]

    def sorted_for_daily(self) -> list[Quote]:
        """Stable ordering every player shares for daily selection."""
        return sorted(self._quotes, key=lambda q: q.text)
