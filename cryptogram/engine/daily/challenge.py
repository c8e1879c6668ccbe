"""Daily challenge — the same puzzle for every player on a given date."""

from __future__ import annotations

import logging
import random
import time
import uuid
from collections.abc import Callable
from datetime import date

from cryptogram.config import DAILY_DIFFICULTY, DAILY_MAX_MISTAKES, LAUNCH_DATE
from cryptogram.engine.gameplay import GuessTracker
from cryptogram.errors import QuoteLibraryError
from cryptogram.models.quote import Quote, QuoteLibrary

logger = logging.getLogger(__name__)

_MASK64 = (1 << 64) - 1


class DailyChallenge:
    """Selects the day's quote and builds its cryptogram deterministically.

    Quotes are ordered by text and cycled by the number of days since
    launch; the cipher is seeded from the day's id, so two players on the
    same date get the same letters as well as the same quote.
    """

    def __init__(self, library: QuoteLibrary, launch_date: date = LAUNCH_DATE) -> None:
        self.library = library
        self.launch_date = launch_date
        self._cache: tuple[str, Quote] | None = None

    # -- identity -------------------------------------------------------------

    @staticmethod
    def daily_id(day: date) -> str:
        return f"daily-{day.isoformat()}"

    @staticmethod
    def daily_uuid(day: date) -> uuid.UUID:
        """Stable UUID for *day*, built from a djb2 hash of its daily id."""
        h = 5381
        for byte in DailyChallenge.daily_id(day).encode("utf-8"):
            h = ((h << 5) + h + byte) & _MASK64
        text = (
            f"{(h >> 32) & 0xFFFFFFFF:08x}-"
            f"{(h >> 16) & 0xFFFF:04x}-"
            f"{h & 0xFFFF:04x}-"
            f"{(h >> 48) & 0xFFFF:04x}-"
            f"{h & 0xFFFFFFFFFFFF:012x}"
        )
        return uuid.UUID(text)

    def day_index(self, day: date) -> int:
        # abs() keeps pre-launch dates usable.
        return abs((day - self.launch_date).days)

    # -- selection ------------------------------------------------------------

    def quote_for(self, day: date | None = None) -> Quote:
        day = day or date.today()
        key = day.isoformat()
        if self._cache and self._cache[0] == key:
            return self._cache[1]

        quotes = self.library.sorted_for_daily()
        if not quotes:
            raise QuoteLibraryError("No quotes available for the daily challenge.")
        index = self.day_index(day) % len(quotes)
        quote = quotes[index]
        logger.info("Daily %s: quote %d of %d", key, index + 1, len(quotes))

        self._cache = (key, quote)
        return quote

    def tracker_for(
        self,
        day: date | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> GuessTracker:
        day = day or date.today()
        quote = self.quote_for(day)
        return GuessTracker(
            quote,
            difficulty=DAILY_DIFFICULTY,
            rng=random.Random(self.daily_id(day)),
            max_mistakes=DAILY_MAX_MISTAKES,
            clock=clock,
        )
