"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

import time
from collections.abc import Callable

from cryptogram.models.puzzle import Cryptogram, is_puzzle_letter


class GameState:
    """Holds the cryptogram, revealed letters, mistakes, and elapsed time."""

    def __init__(
        self,
        cryptogram: Cryptogram,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.cryptogram = cryptogram
        self.guessed: dict[str, str] = {}
        self.incorrect: dict[str, set[str]] = {}
        self.mistakes: int = 0
        self.max_mistakes: int = cryptogram.max_mistakes
        self.hints_used: int = 0
        self.selected: str | None = None
        self.won: bool = False
        self.lost: bool = False

        self._clock = clock
        self._start_time: float = clock()
        self._elapsed_banked: float = 0.0
        self._running: bool = True

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        if self._running:
            return self._elapsed_banked + (self._clock() - self._start_time)
        return self._elapsed_banked

    @property
    def time_spent_seconds(self) -> int:
        return max(1, int(self.elapsed_time))

    def pause(self) -> None:
        if self._running:
            self._elapsed_banked += self._clock() - self._start_time
            self._running = False

    def resume(self) -> None:
        if not self._running:
            self._start_time = self._clock()
            self._running = True

    # -- queries --------------------------------------------------------------

    @property
    def is_over(self) -> bool:
        return self.won or self.lost

    @property
    def remaining_mistakes(self) -> int:
        return max(0, self.max_mistakes - self.mistakes)

    @property
    def display(self) -> str:
        """Encrypted text with every revealed letter swapped for its plaintext."""
        return "".join(
            self.guessed.get(ch, ch) if is_puzzle_letter(ch) else ch
            for ch in self.cryptogram.encrypted
        )

    @property
    def completion(self) -> float:
        total = len(self.cryptogram.frequency)
        return len(self.guessed) / total if total else 0.0

    def all_revealed(self) -> bool:
        return set(self.cryptogram.frequency) <= set(self.guessed)
