"""Time-pressure mode: letters are given away when the player is too slow."""

from __future__ import annotations

import logging
import random
from enum import StrEnum

from cryptogram.config import GATEWAY_BONUS_SECONDS
from cryptogram.engine.gameplay import GuessTracker
from cryptogram.engine.timed.reveal import RevealOrderPlanner
from cryptogram.errors import InvalidLetterError
from cryptogram.models.puzzle import ascii_upper

logger = logging.getLogger(__name__)


class TimedGuessResult(StrEnum):
    TIMER_LETTER = "timer_letter"
    GATEWAY_BONUS = "gateway_bonus"
    INCORRECT = "incorrect"
    INVALID = "invalid"


class TimedRound:
    """Countdown layered over a :class:`GuessTracker`.

    Each target letter gets ``interval`` seconds.  Guessing the target moves
    on and grows the streak; guessing any other letter correctly (a
    *gateway* letter) banks bonus time.  When the countdown runs out the
    target is revealed for free and the streak resets.  Time only moves
    through :meth:`tick`, so the caller owns the clock.
    """

    def __init__(
        self,
        tracker: GuessTracker,
        interval: float | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.tracker = tracker
        self.interval = interval or tracker.cryptogram.difficulty.preset.reveal_interval
        self.rng = rng or tracker.rng
        self.reveal_order: list[str] = []
        self.time_remaining: float = self.interval
        self.bonus_time: float = 0.0
        self.active: bool = False
        self.elapsed: float = 0.0

        self.streak: int = 0
        self.best_streak: int = 0
        self.gateway_bonuses: int = 0
        self.letters_guessed: int = 0
        self.auto_revealed: list[str] = []
        self._index: int = 0

    # -- lifecycle ------------------------------------------------------------

    def start(self) -> None:
        self.reveal_order = RevealOrderPlanner.plan(
            self.tracker.cryptogram.encrypted, self.rng
        )
        self._index = 0
        self.time_remaining = self.interval
        self.bonus_time = 0.0
        self.active = not self.tracker.is_over
        self._skip_revealed()

    def stop(self) -> None:
        self.active = False

    @property
    def next_letter(self) -> str | None:
        """First letter of the reveal order that is still hidden."""
        for letter in self.reveal_order[self._index:]:
            if not self.tracker.is_revealed(letter):
                return letter
        return None

    @property
    def letters_revealed_by_timer(self) -> int:
        return len(self.auto_revealed)

    # -- clock ----------------------------------------------------------------

    def tick(self, dt: float) -> list[str]:
        """Advance the countdown by *dt* seconds; return letters auto-revealed."""
        if not self.active or dt <= 0:
            return []
        self.elapsed += dt
        self.time_remaining -= dt
        if self.bonus_time > 0:
            paid = min(dt, self.bonus_time)
            self.time_remaining += paid
            self.bonus_time -= paid

        revealed: list[str] = []
        while self.active and self.time_remaining <= 0:
            self._skip_revealed()
            letter = self.next_letter
            if letter is None:
                self.stop()
                break
            overshoot = self.time_remaining
            if self.tracker.reveal(letter):
                self.auto_revealed.append(letter)
                revealed.append(letter)
                logger.debug("Timer revealed %s", letter)
            self.streak = 0
            self._skip_revealed()
            self.time_remaining = self.interval + overshoot
        return revealed

    # -- guesses --------------------------------------------------------------

    def guess(self, encrypted: str, letter: str) -> TimedGuessResult:
        if not self.active or self.tracker.is_over:
            return TimedGuessResult.INVALID
        target = self.next_letter
        try:
            correct = self.tracker.make_guess(encrypted, letter)
        except InvalidLetterError:
            return TimedGuessResult.INVALID

        if not correct:
            self.streak = 0
            result = TimedGuessResult.INCORRECT
        elif ascii_upper(encrypted) == target:
            self.letters_guessed += 1
            self.streak += 1
            self.best_streak = max(self.best_streak, self.streak)
            self.time_remaining = self.interval
            result = TimedGuessResult.TIMER_LETTER
        else:
            self.letters_guessed += 1
            self.bonus_time += GATEWAY_BONUS_SECONDS
            self.gateway_bonuses += 1
            result = TimedGuessResult.GATEWAY_BONUS

        self._skip_revealed()
        logger.debug("Timed guess %s=%s -> %s", encrypted, letter, result)
        return result

    def hint(self) -> str | None:
        """Take a hint through the tracker and keep the countdown on a hidden letter."""
        target = self.next_letter
        letter = self.tracker.hint()
        if letter is not None:
            self._skip_revealed()
            if self.active and self.next_letter != target:
                self.time_remaining = self.interval
        return letter

    def summary(self) -> dict[str, object]:
        """Keyword arguments for ``StatsManager.record_timed``."""
        return {
            "won": self.tracker.is_won,
            "elapsed": round(self.elapsed, 2),
            "streak": self.best_streak,
            "gateway_bonuses": self.gateway_bonuses,
            "letters_revealed": self.letters_revealed_by_timer,
            "letters_guessed": self.letters_guessed,
        }

    # -- helpers --------------------------------------------------------------

    def _skip_revealed(self) -> None:
        order = self.reveal_order
        while self._index < len(order) and self.tracker.is_revealed(order[self._index]):
            self._index += 1
        if self.tracker.is_over or self.next_letter is None:
            self.stop()
