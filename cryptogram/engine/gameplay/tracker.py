"""Core gameplay logic — processes guesses and decides win or loss."""

from __future__ import annotations

import logging
import random
import time
from collections.abc import Callable

from cryptogram.config import INFINITE_MAX_MISTAKES, Difficulty
from cryptogram.engine.cipher import CipherGenerator
from cryptogram.engine.gamestate import GameState
from cryptogram.engine.scoring import ScoreCalculator, StreakBoost
from cryptogram.errors import GameOverError, InvalidLetterError, NoSelectionError
from cryptogram.models.puzzle import Cryptogram, ascii_upper, is_puzzle_letter
from cryptogram.models.quote import Quote

logger = logging.getLogger(__name__)


class GuessTracker:
    """Orchestrates a single cryptogram session.

    The player selects an encrypted letter, then guesses its plaintext.
    Wrong guesses and hints cost a mistake; reaching ``max_mistakes`` loses
    the game, revealing every distinct encrypted letter wins it.
    """

    def __init__(
        self,
        quote: Quote | str,
        difficulty: Difficulty | str = Difficulty.MEDIUM,
        rng: random.Random | None = None,
        max_mistakes: int | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.rng = rng or random.Random()
        self.quote = quote if isinstance(quote, Quote) else None
        cryptogram = CipherGenerator.generate(quote, difficulty, self.rng, max_mistakes)
        self.state = GameState(cryptogram, clock=clock)

    @classmethod
    def from_cryptogram(
        cls,
        cryptogram: Cryptogram,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.monotonic,
        quote: Quote | None = None,
    ) -> GuessTracker:
        """Create a session around an existing cryptogram (e.g. loaded from file)."""
        obj = object.__new__(cls)
        obj.rng = rng or random.Random()
        obj.quote = quote
        obj.state = GameState(cryptogram, clock=clock)
        return obj

    # -- actions --------------------------------------------------------------

    def select(self, letter: str) -> str | None:
        """Select an encrypted letter; selecting a revealed one clears the selection."""
        self._ensure_active()
        encrypted = self._puzzle_letter(letter)
        if self.is_revealed(encrypted):
            self.state.selected = None
        else:
            self.state.selected = encrypted
        return self.state.selected

    def guess(self, letter: str) -> bool:
        """Guess the plaintext for the selected letter.  Returns True if correct."""
        self._ensure_active()
        state = self.state
        encrypted = state.selected
        if encrypted is None:
            raise NoSelectionError("Select an encrypted letter before guessing.")
        plain = self._letter(letter)

        correct = state.cryptogram.plain_for(encrypted) == plain
        if correct:
            state.guessed[encrypted] = plain
            logger.debug("Correct guess %s=%s", encrypted, plain)
            self._check_win()
        else:
            state.incorrect.setdefault(encrypted, set()).add(plain)
            self._add_mistake()
            logger.debug(
                "Wrong guess %s=%s (%d/%d mistakes)",
                encrypted, plain, state.mistakes, state.max_mistakes,
            )

        state.selected = None
        return correct

    def make_guess(self, encrypted: str, letter: str) -> bool:
        """Select *encrypted* and guess *letter* in one step."""
        if self.select(encrypted) is None:
            raise InvalidLetterError(f"{ascii_upper(encrypted)} is already revealed.")
        return self.guess(letter)

    def hint(self) -> str | None:
        """Reveal a random unrevealed letter at the cost of one mistake.

        Returns the encrypted letter revealed, or ``None`` when a hint would
        leave no mistakes to spare or nothing is left to reveal.
        """
        self._ensure_active()
        state = self.state
        if state.max_mistakes - state.mistakes <= 1:
            return None
        hidden = [c for c in self.unique_encrypted_letters() if not self.is_revealed(c)]
        if not hidden:
            return None

        encrypted = self.rng.choice(hidden)
        state.guessed[encrypted] = state.cryptogram.key[encrypted]
        state.hints_used += 1
        state.selected = None
        logger.debug("Hint revealed %s", encrypted)
        self._add_mistake()
        if not state.lost:
            self._check_win()
        return encrypted

    def reveal(self, letter: str) -> bool:
        """Reveal *letter* without penalty.  Returns False if it was already shown."""
        self._ensure_active()
        encrypted = self._puzzle_letter(letter)
        if self.is_revealed(encrypted):
            return False
        self.state.guessed[encrypted] = self.state.cryptogram.key[encrypted]
        if self.state.selected == encrypted:
            self.state.selected = None
        self._check_win()
        return True

    def enable_infinite_mode(self) -> None:
        """Lift the mistake limit so a lost game can be played to the end."""
        if self.state.won:
            raise GameOverError("The game is already won.")
        self.state.lost = False
        self.state.max_mistakes = INFINITE_MAX_MISTAKES
        self.state.resume()

    def abandon(self) -> None:
        if self.state.is_over:
            return
        self.state.lost = True
        self.state.pause()

    # -- queries --------------------------------------------------------------

    @property
    def cryptogram(self) -> Cryptogram:
        return self.state.cryptogram

    @property
    def display(self) -> str:
        return self.state.display

    @property
    def is_won(self) -> bool:
        return self.state.won

    @property
    def is_lost(self) -> bool:
        return self.state.lost

    @property
    def is_over(self) -> bool:
        return self.state.is_over

    def is_revealed(self, encrypted: str) -> bool:
        return encrypted in self.state.guessed

    def unique_encrypted_letters(self) -> list[str]:
        return self.cryptogram.letters()

    def unique_solution_letters(self) -> list[str]:
        return self.cryptogram.solution_letters()

    def letter_frequency(self, letter: str) -> int:
        return self.cryptogram.frequency.get(ascii_upper(letter), 0)

    def positions_of(self, letter: str) -> list[int]:
        return self.cryptogram.positions_of(ascii_upper(letter))

    def score(self, streak: int = 0) -> int:
        """Final score; zero unless won.  *streak* applies the daily boost."""
        state = self.state
        base = ScoreCalculator.calculate(
            self.cryptogram.difficulty,
            state.time_spent_seconds,
            state.mistakes,
            won=state.won,
        )
        return StreakBoost.apply(base, streak) if streak else base

    # -- helpers --------------------------------------------------------------

    def _ensure_active(self) -> None:
        if self.state.is_over:
            raise GameOverError("The game is over.")

    def _add_mistake(self) -> None:
        state = self.state
        state.mistakes += 1
        if state.mistakes >= state.max_mistakes:
            state.lost = True
            state.pause()
            logger.info("Game lost after %d mistakes", state.mistakes)

    def _check_win(self) -> None:
        if self.state.all_revealed():
            self.state.won = True
            self.state.pause()
            logger.info(
                "Game won with %d mistakes in %ds",
                self.state.mistakes, self.state.time_spent_seconds,
            )

    @staticmethod
    def _letter(letter: str) -> str:
        ch = ascii_upper((letter or "").strip())
        if not is_puzzle_letter(ch):
            raise InvalidLetterError(f"Expected a single letter A-Z, got {letter!r}.")
        return ch

    def _puzzle_letter(self, letter: str) -> str:
        ch = self._letter(letter)
        if ch not in self.cryptogram.frequency:
            raise InvalidLetterError(f"{ch} does not appear in the puzzle.")
        return ch
