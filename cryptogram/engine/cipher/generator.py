"""Builds substitution ciphers and encrypts quotes into cryptograms."""

from __future__ import annotations

import logging
import random

from cryptogram.config import ALPHABET, Difficulty
from cryptogram.errors import InvalidLetterError
from cryptogram.models.puzzle import Cryptogram, ascii_upper, is_puzzle_letter
from cryptogram.models.quote import Quote

logger = logging.getLogger(__name__)


class CipherGenerator:
    """Stateless cipher construction — all methods are static."""

    @staticmethod
    def derangement(rng: random.Random | None = None) -> dict[str, str]:
        """Return a plain→cipher mapping where no letter maps to itself.

        Shuffles are drawn until one has no fixed point, which keeps the
        result uniform over all derangements.
        """
        rng = rng or random.Random()
        letters = list(ALPHABET)
        attempts = 0
        while True:
            attempts += 1
            shuffled = letters[:]
            rng.shuffle(shuffled)
            if all(p != c for p, c in zip(letters, shuffled)):
                logger.debug("Derangement found after %d shuffle(s)", attempts)
                return dict(zip(letters, shuffled))

    @staticmethod
    def encrypt(text: str, mapping: dict[str, str]) -> str:
        """Upper-case *text* and substitute every A-Z letter through *mapping*."""
        return "".join(
            mapping.get(ch, ch) if is_puzzle_letter(ch) else ch
            for ch in ascii_upper(text)
        )

    @staticmethod
    def decrypt(text: str, mapping: dict[str, str]) -> str:
        """Undo :meth:`encrypt` given the same plain→cipher *mapping*."""
        inverse = {c: p for p, c in mapping.items()}
        return CipherGenerator.encrypt(text, inverse)

    @staticmethod
    def generate(
        quote: Quote | str,
        difficulty: Difficulty | str = Difficulty.MEDIUM,
        rng: random.Random | None = None,
        max_mistakes: int | None = None,
    ) -> Cryptogram:
        """Encrypt *quote* with a fresh derangement.

        The same seeded *rng* and quote always produce the same cryptogram.
        """
        text = quote.text if isinstance(quote, Quote) else quote
        solution = ascii_upper(text)
        if not any(is_puzzle_letter(ch) for ch in solution):
            raise InvalidLetterError(f"Quote has no letters to encrypt: {text!r}")

        level = Difficulty.parse(difficulty)
        mapping = CipherGenerator.derangement(rng)
        encrypted = CipherGenerator.encrypt(solution, mapping)
        cryptogram = Cryptogram(
            encrypted=encrypted,
            solution=solution,
            key={c: p for p, c in mapping.items()},
            difficulty=level,
            max_mistakes=max_mistakes if max_mistakes is not None else level.preset.max_mistakes,
        )
        logger.debug(
            "Generated %s cryptogram with %d distinct letters",
            level, len(cryptogram.frequency),
        )
        return cryptogram
