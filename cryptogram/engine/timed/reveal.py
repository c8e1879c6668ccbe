"""Plans the order in which timed mode gives letters away."""

from __future__ import annotations

import logging
import random
import re
from collections import Counter

from cryptogram.models.puzzle import ascii_upper, is_puzzle_letter

logger = logging.getLogger(__name__)

_WORD_RE = re.compile(r"[A-Z']+")

# Singles (likely A or I) slot in this far into the order.
_SINGLES_POSITION = 0.4


class RevealOrderPlanner:
    """Stateless planner — all methods are static.

    Letters a solver would crack first (doubles, THE-like trigrams, very
    frequent letters) are revealed early; one-letter words are held back
    to roughly 40% of the way in; rare letters go last.
    """

    @staticmethod
    def plan(encrypted: str, rng: random.Random | None = None) -> list[str]:
        """Return every distinct encrypted letter in reveal order."""
        rng = rng or random.Random()
        tier1, tier2, tier3, tier4 = RevealOrderPlanner.tiers(encrypted)
        for tier in (tier1, tier2, tier3, tier4):
            rng.shuffle(tier)

        order = tier1 + tier2
        insert_at = max(1, int(len(order) * _SINGLES_POSITION))
        for letter in tier3:
            order.insert(min(insert_at, len(order)), letter)
        order.extend(tier4)

        logger.debug("Reveal order: %s", "".join(order))
        return order

    @staticmethod
    def tiers(encrypted: str) -> tuple[list[str], list[str], list[str], list[str]]:
        """Split letters into the four reveal tiers (first-appearance order)."""
        frequency = Counter(ch for ch in encrypted if is_puzzle_letter(ch))
        patterns = RevealOrderPlanner.common_patterns(encrypted)

        tier1: list[str] = []
        tier2: list[str] = []
        tier3: list[str] = []
        tier4: list[str] = []
        for letter, freq in frequency.items():
            if freq >= 4:
                in_pattern = any(letter in p for p in patterns)
                (tier1 if in_pattern else tier2).append(letter)
            elif freq >= 2:
                is_double = RevealOrderPlanner.is_double(letter, encrypted)
                (tier1 if is_double else tier2).append(letter)
            elif RevealOrderPlanner.is_single_letter_word(letter, encrypted):
                tier3.append(letter)
            else:
                tier4.append(letter)
        return tier1, tier2, tier3, tier4

    # -- heuristics -----------------------------------------------------------

    @staticmethod
    def words(text: str) -> list[str]:
        return _WORD_RE.findall(ascii_upper(text))

    @staticmethod
    def common_patterns(text: str) -> list[set[str]]:
        """Letter sets of THE-like three-letter words, plus in-word doubles."""
        patterns: list[set[str]] = []
        for word in RevealOrderPlanner.words(text):
            letters = [ch for ch in word if is_puzzle_letter(ch)]
            if len(letters) == 3 and len(set(letters)) == 3:
                patterns.append(set(letters))
            for prev, ch in zip(letters, letters[1:]):
                if prev == ch:
                    patterns.append({ch})
        return patterns

    @staticmethod
    def is_double(letter: str, text: str) -> bool:
        return any(a == b == letter for a, b in zip(text, text[1:]))

    @staticmethod
    def is_single_letter_word(letter: str, text: str) -> bool:
        return letter in RevealOrderPlanner.words(text)
