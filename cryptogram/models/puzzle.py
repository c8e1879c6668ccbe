"""Cryptogram model: an encrypted quote together with its answer key."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from string import ascii_lowercase, ascii_uppercase
from typing import Any

from cryptogram.config import ALPHABET, Difficulty

_ASCII_UPPER = str.maketrans(ascii_lowercase, ascii_uppercase)


def ascii_upper(text: str) -> str:
    """Upper-case a-z only; every other character, accented or not, is kept."""
    return text.translate(_ASCII_UPPER)


def is_puzzle_letter(ch: str) -> bool:
    """True for the 26 uppercase ASCII letters that take part in the cipher."""
    return len(ch) == 1 and ch in ALPHABET


@dataclass
class Cryptogram:
    """A quote encrypted with a monoalphabetic substitution.

    ``key`` maps each *encrypted* letter to its plaintext letter.  Characters
    outside A-Z appear unchanged in both ``encrypted`` and ``solution``.
    """

    encrypted: str
    solution: str
    key: dict[str, str]
    difficulty: Difficulty = Difficulty.MEDIUM
    max_mistakes: int = 5
    frequency: dict[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if len(self.encrypted) != len(self.solution):
            raise ValueError(
                f"Encrypted text has {len(self.encrypted)} characters but the "
                f"solution has {len(self.solution)}."
            )
        if not self.frequency:
            self.frequency = dict(
                Counter(ch for ch in self.encrypted if is_puzzle_letter(ch))
            )

    # -- queries --------------------------------------------------------------

    def letters(self) -> list[str]:
        """Distinct encrypted letters in order of first appearance."""
        seen: dict[str, None] = {}
        for ch in self.encrypted:
            if is_puzzle_letter(ch):
                seen.setdefault(ch, None)
        return list(seen)

    def solution_letters(self) -> list[str]:
        return sorted({ch for ch in self.solution if is_puzzle_letter(ch)})

    def plain_for(self, encrypted_letter: str) -> str | None:
        return self.key.get(encrypted_letter)

    def positions_of(self, encrypted_letter: str) -> list[int]:
        return [i for i, ch in enumerate(self.encrypted) if ch == encrypted_letter]

    # -- serialisation --------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return {
            "encrypted": self.encrypted,
            "solution": self.solution,
            "key": dict(sorted(self.key.items())),
            "difficulty": str(self.difficulty),
            "max_mistakes": self.max_mistakes,
            "frequency": dict(sorted(self.frequency.items())),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Cryptogram:
        return cls(
            encrypted=data["encrypted"],
            solution=data["solution"],
            key=dict(data["key"]),
            difficulty=Difficulty.parse(data.get("difficulty")),
            max_mistakes=int(data.get("max_mistakes", 5)),
            frequency=dict(data.get("frequency") or {}),
        )
