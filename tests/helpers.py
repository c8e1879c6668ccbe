"""Test helpers shared across modules."""

from __future__ import annotations

import random

from cryptogram.engine.cipher import CipherGenerator
from cryptogram.models.puzzle import Cryptogram


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_cryptogram(text: str = "Hello, world!", seed: int = 1, **kwargs) -> Cryptogram:
    return CipherGenerator.generate(text, rng=random.Random(seed), **kwargs)


def wrong_letter(plain: str) -> str:
    return "Q" if plain != "Q" else "Z"
