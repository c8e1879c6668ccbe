"""Timed-mode reveal order heuristics."""

from __future__ import annotations

import random

import pytest

from cryptogram.engine.timed import RevealOrderPlanner
from helpers import make_cryptogram


# -- tiers --------------------------------------------------------------------


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        # frequent letter inside a THE-like word and a double
        ("XYZ XXXX", (["X"], [], [], ["Y", "Z"])),
        # frequent letter in no pattern
        ("QABC QDEF QGHJ QKLM", ([], ["Q"], [], list("ABCDEFGHJKLM"))),
        # doubled mid-frequency letter
        ("MOON", (["O"], [], [], ["M", "N"])),
        # mid-frequency letter never doubled
        ("KIWI", ([], ["I"], [], ["K", "W"])),
        # lone one-letter word
        ("A RUNG", ([], [], ["A"], ["R", "U", "N", "G"])),
    ],
)
def test_tiers(text: str, expected: tuple[list[str], ...]) -> None:
    assert RevealOrderPlanner.tiers(text) == expected


def test_singles_are_inserted_forty_percent_in() -> None:
    # O tier 1, I tier 2, A tier 3, the rest tier 4
    order = RevealOrderPlanner.plan("MOON A KIWI", random.Random(0))

    assert order[:3] == ["O", "A", "I"]
    assert set(order[3:]) == {"M", "N", "K", "W"}


def test_tier_one_before_tier_two_before_tier_four() -> None:
    text = "BOOK THE TREE BOOK TEA SKY"
    tier1, tier2, tier3, tier4 = RevealOrderPlanner.tiers(text)
    order = RevealOrderPlanner.plan(text, random.Random(1))

    assert not tier3
    assert set(order[: len(tier1)]) == set(tier1)
    assert set(order[len(tier1): len(tier1) + len(tier2)]) == set(tier2)
    assert set(order[-len(tier4):]) == set(tier4)


@pytest.mark.parametrize("seed", range(5))
def test_plan_is_a_permutation_of_puzzle_letters(seed: int) -> None:
    c = make_cryptogram("It was the best of times, it was the worst of times.", seed=seed)
    order = RevealOrderPlanner.plan(c.encrypted, random.Random(seed))

    assert sorted(order) == sorted(c.letters())
    assert len(order) == len(set(order))


def test_plan_is_deterministic_for_a_seed() -> None:
    text = make_cryptogram("The journey of a thousand miles begins with one step.").encrypted
    assert RevealOrderPlanner.plan(text, random.Random(4)) == RevealOrderPlanner.plan(text, random.Random(4))


# -- heuristics ---------------------------------------------------------------


def test_common_patterns() -> None:
    patterns = RevealOrderPlanner.common_patterns("THE BOOK, DON'T SEE")
    assert {"T", "H", "E"} in patterns
    assert {"O"} in patterns
    assert {"E"} in patterns
    assert {"D", "O", "N"} not in patterns  # DON'T has four letters


def test_is_double_and_single_letter_word() -> None:
    assert RevealOrderPlanner.is_double("L", "HELLO")
    assert not RevealOrderPlanner.is_double("L", "LOL")
    assert RevealOrderPlanner.is_single_letter_word("I", "SO I SAID")
    assert not RevealOrderPlanner.is_single_letter_word("I", "IT IS")
