"""Daily challenge selection and identity."""

from __future__ import annotations

import uuid
from datetime import date, timedelta

import pytest

from cryptogram.config import DAILY_MAX_MISTAKES, LAUNCH_DATE, Difficulty
from cryptogram.engine.daily import DailyChallenge
from cryptogram.errors import QuoteLibraryError
from cryptogram.models.quote import QuoteLibrary

DAY = date(2025, 3, 14)


def test_daily_id() -> None:
    assert DailyChallenge.daily_id(DAY) == "daily-2025-03-14"


def test_daily_uuid_is_stable_per_day() -> None:
    first = DailyChallenge.daily_uuid(DAY)
    assert isinstance(first, uuid.UUID)
    assert first == DailyChallenge.daily_uuid(DAY)
    assert first != DailyChallenge.daily_uuid(DAY + timedelta(days=1))
    assert len(str(first)) == 36


@pytest.mark.parametrize(
    "offset, expected",
    [(0, 0), (1, 1), (3, 3), (-2, 2)],
)
def test_day_index(library: QuoteLibrary, offset: int, expected: int) -> None:
    challenge = DailyChallenge(library)
    assert challenge.day_index(LAUNCH_DATE + timedelta(days=offset)) == expected


def test_quotes_cycle_in_text_order(library: QuoteLibrary) -> None:
    challenge = DailyChallenge(library)
    ordered = library.sorted_for_daily()

    assert [q.text for q in ordered] == [
        "All that glitters is not gold.",
        "Fortune favors the bold.",
        "Knowledge is power.",
    ]
    for offset in range(6):
        day = LAUNCH_DATE + timedelta(days=offset)
        assert challenge.quote_for(day) == ordered[offset % 3]


def test_quote_is_cached_for_the_day(library: QuoteLibrary) -> None:
    challenge = DailyChallenge(library)
    first = challenge.quote_for(DAY)
    assert challenge.quote_for(DAY) is first


def test_custom_launch_date(library: QuoteLibrary) -> None:
    challenge = DailyChallenge(library, launch_date=DAY)
    assert challenge.day_index(DAY) == 0
    assert challenge.quote_for(DAY).text == "All that glitters is not gold."


def test_empty_library_raises() -> None:
    with pytest.raises(QuoteLibraryError):
        DailyChallenge(QuoteLibrary([])).quote_for(DAY)


def test_every_player_gets_the_same_puzzle(library: QuoteLibrary, clock) -> None:
    one = DailyChallenge(library).tracker_for(DAY, clock=clock)
    two = DailyChallenge(library).tracker_for(DAY, clock=clock)

    assert one.cryptogram.encrypted == two.cryptogram.encrypted
    assert one.cryptogram.key == two.cryptogram.key
    assert one.quote == two.quote


def test_daily_puzzle_settings(library: QuoteLibrary, clock) -> None:
    game = DailyChallenge(library).tracker_for(DAY, clock=clock)
    assert game.cryptogram.difficulty is Difficulty.MEDIUM
    assert game.state.max_mistakes == DAILY_MAX_MISTAKES
    assert game.quote is not None
