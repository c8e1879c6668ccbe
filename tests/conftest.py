"""Shared fixtures: a controllable clock and a small quote library."""

from __future__ import annotations

import pytest

from cryptogram.models.quote import Quote, QuoteLibrary
from helpers import FakeClock


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def library() -> QuoteLibrary:
    return QuoteLibrary(
        [
            Quote("Knowledge is power.", "Francis Bacon", difficulty=0.0, category="philosophy"),
            Quote("Fortune favors the bold.", "Virgil", difficulty=1.0, category="classic"),
            Quote("All that glitters is not gold.", "William Shakespeare", difficulty=2.0, category="literature"),
        ]
    )
