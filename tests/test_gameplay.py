"""Guess tracking, hints, win and loss."""

from __future__ import annotations

import random

import pytest

from cryptogram.config import INFINITE_MAX_MISTAKES, Difficulty
from cryptogram.engine.gameplay import GuessTracker
from cryptogram.errors import GameOverError, InvalidLetterError, NoSelectionError
from cryptogram.models.quote import Quote
from helpers import FakeClock, make_cryptogram, wrong_letter


# -- helpers ------------------------------------------------------------------


def _game(text: str = "Hello, world!", max_mistakes: int = 5, clock=None) -> GuessTracker:
    cryptogram = make_cryptogram(text, max_mistakes=max_mistakes)
    return GuessTracker.from_cryptogram(
        cryptogram, rng=random.Random(0), clock=clock or FakeClock()
    )


def _solve(game: GuessTracker) -> None:
    for letter in game.unique_encrypted_letters():
        if not game.is_revealed(letter):
            assert game.make_guess(letter, game.cryptogram.key[letter])


# -- selection ----------------------------------------------------------------


def test_select_and_deselect_revealed_letter() -> None:
    game = _game()
    first = game.unique_encrypted_letters()[0]

    assert game.select(first.lower()) == first
    assert game.state.selected == first

    game.guess(game.cryptogram.key[first])
    assert game.select(first) is None


@pytest.mark.parametrize("bad", ["1", "", "AB", "!"])
def test_select_rejects_non_letters(bad: str) -> None:
    with pytest.raises(InvalidLetterError):
        _game().select(bad)


def test_select_rejects_letters_missing_from_puzzle() -> None:
    game = _game()
    absent = next(ch for ch in "ABCDEFGHIJKLMNOPQRSTUVWXYZ" if ch not in game.cryptogram.frequency)
    with pytest.raises(InvalidLetterError):
        game.select(absent)


def test_guess_without_selection_raises() -> None:
    with pytest.raises(NoSelectionError):
        _game().guess("E")


# -- guesses ------------------------------------------------------------------


def test_correct_guess_reveals_every_occurrence() -> None:
    game = _game()
    encrypted_l = next(c for c, p in game.cryptogram.key.items() if p == "L")

    assert game.make_guess(encrypted_l, "l")
    assert game.state.mistakes == 0
    assert game.state.selected is None
    assert [i for i, ch in enumerate(game.display) if ch == "L"] == [2, 3, 10]
    assert game.display[5] == ","


def test_wrong_guess_counts_a_mistake() -> None:
    game = _game()
    letter = game.unique_encrypted_letters()[0]
    wrong = wrong_letter(game.cryptogram.key[letter])

    assert not game.make_guess(letter, wrong)
    assert not game.make_guess(letter, wrong)

    assert game.state.mistakes == 2
    assert game.state.incorrect[letter] == {wrong}
    assert not game.is_revealed(letter)


def test_reaching_max_mistakes_loses() -> None:
    game = _game(max_mistakes=3)
    letter = game.unique_encrypted_letters()[0]
    wrong = wrong_letter(game.cryptogram.key[letter])
    for _ in range(3):
        game.make_guess(letter, wrong)

    assert game.is_lost
    assert game.score() == 0
    with pytest.raises(GameOverError):
        game.make_guess(letter, wrong)


def test_revealing_every_letter_wins() -> None:
    clock = FakeClock()
    game = _game(clock=clock)
    clock.advance(20)
    _solve(game)

    assert game.is_won
    assert game.display == "HELLO, WORLD!"
    assert game.state.completion == 1.0
    # medium, under 30s, no mistakes
    assert game.score() == 1800
    with pytest.raises(GameOverError):
        game.hint()


def test_clock_stops_when_game_ends() -> None:
    clock = FakeClock()
    game = _game(clock=clock)
    clock.advance(12)
    _solve(game)
    clock.advance(500)
    assert game.state.time_spent_seconds == 12


def test_pause_and_resume_bank_active_time() -> None:
    clock = FakeClock()
    state = _game(clock=clock).state
    clock.advance(10)
    state.pause()
    clock.advance(100)
    assert state.elapsed_time == 10

    state.pause()
    state.resume()
    clock.advance(5)
    assert state.elapsed_time == 15

    state.resume()
    assert state.time_spent_seconds == 15


def test_new_tracker_from_quote() -> None:
    quote = Quote("Knowledge is power.", "Francis Bacon")
    game = GuessTracker(quote, Difficulty.EASY, rng=random.Random(2))

    assert game.quote is quote
    assert game.state.max_mistakes == 8
    assert game.unique_solution_letters() == sorted(set("KNOWLEDGEISPOWER"))


# -- hints and reveals --------------------------------------------------------


def test_hint_reveals_a_letter_for_one_mistake() -> None:
    game = _game()
    letter = game.hint()

    assert letter in game.unique_encrypted_letters()
    assert game.is_revealed(letter)
    assert game.state.mistakes == 1
    assert game.state.hints_used == 1


def test_hint_refused_when_it_would_use_the_last_mistake() -> None:
    game = _game(max_mistakes=3)
    assert game.hint() is not None
    assert game.hint() is not None
    assert game.hint() is None
    assert game.state.mistakes == 2
    assert not game.is_lost


def test_reveal_is_free_and_idempotent() -> None:
    game = _game()
    letter = game.unique_encrypted_letters()[0]

    assert game.reveal(letter)
    assert not game.reveal(letter)
    assert game.state.mistakes == 0


def test_reveal_can_win() -> None:
    game = _game("abc")
    for letter in game.unique_encrypted_letters():
        game.reveal(letter)
    assert game.is_won


# -- infinite mode / abandon --------------------------------------------------


def test_infinite_mode_resumes_a_lost_game() -> None:
    game = _game(max_mistakes=1)
    letter = game.unique_encrypted_letters()[0]
    game.make_guess(letter, wrong_letter(game.cryptogram.key[letter]))
    assert game.is_lost

    game.enable_infinite_mode()

    assert not game.is_lost
    assert game.state.max_mistakes == INFINITE_MAX_MISTAKES
    _solve(game)
    assert game.is_won


def test_infinite_mode_refused_after_a_win() -> None:
    game = _game("ab")
    _solve(game)
    with pytest.raises(GameOverError):
        game.enable_infinite_mode()


def test_abandon_marks_game_lost() -> None:
    game = _game()
    game.abandon()
    assert game.is_lost
    game.abandon()
    assert game.is_over


# -- queries ------------------------------------------------------------------


def test_letter_queries() -> None:
    game = _game()
    encrypted_o = next(c for c, p in game.cryptogram.key.items() if p == "O")

    assert game.letter_frequency(encrypted_o) == 2
    assert game.letter_frequency(encrypted_o.lower()) == 2
    assert game.positions_of(encrypted_o) == [4, 8]
    assert len(game.unique_encrypted_letters()) == 7


@pytest.mark.parametrize("letter", ["ı", "ß", "ﬁ", "é"])
def test_non_ascii_letters_are_rejected(letter: str) -> None:
    game = _game()
    with pytest.raises(InvalidLetterError):
        game.select(letter)

    game.select(game.unique_encrypted_letters()[0])
    with pytest.raises(InvalidLetterError):
        game.guess(letter)
    assert game.state.mistakes == 0
