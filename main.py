#!/usr/bin/env python3
"""Cryptogram puzzle game.

Usage::

    python main.py                          # random puzzle, medium difficulty
    python main.py -d hard --timed          # time-pressure mode
    python main.py --daily                  # today's daily challenge
    python main.py --print --seed 7         # print a puzzle and exit
    python main.py --print --daily --json   # export today's daily puzzle
    python main.py --scores                 # view high scores
"""

from __future__ import annotations

import logging
import random
from datetime import date
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

from cryptogram.config import Difficulty, data_dir
from cryptogram.engine.daily import DailyChallenge
from cryptogram.engine.gameplay import GuessTracker
from cryptogram.errors import CryptogramError
from cryptogram.models.quote import QuoteLibrary
from frontend.cli.rich import app as rich_app

logger = logging.getLogger("cryptogram")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=rich_app.console, show_path=False)],
        force=True,
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    difficulty: Difficulty = typer.Option(
        Difficulty.MEDIUM, "-d", "--difficulty",
        case_sensitive=False,
        help="Mistake limit and score base.",
    ),
    daily: bool = typer.Option(
        False, "--daily",
        help="Play today's daily challenge.",
    ),
    timed: bool = typer.Option(
        False, "--timed",
        help="Time-pressure mode: letters auto-reveal when you are too slow.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for quote choice and cipher (ignored for --daily).",
    ),
    quotes: Optional[Path] = typer.Option(
        None, "--quotes",
        exists=True, dir_okay=False,
        help="Quote pack JSON file. Defaults to the bundled pack.",
    ),
    data: Optional[Path] = typer.Option(
        None, "--data-dir",
        file_okay=False,
        help="Where high scores and stats are kept.",
    ),
    print_only: bool = typer.Option(
        False, "--print",
        help="Print one puzzle and exit.",
    ),
    as_json: bool = typer.Option(
        False, "--json",
        help="With --print, export the puzzle and its answer key as JSON.",
    ),
    scores: bool = typer.Option(
        False, "--scores",
        help="Show high scores and exit.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Debug logging.",
    ),
) -> None:
    """Cryptogram — decrypt famous quotes letter by letter."""
    _configure_logging(verbose)
    data_path = data or data_dir()

    if scores:
        rich_app.print_scores(data_path)
        return

    try:
        library = QuoteLibrary.load(quotes)
        if print_only:
            if daily:
                today = date.today()
                game = DailyChallenge(library).tracker_for(today)
                title = f"Daily Challenge  {today.isoformat()}"
            else:
                rng = random.Random(seed)
                game = GuessTracker(library.random_quote(rng), difficulty, rng=rng)
                title = f"Cryptogram  {difficulty}"
            if as_json:
                rich_app.export_puzzle(game, today if daily else None)
            else:
                rich_app.print_puzzle(game, title)
            return

        rich_app.run(
            data_dir=data_path,
            library=library,
            difficulty=difficulty,
            daily=daily,
            timed=timed,
            seed=seed,
        )
    except CryptogramError as exc:
        logger.error("%s", exc)
        raise typer.Exit(code=1) from exc


if __name__ == "__main__":
    app()
