"""Rich terminal frontend — styled puzzle panels, letter tables and scores.

Plays classic, daily and timed cryptograms with line commands read
through the shared input handler.
"""

from __future__ import annotations

import random
import time
from datetime import date, datetime
from pathlib import Path

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from cryptogram.config import Difficulty
from cryptogram.engine.daily import DailyChallenge
from cryptogram.engine.gameplay import GuessTracker
from cryptogram.engine.scoring import StreakBoost
from cryptogram.engine.timed import TimedGuessResult, TimedRound
from cryptogram.errors import CryptogramError
from cryptogram.models.highscore import HighScoreEntry, HighScoreManager
from cryptogram.models.puzzle import is_puzzle_letter
from cryptogram.models.quote import QuoteLibrary
from cryptogram.models.stats import StatsManager
from frontend.cli.input_handler import Command, read_command

console = Console()

_HELP = (
    "[bold cyan]X=Y[/bold cyan] [dim]guess encrypted X is Y[/dim]   "
    "[bold cyan]?[/bold cyan] [dim]hint[/dim]   "
    "[bold cyan]r[/bold cyan] [dim]new puzzle[/dim]   "
    "[bold cyan]q[/bold cyan] [dim]quit[/dim]"
)


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


def _managers(data_dir: Path) -> tuple[HighScoreManager, StatsManager]:
    return (
        HighScoreManager(data_dir / "highscores.json"),
        StatsManager(data_dir / "stats.json"),
    )


# -- puzzle rendering ---------------------------------------------------------


def _render_text(game: GuessTracker, highlight: str | None = None) -> Text:
    """Encrypted line over the player's current decryption."""
    text = Text()
    encrypted = game.cryptogram.encrypted
    display = game.display
    for ch in encrypted:
        if ch == highlight:
            text.append(ch, style="bold black on yellow")
        elif game.is_revealed(ch):
            text.append(ch, style="dim")
        else:
            text.append(ch, style="bold white")
    text.append("\n")
    for enc, shown in zip(encrypted, display):
        if enc == shown and is_puzzle_letter(enc):
            text.append("_", style="dim")
        elif enc != shown:
            text.append(shown, style="bold green")
        else:
            text.append(shown)
    return text


def _render_letters(game: GuessTracker) -> Table:
    """One column per encrypted letter: the letter, its count, and the guess."""
    table = Table(
        show_header=False,
        box=rich.box.SIMPLE,
        padding=(0, 1),
        border_style="bright_blue",
    )
    letters = game.unique_encrypted_letters()
    for _ in letters:
        table.add_column(justify="center")

    top, counts, guesses = [], [], []
    for letter in letters:
        top.append(f"[bold white]{letter}[/bold white]")
        counts.append(f"[dim]{game.letter_frequency(letter)}[/dim]")
        plain = game.state.guessed.get(letter)
        if plain:
            guesses.append(f"[bold green]{plain}[/bold green]")
        elif letter in game.state.incorrect:
            wrong = "".join(sorted(game.state.incorrect[letter]))
            guesses.append(f"[red]{wrong[:2]}[/red]")
        else:
            guesses.append("[dim]·[/dim]")
    table.add_row(*top)
    table.add_row(*counts)
    table.add_row(*guesses)
    return table


def _stats_line(game: GuessTracker, timed: TimedRound | None = None) -> Text:
    stats = Text()
    state = game.state
    stats.append("  Mistakes: ", style="dim")
    stats.append(f"{state.mistakes}/{state.max_mistakes}", style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(state.elapsed_time), style="bold yellow")
    if timed is not None:
        stats.append("    Next: ", style="dim")
        stats.append(timed.next_letter or "-", style="bold magenta")
        stats.append(f" in {max(0.0, timed.time_remaining):.1f}s", style="magenta")
        if timed.streak:
            stats.append(f"    Streak: {timed.streak}", style="bold cyan")
    return stats


def _draw_game(
    game: GuessTracker,
    title: str,
    status: str = "",
    timed: TimedRound | None = None,
) -> None:
    console.clear()
    highlight = timed.next_letter if timed is not None else None
    body = Group(
        Align.center(_render_text(game, highlight)),
        Text(""),
        Align.center(_render_letters(game)),
    )
    panel = Panel(
        body,
        title=f"[bold cyan]{title}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(_stats_line(game, timed)))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(Text.from_markup(_HELP)))


def _draw_result(game: GuessTracker, score: int, boost_text: str | None) -> None:
    state = game.state
    quote = game.quote
    headline = Text()
    if game.is_won:
        headline.append("★ DECRYPTED! ★", style="bold green")
    else:
        headline.append("GAME OVER", style="bold red")

    solution = Text(game.cryptogram.solution, style="bold white")
    byline = Text(f"— {quote.byline}" if quote else "", style="italic dim")

    stats = Text()
    stats.append("Score: ", style="dim")
    stats.append(str(score), style="bold yellow")
    if boost_text:
        stats.append(f"  {boost_text}", style="cyan")
    stats.append("    Mistakes: ", style="dim")
    stats.append(f"{state.mistakes}/{state.max_mistakes}", style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(state.elapsed_time), style="bold yellow")

    panel = Panel(
        Group(
            Align.center(headline),
            Text(""),
            Align.center(solution),
            Align.center(byline),
            Text(""),
            Align.center(stats),
        ),
        border_style="bold green" if game.is_won else "red",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))


def print_puzzle(game: GuessTracker, title: str) -> None:
    """Non-interactive dump of a fresh puzzle."""
    quote = game.quote
    body = Group(
        Text(game.cryptogram.encrypted, style="bold white"),
        Text(""),
        _render_letters(game),
        Text(f"— {quote.author}" if quote else "", style="italic dim"),
    )
    console.print(Panel(body, title=f"[bold cyan]{title}[/bold cyan]", border_style="bright_blue"))


def export_puzzle(game: GuessTracker, day: date | None = None) -> None:
    """Dump the puzzle and its answer key as JSON."""
    data = game.cryptogram.to_dict()
    if game.quote is not None:
        data["author"] = game.quote.byline
    if day is not None:
        data["daily_id"] = DailyChallenge.daily_id(day)
        data["uuid"] = str(DailyChallenge.daily_uuid(day))
    console.print_json(data=data)


def print_scores(data_dir: Path) -> None:
    """High-score tables and lifetime stats."""
    scores, stats_manager = _managers(data_dir)
    parts: list = []

    modes = scores.get_all_modes()
    if not modes:
        parts.append(Text("No high scores yet.", style="dim"))
    for mode in modes:
        table = Table(
            title=mode.upper(),
            title_style="bold cyan",
            box=rich.box.ROUNDED,
            border_style="dim",
        )
        table.add_column("#", justify="right", style="dim", width=3)
        table.add_column("Score", justify="right", style="yellow")
        table.add_column("Mistakes", justify="right")
        table.add_column("Time", justify="right")
        table.add_column("Date", style="dim")
        for i, e in enumerate(scores.get_scores(mode)[:10], 1):
            table.add_row(str(i), str(e.score), str(e.mistakes), f"{e.time:.0f}s", e.date)
        parts.append(Align.center(table))

    s = stats_manager.stats
    summary = Text()
    summary.append(f"Played {s.games_played}  ", style="bold")
    summary.append(f"Won {s.games_won} ({s.win_rate:.0f}%)  ")
    summary.append(f"Best {s.best_score}  ")
    summary.append(f"Daily streak {s.current_streak()} (best {s.best_streak})")
    if s.timed.games_played:
        summary.append(
            f"\nTimed: {s.timed.games_won}/{s.timed.games_played} won, "
            f"best streak {s.timed.best_streak}, "
            f"guess efficiency {s.timed.guess_efficiency:.0f}%"
        )
    parts.append(Align.center(summary))

    console.print(
        Panel(Group(*parts), title="[bold]HIGH  SCORES[/bold]", border_style="bright_blue", padding=(1, 2))
    )


# -- game loop ----------------------------------------------------------------


def _apply_hint(game: GuessTracker, timed: TimedRound | None) -> str:
    letter = timed.hint() if timed is not None else game.hint()
    if letter is None:
        return "[yellow]No hint available — not enough mistakes left.[/yellow]"
    return f"[cyan]Hint:[/cyan] {letter} is [bold]{game.state.guessed[letter]}[/bold] (+1 mistake)"


def _apply_guess(game: GuessTracker, timed: TimedRound | None, cmd: Command) -> str:
    if timed is not None and timed.active:
        result = timed.guess(cmd.encrypted, cmd.plain)
        return {
            TimedGuessResult.TIMER_LETTER: "[green]Correct![/green]",
            TimedGuessResult.GATEWAY_BONUS: "[green]Correct![/green] [cyan]+2s bonus[/cyan]",
            TimedGuessResult.INCORRECT: "[red]Wrong.[/red]",
            TimedGuessResult.INVALID: f"[yellow]Can't guess {cmd.encrypted} now.[/yellow]",
        }[result]
    if game.make_guess(cmd.encrypted, cmd.plain):
        return f"[green]{cmd.encrypted} is {cmd.plain}![/green]"
    return f"[red]{cmd.encrypted} is not {cmd.plain}.[/red]"


def _record(
    game: GuessTracker,
    mode: str,
    scores: HighScoreManager,
    stats: StatsManager,
    daily: date | None,
    timed: TimedRound | None,
) -> tuple[int, str | None]:
    streak = stats.record_daily(daily) if daily and game.is_won else 0
    score = game.score(streak)
    stats.record_game(game.is_won, score, game.state.mistakes, game.state.time_spent_seconds)
    if timed is not None:
        stats.record_timed(**timed.summary())
    if game.is_won:
        scores.add_score(
            mode,
            HighScoreEntry(
                score=score,
                mistakes=game.state.mistakes,
                time=round(game.state.elapsed_time, 2),
                date=datetime.now().strftime("%Y-%m-%d %H:%M"),
            ),
        )
    return score, StreakBoost.display_text(streak)


def _play(
    new_game,
    mode: str,
    title: str,
    scores: HighScoreManager,
    stats: StatsManager,
    daily: date | None = None,
    timed_mode: bool = False,
) -> None:
    while True:
        game: GuessTracker = new_game()
        timed = TimedRound(game) if timed_mode else None
        if timed is not None:
            timed.start()
        status = ""
        last = time.monotonic()
        infinite = False
        restarted = False

        while not game.is_over or (game.is_lost and not infinite):
            if game.is_lost:
                _draw_result(game, 0, None)
                console.print(Align.center(Text("  C to keep playing, Q to give up.", style="dim")))
                cmd = read_command(console)
                if cmd.action == "continue":
                    game.enable_infinite_mode()
                    infinite = True
                    if timed is not None:
                        timed.stop()
                    continue
                break

            _draw_game(game, title, status, timed)
            status = ""
            cmd = read_command(console)

            now = time.monotonic()
            if timed is not None:
                revealed = timed.tick(now - last)
                if revealed:
                    status = f"[magenta]Timer revealed {', '.join(revealed)}[/magenta]  "
            last = now
            if game.is_over:
                continue

            try:
                if cmd.action == "guess":
                    status += _apply_guess(game, timed, cmd)
                elif cmd.action == "hint":
                    status += _apply_hint(game, timed)
                elif cmd.action == "restart" and daily is not None:
                    status += "[yellow]The daily challenge can't be restarted.[/yellow]"
                elif cmd.action == "restart":
                    game.abandon()
                    restarted = True
                    break
                elif cmd.action == "quit":
                    game.abandon()
                    return
                elif cmd.action == "unknown":
                    status += f"[yellow]Unknown command {cmd.encrypted!r}.[/yellow]"
            except CryptogramError as exc:
                status += f"[yellow]{exc}[/yellow]"

        if game.is_won and not infinite:
            score, boost = _record(game, mode, scores, stats, daily, timed)
            _draw_result(game, score, boost)
        elif game.is_won:
            _draw_result(game, 0, None)
        elif game.is_lost and not infinite:
            _record(game, mode, scores, stats, None, timed)

        if restarted:
            continue

        if daily is not None:
            return
        console.print(Align.center(Text("\n  R to play again, Q to go back.\n", style="dim")))
        if read_command(console).action != "restart":
            return


# -- public entry point -------------------------------------------------------


def run(
    data_dir: Path,
    library: QuoteLibrary,
    difficulty: Difficulty = Difficulty.MEDIUM,
    daily: bool = False,
    timed: bool = False,
    seed: int | None = None,
) -> None:
    """Launch an interactive game in the terminal."""
    scores, stats = _managers(data_dir)
    rng = random.Random(seed)

    if daily:
        today = date.today()
        if stats.has_completed(today):
            console.print("[green]Today's daily challenge is already complete.[/green]")
            return
        challenge = DailyChallenge(library)
        _play(
            lambda: challenge.tracker_for(today),
            "daily",
            f"Daily Challenge  {today.isoformat()}",
            scores,
            stats,
            daily=today,
            timed_mode=timed,
        )
        return

    mode = "timed" if timed else str(difficulty)
    title = f"{'Timed' if timed else 'Cryptogram'}  {difficulty}"
    _play(
        lambda: GuessTracker(library.random_quote(rng), difficulty, rng=rng),
        mode,
        title,
        scores,
        stats,
        timed_mode=timed,
    )
