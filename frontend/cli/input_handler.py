"""Line-command parser shared by the terminal frontends.

A cryptogram move names two letters, so input is read a line at a time
rather than a key at a time.  Each line is normalised to an action tuple.
"""

from __future__ import annotations

import re
from typing import NamedTuple

from rich.console import Console
from rich.prompt import Prompt


class Command(NamedTuple):
    action: str
    encrypted: str | None = None
    plain: str | None = None


# -- shared command mapping ----------------------------------------------------

_ACTION_MAP: dict[str, str] = {
    "q": "quit",
    "quit": "quit",
    "exit": "quit",
    "?": "hint",
    "hint": "hint",
    "c": "continue",
    "continue": "continue",
    "help": "help",
    "h": "help",
    "r": "restart",
    "restart": "restart",
}

# "X=Y", "X -> Y", "X Y" or just "XY"
_GUESS_RE = re.compile(r"^([A-Za-z])\s*(?:=|->|:)?\s*([A-Za-z])$")


def parse(raw: str) -> Command:
    """Map a raw input line to a :class:`Command`.

    Possible actions:
        "guess"     — encrypted letter and plaintext guess
        "hint"      — ? / hint
        "quit"      — q / quit / exit
        "continue"  — c (keep playing after a loss)
        "restart"   — r (new puzzle)
        "help"      — h / help
        "tick"      — empty line (just refresh the clock)
        "unknown"   — anything else
    """
    line = raw.strip()
    if not line:
        return Command("tick")
    action = _ACTION_MAP.get(line.lower())
    if action:
        return Command(action)
    match = _GUESS_RE.match(line)
    if match:
        return Command("guess", match.group(1).upper(), match.group(2).upper())
    return Command("unknown", line)


# -- public API ----------------------------------------------------------------


def read_command(console: Console, prompt: str = "  move") -> Command:
    """Block for one line of input and parse it.  EOF counts as quit."""
    try:
        raw = Prompt.ask(prompt, console=console, default="", show_default=False)
    except (EOFError, KeyboardInterrupt):
        return Command("quit")
    return parse(raw)
