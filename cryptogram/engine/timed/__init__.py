from cryptogram.engine.timed.reveal import RevealOrderPlanner
from cryptogram.engine.timed.round import TimedGuessResult, TimedRound

__all__ = ["RevealOrderPlanner", "TimedGuessResult", "TimedRound"]
