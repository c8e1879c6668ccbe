from cryptogram.models.highscore import HighScoreEntry, HighScoreManager
from cryptogram.models.puzzle import Cryptogram
from cryptogram.models.quote import Quote, QuoteLibrary
from cryptogram.models.stats import PlayerStats, StatsManager, TimedStats

__all__ = [
    "Cryptogram",
    "HighScoreEntry",
    "HighScoreManager",
    "PlayerStats",
    "Quote",
    "QuoteLibrary",
    "StatsManager",
    "TimedStats",
]
