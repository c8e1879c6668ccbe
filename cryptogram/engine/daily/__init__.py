from cryptogram.engine.daily.challenge import DailyChallenge

__all__ = ["DailyChallenge"]
