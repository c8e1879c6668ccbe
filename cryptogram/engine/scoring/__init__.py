from cryptogram.engine.scoring.score import ScoreCalculator, StreakBoost

__all__ = ["ScoreCalculator", "StreakBoost"]
