from cryptogram.engine.gameplay.tracker import GuessTracker

__all__ = ["GuessTracker"]
