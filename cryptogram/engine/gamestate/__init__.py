from cryptogram.engine.gamestate.state import GameState

__all__ = ["GameState"]
