"""Exceptions raised by the cryptogram engine."""

from __future__ import annotations


class CryptogramError(Exception):
    """Base class for every error the engine raises on purpose."""


class InvalidLetterError(CryptogramError, ValueError):
    """A letter argument is not A-Z, or is not part of the puzzle."""


class NoSelectionError(CryptogramError):
    """A guess was made before an encrypted letter was selected."""


class GameOverError(CryptogramError):
    """The game is already won or lost."""


class QuoteLibraryError(CryptogramError):
    """The quote pack could not be loaded or holds no usable quotes."""
