"""Cryptogram puzzles: substitution ciphers over famous quotes."""

__version__ = "0.1.0"
