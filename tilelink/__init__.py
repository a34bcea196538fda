"""Board generation and tile connectivity engine for pair-matching puzzles."""

__version__ = "1.0.0"
