"""
Exceptions raised by the scoring engine.
"""


class PokerScoreError(Exception):
    """Base class for all pokerscore errors."""
    pass


class InvalidHandError(PokerScoreError, ValueError):
    """A hand could not be built: wrong card count, duplicates, or non-card items."""
    pass


class CardParseError(PokerScoreError, ValueError):
    """Card text could not be parsed."""
    pass


class ScoringConfigError(PokerScoreError, ValueError):
    """A base-value table is incomplete or not strictly increasing."""
    pass
