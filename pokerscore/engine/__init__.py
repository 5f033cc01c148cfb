"""
Poker hand scoring engine components.
"""

from .cards import Card, Hand, Rank, Suit, HAND_SIZE
from .errors import PokerScoreError, InvalidHandError, CardParseError, ScoringConfigError
from .hand_detector import Category, DetectedHand, HandDetector, detect_hand, is_wheel
from .scoring import (
    ScoringEngine, ScoringConfig, ScoreBreakdown, DEFAULT_CONFIG, MAX_TIE_BREAK, calculate_score, score_breakdown,
)
