"""
Five-card poker hand scorer
"""

from .engine.cards import Card, Hand, Rank, Suit
from .engine.errors import PokerScoreError, InvalidHandError, CardParseError, ScoringConfigError
from .engine.hand_detector import Category, DetectedHand, HandDetector, detect_hand
from .engine.scoring import ScoringEngine, ScoringConfig, ScoreBreakdown, calculate_score, score_breakdown
from .presets import PRESETS, DEFAULT_PRESET, get_preset, list_presets
from .scorer import HandScorer, Evaluation

__version__ = "0.1.0"
