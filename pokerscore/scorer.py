"""
Main API for poker hand scoring.
Provides clean interface for evaluating and ranking hands.
"""

from typing import Iterable, NamedTuple, Union

import pandas as pd

from .engine.cards import Hand
from .engine.hand_detector import Category, HandDetector
from .engine.scoring import ScoreBreakdown, ScoringConfig, ScoringEngine
from .presets import DEFAULT_PRESET, get_preset, list_presets


RANKING_COLUMNS = ["hand", "category", "score", "scoring_cards"]


class Evaluation(NamedTuple):
    """Category and score of a single hand."""
    category: Category
    score: int


def as_hand(cards) -> Hand:
    """Accept a Hand, a hand string, or an iterable of cards / (Rank, Suit) pairs."""
    if isinstance(cards, Hand):
        return cards
    if isinstance(cards, str):
        return Hand.from_str(cards)
    return Hand(cards)


class HandScorer:
    """
    Main interface for scoring poker hands.

    Usage:
        scorer = HandScorer()
        category, score = scorer.evaluate("AS AH 10D 10C KS")
        print(scorer.explain("2S 3S 4S 5S 6S"))
        table = scorer.rank_hands(["AS AH 10D 10C KS", "2S 2H 2D 5C 5S"])
    """

    def __init__(self, preset: Union[str, ScoringConfig] = DEFAULT_PRESET):
        if isinstance(preset, str):
            config = get_preset(preset)
            if config is None:
                raise ValueError(f"Unknown preset: {preset}. Available: {list_presets()}")
        else:
            config = preset
        self.config = config
        self.detector = HandDetector()
        self.engine = ScoringEngine(config, self.detector)

    def evaluate(self, cards) -> Evaluation:
        hand = as_hand(cards)
        category = self.detector.classify(hand)
        return Evaluation(category, self.engine.score(hand, category))

    def breakdown(self, cards) -> ScoreBreakdown:
        return self.engine.score_hand(as_hand(cards))

    def explain(self, cards) -> str:
        """One-line summary, e.g. "Two Pair (Final Score: 248)"."""
        category, score = self.evaluate(cards)
        return f"{category.display_name} (Final Score: {score})"

    def rank_hands(self, hands: Iterable) -> pd.DataFrame:
        """
        Score several hands and order them strongest first.

        Ties keep their input order.
        """
        rows = []
        for cards in hands:
            hand = as_hand(cards)
            detected = self.detector.detect(hand)
            rows.append({
                "hand": str(hand),
                "category": detected.category.display_name,
                "score": self.engine.score(hand, detected.category),
                "scoring_cards": " ".join(str(c) for c in detected.scoring_cards),
            })

        table = pd.DataFrame(rows, columns=RANKING_COLUMNS)
        return table.sort_values("score", ascending=False, kind="stable").reset_index(drop=True)
