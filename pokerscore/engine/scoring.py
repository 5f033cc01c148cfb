"""
Scoring engine for poker hand scoring.
Calculates the final score from a hand's category and its card ranks.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from .cards import Hand, Rank
from .errors import ScoringConfigError
from .hand_detector import Category, HandDetector, is_wheel

logger = logging.getLogger(__name__)


# Upper bound on any tie-break: five cards at Ace value
MAX_TIE_BREAK = 5 * Rank.ACE.value

LOW_ACE_VALUE = 1

# Categories whose tie-break is the plain sum of all five ranks
SUM_CATEGORIES = (Category.HIGH_CARD, Category.STRAIGHT, Category.FLUSH, Category.STRAIGHT_FLUSH)


@dataclass(frozen=True)
class ScoringConfig:
    """Base value per category. Values must rise strictly with category strength."""
    name: str
    base_values: Mapping = field(hash=False)

    def __post_init__(self):
        missing = [c.name for c in Category if c not in self.base_values]
        if missing:
            raise ScoringConfigError(f"{self.name}: no base value for {', '.join(missing)}")

        previous = None
        for category in Category:
            value = self.base_values[category]
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ScoringConfigError(
                    f"{self.name}: base value for {category.name} must be a non-negative int, got {value!r}")
            if previous is not None and value <= previous:
                raise ScoringConfigError(
                    f"{self.name}: base values must strictly increase, "
                    f"{category.name}={value} is not above {previous}")
            previous = value

        object.__setattr__(self, "base_values", MappingProxyType(dict(self.base_values)))

    @property
    def preserves_category_order(self) -> bool:
        """True when every gap between adjacent base values exceeds MAX_TIE_BREAK."""
        values = [self.base_values[c] for c in Category]
        return all(high - low > MAX_TIE_BREAK for low, high in zip(values, values[1:]))


def spaced_config(name: str, step: int) -> ScoringConfig:
    """Base values 0, step, 2*step, ... in category order."""
    return ScoringConfig(name=name, base_values={c: step * i for i, c in enumerate(Category)})


# Gaps wider than any tie-break: a stronger category always scores higher
DEFAULT_CONFIG = spaced_config("standard", 100)


@dataclass
class ScoreBreakdown:
    """Detailed breakdown of how score was calculated."""
    category: Category
    base_value: int
    tie_break: int
    final_score: int
    details: list[str] = field(default_factory=list)

    def add_detail(self, msg: str):
        self.details.append(msg)


class ScoringEngine:
    """
    Calculates scores as base value of the category plus a rank tie-break.

    Score = Base Value(category) + Σ rank value × multiplicity
    """

    def __init__(self, config: ScoringConfig = None, detector: HandDetector = None):
        if config is None:
            config = DEFAULT_CONFIG
        self.config = config
        self.detector = detector or HandDetector()

    def base_value(self, category: Category) -> int:
        return self.config.base_values[category]

    def contributions(self, hand: Hand, category: Category) -> list[tuple]:
        """
        (card, value) pairs that make up the tie-break, highest rank first.

        Sum categories count every card, with an Ace worth 1 in an ace-low straight.
        Grouped categories count only cards whose rank repeats; kickers add nothing.
        """
        cards = sorted(hand, key=lambda c: c.rank, reverse=True)
        if category in SUM_CATEGORIES:
            low_ace = category in (Category.STRAIGHT, Category.STRAIGHT_FLUSH) and is_wheel(hand)
            return [(c, LOW_ACE_VALUE if low_ace and c.rank == Rank.ACE else int(c.rank))
                    for c in cards]

        rank_counts = hand.rank_counts
        return [(c, int(c.rank)) for c in cards if rank_counts[c.rank] >= 2]

    def tie_break(self, hand: Hand, category: Category) -> int:
        return sum(value for _, value in self.contributions(hand, category))

    def score(self, hand: Hand, category: Category) -> int:
        total = self.base_value(category) + self.tie_break(hand, category)
        logger.debug("Scored %s as %s: %d", hand, category.name, total)
        return total

    def score_hand(self, hand: Hand, category: Optional[Category] = None) -> ScoreBreakdown:
        """
        Calculate the score for a hand with a step-by-step breakdown.

        Args:
            hand: The hand to score
            category: Category to score under; detected from the hand if omitted
        """
        if category is None:
            category = self.detector.classify(hand)

        base = self.base_value(category)
        contributions = self.contributions(hand, category)
        tie_break = sum(value for _, value in contributions)
        breakdown = ScoreBreakdown(
            category=category,
            base_value=base,
            tie_break=tie_break,
            final_score=base + tie_break,
        )

        breakdown.add_detail(f"{category.display_name} base: {base}")
        for card, value in contributions:
            breakdown.add_detail(f"{card} +{value}")
        breakdown.add_detail(f"Final score: {breakdown.final_score}")
        logger.debug("Scored %s as %s: %d", hand, category.name, breakdown.final_score)
        return breakdown


def calculate_score(hand: Hand, config: ScoringConfig = None) -> int:
    """Convenience function to calculate score."""
    engine = ScoringEngine(config)
    return engine.score(hand, engine.detector.classify(hand))


def score_breakdown(hand: Hand, config: ScoringConfig = None) -> ScoreBreakdown:
    """Get detailed score breakdown."""
    return ScoringEngine(config).score_hand(hand)
