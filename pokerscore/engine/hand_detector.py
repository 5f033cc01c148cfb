"""
Hand detection for poker hand scoring.
Identifies the category of a five-card hand and the cards that form it.
"""

import logging
from dataclasses import dataclass
from enum import IntEnum, auto

from .cards import Card, Hand, Rank

logger = logging.getLogger(__name__)


class Category(IntEnum):
    """Poker hand categories, ordered by strength."""
    HIGH_CARD = auto()
    PAIR = auto()
    TWO_PAIR = auto()
    THREE_OF_A_KIND = auto()
    STRAIGHT = auto()
    FLUSH = auto()
    FULL_HOUSE = auto()
    FOUR_OF_A_KIND = auto()
    STRAIGHT_FLUSH = auto()

    @property
    def display_name(self) -> str:
        return CATEGORY_NAMES[self]


# Names as printed in explanations
CATEGORY_NAMES = {
    Category.HIGH_CARD: "High Card",
    Category.PAIR: "Pair",
    Category.TWO_PAIR: "Two Pair",
    Category.THREE_OF_A_KIND: "Three Of A Kind",
    Category.STRAIGHT: "Straight",
    Category.FLUSH: "Flush",
    Category.FULL_HOUSE: "Full House",
    Category.FOUR_OF_A_KIND: "Four of a Kind",
    Category.STRAIGHT_FLUSH: "Straight Flush",
}


WHEEL_RANKS = (Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE, Rank.ACE)


@dataclass(frozen=True)
class DetectedHand:
    """Result of hand detection."""
    category: Category
    scoring_cards: tuple  # Cards that form the category
    hand: Hand


def is_flush(hand: Hand) -> bool:
    suit_counts = hand.suit_counts
    return len(suit_counts) == 1 and max(suit_counts.values()) == 5


def is_wheel(hand: Hand) -> bool:
    """True for the ace-low straight A-2-3-4-5."""
    return hand.sorted_ranks == WHEEL_RANKS


def is_straight(hand: Hand) -> bool:
    ranks = hand.sorted_ranks
    if len(set(ranks)) != 5:
        return False
    if ranks[-1] - ranks[0] == 4:
        return True
    return ranks == WHEEL_RANKS


class HandDetector:
    """Classifies five-card hands, strongest category first."""

    def classify(self, hand: Hand) -> Category:
        flush = is_flush(hand)
        straight = is_straight(hand)
        counts = sorted(hand.rank_counts.values(), reverse=True)

        if flush and straight:
            category = Category.STRAIGHT_FLUSH
        elif counts[0] == 4:
            category = Category.FOUR_OF_A_KIND
        elif counts == [3, 2]:
            category = Category.FULL_HOUSE
        elif flush:
            category = Category.FLUSH
        elif straight:
            category = Category.STRAIGHT
        elif counts[0] == 3:
            category = Category.THREE_OF_A_KIND
        elif counts.count(2) == 2:
            category = Category.TWO_PAIR
        elif counts.count(2) == 1:
            category = Category.PAIR
        else:
            category = Category.HIGH_CARD

        logger.debug("Classified %s as %s", hand, category.name)
        return category

    def detect(self, hand: Hand) -> DetectedHand:
        """Detect the category of a hand along with its scoring cards."""
        category = self.classify(hand)
        return DetectedHand(category, self._scoring_cards(hand, category), hand)

    def _scoring_cards(self, hand: Hand, category: Category) -> tuple:
        if category in (Category.STRAIGHT, Category.STRAIGHT_FLUSH):
            if is_wheel(hand):
                # Ace leads the wheel
                return tuple(sorted(hand, key=lambda c: 1 if c.rank == Rank.ACE else c.rank))
            return tuple(sorted(hand, key=lambda c: c.rank))

        if category in (Category.FLUSH, Category.FULL_HOUSE):
            return self._by_group(hand, 5)

        if category == Category.HIGH_CARD:
            return (max(hand, key=lambda c: c.rank),)

        scoring_count = {
            Category.PAIR: 2,
            Category.TWO_PAIR: 4,
            Category.THREE_OF_A_KIND: 3,
            Category.FOUR_OF_A_KIND: 4,
        }[category]
        return self._by_group(hand, scoring_count)

    def _by_group(self, hand: Hand, scoring_count: int) -> tuple:
        """Take cards grouped by rank count (descending), then rank (descending)."""
        rank_counts = hand.rank_counts
        sorted_ranks = sorted(rank_counts, key=lambda r: (rank_counts[r], r), reverse=True)

        scoring_cards: list[Card] = []
        for rank in sorted_ranks:
            for card in hand:
                if card.rank == rank and len(scoring_cards) < scoring_count:
                    scoring_cards.append(card)
        return tuple(scoring_cards)


def detect_hand(hand: Hand) -> DetectedHand:
    """Convenience function to detect a hand."""
    return HandDetector().detect(hand)
