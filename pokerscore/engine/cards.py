"""
Card and hand model for poker hand scoring.
Handles card creation, text parsing, and the derived views used by detection.
"""

import re
from collections import Counter
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable, Union

from .errors import CardParseError, InvalidHandError


HAND_SIZE = 5


class Rank(IntEnum):
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def symbol(self) -> str:
        return RANK_SYMBOLS[self]


class Suit(Enum):
    SPADES = "Spades"
    HEARTS = "Hearts"
    DIAMONDS = "Diamonds"
    CLUBS = "Clubs"

    @property
    def symbol(self) -> str:
        return SUIT_SYMBOLS[self]

    @property
    def letter(self) -> str:
        return self.value[0]


RANK_SYMBOLS = {
    Rank.TWO: "2", Rank.THREE: "3", Rank.FOUR: "4", Rank.FIVE: "5",
    Rank.SIX: "6", Rank.SEVEN: "7", Rank.EIGHT: "8", Rank.NINE: "9",
    Rank.TEN: "10", Rank.JACK: "J", Rank.QUEEN: "Q", Rank.KING: "K", Rank.ACE: "A",
}
SUIT_SYMBOLS = {
    Suit.SPADES: "♠", Suit.HEARTS: "♥", Suit.DIAMONDS: "♦", Suit.CLUBS: "♣",
}

# Text tokens accepted by the parsers (upper-cased before lookup)
RANK_TOKENS = {symbol: rank for rank, symbol in RANK_SYMBOLS.items()}
RANK_TOKENS["T"] = Rank.TEN
SUIT_TOKENS = {}
for _suit in Suit:
    SUIT_TOKENS[_suit.letter] = _suit
    SUIT_TOKENS[_suit.symbol] = _suit
    SUIT_TOKENS[_suit.value.upper()] = _suit
    SUIT_TOKENS[_suit.value.upper().rstrip("S")] = _suit

_CARD_PATTERN = re.compile(r"^(10|[2-9TJQKA])(.+)$", re.IGNORECASE)
_HAND_SEPARATOR = re.compile(r"[\s,]+")


@dataclass(frozen=True)
class Card:
    rank: Rank
    suit: Suit

    def __post_init__(self):
        if not isinstance(self.rank, Rank):
            raise TypeError(f"Card rank must be a Rank, got {self.rank!r}")
        if not isinstance(self.suit, Suit):
            raise TypeError(f"Card suit must be a Suit, got {self.suit!r}")

    @classmethod
    def from_str(cls, text: str) -> "Card":
        """
        Parse a card such as "AS", "10h", "Q♦" or "KClubs".

        Raises:
            CardParseError: if the rank or suit token is not recognised
        """
        match = _CARD_PATTERN.match(text.strip())
        if not match:
            raise CardParseError(f"Cannot parse card: {text!r}")
        rank_token, suit_token = match.groups()
        suit = SUIT_TOKENS.get(suit_token.upper())
        if suit is None:
            raise CardParseError(f"Unknown suit in card {text!r}: {suit_token!r}")
        return cls(RANK_TOKENS[rank_token.upper()], suit)

    def __str__(self) -> str:
        return f"{self.rank.symbol}{self.suit.symbol}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"


CardLike = Union[Card, tuple]


def _as_card(item) -> Card:
    if isinstance(item, Card):
        return item
    if isinstance(item, tuple) and len(item) == 2:
        rank, suit = item
        if isinstance(rank, Rank) and isinstance(suit, Suit):
            return Card(rank, suit)
    raise InvalidHandError(f"Not a card: {item!r}")


class Hand:
    """
    An immutable set of exactly five distinct cards.

    Derived views are recomputed from the cards on every access.
    """

    __slots__ = ("_cards",)

    def __init__(self, cards: Iterable[CardLike]):
        try:
            items = iter(cards)
        except TypeError:
            raise InvalidHandError(f"A hand needs an iterable of cards, got {cards!r}") from None
        cards = tuple(_as_card(c) for c in items)
        if len(cards) != HAND_SIZE:
            raise InvalidHandError(f"A hand needs exactly {HAND_SIZE} cards, got {len(cards)}")
        duplicates = [card for card, n in Counter(cards).items() if n > 1]
        if duplicates:
            listed = ", ".join(str(c) for c in duplicates)
            raise InvalidHandError(f"Duplicate cards in hand: {listed}")
        self._cards = cards

    @classmethod
    def from_str(cls, text: str) -> "Hand":
        """Parse a hand such as "AS AH 10D 10C KS" (commas also separate cards)."""
        tokens = [t for t in _HAND_SEPARATOR.split(text.strip()) if t]
        return cls(Card.from_str(t) for t in tokens)

    @property
    def cards(self) -> tuple:
        return self._cards

    @property
    def rank_counts(self) -> Counter:
        """Rank -> number of cards of that rank."""
        return Counter(c.rank for c in self._cards)

    @property
    def suit_counts(self) -> Counter:
        """Suit -> number of cards of that suit."""
        return Counter(c.suit for c in self._cards)

    @property
    def sorted_ranks(self) -> tuple:
        """All five ranks, ascending."""
        return tuple(sorted(c.rank for c in self._cards))

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self):
        return iter(self._cards)

    def __contains__(self, card) -> bool:
        return card in self._cards

    def __eq__(self, other) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return frozenset(self._cards) == frozenset(other._cards)

    def __hash__(self) -> int:
        return hash(frozenset(self._cards))

    def __str__(self) -> str:
        return " ".join(str(c) for c in self._cards)

    def __repr__(self) -> str:
        return f"Hand({self.__str__()})"
