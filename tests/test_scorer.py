"""
HandScorer facade tests: evaluation, explanations and ranking tables.
"""

import pytest

from pokerscore import (
    Card, CardParseError, Category, Evaluation, Hand, HandScorer, InvalidHandError, Rank, Suit,
)
from pokerscore.presets import get_preset


class TestHandScorer:

    def setup_method(self):
        self.scorer = HandScorer()
        self.compact = HandScorer("compact")

    @pytest.mark.parametrize("text, category, score", [
        ("AS AH 10D 10C KS", Category.TWO_PAIR, 68),
        ("2S 3S 4S 5S 6S", Category.STRAIGHT_FLUSH, 100),
        ("AS 2H 3D 4C 5S", Category.STRAIGHT, 55),
        ("2S 2H 2D 5C 5S", Category.FULL_HOUSE, 76),
    ])
    def test_worked_examples(self, text, category, score):
        assert self.compact.evaluate(text) == Evaluation(category, score)

    def test_evaluation_unpacks_as_pair(self):
        category, score = self.scorer.evaluate("AS AH 10D 10C KS")
        assert category == Category.TWO_PAIR
        assert score == 248

    def test_accepts_hand_and_pairs(self):
        pairs = [(Rank.TWO, Suit.SPADES), (Rank.THREE, Suit.SPADES), (Rank.FOUR, Suit.SPADES),
                 (Rank.FIVE, Suit.SPADES), (Rank.SIX, Suit.SPADES)]
        assert self.scorer.evaluate(pairs) == self.scorer.evaluate(Hand(pairs))
        assert self.scorer.evaluate(pairs).score == 820

    def test_accepts_config(self):
        scorer = HandScorer(get_preset("compact"))
        assert scorer.evaluate("AS AH 10D 10C KS").score == 68

    def test_unknown_preset(self):
        with pytest.raises(ValueError, match="Unknown preset"):
            HandScorer("nope")

    def test_invalid_hand(self):
        with pytest.raises(InvalidHandError):
            self.scorer.evaluate("AS AS 10D 10C KS")
        with pytest.raises(InvalidHandError):
            self.scorer.evaluate([Card(Rank.ACE, Suit.SPADES)])

    def test_unparseable_hand(self):
        with pytest.raises(CardParseError):
            self.scorer.evaluate("AS AH 10D 10C 1S")

    def test_explain(self):
        assert self.scorer.explain("AS AH 10D 10C KS") == "Two Pair (Final Score: 248)"
        assert self.compact.explain("2S 3S 4S 5S 6S") == "Straight Flush (Final Score: 100)"

    def test_breakdown(self):
        breakdown = self.scorer.breakdown("9S 9H 9D 9C KS")
        assert breakdown.category == Category.FOUR_OF_A_KIND
        assert breakdown.final_score == 700 + 36


class TestRankHands:

    def setup_method(self):
        self.scorer = HandScorer()

    def test_sorted_strongest_first(self):
        table = self.scorer.rank_hands([
            "AS KH 9D 7C 2S",
            "2S 2H 2D 5C 5S",
            "AS AH 10D 10C KS",
        ])
        assert list(table.columns) == ["hand", "category", "score", "scoring_cards"]
        assert list(table["category"]) == ["Full House", "Two Pair", "High Card"]
        assert list(table["score"]) == [616, 248, 45]
        assert table.loc[1, "scoring_cards"] == "A♠ A♥ 10♦ 10♣"

    def test_ties_keep_input_order(self):
        table = self.scorer.rank_hands(["KS KH 4D 3C 2S", "KD KC 5D 3H 2H"])
        assert list(table["hand"]) == ["K♠ K♥ 4♦ 3♣ 2♠", "K♦ K♣ 5♦ 3♥ 2♥"]

    def test_empty(self):
        table = self.scorer.rank_hands([])
        assert table.empty
        assert list(table.columns) == ["hand", "category", "score", "scoring_cards"]

    def test_invalid_hand_propagates(self):
        with pytest.raises(InvalidHandError):
            self.scorer.rank_hands(["AS KH 9D 7C 2S", "AS KH 9D 7C"])
