"""Tests for Hand evaluation."""

from hypothesis import given, strategies as st

from blackjack.cards import Card, Rank, Suit
from blackjack.hand import Hand
from tests.conftest import make_hand

card_strategy = st.builds(Card, st.sampled_from(list(Rank)), st.sampled_from(list(Suit)))
non_ace_strategy = st.builds(
    Card,
    st.sampled_from([rank for rank in Rank if not rank.is_ace]),
    st.sampled_from(list(Suit)),
)


class TestHand:
    """Tests for the Hand class."""

    def test_empty_hand(self, empty_hand):
        """Test empty hand properties."""
        assert len(empty_hand) == 0
        assert empty_hand.value == 0
        assert not empty_hand.is_soft
        assert not empty_hand.is_blackjack
        assert not empty_hand.is_busted

    def test_add_card(self, empty_hand):
        """Test adding cards to hand."""
        empty_hand.add_card(Card(Rank.TEN, Suit.SPADES))
        assert len(empty_hand) == 1
        assert empty_hand.value == 10

    def test_hard_hand_value(self, hard_16_hand):
        """Test hard hand value calculation."""
        assert hard_16_hand.value == 16
        assert not hard_16_hand.is_soft

    def test_soft_hand_value(self, soft_17_hand):
        """Test soft hand value calculation."""
        assert soft_17_hand.value == 17
        assert soft_17_hand.is_soft

    def test_face_cards_count_ten(self):
        """Test that Jack, Queen and King are worth 10."""
        assert make_hand("JS", "QH").value == 20
        assert make_hand("KD", "5C").value == 15

    def test_blackjack(self, blackjack_hand):
        """Test blackjack detection."""
        assert blackjack_hand.is_blackjack
        assert blackjack_hand.value == 21

    def test_not_blackjack_three_cards(self):
        """Test that 21 with 3+ cards is not blackjack."""
        hand = make_hand("7S", "7H", "7C")
        assert hand.value == 21
        assert not hand.is_blackjack

    def test_not_blackjack_after_ace_demotion(self):
        """Test that A-5-5 makes 21 without being blackjack."""
        hand = make_hand("AS", "5H", "5C")
        assert hand.value == 21
        assert not hand.is_blackjack

    def test_bust(self, bust_hand):
        """Test bust detection."""
        assert bust_hand.is_busted
        assert bust_hand.value == 26

    def test_twenty_one_is_not_bust(self):
        assert not make_hand("10S", "9H", "2C").is_busted

    def test_soft_to_hard_transition(self):
        """Test ace switching from 11 to 1."""
        hand = Hand()
        hand.add_card(Card(Rank.ACE, Suit.SPADES))
        assert hand.value == 11
        assert hand.is_soft

        hand.add_card(Card(Rank.FIVE, Suit.HEARTS))
        assert hand.value == 16
        assert hand.is_soft

        hand.add_card(Card(Rank.EIGHT, Suit.CLUBS))
        # Ace now counts as 1
        assert hand.value == 14
        assert not hand.is_soft

    def test_multiple_aces(self):
        """Test hand with multiple aces."""
        hand = make_hand("AS", "AH")
        # A-A = 12 (11 + 1)
        assert hand.value == 12
        assert not hand.is_blackjack

        hand.add_card(Card(Rank.ACE, Suit.CLUBS))
        # A-A-A = 13 (11 + 1 + 1)
        assert hand.value == 13

        hand.add_card(Card(Rank.NINE, Suit.DIAMONDS))
        # A-A-A-9 = 12 (1 + 1 + 1 + 9)
        assert hand.value == 12

    def test_all_aces_demoted_can_still_bust(self):
        """Test that a hand bust with every ace at 1 reports the low total."""
        hand = make_hand("AS", "KH", "QD", "5C")
        assert hand.value == 26
        assert hand.is_busted

    def test_str(self, blackjack_hand, bust_hand, hard_16_hand):
        assert str(hard_16_hand) == "10♠, 6♥ (16)"
        assert "BLACKJACK" in str(blackjack_hand)
        assert "BUST" in str(bust_hand)


class TestHandProperties:
    """Property-based checks on hand values."""

    @given(st.lists(card_strategy, min_size=1, max_size=8))
    def test_value_never_exceeds_all_aces_high(self, cards):
        """Demoting aces never raises the total."""
        all_high = sum(card.value for card in cards)
        assert Hand(cards).value <= all_high

    @given(st.lists(card_strategy, min_size=1, max_size=8))
    def test_bust_only_when_every_ace_is_low(self, cards):
        """A busted hand has no ace left to demote."""
        hand = Hand(cards)
        if hand.is_busted:
            assert hand.value == sum(1 if card.is_ace else card.value for card in cards)

    @given(st.lists(card_strategy, min_size=2, max_size=6), non_ace_strategy)
    def test_non_ace_card_on_hard_hand_adds_its_value(self, cards, extra):
        """A hard hand gains exactly the new card's value, moving only towards bust."""
        hand = Hand(list(cards))
        if hand.is_busted or hand.is_soft:
            return
        before = hand.value
        hand.add_card(extra)
        assert hand.value == before + extra.value

    @given(st.lists(card_strategy, min_size=2, max_size=6), non_ace_strategy)
    def test_non_ace_card_demotes_at_most_one_ace(self, cards, extra):
        hand = Hand(list(cards))
        if hand.is_busted:
            return
        before = hand.value
        hand.add_card(extra)
        assert hand.value >= before + extra.value - 10

    @given(card_strategy, card_strategy)
    def test_two_card_twenty_one_is_blackjack(self, first, second):
        hand = Hand([first, second])
        assert hand.is_blackjack == (hand.value == 21)
