"""Tests for the deck."""

import random

import pytest
from pokersolitaire.deck import Deck, DeckEmpty


class TestDeck:
    def test_full_deck(self):
        deck = Deck()
        assert len(deck) == 52
        assert len(set(deck.cards)) == 52

    def test_deal_one(self):
        deck = Deck()
        c = deck.deal_one()
        assert len(deck) == 51
        assert c not in deck

    def test_deal_until_empty(self):
        deck = Deck()
        dealt = [deck.deal_one() for _ in range(52)]
        assert len(set(dealt)) == 52
        with pytest.raises(DeckEmpty):
            deck.deal_one()

    def test_shuffle_restores_full_deck(self):
        deck = Deck()
        for _ in range(10):
            deck.deal_one()
        deck.shuffle()
        assert len(deck) == 52

    def test_seeded_shuffle_is_reproducible(self):
        a = Deck(rng=random.Random(7))
        b = Deck(rng=random.Random(7))
        a.shuffle()
        b.shuffle()
        assert a.cards == b.cards
