"""Suit-isomorphism canonicalization for hold'em hands."""

from handcanon.game.cards import CANONICAL_DECK, Card, Rank, Street, Suit
from handcanon.isomorphism import (
    SuitPermutation,
    ValidationError,
    canonical_key,
    canonicalize,
    canonicalize_hand,
)

__version__ = "0.1.0"

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "Street",
    "CANONICAL_DECK",
    "SuitPermutation",
    "ValidationError",
    "canonicalize",
    "canonicalize_hand",
    "canonical_key",
]
