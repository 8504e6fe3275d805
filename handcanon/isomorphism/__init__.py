"""
Suit isomorphism module for canonical hand representation.

Key concepts:
- Suits are interchangeable until the cards of a hand create distinctions
- Canonical representation hands out suits in order of appearance in the
  segment-sorted hand, using later cards to break ties between paired suits
- A canonical hand is the smallest of its 24 suit relabelings
"""

from handcanon.isomorphism.suit_canonicalization import (
    are_isomorphic,
    canonical_hand_id,
    canonical_key,
    canonical_permutation,
    canonicalize,
    canonicalize_exhaustive,
    canonicalize_hand,
    resolve_first_suit,
    sort_segments,
)
from handcanon.isomorphism.suit_map import (
    SuitMap,
    SuitPermutation,
    all_suit_permutations,
    permute_suits,
)
from handcanon.isomorphism.validation import ValidationError, validate_hand

__all__ = [
    "SuitMap",
    "SuitPermutation",
    "all_suit_permutations",
    "permute_suits",
    "canonicalize",
    "canonicalize_hand",
    "canonicalize_exhaustive",
    "canonical_permutation",
    "canonical_key",
    "canonical_hand_id",
    "are_isomorphic",
    "resolve_first_suit",
    "sort_segments",
    "ValidationError",
    "validate_hand",
]
