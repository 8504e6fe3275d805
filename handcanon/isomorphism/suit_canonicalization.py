"""
Suit isomorphism canonicalization of hold'em hands.

A hand is 2 private cards followed by 0, 3, 4 or 5 shared cards. Two hands
that differ only by a global renaming of suits are strategically identical,
so every hand is mapped to the lexicographically smallest member of its
class under the 24 suit relabelings.

Canonical Form:
- Private and shared segments are each sorted by (rank, suit); cards never
  cross the boundary between them
- Canonical suits are handed out in order (clubs, diamonds, hearts, spades)
  to suits in the order their cards appear in the sorted hand
- Where several unassigned suits share a rank (pairs, trips, quads), later
  cards decide which of them takes the next label

Example:
    [2♣ 2♠ | 3♠ 4♠ 5♠] → [2♣ 2♦ | 3♣ 4♣ 5♣]
    Spades is the suit that continues on the board, so it becomes clubs.

The lookahead is a forward scan over rank groups carrying two boolean
SuitMaps: the live candidate set and the candidates present at the current
rank. A rank holding exactly one candidate settles which suit goes first; a
rank holding several narrows the candidate set to them.
"""

import logging
from itertools import groupby
from operator import attrgetter
from typing import Optional, Sequence

from handcanon.game.cards import Card, Suit
from handcanon.isomorphism.suit_map import (
    NUM_SUITS,
    SuitMap,
    SuitPermutation,
    all_suit_permutations,
    permute_suits,
)
from handcanon.isomorphism.validation import validate_hand, validate_segments
from handcanon.shared.config import Config

logger = logging.getLogger(__name__)

PRIVATE_SIZE = 2


class _SuitCursor:
    """Hands out canonical suits in enumeration order, each at most once."""

    def __init__(self):
        self._position = 0

    def next(self) -> Suit:
        if self._position >= NUM_SUITS:
            raise RuntimeError("All four canonical suits have already been assigned")
        suit = Suit(self._position)
        self._position += 1
        return suit


def sort_segments(cards: Sequence[Card]) -> list[Card]:
    """Sort the private and shared segments independently."""
    return sorted(cards[:PRIVATE_SIZE]) + sorted(cards[PRIVATE_SIZE:])


def _narrow_candidates(tail: Sequence[Card], candidates: SuitMap[bool]) -> SuitMap[bool]:
    """
    Scan ``tail`` rank by rank, narrowing ``candidates``.

    Returns a map with a single suit set as soon as one rank group holds
    exactly one live candidate. Otherwise returns the last narrowed set, whose
    suits appear together (or not at all) in every remaining rank group.
    """
    candidates = candidates.copy()
    for _, rank_group in groupby(tail, key=attrgetter("rank")):
        active = SuitMap.filled(False)
        for card in rank_group:
            if candidates[card.suit]:
                active[card.suit] = True

        live = len(active.suits_where())
        if live == 1:
            return active
        if live > 1:
            candidates = active

    return candidates


def resolve_first_suit(tail: Sequence[Card], candidates: SuitMap[bool]) -> Optional[Suit]:
    """
    Find which candidate suit later cards single out first.

    Args:
        tail: Cards sorted by rank
        candidates: Suits that are interchangeable so far

    Returns:
        The suit that should take the earliest canonical label, or None if
        nothing in ``tail`` tells the candidates apart
    """
    live = _narrow_candidates(tail, candidates).suits_where()
    if len(live) == 1:
        return live[0]
    return None


def _next_suit_to_assign(tail: Sequence[Card], assigned: SuitMap[Optional[Suit]]) -> Suit:
    """
    Pick the suit that receives the next canonical label.

    ``tail[0]`` is the card being processed and its suit is unassigned.
    Candidates are the unassigned suits among cards of the same rank.
    """
    card = tail[0]
    candidates = SuitMap.filled(False)
    for other in tail:
        if other.rank != card.rank:
            break
        if assigned[other.suit] is None:
            candidates[other.suit] = True

    live = _narrow_candidates(tail, candidates).suits_where()
    if len(live) == 1 or card.suit not in live:
        # With 3+ tied suits a later rank can narrow to a set that excludes
        # this card's suit; any survivor then gives the same hand.
        return live[0]
    return card.suit


def _find_permutation(hand: list[Card]) -> SuitPermutation:
    """Compute the canonical relabeling for a segment-sorted hand."""
    hand = list(hand)
    shared = hand[PRIVATE_SIZE:]

    # Pocket pair: the shared cards decide which private suit comes first
    if hand[0].rank == hand[1].rank:
        candidates = SuitMap.filled(False)
        candidates[hand[0].suit] = True
        candidates[hand[1].suit] = True
        if resolve_first_suit(shared, candidates) == hand[1].suit:
            hand[0], hand[1] = hand[1], hand[0]
        logger.debug("Pocket pair order resolved to %r", hand[:PRIVATE_SIZE])

    assigned: SuitMap[Optional[Suit]] = SuitMap.filled(None)
    cursor = _SuitCursor()

    for card in hand[:PRIVATE_SIZE]:
        if assigned[card.suit] is None:
            assigned[card.suit] = cursor.next()

    for idx in range(PRIVATE_SIZE, len(hand)):
        card = hand[idx]
        while assigned[card.suit] is None:
            suit = _next_suit_to_assign(hand[idx:], assigned)
            assigned[suit] = cursor.next()

    # Suits absent from the hand take the remaining labels in order
    permutation = SuitPermutation.from_suit_map(
        assigned.map(lambda suit: suit if suit is not None else cursor.next())
    )
    logger.debug("Canonical permutation for %r: %r", hand, permutation)
    return permutation


def canonical_permutation(cards: Sequence[Card], config: Optional[Config] = None) -> SuitPermutation:
    """
    Get the suit relabeling that takes ``cards`` to its canonical form.

    Args:
        cards: Private cards followed by shared cards
        config: Optional config controlling accepted hand shapes

    Returns:
        Bijective SuitPermutation
    """
    validate_hand(cards, config.hand if config is not None else None)
    return _find_permutation(sort_segments(cards))


def canonicalize(cards: Sequence[Card], config: Optional[Config] = None) -> list[Card]:
    """
    Canonicalize a hand under suit isomorphism.

    The result has the same length, segment split and ranks as ``cards`` and
    is less than or equal to every segment-sorted suit relabeling of it.

    Args:
        cards: Private cards followed by shared cards
        config: Optional config controlling accepted hand shapes

    Returns:
        Canonical hand as a new list

    Raises:
        ValidationError: If the hand shape is not accepted

    Example:
        [2♠ 2♣ | 3♠ 3♣ 4♠ 4♣ 5♠] → [2♣ 2♦ | 3♣ 3♦ 4♣ 4♦ 5♣]
    """
    validate_hand(cards, config.hand if config is not None else None)
    hand = sort_segments(cards)
    permutation = _find_permutation(hand)
    return sort_segments(permute_suits(hand, permutation))


def canonicalize_hand(
    hole_cards: Sequence[Card], board: Sequence[Card], config: Optional[Config] = None
) -> tuple[tuple[Card, ...], tuple[Card, ...]]:
    """
    Canonicalize a hand given as separate hole cards and board.

    Returns:
        Tuple of (canonical hole cards, canonical board)
    """
    validate_segments(hole_cards, board, config.hand if config is not None else None)
    canonical = canonicalize([*hole_cards, *board], config)
    return tuple(canonical[:PRIVATE_SIZE]), tuple(canonical[PRIVATE_SIZE:])


def canonicalize_exhaustive(cards: Sequence[Card], config: Optional[Config] = None) -> list[Card]:
    """
    Canonicalize by trying all 24 suit relabelings and keeping the smallest.

    Slower reference for :func:`canonicalize`; both always agree.
    """
    validate_hand(cards, config.hand if config is not None else None)
    return min(sort_segments(permute_suits(cards, perm)) for perm in all_suit_permutations())


def card_index(card: Card) -> int:
    """Index of ``card`` in the canonical deck (0 = 2♣, 51 = A♠)."""
    return (card.rank - 2) * NUM_SUITS + card.suit


def canonical_key(cards: Sequence[Card], config: Optional[Config] = None) -> tuple[int, ...]:
    """
    Hashable key of the canonical form, usable as a dict key.

    Isomorphic hands share a key; the private/shared split is implied by
    position.
    """
    return tuple(card_index(card) for card in canonicalize(cards, config))


def canonical_hand_id(cards: Sequence[Card], config: Optional[Config] = None) -> int:
    """
    Compute a unique integer ID for the canonical form of ``cards``.

    Hands of different lengths can share an ID; compare IDs only within a
    street.
    """
    result = 0
    for idx in canonical_key(cards, config):
        result = result * 52 + idx
    return result


def are_isomorphic(first: Sequence[Card], second: Sequence[Card]) -> bool:
    """Check whether two hands are suit relabelings of one another."""
    if len(first) != len(second):
        return False
    return canonicalize(first) == canonicalize(second)
