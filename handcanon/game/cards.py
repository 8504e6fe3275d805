"""
Card model for suit-isomorphism canonicalization.

Defines ranks, suits and cards as immutable ordered values. Cards compare
by rank first and suit second, with the fixed suit order
Clubs < Diamonds < Hearts < Spades. That suit order is load-bearing: it is
both the tie-break between equal ranks and the order in which canonical
suit labels are handed out.

Cards can be converted to and from the treys integer encoding so that a
canonical hand can be passed straight to a treys evaluator.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, IntEnum

from treys import Card as TreysCard

# Treys uses power-of-2 suit encoding: s=1, h=2, d=4, c=8
TREYS_SUIT_INT_TO_CHAR = {1: "s", 2: "h", 4: "d", 8: "c"}


class Rank(IntEnum):
    """Card face value, Two lowest and Ace highest."""

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
    def shorthand(self) -> str:
        return RANK_CHARS[self.value - 2]

    @classmethod
    def from_char(cls, char: str) -> "Rank":
        """Parse a rank character ('2'-'9', 'T', 'J', 'Q', 'K', 'A'; '10' also accepted)."""
        if char == "10":
            return cls.TEN
        idx = RANK_CHARS.find(char.upper())
        if len(char) != 1 or idx < 0:
            raise ValueError(f"Unknown rank: {char!r}")
        return cls(idx + 2)

    def of(self, suit: "Suit") -> "Card":
        """Build a card of this rank, e.g. ``Rank.ACE.of(Suit.SPADES)``."""
        return Card(self, suit)


class Suit(IntEnum):
    """Card suit in canonical enumeration order."""

    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3

    @property
    def shorthand(self) -> str:
        return SUIT_CHARS[self.value]

    @property
    def symbol(self) -> str:
        return SUIT_SYMBOLS[self.value]

    @classmethod
    def from_char(cls, char: str) -> "Suit":
        """Parse a suit character ('c', 'd', 'h', 's' or the matching symbol)."""
        lowered = char.lower()
        if lowered in SUIT_CHARS and len(lowered) == 1:
            return cls(SUIT_CHARS.index(lowered))
        if char in SUIT_SYMBOLS and len(char) == 1:
            return cls(SUIT_SYMBOLS.index(char))
        raise ValueError(f"Unknown suit: {char!r}")


RANK_CHARS = "23456789TJQKA"
SUIT_CHARS = "cdhs"
SUIT_SYMBOLS = "♣♦♥♠"


@dataclass(frozen=True, order=True)
class Card:
    """
    Immutable playing card.

    Field order matters: the generated comparison methods compare ``rank``
    first and ``suit`` second, which is the card order used everywhere in
    canonicalization.

    Attributes:
        rank: Face value
        suit: Suit
    """

    rank: Rank
    suit: Suit

    @classmethod
    def new(cls, card_str: str) -> "Card":
        """
        Create a card from its string form (e.g. 'As', 'Kh', '2d', '10c').

        Args:
            card_str: Rank characters followed by one suit character

        Returns:
            Card instance
        """
        if len(card_str) < 2:
            raise ValueError(f"Invalid card string: {card_str!r}")
        return cls(Rank.from_char(card_str[:-1]), Suit.from_char(card_str[-1]))

    @classmethod
    def from_treys(cls, card_int: int) -> "Card":
        """Create a card from a treys integer."""
        # Treys: get_rank_int returns 0=2, 1=3, ..., 12=A
        rank = Rank(TreysCard.get_rank_int(card_int) + 2)
        suit = Suit.from_char(TREYS_SUIT_INT_TO_CHAR[TreysCard.get_suit_int(card_int)])
        return cls(rank, suit)

    def to_treys(self) -> int:
        """Convert to the treys integer encoding."""
        return TreysCard.new(f"{self.rank.shorthand}{self.suit.shorthand}")

    def with_suit(self, suit: Suit) -> "Card":
        """Return a copy of this card with its suit replaced."""
        return replace(self, suit=suit)

    def __str__(self) -> str:
        """Pretty representation (e.g., '[ A ♠ ]')."""
        return TreysCard.int_to_pretty_str(self.to_treys()).strip()

    def __repr__(self) -> str:
        """Compact representation (e.g., 'As')."""
        return f"{self.rank.shorthand}{self.suit.shorthand}"


class Street(Enum):
    """Betting rounds, keyed by the number of shared cards visible."""

    PREFLOP = 0
    FLOP = 3
    TURN = 4
    RIVER = 5

    def __str__(self) -> str:
        return self.name.lower()

    @property
    def board_size(self) -> int:
        return self.value

    @classmethod
    def from_board_size(cls, size: int) -> "Street":
        """Get the street with ``size`` shared cards."""
        for street in cls:
            if street.value == size:
                return street
        raise ValueError(f"No street has {size} board cards")


# Sorted by rank, then suit
CANONICAL_DECK: tuple[Card, ...] = tuple(Card(rank, suit) for rank in Rank for suit in Suit)


def parse_cards(text: str) -> list[Card]:
    """
    Parse whitespace-separated cards, e.g. ``"As Kd 2c"``.

    Args:
        text: Card strings separated by whitespace

    Returns:
        List of cards in the order given
    """
    return [Card.new(token) for token in text.split()]
