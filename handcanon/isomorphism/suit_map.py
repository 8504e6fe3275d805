"""
Fixed-size suit maps and suit permutations.

SuitMap is a total map from the four suits to arbitrary values, stored as a
4-slot list indexed by suit. The key space is closed, so lookups and
updates cannot fail.

SuitPermutation is a bijective SuitMap[Suit] used to relabel every card of a
hand. Building one from a non-bijective target list raises immediately.
"""

from __future__ import annotations

from itertools import permutations
from typing import Callable, Generic, Iterable, Iterator, Sequence, TypeVar

from handcanon.game.cards import Card, Suit

T = TypeVar("T")
U = TypeVar("U")

NUM_SUITS = len(Suit)


class SuitMap(Generic[T]):
    """
    Map from suit to some value.

    Slot ``i`` holds the value for ``Suit(i)``, so iteration always follows
    the suit enumeration order: Clubs, Diamonds, Hearts, Spades.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[T]):
        values = list(values)
        if len(values) != NUM_SUITS:
            raise ValueError(f"SuitMap needs exactly {NUM_SUITS} values, got {len(values)}")
        self._values = values

    @classmethod
    def filled(cls, value: T) -> "SuitMap[T]":
        """Map every suit to ``value``."""
        return cls([value] * NUM_SUITS)

    @classmethod
    def from_values(cls, values: Sequence[T]) -> "SuitMap[T]":
        """Interpret ``values`` as Clubs -> x[0], Diamonds -> x[1], Hearts -> x[2], Spades -> x[3]."""
        return cls(values)

    def get(self, suit: Suit) -> T:
        return self._values[suit]

    def set(self, suit: Suit, value: T) -> None:
        self._values[suit] = value

    def __getitem__(self, suit: Suit) -> T:
        return self._values[suit]

    def __setitem__(self, suit: Suit, value: T) -> None:
        self._values[suit] = value

    def items(self) -> Iterator[tuple[Suit, T]]:
        """Yield the four ``(suit, value)`` pairs in suit order."""
        for idx, value in enumerate(self._values):
            yield Suit(idx), value

    def __iter__(self) -> Iterator[tuple[Suit, T]]:
        return self.items()

    def values(self) -> list[T]:
        return list(self._values)

    def map(self, f: Callable[[T], U]) -> "SuitMap[U]":
        """Return a new map with ``f`` applied to every value."""
        return SuitMap(f(value) for value in self._values)

    def suits_where(self, predicate: Callable[[T], bool] = bool) -> list[Suit]:
        """Suits whose value satisfies ``predicate``, in suit order."""
        return [suit for suit, value in self.items() if predicate(value)]

    def copy(self) -> "SuitMap[T]":
        return SuitMap(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SuitMap):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        inner = ", ".join(f"{suit.name.lower()}={value!r}" for suit, value in self.items())
        return f"SuitMap({inner})"


class SuitPermutation:
    """
    Bijective relabeling of the four suits.

    ``targets[i]`` is the suit that ``Suit(i)`` is mapped to, e.g.
    ``[HEARTS, DIAMONDS, SPADES, CLUBS]`` means

        Clubs -> Hearts
        Diamonds -> Diamonds
        Hearts -> Spades
        Spades -> Clubs
    """

    __slots__ = ("_targets",)

    def __init__(self, targets: Iterable[Suit]):
        targets = tuple(Suit(target) for target in targets)
        if len(targets) != NUM_SUITS or set(targets) != set(Suit):
            raise ValueError(f"target suits must contain all four suits exactly once: {targets}")
        self._targets = targets

    @classmethod
    def identity(cls) -> "SuitPermutation":
        return cls(tuple(Suit))

    @classmethod
    def from_suit_map(cls, suit_map: SuitMap[Suit]) -> "SuitPermutation":
        """Build a permutation from a total SuitMap[Suit]; it must be a bijection."""
        return cls(suit_map.values())

    @property
    def targets(self) -> tuple[Suit, ...]:
        return self._targets

    def map(self, suit: Suit) -> Suit:
        return self._targets[suit]

    def __call__(self, suit: Suit) -> Suit:
        return self._targets[suit]

    def inverse(self) -> "SuitPermutation":
        inverse = [Suit.CLUBS] * NUM_SUITS
        for source, target in enumerate(self._targets):
            inverse[target] = Suit(source)
        return SuitPermutation(inverse)

    def compose(self, other: "SuitPermutation") -> "SuitPermutation":
        """Permutation equivalent to applying ``self`` first, then ``other``."""
        return SuitPermutation(other.map(target) for target in self._targets)

    def is_identity(self) -> bool:
        return self._targets == tuple(Suit)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SuitPermutation):
            return NotImplemented
        return self._targets == other._targets

    def __hash__(self) -> int:
        return hash(self._targets)

    def __repr__(self) -> str:
        pairs = ", ".join(
            f"{Suit(source).shorthand}->{target.shorthand}"
            for source, target in enumerate(self._targets)
        )
        return f"SuitPermutation({pairs})"


def permute_suits(cards: Iterable[Card], permutation: SuitPermutation) -> list[Card]:
    """
    Relabel every card's suit with ``permutation``.

    Ranks, length and order are unchanged; no re-sorting happens here.
    """
    return [card.with_suit(permutation.map(card.suit)) for card in cards]


def all_suit_permutations() -> list[SuitPermutation]:
    """All 24 suit permutations, identity first."""
    return [SuitPermutation(perm) for perm in permutations(Suit)]
