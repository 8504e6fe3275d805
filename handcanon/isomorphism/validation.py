"""
Input validation for hands entering canonicalization.

A well-formed hand is exactly 2 private cards followed by the shared cards of
one street (0, 3, 4 or 5), with no card repeated. Anything else is a caller
error and is rejected here, before the engine runs.
"""

from typing import Optional, Sequence

from handcanon.game.cards import Card, Street
from handcanon.shared.config import HandShapeConfig


class ValidationError(ValueError):
    """Raised when validation fails."""

    pass


def validate_hand(cards: Sequence[Card], shape: Optional[HandShapeConfig] = None) -> Street:
    """
    Validate a hand's shape and contents.

    Args:
        cards: Private cards followed by shared cards
        shape: Allowed hand shape (defaults to HandShapeConfig())

    Returns:
        The street whose board size matches the shared segment

    Raises:
        ValidationError: If the hand is malformed
    """
    if shape is None:
        shape = HandShapeConfig()

    for card in cards:
        if not isinstance(card, Card):
            raise ValidationError(f"Expected Card, got {type(card).__name__}: {card!r}")

    if len(cards) < shape.private_size:
        raise ValidationError(
            f"Expected at least {shape.private_size} private cards, got {len(cards)}"
        )

    shared_size = len(cards) - shape.private_size
    try:
        street = Street.from_board_size(shared_size)
    except ValueError as exc:
        raise ValidationError(f"{shared_size} shared cards do not match any street") from exc

    if street.board_size not in shape.shared_sizes:
        raise ValidationError(
            f"{street} hands are not accepted; expected {list(shape.shared_sizes)} shared cards"
        )

    seen = set()
    for card in cards:
        if card in seen:
            raise ValidationError(f"Duplicate card: {card!r} appears twice")
        seen.add(card)

    return street


def validate_segments(
    hole_cards: Sequence[Card], board: Sequence[Card], shape: Optional[HandShapeConfig] = None
) -> Street:
    """
    Validate a hand given as separate private and shared segments.

    Raises:
        ValidationError: If either segment is malformed
    """
    if shape is None:
        shape = HandShapeConfig()

    if len(hole_cards) != shape.private_size:
        raise ValidationError(
            f"Expected {shape.private_size} hole cards, got {len(hole_cards)}"
        )

    return validate_hand([*hole_cards, *board], shape)
