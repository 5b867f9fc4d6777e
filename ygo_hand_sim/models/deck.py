import logging
from collections import Counter
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Tuple, Union

from pydantic import ValidationError as PydanticValidationError

from ygo_hand_sim.models.card import Card, CardDetails, empty_card

logger = logging.getLogger(__name__)

DEFAULT_MIN_DECK_SIZE = 40


class Deck:
    """
    An ordered list of card slots, possibly padded with ``Empty Card`` entries.

    A deck is not modified after it is built; ``deck_list`` is a tuple.
    """

    def __init__(self, cards: Iterable[Card] = ()):
        self._deck_list: Tuple[Card, ...] = tuple(cards)

    @property
    def deck_list(self) -> Tuple[Card, ...]:
        return self._deck_list

    def __len__(self) -> int:
        return len(self._deck_list)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._deck_list)

    def __repr__(self) -> str:
        return f"<Deck(unique_cards={len(self.card_counts())}, total_cards={len(self)})>"

    @property
    def non_empty_count(self) -> int:
        """Number of slots holding a real card."""
        return sum(1 for card in self._deck_list if not card.is_empty())

    def card_counts(self) -> Dict[str, int]:
        """
        Count copies per card name in deck order, ignoring padding slots.

        Returns:
            Mapping of card name to number of copies.
        """
        return dict(Counter(card.name for card in self._deck_list if not card.is_empty()))

    def get_quantity(self, card_name: str) -> int:
        return self.card_counts().get(card_name, 0)


def build_deck(
    cards: Mapping[str, Union[CardDetails, Mapping[str, Any]]],
    min_size: int = DEFAULT_MIN_DECK_SIZE,
) -> Deck:
    """
    Build a Deck from a card name to details mapping.

    Each card is expanded into ``qty`` copies in mapping order, then the deck is
    padded with ``Empty Card`` slots up to ``min_size``.

    Args:
        cards: Mapping of card name to CardDetails or a plain dict.
        min_size: Minimum number of slots in the resulting deck.

    Returns:
        Deck instance.

    Raises:
        ValueError: If a card name is empty or its details are invalid.
    """
    deck_list: List[Card] = []
    for name, raw_details in cards.items():
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"Invalid card name: {name!r}")
        try:
            details = (
                raw_details
                if isinstance(raw_details, CardDetails)
                else CardDetails.model_validate(raw_details)
            )
        except PydanticValidationError as e:
            raise ValueError(f"Invalid card details for {name}: {e}") from e
        card = Card(name=name, details=details)
        deck_list.extend(card for _ in range(details.qty))

    padding = max(0, min_size - len(deck_list))
    if padding:
        deck_list.extend(empty_card() for _ in range(padding))
    logger.debug(
        f"Built deck with {len(deck_list) - padding} cards and {padding} empty slots"
    )
    return Deck(deck_list)
