from .card import Card, CardDetails, EMPTY_CARD_NAME
from .condition import (
    AndCondition,
    CardCondition,
    Condition,
    OrCondition,
    condition_from_dict,
)
from .deck import Deck, build_deck
