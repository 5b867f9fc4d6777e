"""Yu-Gi-Oh! hand simulator input library public API.

This package provides the deck model, the condition language parser and
serializer, and YAML / YDK loading of simulation inputs.
"""

from .conditions import condition_to_string, conditions_to_strings, parse_condition
from .errors import HandSimError, ParseError, SerializationError, ValidationError
from .models import (
    AndCondition,
    Card,
    CardCondition,
    CardDetails,
    Condition,
    Deck,
    EMPTY_CARD_NAME,
    OrCondition,
    build_deck,
    condition_from_dict,
)
from .settings import Settings
from .simulation_io import (
    SimulationIO,
    SimulationInput,
    deck_to_mapping,
    validate_simulation_document,
)
from .ydk_io import convert_ydk_to_yaml, parse_ydk_main_deck

__all__ = [
    "parse_condition",
    "condition_to_string",
    "conditions_to_strings",
    "HandSimError",
    "ParseError",
    "SerializationError",
    "ValidationError",
    "AndCondition",
    "Card",
    "CardCondition",
    "CardDetails",
    "Condition",
    "Deck",
    "EMPTY_CARD_NAME",
    "OrCondition",
    "build_deck",
    "condition_from_dict",
    "Settings",
    "SimulationIO",
    "SimulationInput",
    "deck_to_mapping",
    "validate_simulation_document",
    "convert_ydk_to_yaml",
    "parse_ydk_main_deck",
]
