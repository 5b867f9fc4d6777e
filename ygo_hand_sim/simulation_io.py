"""Simulation input loading and saving.

A simulation input document is YAML of the form::

    deck:
      Ash Blossom & Joyous Spring: {qty: 3, tags: [handtrap]}
      Pot of Prosperity: {qty: 2, tags: [], free: true}
    conditions:
      - 2+ Ash Blossom & Joyous Spring
      - (Pot of Prosperity OR Pot of Desires)

``SimulationIO`` turns such documents into a Deck plus parsed condition trees and
back. Every load failure is reported as a ``ValidationError`` with the message
``Failed to parse <source>: <cause>``.
"""
import asyncio
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

import yaml

from ygo_hand_sim.conditions.parser import parse_condition
from ygo_hand_sim.conditions.serializer import conditions_to_strings
from ygo_hand_sim.errors import HandSimError, ValidationError
from ygo_hand_sim.models.condition import Condition
from ygo_hand_sim.models.deck import Deck, build_deck
from ygo_hand_sim.settings import Settings
from ygo_hand_sim.ydk_io import convert_ydk_to_yaml

logger = logging.getLogger(__name__)

DeckBuilder = Callable[[Mapping[str, Any], int], Deck]
YdkConverter = Callable[[str], str]


@dataclass
class SimulationInput:
    """A deck together with the top-level conditions to check against its hands."""

    deck: Deck
    conditions: List[Condition] = field(default_factory=list)


def validate_simulation_document(data: Any) -> None:
    """
    Check the overall shape of a loaded simulation input document.

    Raises:
        ValidationError: If ``deck`` or ``conditions`` is missing or mistyped, or a
            deck entry is not a mapping with a numeric ``qty`` and a list of ``tags``.
    """
    if not isinstance(data, dict):
        raise ValidationError("Invalid YAML structure: not an object")

    deck = data.get("deck")
    if not isinstance(deck, dict):
        raise ValidationError("Invalid YAML structure: deck must be an object")

    if not isinstance(data.get("conditions"), list):
        raise ValidationError("Invalid YAML structure: conditions must be an array")

    for card_name, card_details in deck.items():
        if card_name is None:
            raise ValidationError("Invalid card name: deck keys must not be empty")
        if not isinstance(card_details, dict):
            raise ValidationError(f"Invalid card details for {card_name}")
        qty = card_details.get("qty")
        if isinstance(qty, bool) or not isinstance(qty, (int, float)):
            raise ValidationError(f"Invalid card structure for {card_name}: qty must be a number")
        if not isinstance(card_details.get("tags"), list):
            raise ValidationError(f"Invalid card structure for {card_name}: tags must be an array")

    for index, condition in enumerate(data["conditions"]):
        if not isinstance(condition, str):
            raise ValidationError(f"Invalid condition at index {index}: must be a string")


def _deck_entries(deck: Mapping[Any, Any]) -> Dict[str, Any]:
    """
    Key deck entries by card name as text.

    YAML reads unquoted names such as passcodes as numbers; they are names all the same.
    """
    entries: Dict[str, Any] = {}
    for card_name, card_details in deck.items():
        name = str(card_name)
        if name in entries:
            raise ValidationError(f"Duplicate card name {name}")
        entries[name] = card_details
    return entries


def deck_to_mapping(deck: Deck) -> Dict[str, Dict[str, Any]]:
    """
    Aggregate a deck into a card name to ``{qty, tags, free}`` mapping.

    Empty Card slots are skipped. The first occurrence of a name decides its tags
    and free flag; later copies only increase ``qty``.
    """
    deck_object: Dict[str, Dict[str, Any]] = {}
    for card in deck.deck_list:
        if card.is_empty():
            continue
        if card.name in deck_object:
            deck_object[card.name]["qty"] += 1
        else:
            deck_object[card.name] = {
                "qty": 1,
                "tags": list(card.tags),
                "free": card.free,
            }
    return deck_object


class SimulationIO:
    """
    Load and save simulation inputs.

    Create one instance at startup and pass it to whatever needs it. ``yaml`` and
    ``input`` hold the text and result of the last successful load; nothing in this
    class reads them back.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        deck_builder: Optional[DeckBuilder] = None,
        ydk_converter: Optional[YdkConverter] = None,
    ):
        self.settings = settings or Settings()
        self.deck_builder: DeckBuilder = deck_builder or build_deck
        self.ydk_converter: YdkConverter = ydk_converter or convert_ydk_to_yaml
        self.yaml: Optional[str] = None
        self.input: Optional[SimulationInput] = None

    def load_from_yaml_string(self, yaml_string: str, source: str = "YAML") -> SimulationInput:
        """
        Load a simulation input from YAML text.

        Args:
            yaml_string: YAML document with ``deck`` and ``conditions``.
            source: Name of the artifact used in error messages.

        Returns:
            SimulationInput with the built deck and parsed conditions.

        Raises:
            ValidationError: If the YAML, its structure, the deck or any condition is invalid.
        """
        min_deck_size = self.settings.min_deck_size
        try:
            data = yaml.safe_load(yaml_string)
            validate_simulation_document(data)
            deck = self.deck_builder(_deck_entries(data["deck"]), min_deck_size)
            conditions = [parse_condition(text) for text in data["conditions"]]
        except (HandSimError, ValueError, yaml.YAMLError) as e:
            logger.error(f"Failed to parse {source}: {e}")
            raise ValidationError(f"Failed to parse {source}: {e}") from e

        simulation_input = SimulationInput(deck=deck, conditions=conditions)
        self.yaml = yaml_string
        self.input = simulation_input
        logger.info(
            f"Loaded {source} with {deck.non_empty_count} cards and {len(conditions)} conditions"
        )
        return simulation_input

    async def load_from_yaml_file(self, path: Union[str, Path]) -> SimulationInput:
        """Read a YAML file and load it; read errors propagate unchanged."""
        yaml_content = await self.read_file_content(path)
        return self.load_from_yaml_string(yaml_content, source=Path(path).name)

    async def convert_ydk_file(self, path: Union[str, Path]) -> str:
        """Read a YDK file and convert it to simulation input YAML."""
        ydk_content = await self.read_file_content(path)
        return self.ydk_converter(ydk_content)

    @staticmethod
    async def read_file_content(path: Union[str, Path]) -> str:
        return await asyncio.to_thread(Path(path).read_text, encoding="utf-8")

    def _dump(self, data: Dict[str, Any]) -> str:
        return yaml.safe_dump(
            data,
            default_flow_style=False,
            sort_keys=self.settings.yaml_sort_keys,
            allow_unicode=True,
        )

    def serialize_deck_to_yaml(self, deck: Deck) -> str:
        return self._dump({"deck": deck_to_mapping(deck)})

    def serialize_conditions_to_yaml(self, conditions: Sequence[Condition]) -> str:
        return self._dump({"conditions": conditions_to_strings(conditions)})

    def serialize_simulation_input_to_yaml(self, simulation_input: SimulationInput) -> str:
        """
        Serialize a simulation input as a single YAML document.

        The document holds ``deck`` followed by ``conditions`` and loads back with
        ``load_from_yaml_string``.
        """
        data = {
            "deck": deck_to_mapping(simulation_input.deck),
            "conditions": conditions_to_strings(simulation_input.conditions),
        }
        logger.info(f"Serialized simulation input with {len(data['deck'])} unique cards")
        return self._dump(data)
