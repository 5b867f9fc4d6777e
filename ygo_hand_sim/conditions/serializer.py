import re
from typing import Iterable, List

from ygo_hand_sim.errors import SerializationError
from ygo_hand_sim.models.condition import AndCondition, CardCondition, Condition, OrCondition

# Names whose first word would be read back as a quantity need an explicit "1 ".
_LEADING_QUANTITY_RE = re.compile(r"^\d+(\+|\s)")


def _quantity_prefix(condition: CardCondition) -> str:
    if condition.operator == ">=":
        return f"{condition.quantity}+ "
    if condition.quantity != 1 or _LEADING_QUANTITY_RE.match(condition.card_name):
        return f"{condition.quantity} "
    return ""


def condition_to_string(condition: Condition) -> str:
    """
    Convert a condition tree back to condition-language text.

    Groups are always wrapped in parentheses, so the output parses back to an
    equivalent tree even when the parsed text had no grouping.

    Raises:
        SerializationError: If the tree contains a node of an unknown type.
    """
    if isinstance(condition, CardCondition):
        return f"{_quantity_prefix(condition)}{condition.card_name}"
    if isinstance(condition, AndCondition):
        return "(" + " AND ".join(condition_to_string(c) for c in condition.conditions) + ")"
    if isinstance(condition, OrCondition):
        return "(" + " OR ".join(condition_to_string(c) for c in condition.conditions) + ")"
    raise SerializationError(f"Unknown condition type: {type(condition).__name__}")


def conditions_to_strings(conditions: Iterable[Condition]) -> List[str]:
    """Serialize top-level conditions one per entry, keeping their order."""
    return [condition_to_string(c) for c in conditions]
