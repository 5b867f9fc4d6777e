"""
Condition tree models.

A condition describes what a drawn hand must contain. It is either a single
card test (``CardCondition``) or an ``AndCondition`` / ``OrCondition`` grouping
other conditions. The ``kind`` field tags each node so trees can be dumped to
and validated from plain dictionaries.
"""
from typing import Annotated, Any, List, Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

Operator = Literal["=", ">="]


class CardCondition(BaseModel):
    """
    Hand contains ``operator`` ``quantity`` copies of ``card_name``.

    Attributes:
        card_name: Name of the card to look for.
        quantity: Number of copies.
        operator: "=" for exactly, ">=" for at least.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["card"] = "card"
    card_name: str = Field(min_length=1)
    quantity: int = Field(1, ge=0)
    operator: Operator = "="


class AndCondition(BaseModel):
    """All child conditions must hold."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["and"] = "and"
    conditions: List["Condition"] = Field(min_length=1)


class OrCondition(BaseModel):
    """At least one child condition must hold."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["or"] = "or"
    conditions: List["Condition"] = Field(min_length=1)


Condition = Annotated[
    Union[CardCondition, AndCondition, OrCondition],
    Field(discriminator="kind"),
]

AndCondition.model_rebuild()
OrCondition.model_rebuild()

_condition_adapter: TypeAdapter = TypeAdapter(Condition)


def condition_from_dict(data: Mapping[str, Any]) -> Union[CardCondition, AndCondition, OrCondition]:
    """
    Validate a condition tree from its dictionary form (as produced by ``model_dump``).

    Raises:
        pydantic.ValidationError: If the data is not a valid condition tree.
    """
    return _condition_adapter.validate_python(data)
