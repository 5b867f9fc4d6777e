from dataclasses import dataclass
from typing import Any, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

EMPTY_CARD_NAME = "Empty Card"


class CardDetails(BaseModel):
    """
    Per-card entry of a deck description.

    Attributes:
        qty: Number of copies in the deck.
        tags: Free-form labels attached to the card.
        free: Whether the card can be played without using the normal summon.

    Unknown keys are kept as extra metadata. Details are shared by every copy of a
    card in a deck and cannot be changed once built.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    qty: int = Field(1, ge=0)
    tags: Tuple[str, ...] = ()
    free: bool = False

    @field_validator("qty", mode="before")
    @classmethod
    def reject_bool_qty(cls, v: Any) -> Any:
        if isinstance(v, bool):
            raise ValueError("qty must be a number, not a boolean")
        return v

    @field_validator("tags", mode="before")
    @classmethod
    def default_tags(cls, v: Any) -> Any:
        if v is None:
            return ()
        return v


@dataclass(frozen=True)
class Card:
    """A single card slot in a deck."""

    name: str
    details: CardDetails

    @property
    def tags(self) -> List[str]:
        return list(self.details.tags)

    @property
    def free(self) -> bool:
        return self.details.free

    def is_empty(self) -> bool:
        """Check if this slot is padding rather than a real card."""
        return self.name == EMPTY_CARD_NAME


def empty_card() -> Card:
    return Card(name=EMPTY_CARD_NAME, details=CardDetails(qty=0))
