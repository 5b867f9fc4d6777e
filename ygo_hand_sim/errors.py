"""Exception types raised by the hand simulator input layer."""
from typing import Optional


class HandSimError(Exception):
    """Base class for all errors raised by ygo_hand_sim."""


class ParseError(HandSimError):
    """
    Raised when a condition string does not match the condition grammar.

    Attributes:
        reason: Short description of what went wrong.
        position: 0-based character offset in ``text`` where the problem was found.
        text: The condition string being parsed.
    """

    def __init__(self, reason: str, position: int, text: Optional[str] = None):
        self.reason = reason
        self.position = position
        self.text = text
        super().__init__(f"{reason} at position {position}")


class ValidationError(HandSimError):
    """
    Raised when a simulation input document cannot be loaded.

    Not to be confused with ``pydantic.ValidationError``; pydantic errors raised
    while building models are wrapped into this type at the loading boundary.
    """


class SerializationError(HandSimError):
    """Raised when a condition tree contains a node of an unknown type."""
