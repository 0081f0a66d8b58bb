from dataclasses import dataclass

from ..entity import EntityId
from ..value_object import ValueObject


@dataclass(frozen=True)
class OwnerId(ValueObject):
    """
    Identifier of the authenticated caller.

    Issued by the external identity provider (the JWT ``sub`` claim) and
    opaque to this service.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("OwnerId must be a non-empty string")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CategoryId(EntityId):
    """Strongly-typed category identifier."""


@dataclass(frozen=True)
class NoteId(EntityId):
    """Strongly-typed note identifier."""


@dataclass(frozen=True)
class FlashcardId(EntityId):
    """Strongly-typed flashcard identifier."""
