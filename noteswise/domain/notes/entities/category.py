"""Category entity for grouping notes."""

from dataclasses import dataclass
from datetime import datetime

from noteswise.domain.common.entity import Entity
from noteswise.domain.common.exceptions import ValidationError
from noteswise.domain.common.value_objects import CategoryId, OwnerId

MAX_NAME_LENGTH = 100
MAX_COLOR_LENGTH = 32


@dataclass(eq=False)
class Category(Entity[CategoryId]):
    """
    Category owned by a single user.

    Business Rules:
    - Name cannot be empty
    - Owner never changes after creation (there is no mutator for it)
    """

    id: CategoryId
    owner_id: OwnerId
    name: str
    color: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        _validate_name(self.name)
        _validate_color(self.color)

    def rename(self, name: str) -> None:
        """
        Change the category name.

        Raises:
            ValidationError: If name is empty or too long
        """
        _validate_name(name)
        self.name = name.strip()

    def change_color(self, color: str | None) -> None:
        """Change or clear the display color."""
        _validate_color(color)
        self.color = color

    @classmethod
    def create(cls, owner_id: OwnerId, name: str, color: str | None = None) -> "Category":
        """Create a new category (ID will be 0 until persisted)."""
        _validate_name(name)
        return cls(
            id=CategoryId.generate(),
            owner_id=owner_id,
            name=name.strip(),
            color=color,
        )

    @classmethod
    def create_with_id(
        cls,
        id: CategoryId,
        owner_id: OwnerId,
        name: str,
        color: str | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Category":
        """Reconstitute a category from persistence."""
        return cls(
            id=id,
            owner_id=owner_id,
            name=name,
            color=color,
            created_at=created_at,
            updated_at=updated_at,
        )


def _validate_name(name: str) -> None:
    if not name or not name.strip():
        raise ValidationError("Category name cannot be empty", field="name")
    if len(name.strip()) > MAX_NAME_LENGTH:
        raise ValidationError(
            f"Category name cannot exceed {MAX_NAME_LENGTH} characters", field="name"
        )


def _validate_color(color: str | None) -> None:
    if color is not None and len(color) > MAX_COLOR_LENGTH:
        raise ValidationError(
            f"Color cannot exceed {MAX_COLOR_LENGTH} characters", field="color", value=color
        )
