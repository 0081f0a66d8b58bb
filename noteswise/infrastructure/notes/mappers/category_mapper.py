"""Mapper for Category ORM ↔ Domain conversion."""

from noteswise.domain.common.value_objects import CategoryId, OwnerId
from noteswise.domain.notes.entities.category import Category
from noteswise.models import Category as CategoryORM


class CategoryMapper:
    """Mapper for Category ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: CategoryORM) -> Category:
        """Convert ORM model to domain entity."""
        return Category.create_with_id(
            id=CategoryId(orm_model.id),
            owner_id=OwnerId(orm_model.owner_id),
            name=orm_model.name,
            color=orm_model.color,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(self, domain_entity: Category) -> CategoryORM:
        """Convert a new domain entity to an ORM model for insertion."""
        return CategoryORM(
            owner_id=domain_entity.owner_id.value,
            name=domain_entity.name,
            color=domain_entity.color,
        )

    def to_update_values(self, domain_entity: Category) -> dict[str, object]:
        """Column values written on update. Owner and timestamps are never written."""
        return {"name": domain_entity.name, "color": domain_entity.color}
