"""Mapper for Note ORM ↔ Domain conversion."""

from noteswise.domain.common.value_objects import CategoryId, NoteId, OwnerId
from noteswise.domain.notes.entities.note import Note
from noteswise.models import Note as NoteORM


class NoteMapper:
    """Mapper for Note ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: NoteORM) -> Note:
        """Convert ORM model to domain entity."""
        return Note.create_with_id(
            id=NoteId(orm_model.id),
            owner_id=OwnerId(orm_model.owner_id),
            title=orm_model.title,
            content=orm_model.content,
            summary=orm_model.summary,
            audio_url=orm_model.audio_url,
            category_id=CategoryId(orm_model.category_id) if orm_model.category_id else None,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(self, domain_entity: Note) -> NoteORM:
        """Convert a new domain entity to an ORM model for insertion."""
        return NoteORM(
            owner_id=domain_entity.owner_id.value,
            **self.to_update_values(domain_entity),
        )

    def to_update_values(self, domain_entity: Note) -> dict[str, object]:
        """Column values written on update. Owner and timestamps are never written."""
        return {
            "title": domain_entity.title,
            "content": domain_entity.content,
            "summary": domain_entity.summary,
            "audio_url": domain_entity.audio_url,
            "category_id": domain_entity.category_id.value if domain_entity.category_id else None,
        }
