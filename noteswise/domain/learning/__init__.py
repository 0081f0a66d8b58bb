"""
Learning bounded context - Domain layer.

Aggregates:
- Flashcard: a question/answer card attached to a note. Flashcards carry no
  owner of their own; they belong to whoever owns the parent note.
"""
