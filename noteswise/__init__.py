"""NotesWise API: owner-scoped notes, categories and flashcards with AI helpers."""
