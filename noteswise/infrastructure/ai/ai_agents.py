from pydantic import BaseModel
from pydantic_ai import Agent

from noteswise.infrastructure.ai.ai_model import get_ai_model

MAX_INPUT_CHARS = 20000


class FlashcardSuggestion(BaseModel):
    question: str
    answer: str


def get_summary_agent() -> Agent[None, str]:
    return Agent(
        get_ai_model(),
        output_type=str,
        instructions="""
        Summarize the user's note so they can recall it at a glance.
        Keep the key ideas, definitions and conclusions. Use 2-4 sentences,
        followed by short bullet points if the note lists several facts.
        Write in the language of the note. Output only the summary text,
        with no heading or preamble.
        """,
    )


def get_flashcard_agent() -> Agent[None, list[FlashcardSuggestion]]:
    return Agent(
        get_ai_model(),
        output_type=list[FlashcardSuggestion],
        instructions="""
        Create study flashcards from the user's note.
        Each card tests exactly one fact or concept and must make sense on its own,
        without access to the note. Keep questions short and unambiguous, avoid
        yes/no questions, and give precise answers. Write in the language of the note.
        Return between three and eight cards as a list of question and answer fields.
        """,
    )
