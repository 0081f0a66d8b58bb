from noteswise.application.learning.protocols.ai_flashcard_service import AIFlashcardSuggestion
from noteswise.infrastructure.ai.ai_agents import (
    MAX_INPUT_CHARS,
    get_flashcard_agent,
    get_summary_agent,
)


class AIService:
    async def generate_summary(self, content: str) -> str:
        agent = get_summary_agent()
        result = await agent.run(content[:MAX_INPUT_CHARS])
        return result.output.strip()

    async def generate_flashcard_suggestions(self, content: str) -> list[AIFlashcardSuggestion]:
        agent = get_flashcard_agent()
        result = await agent.run(content[:MAX_INPUT_CHARS])
        return [AIFlashcardSuggestion(question=s.question, answer=s.answer) for s in result.output]
