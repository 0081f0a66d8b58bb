from typing import Protocol


class SpeechServiceProtocol(Protocol):
    async def generate_audio(self, text: str, voice: str | None = None) -> str:
        """Synthesize speech for text and return it base64 encoded."""
        ...
