"""Speech synthesis through the OpenAI audio API."""

import base64

import structlog
from openai import AsyncOpenAI

from noteswise.config import Settings
from noteswise.exceptions import ServiceError, ValidationError

logger = structlog.get_logger(__name__)

MAX_SPEECH_INPUT_CHARS = 4096


class OpenAISpeechService:
    """Synthesizes MP3 narration and returns it base64 encoded."""

    def __init__(self, settings: Settings) -> None:
        self.api_key = settings.OPENAI_API_KEY
        self.model = settings.TTS_MODEL
        self.default_voice = settings.TTS_DEFAULT_VOICE
        self._client: AsyncOpenAI | None = None

    @property
    def client(self) -> AsyncOpenAI:
        if self.api_key is None:
            raise ServiceError("Speech synthesis requires OPENAI_API_KEY to be configured")
        if self._client is None:
            self._client = AsyncOpenAI(api_key=self.api_key)
        return self._client

    async def generate_audio(self, text: str, voice: str | None = None) -> str:
        if not text.strip():
            raise ValidationError("Nothing to narrate")

        response = await self.client.audio.speech.create(
            model=self.model,
            voice=voice or self.default_voice,  # type: ignore[arg-type]
            input=text[:MAX_SPEECH_INPUT_CHARS],
            response_format="mp3",
        )
        audio = response.read()
        logger.debug("synthesized_speech", model=self.model, chars=len(text), bytes=len(audio))
        return base64.b64encode(audio).decode("ascii")
