from typing import Protocol


class AISummaryServiceProtocol(Protocol):
    async def generate_summary(self, content: str) -> str: ...
