from models import EmailRequest

from .extract import extract_reply
from .llm import GeminiClient
from .prompt import build_prompt


class EmailGeneratorService:
    """prompt -> Gemini -> reply text. Holds no per-request state."""

    def __init__(self, client: GeminiClient):
        self.client = client

    async def generate_reply(self, request: EmailRequest) -> str:
        prompt = build_prompt(request.email_content, request.tone)
        # GenerationError from the client is left to the caller
        raw = await self.client.send(prompt)
        return extract_reply(raw)
