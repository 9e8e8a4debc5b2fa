from google import genai
from speech_relay.core.config import settings
from typing import Optional
import logging

logger = logging.getLogger(__name__)

class GenerationError(Exception):
    """Raised when the Gemini backend does not produce a completion."""

class GeminiService:
    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None, client=None):
        self.api_key = api_key or settings.GEMINI_API_KEY
        self.model = model or settings.GEMINI_MODEL
        self._client = client

    @property
    def client(self):
        # Built on first use; the server must start without a key
        if self._client is None:
            if not self.api_key:
                raise GenerationError("GEMINI_API_KEY is not configured")
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def generate(self, prompt: str) -> str:
        """
        Sends a single-turn prompt to Gemini and returns the text of the reply.
        """
        logger.info(f"Requesting Gemini completion: model={self.model}")
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
            )
            text = response.text
        except GenerationError:
            raise
        except Exception as e:
            logger.error(f"Gemini request failed: {str(e)}")
            raise GenerationError(f"Gemini request failed: {str(e)}") from e

        if not text:
            raise GenerationError("Gemini returned an empty response")

        logger.info(f"Received Gemini response: {text}")
        return text
