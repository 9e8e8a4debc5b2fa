from speech_relay.schemas.speech import SpeechResponse
from speech_relay.services.gemini_service import GeminiService
from speech_relay.services.voice_service import VoiceService
from typing import Optional
import logging

logger = logging.getLogger(__name__)

class SpeechService:
    def __init__(self, generator: Optional[GeminiService] = None, voice_service: Optional[VoiceService] = None):
        self.generator = generator or GeminiService()
        self.voice_service = voice_service or VoiceService()

    async def process(self, text: str) -> SpeechResponse:
        """
        Sends the text to Gemini once and synthesizes the reply, not the input.
        """
        reply = await self.generator.generate(text)
        audio_url = await self.voice_service.generate_audio(reply)
        return SpeechResponse(text=reply, audioUrl=audio_url, autoplay=True)

_speech_service: Optional[SpeechService] = None

def get_speech_service() -> SpeechService:
    global _speech_service
    if _speech_service is None:
        _speech_service = SpeechService()
    return _speech_service
