import base64
import logging
from typing import List, Optional, Sequence, Tuple

import edge_tts

from speech_relay.core.config import settings

logger = logging.getLogger(__name__)

# -------------------------------------------------------------------
# Fixed settings
AUDIO_DATA_URL_PREFIX = "data:audio/mpeg;base64,"
# edge-tts always requests audio-24khz-48kbitrate-mono-mp3
# -------------------------------------------------------------------

class SynthesisError(Exception):
    """A single voice failed to produce audio."""

class AudioGenerationError(Exception):
    """Every candidate voice failed."""

def to_data_url(audio: bytes) -> str:
    return AUDIO_DATA_URL_PREFIX + base64.b64encode(audio).decode("ascii")

async def synthesize(text: str, voice: str) -> str:
    """
    Synthesizes ``text`` with one Edge voice and returns it as an MP3 data URL.

    The text goes in unescaped: Communicate escapes it for the SSML document.
    """
    communicate = edge_tts.Communicate(text, voice)

    audio = bytearray()
    async for chunk in communicate.stream():
        if chunk["type"] == "audio":
            audio.extend(chunk["data"])

    if not audio:
        raise SynthesisError(f"No audio received for voice {voice}")

    logger.info(f"Audio generated with voice {voice}: {len(audio)} bytes")
    return to_data_url(bytes(audio))

async def synthesize_with_fallback(text: str, voices: Sequence[str]) -> Tuple[str, str]:
    """
    Tries each voice in order and returns ``(voice, audio_url)`` for the first
    one that succeeds. Failures are logged and the next voice is tried.
    """
    for voice in voices:
        try:
            audio_url = await synthesize(text, voice)
            return voice, audio_url
        except Exception as e:
            logger.warning(f"Error generating audio: voice={voice}, error={str(e)}")

    raise AudioGenerationError("audio generation failed")

class VoiceService:
    def __init__(self, voices: Optional[List[str]] = None):
        self.voices = list(voices) if voices is not None else settings.voice_candidates()

    async def generate_audio(self, text: str) -> str:
        voice, audio_url = await synthesize_with_fallback(text, self.voices)
        logger.info(f"Using audio from voice {voice}")
        return audio_url
