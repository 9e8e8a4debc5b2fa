"""
Environment variables configuration template.
Run this module to write a .env file, then replace the values with your actual credentials.
"""
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

ENV_TEMPLATE = """
# Gemini Configuration
GEMINI_API_KEY=your_gemini_api_key
GEMINI_MODEL=gemini-2.5-flash

# Edge TTS Voices
DEFAULT_VOICE=id-ID-ArdiNeural
FALLBACK_VOICES=["id-ID-ArdiNeural", "en-US-AnaNeural"]

# Server Configuration
HOST=0.0.0.0
PORT=3000
LOG_LEVEL=INFO
"""

def create_env_file(path=".env", overwrite: bool = False) -> bool:
    """Create a new .env file with template values.

    An existing file is left untouched unless ``overwrite`` is set.
    Returns True when the file was written.
    """
    env_path = Path(path)
    if env_path.exists() and not overwrite:
        logger.warning(f".env file already exists at {env_path}, not overwriting")
        return False

    env_path.write_text(ENV_TEMPLATE.strip() + "\n", encoding="utf-8")
    logger.info(f".env file created successfully at {env_path}")
    return True

if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    create_env_file()
