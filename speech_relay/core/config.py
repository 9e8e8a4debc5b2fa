from pathlib import Path
from typing import List, Optional
from pydantic_settings import BaseSettings

PACKAGE_DIR = Path(__file__).resolve().parent.parent

class Settings(BaseSettings):
    GEMINI_API_KEY: Optional[str] = None
    GEMINI_MODEL: str = "gemini-2.5-flash"
    DEFAULT_VOICE: str = "id-ID-ArdiNeural"
    FALLBACK_VOICES: List[str] = ["id-ID-ArdiNeural", "en-US-AnaNeural"]
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    # Shipped inside the package, independent of the working directory
    STATIC_DIR: str = str(PACKAGE_DIR / "public")
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"

    def voice_candidates(self) -> List[str]:
        # Default first, then the fallbacks verbatim (duplicates are tried again)
        return [self.DEFAULT_VOICE, *self.FALLBACK_VOICES]

settings = Settings()
