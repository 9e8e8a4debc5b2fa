from pydantic import BaseModel
from typing import List, Optional

class SpeechRequest(BaseModel):
    text: Optional[str] = None

class SpeechResponse(BaseModel):
    text: str
    audioUrl: str
    autoplay: bool = True

class HealthResponse(BaseModel):
    status: str = "OK"
    defaultVoice: str
    fallbackVoices: List[str]

class ErrorResponse(BaseModel):
    error: str
