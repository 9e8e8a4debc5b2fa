from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from speech_relay.core.config import settings
from speech_relay.schemas.speech import SpeechRequest, SpeechResponse, HealthResponse, ErrorResponse
from speech_relay.services.speech_service import SpeechService, get_speech_service
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

TEXT_REQUIRED = "Text is required"
PROCESSING_FAILED = "Failed to process speech or get a response from Gemini"

def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())

@router.post(
    "/process-speech",
    response_model=SpeechResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def process_speech(request: SpeechRequest, service: SpeechService = Depends(get_speech_service)):
    """
    Sends the text to Gemini and returns the reply with its synthesized audio
    """
    if not request.text:
        return error_response(400, TEXT_REQUIRED)

    logger.info(f"Received speech processing request: {request.text}")

    try:
        return await service.process(request.text)
    except Exception as e:
        logger.error(f"Error processing speech or generating Gemini response: {str(e)}")
        return error_response(500, PROCESSING_FAILED)

@router.get("/health", response_model=HealthResponse)
async def health():
    logger.info("Health check requested")
    return HealthResponse(
        status="OK",
        defaultVoice=settings.DEFAULT_VOICE,
        fallbackVoices=settings.FALLBACK_VOICES,
    )
