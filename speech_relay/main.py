from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles
from speech_relay.api import speech
from speech_relay.core.config import settings
import logging
import os

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Speech Relay")

app.include_router(speech.router, tags=["Speech"])

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Malformed bodies get the same answer as a missing text
    logger.info(f"Rejected request to {request.url.path}: {exc.errors()}")
    return speech.error_response(400, speech.TEXT_REQUIRED)

# Must stay after the routers; without the directory "/" is a plain 404
if os.path.isdir(settings.STATIC_DIR):
    app.mount("/", StaticFiles(directory=settings.STATIC_DIR, html=True), name="static")
else:
    logger.warning(f"Static directory {settings.STATIC_DIR} not found, static files disabled")

def run():
    import uvicorn
    logger.info(f"Server running on port {settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)

if __name__ == "__main__":
    run()
