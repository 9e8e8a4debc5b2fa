from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from speech_relay.main import app
from speech_relay.services import voice_service
from speech_relay.services.gemini_service import GeminiService
from speech_relay.services.speech_service import SpeechService, get_speech_service
from speech_relay.services.voice_service import VoiceService

VOICES = ["id-ID-ArdiNeural", "id-ID-GadisNeural", "en-US-AnaNeural"]


@pytest.fixture
def anyio_backend():
    return "asyncio"


class FakeStream:
    def __init__(self, outcome):
        self.outcome = outcome

    async def stream(self):
        if isinstance(self.outcome, Exception):
            raise self.outcome
        for data in self.outcome:
            yield {"type": "WordBoundary", "offset": 0}
            yield {"type": "audio", "data": data}


class FakeTTS:
    """Stands in for edge_tts.Communicate; outcomes are keyed by voice."""

    def __init__(self):
        self.calls = []
        self.outcomes = {}

    def communicate(self, text, voice, **kwargs):
        self.calls.append((text, voice))
        return FakeStream(self.outcomes.get(voice, [b"ID3", b"\x00audio"]))

    @property
    def voices(self):
        return [voice for _, voice in self.calls]


class FakeModels:
    def __init__(self):
        self.calls = []
        self.reply = "Halo! Ada yang bisa saya bantu?"
        self.error = None

    async def generate_content(self, model, contents):
        self.calls.append((model, contents))
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.reply)


@pytest.fixture
def tts(monkeypatch):
    fake = FakeTTS()
    monkeypatch.setattr(voice_service.edge_tts, "Communicate", fake.communicate)
    return fake


@pytest.fixture
def gemini():
    models = FakeModels()
    client = SimpleNamespace(aio=SimpleNamespace(models=models))
    return SimpleNamespace(models=models, service=GeminiService(api_key="test-key", model="gemini-2.5-flash", client=client))


@pytest.fixture
def client(tts, gemini):
    service = SpeechService(generator=gemini.service, voice_service=VoiceService(voices=VOICES))
    app.dependency_overrides[get_speech_service] = lambda: service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
