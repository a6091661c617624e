import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import jobmatch.config as config


class StubModels:
    def __init__(self, responses):
        self._responses = list(responses)
        self.calls = []

    def generate_content(self, *args, **kwargs):
        self.calls.append(kwargs)
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


class StubClient:
    def __init__(self, *responses):
        self.models = StubModels(responses)


def make_response(text, chunks=None):
    """Build an object shaped like a google-genai GenerateContentResponse."""
    part = SimpleNamespace(text=text)
    content = SimpleNamespace(parts=[part])
    web_chunks = [SimpleNamespace(web=SimpleNamespace(title=title, uri=uri)) for title, uri in chunks or []]
    metadata = SimpleNamespace(grounding_chunks=web_chunks)
    candidate = SimpleNamespace(content=content, grounding_metadata=metadata)
    return SimpleNamespace(candidates=[candidate])


@pytest.fixture(autouse=True)
def configure_env(monkeypatch):
    monkeypatch.setenv("GOOGLE_API_KEY", "test-google-key")
    monkeypatch.delenv("JOBMATCH_MODEL", raising=False)
    config.set_google_api_key("test-google-key")
    yield
    config.set_google_api_key(None)
