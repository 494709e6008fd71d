import types
from typing import Any, Dict, List

import pytest
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pair_programmer.dispatcher import Dispatcher
from pair_programmer.llm_client import ModelClient
from pair_programmer.models import DEFAULT_REGISTRY
from pair_programmer.tools.catalog import build_tool_registry


class DummyChoice:
    def __init__(self, content):
        self.message = types.SimpleNamespace(content=content)


class DummyCompletion:
    def __init__(self, content):
        self.choices = [DummyChoice(content)]


class DummyChatClient:
    """
    Minimal mock for openai.OpenAI that supports:
    client.chat.completions.create(...)

    Every call is recorded in `calls` so tests can count provider traffic.
    """
    def __init__(self, content: str = "ok"):
        self._content = content
        self.calls: List[Dict[str, Any]] = []
        self.chat = types.SimpleNamespace(
            completions=types.SimpleNamespace(create=self._create)
        )

    def _reply(self, **kwargs):
        return DummyCompletion(self._content)

    def _create(self, **kwargs):
        self.calls.append(kwargs)
        return self._reply(**kwargs)

    @property
    def last_prompt(self) -> str:
        return self.calls[-1]["messages"][0]["content"]


class EchoChatClient(DummyChatClient):
    """Replies with the model id, temperature and prompt it was given."""

    def _reply(self, **kwargs):
        prompt = kwargs["messages"][0]["content"]
        return DummyCompletion(f"{kwargs['model']}|{kwargs['temperature']}|{prompt}")


class FailingChatClient(DummyChatClient):
    """Raises on every call, like a provider outage."""

    def __init__(self, message: str = "upstream exploded"):
        super().__init__()
        self.message = message

    def _reply(self, **kwargs):
        raise RuntimeError(self.message)


def make_dispatcher(client: DummyChatClient) -> Dispatcher:
    """Build a Dispatcher over the real catalogue with an injected provider client."""
    model_client = ModelClient(DEFAULT_REGISTRY, "test-key", client=client)
    return Dispatcher(build_tool_registry(DEFAULT_REGISTRY), model_client)


@pytest.fixture(autouse=True)
def set_env(monkeypatch):
    """
    Automatically set the required API key env var for all tests.
    """
    monkeypatch.setenv("OPENROUTER_API_KEY", "test-key")
    monkeypatch.delenv("DEBUG", raising=False)
    yield
