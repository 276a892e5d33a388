"""Pytest configuration and fixtures."""

import json
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from sathorn_map.config import Settings
from sathorn_map.main import create_app
from sathorn_map.services.ai_search import AISearchRelay
from sathorn_map.storage import PropertyCatalogue, QueryLog, seed_catalogue


class FakeCompletions:
    """Stand-in for client.chat.completions: records calls, returns a canned reply."""

    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeLLMClient:
    def __init__(self, content=None, error=None):
        self.completions = FakeCompletions(content, error)
        self.chat = SimpleNamespace(completions=self.completions)


def llm_reply(response="Le Du is a Michelin starred restaurant.", ids=(14,), **extra) -> str:
    return json.dumps({"response": response, "relevantPropertyIds": list(ids), **extra})


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None, openai_api_key="test-key")


@pytest.fixture
def catalogue() -> PropertyCatalogue:
    """A freshly seeded catalogue for each test."""
    catalogue = PropertyCatalogue()
    seed_catalogue(catalogue)
    return catalogue


@pytest.fixture
def query_log() -> QueryLog:
    return QueryLog()


@pytest.fixture
def llm_client() -> FakeLLMClient:
    return FakeLLMClient(content=llm_reply())


@pytest.fixture
def relay(llm_client, catalogue, query_log, settings) -> AISearchRelay:
    return AISearchRelay(llm_client, catalogue, query_log, settings)


@pytest.fixture
def client(settings, catalogue, query_log, llm_client) -> TestClient:
    app = create_app(settings, catalogue=catalogue, query_log=query_log, llm_client=llm_client)
    return TestClient(app)
