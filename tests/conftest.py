import anyio
import pytest
from unittest.mock import AsyncMock

@pytest.fixture
def anyio_backend():
    return "asyncio"

@pytest.fixture
def api_key(monkeypatch):
    """Configured upstream credential."""
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test-key")
    return "sk-test-key"

@pytest.fixture
def missing_api_key(monkeypatch):
    """No upstream credential in the environment."""
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)

@pytest.fixture
def upstream_builder():
    from tests.fixtures.mock_clients import UpstreamClientBuilder
    return UpstreamClientBuilder()

@pytest.fixture
def mock_upstream_client():
    """AsyncMock standing in for the pooled httpx client."""
    client = AsyncMock()
    client.post = AsyncMock()
    return client

@pytest.fixture
def chat_payload():
    """Standard inbound chat body."""
    return {
        "systemPrompt": "You are a helpful assistant.",
        "userMessage": "What is the capital of France?",
        "history": [
            {"role": "user", "content": "Hi"},
            {"role": "assistant", "content": "Hello! How can I help?"},
        ],
    }

@pytest.fixture
def chat_request(chat_payload):
    """Standard ChatRequest for testing."""
    from models.api_models import ChatRequest
    return ChatRequest.model_validate(chat_payload)

@pytest.fixture
def configured_app(monkeypatch, upstream_builder):
    """Pre-configured app whose upstream client is served by upstream_builder."""
    from fastapi import FastAPI
    from fastapi.testclient import TestClient
    from cors import CORSHeadersMiddleware
    from routes import chat

    app = FastAPI()
    app.add_middleware(CORSHeadersMiddleware)
    app.include_router(chat.router)

    monkeypatch.setattr(
        "utils.http_client.HTTPClientManager.get_upstream_client",
        lambda: upstream_builder.build()
    )

    with TestClient(app) as client:
        yield client

    anyio.run(upstream_builder.aclose)
