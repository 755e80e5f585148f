"""Shopping assistant: request forwarding to the chat-completion API."""

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import httpx
import openai
import pytest
from assistant.chat import DEFAULT_MODEL, TEMPERATURE, ChatClient, ChatMessage, get_chat_client, router
from fastapi import FastAPI
from fastapi.testclient import TestClient


def _completion(content, role="assistant"):
    message = SimpleNamespace(role=role, content=content)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.fixture
def openai_client():
    mock = MagicMock()
    mock.chat.completions.create.return_value = _completion("Try the Hiking Explorer.")
    return mock


@pytest.fixture
def chat_client(openai_client):
    client = ChatClient(api_key="sk-test", model="gpt-test")
    client._client = openai_client
    return client


@pytest.fixture
def http_client(chat_client):
    app = FastAPI()
    app.include_router(router)
    app.dependency_overrides[get_chat_client] = lambda: chat_client
    return TestClient(app)


class TestChatClient:
    def test_settings_come_from_the_environment(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
        monkeypatch.delenv("OPENAI_MODEL", raising=False)

        client = ChatClient()

        assert client.api_key == "sk-env"
        assert client.model == DEFAULT_MODEL

    def test_openai_client_is_created_lazily(self):
        with patch("assistant.chat.openai.OpenAI") as factory:
            client = ChatClient(api_key="sk-test")
            factory.assert_not_called()

            assert client.client is client.client
            factory.assert_called_once_with(api_key="sk-test")

    def test_complete_returns_the_first_choice(self, chat_client, openai_client):
        messages = [{"role": "user", "content": "Boots for hiking?"}]

        reply = chat_client.complete(messages)

        assert reply == ChatMessage(role="assistant", content="Try the Hiking Explorer.")
        openai_client.chat.completions.create.assert_called_once_with(
            model="gpt-test", messages=messages, temperature=TEMPERATURE
        )

    def test_empty_content_becomes_an_empty_string(self, chat_client, openai_client):
        openai_client.chat.completions.create.return_value = _completion(None)

        assert chat_client.complete([{"role": "user", "content": "hi"}]).content == ""


class TestChatEndpoint:
    def test_reply_is_returned(self, http_client, openai_client):
        response = http_client.post(
            "/api/chat",
            json={
                "messages": [
                    {"role": "system", "content": "You help people pick shoes."},
                    {"role": "user", "content": "Boots for hiking?"},
                ]
            },
        )

        assert response.status_code == 200
        assert response.json() == {"message": {"role": "assistant", "content": "Try the Hiking Explorer."}}
        sent = openai_client.chat.completions.create.call_args.kwargs["messages"]
        assert [m["role"] for m in sent] == ["system", "user"]

    def test_unknown_role_is_rejected(self, http_client, openai_client):
        response = http_client.post("/api/chat", json={"messages": [{"role": "robot", "content": "beep"}]})

        assert response.status_code == 422
        openai_client.chat.completions.create.assert_not_called()

    def test_upstream_failure_is_a_bad_gateway(self, http_client, openai_client):
        request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
        openai_client.chat.completions.create.side_effect = openai.APIConnectionError(request=request)

        response = http_client.post("/api/chat", json={"messages": [{"role": "user", "content": "hi"}]})

        assert response.status_code == 502
        assert response.json()["detail"] == "The assistant is unavailable right now"
