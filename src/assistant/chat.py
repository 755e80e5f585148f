"""Shopping assistant chat, forwarded to the OpenAI chat-completion API."""

import os
from functools import lru_cache
from typing import Literal

import openai
import structlog
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

logger = structlog.get_logger(__name__)

DEFAULT_MODEL = "gpt-3.5-turbo"
TEMPERATURE = 0.7


class ChatMessage(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [{"messages": [{"role": "user", "content": "Which shoes are good for trail running?"}]}]
        }
    }

    messages: list[ChatMessage]


class ChatResponse(BaseModel):
    message: ChatMessage


class ChatClient:
    """Thin wrapper over the OpenAI client; the API key and model come from the environment."""

    def __init__(self, api_key=None, model=None):
        self.api_key = api_key or os.getenv("OPENAI_API_KEY")
        self.model = model or os.getenv("OPENAI_MODEL", DEFAULT_MODEL)
        self._client = None

    @property
    def client(self):
        """Lazy initialization of OpenAI client."""
        if self._client is None:
            self._client = openai.OpenAI(api_key=self.api_key)
        return self._client

    def complete(self, messages: list[dict]) -> ChatMessage:
        """Return the first choice's message for the conversation so far."""
        response = self.client.chat.completions.create(
            model=self.model,
            messages=messages,
            temperature=TEMPERATURE,
        )
        message = response.choices[0].message
        return ChatMessage(role=message.role, content=message.content or "")


@lru_cache
def get_chat_client() -> ChatClient:
    return ChatClient()


router = APIRouter(prefix="/api/chat", tags=["assistant"])


@router.post("", response_model=ChatResponse)
def chat(body: ChatRequest, client: ChatClient = Depends(get_chat_client)) -> ChatResponse:
    try:
        message = client.complete([m.model_dump() for m in body.messages])
    except openai.OpenAIError as exc:
        logger.error("chat_completion_failed", error=str(exc))
        raise HTTPException(status_code=502, detail="The assistant is unavailable right now") from exc
    return ChatResponse(message=message)
