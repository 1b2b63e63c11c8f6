"""Pydantic request / response DTOs for the chat-completions wire format."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from nerf.domain.entities import CompletionRequest
from nerf.domain.exceptions import ParseError


class ChatMessage(BaseModel):
    role: str
    content: str


class ChatCompletionRequest(BaseModel):
    """Body for ``POST /chat/completions``."""

    model: str
    messages: list[ChatMessage]

    @classmethod
    def from_domain(cls, request: CompletionRequest) -> ChatCompletionRequest:
        return cls(
            model=request.model,
            messages=[ChatMessage(**m) for m in request.messages()],
        )


class ChoiceMessage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    content: str


class Choice(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message: ChoiceMessage


class ChatCompletionResponse(BaseModel):
    """Successful response body; only ``choices[0]`` is validated, the rest is ignored."""

    model_config = ConfigDict(extra="ignore")

    choices: list[Any]


def parse_completion(body: str | bytes) -> str:
    """Return ``choices[0].message.content`` from a raw response body, verbatim."""
    try:
        response = ChatCompletionResponse.model_validate_json(body)
    except ValidationError as exc:
        raise ParseError(f"Failed to parse API response: {exc}") from exc

    if not response.choices:
        raise ParseError("Failed to extract reworded text from response: no choices")

    try:
        first = Choice.model_validate(response.choices[0])
    except ValidationError as exc:
        raise ParseError(f"Failed to extract reworded text from response: {exc}") from exc

    return first.message.content
