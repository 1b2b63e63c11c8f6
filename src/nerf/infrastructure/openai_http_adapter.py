"""OpenAI REST adapter — implements the CompletionGateway port over plain HTTP."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

from nerf.domain.entities import CompletionRequest
from nerf.domain.exceptions import ApiError, NetworkError, ParseError
from nerf.infrastructure.schemas import ChatCompletionRequest, parse_completion

logger = logging.getLogger(__name__)

_OPENAI_API = "https://api.openai.com/v1"
DEFAULT_TIMEOUT = httpx.Timeout(30.0)


class OpenAIHttpAdapter:
    """Concrete ``CompletionGateway`` backed by the OpenAI chat-completions API."""

    def __init__(self, api_key: str, client: httpx.Client | None = None) -> None:
        self._client = client if client is not None else httpx.Client(timeout=DEFAULT_TIMEOUT)
        self._headers: dict[str, str] = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

    def complete(self, request: CompletionRequest) -> str:
        """POST /chat/completions → first choice's message content."""
        body = ChatCompletionRequest.from_domain(request).model_dump()
        logger.debug("Sending request body: %s", body)

        resp = self._send("POST", "/chat/completions", json=body)
        logger.debug("ChatGPT API raw response: %s", resp.text)

        reworded = parse_completion(resp.content)
        logger.info("Reworded sentence(s): %s", reworded)
        return reworded

    def list_models(self) -> dict[str, Any]:
        """GET /models → decoded model listing."""
        resp = self._send("GET", "/models")
        try:
            data: dict[str, Any] = resp.json()
        except ValueError as exc:
            raise ParseError(f"Failed to parse model listing as JSON: {exc}") from exc
        return data

    def _send(self, method: str, endpoint: str, **kwargs: Any) -> httpx.Response:
        """Perform a single request with error translation; never retried."""
        url = f"{_OPENAI_API}{endpoint}"
        try:
            resp = self._client.request(method, url, headers=self._headers, **kwargs)
        except httpx.HTTPError as exc:
            raise NetworkError(f"Failed to send request to {url}: {exc}") from exc

        if not resp.is_success:
            logger.error("OpenAI API %s %s returned HTTP %s", method, endpoint, resp.status_code)
            raise ApiError(
                f"ChatGPT API call failed with status: {resp.status_code}",
                status_code=resp.status_code,
            )

        return resp

    def close(self) -> None:
        """Release underlying HTTP resources."""
        self._client.close()

    def __enter__(self) -> OpenAIHttpAdapter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
