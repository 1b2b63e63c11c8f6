"""Port: completion gateway — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Any, Protocol

from nerf.domain.entities import CompletionRequest


class CompletionGateway(Protocol):
    """Abstract contract for interacting with a chat-completions endpoint."""

    def complete(self, request: CompletionRequest) -> str:
        """Send the request and return the first choice's message content."""
        ...

    def list_models(self) -> dict[str, Any]:
        """Return the model listing visible to the configured credentials."""
        ...
