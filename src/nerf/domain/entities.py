"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CompletionRequest:
    """A single system + user exchange sent to the completion endpoint."""

    model: str
    system_instruction: str
    user_content: str

    def messages(self) -> list[dict[str, str]]:
        return [
            {"role": "system", "content": self.system_instruction},
            {"role": "user", "content": self.user_content},
        ]
