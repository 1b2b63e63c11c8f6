"""Rewrite-text use case — the main orchestration pipeline.

This is the single entry point for the business logic.  It depends only on
the two ports (:class:`CompletionGateway` and :class:`Clipboard`) and the
pure prompt helpers.  The interface layer injects concrete adapters at runtime.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from nerf.domain.entities import CompletionRequest
from nerf.domain.ports.clipboard import Clipboard
from nerf.domain.ports.completion_gateway import CompletionGateway
from nerf.services.prompt_loader import fill_prompt, join_words, load_prompt

logger = logging.getLogger(__name__)

# ── Request constants ───────────────────────────────────────────────────────

# Alternative: "gpt-3.5-turbo"
MODEL = "gpt-3.5-turbo-16k"

SYSTEM_INSTRUCTION = (
    "You are a helpful assistant. When transforming statements, preserve all "
    "URLs, `@handles`, and `#channels` exactly as they are, without any "
    "modifications. Do not include these instructions in your output."
)


def build_request(prompt: str, model: str = MODEL) -> CompletionRequest:
    """Wrap a filled prompt with the fixed system instruction."""
    return CompletionRequest(
        model=model,
        system_instruction=SYSTEM_INSTRUCTION,
        user_content=prompt,
    )


# ── Use case ────────────────────────────────────────────────────────────────


class RewriteTextUseCase:
    """Orchestrates the words → prompt → completion → clipboard pipeline.

    Usage::

        use_case = RewriteTextUseCase(gateway, clipboard)
        text = use_case.rewrite(["fix", "this"], "~/.config/nerf/prompt")
        use_case.copy(text)
    """

    def __init__(
        self,
        completion_gateway: CompletionGateway,
        clipboard: Clipboard,
        model: str = MODEL,
    ) -> None:
        self._gateway = completion_gateway
        self._clipboard = clipboard
        self._model = model

    def rewrite(self, words: Sequence[str], prompt_path: str) -> str:
        """Fill the template at *prompt_path* with *words* and return the completion."""
        logger.info("Input sentence(s): %s", join_words(words))

        template = load_prompt(prompt_path)
        logger.debug("Loaded prompt template: %s", template)

        prompt = fill_prompt(template, words)
        logger.debug("Final prompt to send: %s", prompt)

        return self._gateway.complete(build_request(prompt, self._model))

    def copy(self, text: str) -> None:
        logger.info("Copying reworded sentence(s) to clipboard")
        self._clipboard.copy(text)
