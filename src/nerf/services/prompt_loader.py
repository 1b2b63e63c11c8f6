"""Prompt loader — reads the template file and fills in the input words.

This is the only transformation applied before text enters the request.
"""

from __future__ import annotations

import os
from collections.abc import Sequence

from nerf.domain.exceptions import PromptFileError

PLACEHOLDER = "{input}"


def load_prompt(file_path: str) -> str:
    """Read the template at *file_path* after expanding a leading ``~``."""
    expanded_path = os.path.expanduser(file_path)
    try:
        with open(expanded_path, encoding="utf-8") as fh:
            return fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise PromptFileError(
            f"Failed to read prompt file '{expanded_path}': {exc}"
        ) from exc


def join_words(words: Sequence[str]) -> str:
    return " ".join(words)


def fill_prompt(template: str, words: Sequence[str]) -> str:
    """Replace every ``{input}`` with the space-joined words; no escaping."""
    return template.replace(PLACEHOLDER, join_words(words))
