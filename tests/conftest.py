"""
Shared fixtures for all tests.

Fakes for the two ports live here so both unit/ and integration/ can use them.
"""
from typing import Any

import pytest

from nerf.domain.entities import CompletionRequest
from nerf.domain.exceptions import ClipboardError
from nerf.infrastructure.config import Settings


# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------

class FakeGateway:
    """Records every request and answers with a canned completion."""

    def __init__(self, reply='Fixed sentence.', error=None):
        self.reply = reply
        self.error = error
        self.requests: list[CompletionRequest] = []
        self.models: dict[str, Any] = {'object': 'list', 'data': [{'id': 'gpt-3.5-turbo-16k'}]}

    def complete(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.reply

    def list_models(self):
        if self.error is not None:
            raise self.error
        return self.models


class FakeClipboard:

    def __init__(self, fail=False):
        self.fail = fail
        self.copied: list[str] = []

    def copy(self, text):
        if self.fail:
            raise ClipboardError('xclip process failed with status: 1')
        self.copied.append(text)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def clipboard():
    return FakeClipboard()


@pytest.fixture
def prompt_file(tmp_path):
    path = tmp_path / 'prompt'
    path.write_text('Rewrite: {input}', encoding='utf-8')
    return path


@pytest.fixture
def settings(prompt_file):
    return Settings(
        _env_file=None,
        chatgpt_api_key='sk-test',
        prompt_path=str(prompt_file),
    )


@pytest.fixture
def clean_env(monkeypatch):
    for name in ('CHATGPT_API_KEY', 'LOG_LEVEL', 'NERF_PROMPT_PATH', 'NERF_CLIPBOARD_COMMAND'):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def make_gateway():
    return FakeGateway


@pytest.fixture
def make_clipboard():
    return FakeClipboard
