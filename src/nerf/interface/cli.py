"""Command-line interface — argument parsing and adapter wiring."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from importlib.metadata import PackageNotFoundError, version
from typing import TextIO

from nerf.domain.ports.clipboard import Clipboard
from nerf.domain.ports.completion_gateway import CompletionGateway
from nerf.infrastructure.config import Settings, load_settings
from nerf.infrastructure.openai_http_adapter import OpenAIHttpAdapter
from nerf.infrastructure.xclip_clipboard import XclipClipboard
from nerf.interface.error_handlers import EXIT_OK, handle_error
from nerf.services.rewrite_text import RewriteTextUseCase

logger = logging.getLogger(__name__)

SEPARATOR = "*" * 80
LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"


def _package_version() -> str:
    try:
        return version("nerf")
    except PackageNotFoundError:
        return "unknown"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nerf",
        description="AI-powered text processing tool",
    )
    parser.add_argument("words", nargs="*", help="words substituted for {input} in the prompt")
    parser.add_argument(
        "-p",
        "--prompt",
        default=None,
        help="prompt template file (default: $NERF_PROMPT_PATH or ~/.config/nerf/prompt)",
    )
    parser.add_argument(
        "--check-key",
        action="store_true",
        help="verify the API key by listing available models, then exit",
    )
    parser.add_argument(
        "--no-copy",
        action="store_true",
        help="print the result without copying it to the clipboard",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def run(
    argv: Sequence[str] | None = None,
    *,
    settings: Settings | None = None,
    gateway: CompletionGateway | None = None,
    clipboard: Clipboard | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Execute one invocation and return the process exit code.

    Adapters that are not injected are built from *settings* and owned
    (and closed) by this call.
    """
    out = stdout if stdout is not None else sys.stdout
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.words and not args.check_key:
        parser.error("the following arguments are required: words")

    owned: OpenAIHttpAdapter | None = None
    try:
        if settings is None:
            settings = load_settings()
        configure_logging(settings.log_level)

        if gateway is None:
            owned = OpenAIHttpAdapter(settings.chatgpt_api_key.get_secret_value())
            gateway = owned

        if args.check_key:
            models = gateway.list_models()
            print(json.dumps(models, indent=2), file=out)
            return EXIT_OK

        if clipboard is None:
            clipboard = XclipClipboard(settings.clipboard_command)

        use_case = RewriteTextUseCase(completion_gateway=gateway, clipboard=clipboard)
        reworded = use_case.rewrite(args.words, args.prompt or settings.prompt_path)

        print(SEPARATOR, file=out)
        print(reworded, file=out)

        if not args.no_copy:
            use_case.copy(reworded)

        return EXIT_OK

    except Exception as exc:
        return handle_error(exc, stderr)

    finally:
        if owned is not None:
            owned.close()
