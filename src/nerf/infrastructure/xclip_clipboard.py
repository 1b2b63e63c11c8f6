"""External-process clipboard adapter — implements the Clipboard port."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence

from nerf.domain.exceptions import ClipboardError

logger = logging.getLogger(__name__)


class XclipClipboard:
    """Concrete ``Clipboard`` that pipes text into ``xclip`` (or a configured substitute)."""

    def __init__(self, command: Sequence[str] = ("xclip", "-selection", "clipboard")) -> None:
        if not command:
            raise ClipboardError("Clipboard command must not be empty.")
        self._command = list(command)

    def copy(self, text: str) -> None:
        """Write *text* to the command's stdin and wait for it to exit."""
        program = self._command[0]
        try:
            process = subprocess.Popen(self._command, stdin=subprocess.PIPE)
        except OSError as exc:
            raise ClipboardError(
                f"Failed to start {program}. Is it installed?"
            ) from exc

        try:
            process.communicate(text.encode("utf-8"))
        except OSError as exc:
            process.kill()
            process.wait()
            raise ClipboardError(f"Failed to write to {program} stdin: {exc}") from exc

        if process.returncode != 0:
            raise ClipboardError(
                f"{program} process failed with status: {process.returncode}"
            )

        logger.debug("Copied %d characters with %s", len(text), program)
