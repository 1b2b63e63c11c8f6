"""Port: clipboard sink — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol


class Clipboard(Protocol):
    """Abstract contract for placing text on the system clipboard."""

    def copy(self, text: str) -> None:
        """Replace the clipboard contents with *text*."""
        ...
