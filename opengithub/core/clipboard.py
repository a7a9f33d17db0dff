"""Clipboard access through the platform's command-line paste tools."""

from __future__ import annotations

import logging
import shutil
import sys
from typing import List, Optional

from opengithub.core.errors import ClipboardError
from opengithub.core.runner import CommandRunner

logger = logging.getLogger(__name__)

# Tried in order; the first tool found on PATH is used
PASTE_COMMANDS = {
    "darwin": [["pbpaste"]],
    "win32": [["powershell", "-NoProfile", "-Command", "Get-Clipboard"]],
    "linux": [
        ["wl-paste", "--no-newline"],
        ["xclip", "-selection", "clipboard", "-o"],
        ["xsel", "--clipboard", "--output"],
    ],
}


class Clipboard:
    """Reads text from the system clipboard."""

    def __init__(self, runner: Optional[CommandRunner] = None, platform: Optional[str] = None):
        self.runner = runner or CommandRunner()
        self.platform = platform or sys.platform

    def _candidates(self) -> List[List[str]]:
        if self.platform.startswith("linux") or "bsd" in self.platform:
            return PASTE_COMMANDS["linux"]
        return PASTE_COMMANDS.get(self.platform, [])

    def read_text(self) -> str:
        """Return the clipboard's text contents with surrounding whitespace removed.

        Raises:
            ClipboardError: If no paste tool is available or the tool fails
        """
        for args in self._candidates():
            if shutil.which(args[0]) is None:
                continue
            logger.debug(f"Reading clipboard with {args[0]}")
            return self.runner.run(args, error_cls=ClipboardError)

        raise ClipboardError(
            f"No clipboard tool found for platform {self.platform}.\n"
            "Install pbpaste, wl-paste, xclip or xsel, or pass the file explicitly"
        )
