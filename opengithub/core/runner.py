"""Subprocess wrapper used for every external command opengithub runs."""

from __future__ import annotations

import logging
import subprocess
from typing import List, Optional, Type

from opengithub.core.errors import ExternalToolError

logger = logging.getLogger(__name__)


class CommandRunner:
    """Runs external commands synchronously and returns their output.

    Collaborators (git queries, clipboard readers) receive a CommandRunner
    instead of calling subprocess directly, so tests can substitute a mock.
    """

    def run(
        self,
        args: List[str],
        cwd: Optional[str] = None,
        error_cls: Type[ExternalToolError] = ExternalToolError,
    ) -> str:
        """Run a command and return its stripped combined output.

        Args:
            args: Command and arguments (e.g., ["git", "status"])
            cwd: Working directory for the command
            error_cls: ExternalToolError subclass raised on failure

        Returns:
            Combined stdout/stderr with surrounding whitespace removed

        Raises:
            ExternalToolError: If the command exits non-zero or cannot start
        """
        logger.debug(f"Running: {' '.join(args)} (cwd={cwd})")
        try:
            result = subprocess.run(
                args,
                cwd=cwd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                check=False,
            )
        except FileNotFoundError as e:
            raise error_cls(
                f"Executable not found: {args[0]}", command=args
            ) from e
        except OSError as e:
            raise error_cls(
                f"Cannot run {' '.join(args)}: {e}", command=args
            ) from e

        output = result.stdout or ""
        if result.returncode != 0:
            raise error_cls(
                f"Command failed: {' '.join(args)}\n"
                f"Exit code: {result.returncode}\n"
                f"Output: {output.strip()}",
                command=args,
                returncode=result.returncode,
                output=output,
            )
        return output.strip()
