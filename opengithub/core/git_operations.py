"""Git queries that locate a file within its repository.

This module provides a GitOperations class that wraps the read-only git
commands needed to turn an absolute file path into a RemoteDescriptor: the
repository root, the origin remote URL and the checked-out branch.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from opengithub.core.errors import GitError
from opengithub.core.models import RemoteDescriptor
from opengithub.core.runner import CommandRunner

logger = logging.getLogger(__name__)

DEFAULT_REMOTE = "origin"


class GitOperations:
    """Wrapper for the git queries used to build a file link."""

    def __init__(self, runner: Optional[CommandRunner] = None):
        """Initialize GitOperations.

        Args:
            runner: CommandRunner used to invoke git. If None, a new one is created.
        """
        self.runner = runner or CommandRunner()

    def _run_git_command(self, args: list[str], file_path: str) -> str:
        """Run git from the directory containing file_path."""
        return self.runner.run(
            ["git", *args], cwd=os.path.dirname(file_path), error_cls=GitError
        )

    def repo_root(self, file_path: str) -> str:
        """Return the top-level directory of the repository holding file_path.

        Raises:
            GitError: If file_path is not inside a git repository
        """
        return self._run_git_command(["rev-parse", "--show-toplevel"], file_path)

    def relative_path(self, file_path: str) -> str:
        """Return file_path relative to its repository root, with '/' separators.

        The root and the file's parent directory are symlink-resolved because
        git reports the real location of the root. The file name itself is kept,
        so a symlinked file links to the link, not to its target.

        Raises:
            GitError: If the root cannot be determined or file_path lies outside it
        """
        root = os.path.realpath(self.repo_root(file_path))
        real_file = os.path.join(
            os.path.realpath(os.path.dirname(file_path)), os.path.basename(file_path)
        )
        try:
            rel = os.path.relpath(real_file, root)
        except ValueError as e:
            raise GitError(f"Relative path of {file_path} to {root}: {e}") from e

        if rel == os.pardir or rel.startswith(os.pardir + os.sep):
            raise GitError(f"File {file_path} is outside repository root {root}")
        return rel.replace(os.sep, "/")

    def remote_url(self, file_path: str, remote: str = DEFAULT_REMOTE) -> str:
        """Return the configured URL of `remote` for the repository of file_path.

        Raises:
            GitError: If the remote is not configured
        """
        return self._run_git_command(
            ["config", "--get", f"remote.{remote}.url"], file_path
        )

    def current_branch(self, file_path: str) -> str:
        """Return the checked-out branch, or the commit SHA on a detached HEAD.

        Raises:
            GitError: If the branch cannot be determined
        """
        branch = self._run_git_command(["rev-parse", "--abbrev-ref", "HEAD"], file_path)
        if branch == "HEAD":
            logger.info("Detached HEAD, linking to the commit instead of a branch")
            return self._run_git_command(["rev-parse", "HEAD"], file_path)
        return branch

    def describe(
        self, file_path: str, branch: Optional[str] = None, line: int = 0
    ) -> RemoteDescriptor:
        """Collect remote, relative path and branch for file_path.

        Args:
            file_path: Absolute path of a file inside a git repository
            branch: Branch override; the current branch is used when empty
            line: Line number to carry into the descriptor

        Returns:
            Fully populated RemoteDescriptor

        Raises:
            GitError: If any git query fails
        """
        relative = self.relative_path(file_path)
        remote = self.remote_url(file_path)
        if not branch:
            branch = self.current_branch(file_path)

        return RemoteDescriptor(
            remote=remote, relative_path=relative, branch=branch, line=line
        )
