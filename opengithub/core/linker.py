"""Pipeline that turns a copied file reference into a GitHub link."""

import logging
import os
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from opengithub.core.clipboard import Clipboard
from opengithub.core.errors import ClipboardError, ExternalToolError, NotAFilePath
from opengithub.core.git_operations import GitOperations
from opengithub.core.models import LinkResult
from opengithub.utils.line_parser import looks_like_file, split_file_line
from opengithub.utils.path_resolver import find_abs_path, resolve_search_root

logger = logging.getLogger(__name__)


class GithubLinker:
    """Sequences parsing, path resolution, git lookup and URL formatting.

    Each stage raises its own OpenGithubError subclass; nothing is retried and
    the first failure aborts the run.
    """

    def __init__(
        self,
        git: Optional[GitOperations] = None,
        clipboard: Optional[Clipboard] = None,
        console: Optional[Console] = None,
    ):
        """Initialize the linker with its collaborators.

        Args:
            git: GitOperations used to locate files in their repository
            clipboard: Clipboard read when no file argument is given
            console: Optional Rich console for progress lines
        """
        self.git = git or GitOperations()
        self.clipboard = clipboard or Clipboard()
        self.console = console

    def _report(self, message: str) -> None:
        if self.console:
            self.console.print(message)

    def read_input(self, file: Optional[str] = None) -> str:
        """Return the explicit file argument, falling back to the clipboard.

        Raises:
            ClipboardError: If the clipboard is empty or unreadable
            NotAFilePath: If the clipboard text has no file extension
        """
        if file:
            return file

        text = self.clipboard.read_text()
        if not text:
            raise ClipboardError("--file and clipboard empty 👻")

        self._report(f"Using clipboard text: {escape(text)}")
        if not looks_like_file(text.split(":", 1)[0]):
            raise NotAFilePath(f"Clipboard text not a file: {text!r}")
        return text

    def build(
        self, raw: str, root: Optional[str] = None, branch: Optional[str] = None
    ) -> LinkResult:
        """Build the GitHub URL for a `path[:line]` reference.

        Args:
            raw: File reference, optionally suffixed with ':<line>'
            root: Directory to search relative paths from (default: cwd)
            branch: Branch to link to (default: current branch)

        Returns:
            LinkResult with the URL, the resolved file and its descriptor
        """
        ref = split_file_line(raw)

        search_root = ""
        if not os.path.isabs(ref.path):
            search_root = resolve_search_root(root)
            if not root:
                self._report(
                    "Using current directory to resolve relative path since "
                    f"--root or $OPENGITHUB_ROOT not set: {escape(search_root)}"
                )

        abs_path = find_abs_path(ref.path, search_root)

        if not branch:
            self._report(
                "Using current branch since --branch or $OPENGITHUB_BRANCH not set"
            )
        descriptor = self.git.describe(abs_path, branch=branch, line=ref.line)

        self._report(
            f"Found remote:{escape(descriptor.remote)}, branch:{escape(descriptor.branch)}, "
            f"path:{escape(descriptor.relative_path)}, line={descriptor.line}"
        )

        url = descriptor.to_url()
        logger.info(f"Built link {url}")
        return LinkResult(url=url, absolute_path=abs_path, descriptor=descriptor)

    def open_url(self, url: str) -> None:
        """Open url with the platform's default handler.

        Raises:
            ExternalToolError: If the launcher reports a failure
        """
        code = typer.launch(url)
        if code != 0:
            raise ExternalToolError(f"Open url {url}: launcher exited with {code}", returncode=code)
