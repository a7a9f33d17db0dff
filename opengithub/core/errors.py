"""Exception hierarchy for opengithub.

Every failure the tool can report derives from OpenGithubError so the CLI
layer can catch one family per pipeline stage and print a matching hint.
"""

from __future__ import annotations

from typing import List, Optional, Sequence


class OpenGithubError(Exception):
    """Base class for all opengithub failures."""

    pass


class ParseError(OpenGithubError):
    """Raised when the raw `path[:line]` input cannot be parsed."""

    pass


class InvalidLineNumber(ParseError):
    """Raised when the text after ':' is not a non-negative integer."""

    pass


class AmbiguousSeparator(ParseError):
    """Raised when the input contains more than one ':'."""

    pass


class NotAFilePath(ParseError):
    """Raised when clipboard text does not look like a file path."""

    pass


class ResolutionError(OpenGithubError):
    """Raised when a partial path cannot be resolved to a single file."""

    pass


class FileNotFound(ResolutionError):
    """Raised when no file under the search root matches the partial path."""

    pass


class AmbiguousMatch(ResolutionError):
    """Raised when a path segment glob-matches more than one entry."""

    def __init__(self, pattern: str, candidates: Sequence[str]):
        self.pattern = pattern
        self.candidates: List[str] = sorted(candidates)
        listing = "\n  ".join(self.candidates)
        super().__init__(f"Multiple matches for '{pattern}':\n  {listing}")


class ExternalToolError(OpenGithubError):
    """Raised when an external command fails or cannot be started.

    Attributes:
        command: Argument list of the failed command (if any)
        returncode: Exit status (None if the command never ran)
        output: Combined stdout/stderr of the command
    """

    def __init__(
        self,
        message: str,
        command: Optional[Sequence[str]] = None,
        returncode: Optional[int] = None,
        output: str = "",
    ):
        self.command = list(command) if command else []
        self.returncode = returncode
        self.output = output
        super().__init__(message)


class GitError(ExternalToolError):
    """Raised when a git query fails."""

    pass


class ClipboardError(ExternalToolError):
    """Raised when clipboard text cannot be obtained."""

    pass


class UnsupportedRemote(OpenGithubError):
    """Raised when the remote URL is not a git@github.com SSH remote."""

    pass
