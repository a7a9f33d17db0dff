"""Value objects passed between the stages of the link pipeline."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PathReference:
    """A file path with an optional line number (0 means no line)."""

    path: str
    line: int = 0


@dataclass(frozen=True)
class RemoteDescriptor:
    """Everything needed to render a browsable URL for a file."""

    remote: str
    relative_path: str
    branch: str
    line: int = 0

    def to_url(self) -> str:
        """Render this descriptor with the GitHub URL formatter."""
        from opengithub.utils.url_formatter import format_git_url

        return format_git_url(self.remote, self.branch, self.relative_path, self.line)


@dataclass(frozen=True)
class LinkResult:
    """Outcome of a successful link build."""

    url: str
    absolute_path: str
    descriptor: RemoteDescriptor
