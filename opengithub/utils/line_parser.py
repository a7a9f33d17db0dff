"""Utility functions for splitting `path[:line]` references."""

import os
import re

from opengithub.core.errors import AmbiguousSeparator, InvalidLineNumber
from opengithub.core.models import PathReference

_LINE_NUMBER = re.compile(r"^\s*\+?(\d+)\s*$")


def split_file_line(raw: str) -> PathReference:
    """Split a raw reference into its path and optional line number.

    Editors, compilers and stack traces print locations as `path:line`; this
    accepts that form and the bare path form.

    Args:
        raw: Reference text, e.g. "src/app.go" or "src/app.go:42"

    Returns:
        PathReference with line 0 when no line number was given

    Raises:
        InvalidLineNumber: If the text after ':' is not a non-negative integer
        AmbiguousSeparator: If the reference contains more than one ':'

    Examples:
        >>> split_file_line("src/app.go")
        PathReference(path='src/app.go', line=0)

        >>> split_file_line("src/app.go:42")
        PathReference(path='src/app.go', line=42)
    """
    parts = raw.split(":")
    if len(parts) == 1:
        return PathReference(raw, 0)

    if len(parts) > 2:
        raise AmbiguousSeparator(
            f"Cannot parse file line, contains multiple ':': {raw!r}"
        )

    path, line_text = parts
    match = _LINE_NUMBER.match(line_text)
    if not match:
        raise InvalidLineNumber(
            f"Cannot parse file line: {line_text!r} is not a line number (in {raw!r})"
        )

    return PathReference(path, int(match.group(1)))


def looks_like_file(path: str) -> bool:
    """Return True if the last path component carries a file extension."""
    _, ext = os.path.splitext(path.rstrip("/\\"))
    return bool(ext)
