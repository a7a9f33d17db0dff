"""Path resolution for partial file references.

A reference copied from a log or an editor is often relative to some
directory other than the one we are in ("pkg/server/handler.go" while sitting
in the repository root, or "handler.go" alone). The resolver locates the one
real file such a reference points to by walking down from a search root.
"""

import glob
import logging
import os
import re
from typing import List, Optional, Set, Tuple

from opengithub.core.errors import AmbiguousMatch, FileNotFound, ResolutionError

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(
    "[" + re.escape("".join({"/", os.sep, os.altsep or "/"})) + "]"
)


def split_segments(path: str) -> List[str]:
    """Split a path into its components, dropping empty and '.' parts."""
    return [part for part in _SEPARATORS.split(path) if part and part != "."]


def resolve_search_root(root: Optional[str] = None) -> str:
    """Return an absolute search root, defaulting to the current directory.

    Args:
        root: User-supplied root directory ('~' is expanded)

    Returns:
        Absolute directory path

    Raises:
        ResolutionError: If the root is not an existing directory
    """
    if not root:
        return os.getcwd()

    resolved = os.path.abspath(os.path.expanduser(root))
    if not os.path.isdir(resolved):
        raise ResolutionError(f"Search root is not a directory: {resolved}")
    return resolved


def find_abs_path(partial: str, root: str) -> str:
    """Resolve a possibly partial path to the absolute path of a real file.

    Absolute paths are returned unchanged. For relative paths the shortest
    usable suffix is searched for under `root`: leading segments that `root`
    already ends with are skipped, and each remaining suffix is handed to
    find_file() until one matches.

    Args:
        partial: Relative or absolute file path, e.g. "server/handler.go"
        root: Absolute directory to search from

    Returns:
        Absolute path of the matching file

    Raises:
        FileNotFound: If no suffix of the path exists under root
        AmbiguousMatch: If a segment matches several entries
        ResolutionError: If the path is empty or a directory cannot be read
    """
    if not partial:
        raise ResolutionError("Cannot resolve an empty path")

    if os.path.isabs(partial):
        return partial

    segments = split_segments(partial)
    if not segments:
        raise ResolutionError(f"Path has no file components: {partial!r}")

    root = os.path.abspath(root)
    root_parts = split_segments(root)

    for i in range(len(segments)):
        prefix = segments[: i + 1]
        if root_parts[-len(prefix):] == prefix:
            logger.debug(f"Root already inside {'/'.join(prefix)}, skipping")
            continue

        logger.debug(f"Searching {root} for {'/'.join(segments[i:])}")
        found = find_file(root, segments[i:])
        if found is not None:
            logger.info(f"Resolved {partial} -> {found}")
            return found

    raise FileNotFound(f"Cannot find file in root {root}: {partial}")


def find_file(
    root: str,
    segments: List[str],
    _visited: Optional[Set[Tuple[str, Tuple[str, ...]]]] = None,
) -> Optional[str]:
    """Depth-first search for `segments` starting at `root`.

    The first segment is glob-matched against the direct children of root.
    A single match either is the answer (no segments left) or is descended
    into with the remaining segments. With no match, every subdirectory is
    searched for the full segment list, in name order; the first hit wins.

    Returns:
        Absolute path of the match, or None if nothing matched below root

    Raises:
        AmbiguousMatch: If the first segment matches more than one entry
        ResolutionError: If a directory listing fails for a reason other
            than missing permission
    """
    if _visited is None:
        _visited = set()

    head, rest = segments[0], segments[1:]
    pattern = os.path.join(glob.escape(root), head)
    matches = glob.glob(pattern, include_hidden=True)

    if len(matches) > 1:
        raise AmbiguousMatch(os.path.join(root, head), matches)
    if len(matches) == 1 and not rest:
        return matches[0]
    if len(matches) == 1:
        return find_file(matches[0], rest, _visited)

    # Symlinked directories can loop back on themselves
    key = (os.path.realpath(root), tuple(segments))
    if key in _visited:
        return None
    _visited.add(key)

    try:
        with os.scandir(root) as entries:
            subdirs = sorted(entry.path for entry in entries if entry.is_dir())
    except PermissionError:
        logger.debug(f"Skipping unreadable directory: {root}")
        return None
    except (NotADirectoryError, FileNotFoundError):
        return None
    except OSError as e:
        raise ResolutionError(f"Read dir {root}: {e}") from e

    for subdir in subdirs:
        found = find_file(subdir, segments, _visited)
        if found is not None:
            return found

    return None
