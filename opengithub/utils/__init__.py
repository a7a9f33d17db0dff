"""Utility modules for opengithub."""

from opengithub.utils.line_parser import looks_like_file, split_file_line
from opengithub.utils.path_resolver import find_abs_path, find_file, resolve_search_root
from opengithub.utils.url_formatter import format_git_url

__all__ = [
    "find_abs_path",
    "find_file",
    "format_git_url",
    "looks_like_file",
    "resolve_search_root",
    "split_file_line",
]
