"""Core business logic modules."""

from opengithub.core.clipboard import Clipboard
from opengithub.core.config import Config
from opengithub.core.git_operations import GitOperations
from opengithub.core.runner import CommandRunner

__all__ = ["Clipboard", "CommandRunner", "Config", "GitOperations"]
