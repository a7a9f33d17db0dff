"""Unit tests for CommandRunner with mocked subprocess calls."""

import subprocess
from unittest.mock import patch

import pytest

from opengithub.core.errors import ClipboardError, ExternalToolError, GitError
from opengithub.core.runner import CommandRunner


class TestCommandRunner:
    """Test CommandRunner.run."""

    @patch("subprocess.run")
    def test_successful_command(self, mock_run):
        """Returns stripped combined output."""
        mock_run.return_value = subprocess.CompletedProcess(
            args=["git", "status"], returncode=0, stdout="output\n"
        )

        result = CommandRunner().run(["git", "status"], cwd="/repo")

        assert result == "output"
        mock_run.assert_called_once_with(
            ["git", "status"],
            cwd="/repo",
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            check=False,
        )

    @patch("subprocess.run")
    def test_failed_command_carries_output(self, mock_run):
        mock_run.return_value = subprocess.CompletedProcess(
            args=["git", "config"], returncode=1, stdout="fatal: not a git repository\n"
        )

        with pytest.raises(ExternalToolError) as exc_info:
            CommandRunner().run(["git", "config"])

        error = exc_info.value
        assert error.returncode == 1
        assert error.command == ["git", "config"]
        assert "fatal: not a git repository" in error.output
        assert "fatal: not a git repository" in str(error)
        assert "Exit code: 1" in str(error)

    @patch("subprocess.run")
    def test_error_class_selectable(self, mock_run):
        mock_run.return_value = subprocess.CompletedProcess(
            args=["git"], returncode=128, stdout=""
        )

        with pytest.raises(GitError):
            CommandRunner().run(["git", "rev-parse"], error_cls=GitError)

    @patch("subprocess.run")
    def test_missing_executable(self, mock_run):
        mock_run.side_effect = FileNotFoundError("No such file or directory: 'xclip'")

        with pytest.raises(ClipboardError) as exc_info:
            CommandRunner().run(["xclip", "-o"], error_cls=ClipboardError)

        assert "Executable not found: xclip" in str(exc_info.value)
        assert exc_info.value.returncode is None

    @patch("subprocess.run")
    def test_other_os_error(self, mock_run):
        mock_run.side_effect = PermissionError("Permission denied")

        with pytest.raises(ExternalToolError) as exc_info:
            CommandRunner().run(["git", "status"])

        assert "Cannot run git status" in str(exc_info.value)
