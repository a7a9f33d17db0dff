"""Tests for GitHub URL formatting."""

import pytest

from opengithub.core.errors import UnsupportedRemote
from opengithub.utils.url_formatter import format_git_url


class TestFormatGitUrl:
    """Test cases for format_git_url function."""

    def test_url_with_line(self):
        url = format_git_url("git@github.com:acme/widgets.git", "main", "src/app.go", 42)
        assert url == "https://github.com/acme/widgets/blob/main/src/app.go#L42"

    def test_url_without_line_has_no_anchor(self):
        url = format_git_url("git@github.com:acme/widgets.git", "main", "src/app.go", 0)
        assert url == "https://github.com/acme/widgets/blob/main/src/app.go"
        assert "#L" not in url

    def test_line_defaults_to_zero(self):
        url = format_git_url("git@github.com:acme/widgets.git", "dev", "README.md")
        assert url == "https://github.com/acme/widgets/blob/dev/README.md"

    def test_branch_with_slash(self):
        url = format_git_url("git@github.com:acme/widgets.git", "feature/login", "a.py", 3)
        assert url == "https://github.com/acme/widgets/blob/feature/login/a.py#L3"

    def test_commit_sha_as_branch(self):
        sha = "0123456789abcdef0123456789abcdef01234567"
        url = format_git_url("git@github.com:acme/widgets.git", sha, "a.py")
        assert url == f"https://github.com/acme/widgets/blob/{sha}/a.py"

    def test_only_trailing_git_suffix_is_replaced(self):
        """A '.git' inside the repository name is kept."""
        url = format_git_url("git@github.com:acme/.github.git", "main", "profile/README.md")
        assert url == "https://github.com/acme/.github/blob/main/profile/README.md"

    def test_backslash_separators_normalized(self):
        url = format_git_url("git@github.com:acme/widgets.git", "main", "src\\app.go")
        assert url == "https://github.com/acme/widgets/blob/main/src/app.go"

    def test_unsafe_characters_are_encoded(self):
        url = format_git_url("git@github.com:acme/widgets.git", "main", "docs/my file#1.md")
        assert url == "https://github.com/acme/widgets/blob/main/docs/my%20file%231.md"

    def test_plus_signs_are_encoded(self):
        url = format_git_url("git@github.com:acme/widgets.git", "main", "src/c++/a.cc", 2)
        assert url == "https://github.com/acme/widgets/blob/main/src/c%2B%2B/a.cc#L2"

    def test_remote_whitespace_ignored(self):
        url = format_git_url("git@github.com:acme/widgets.git\n", "main", "a.go")
        assert url == "https://github.com/acme/widgets/blob/main/a.go"

    @pytest.mark.parametrize(
        "remote",
        [
            "https://github.com/acme/widgets.git",
            "git@gitlab.com:acme/widgets.git",
            "ssh://git@github.com/acme/widgets.git",
            "git@github.com:acme/widgets",
            "",
        ],
    )
    def test_unsupported_remotes(self, remote):
        with pytest.raises(UnsupportedRemote):
            format_git_url(remote, "main", "a.go", 1)
