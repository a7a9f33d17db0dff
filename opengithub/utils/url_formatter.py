"""GitHub blob URL rendering for SSH remotes."""

from urllib.parse import quote

from opengithub.core.errors import UnsupportedRemote

GITHUB_SSH_PREFIX = "git@github.com:"
GIT_SUFFIX = ".git"


def format_git_url(remote: str, branch: str, relative_path: str, line: int = 0) -> str:
    """Return the GitHub URL that shows `relative_path` at `branch`.

    The remote must look like `git@github.com:{org}/{repo}.git`. The result is
    `https://github.com/{org}/{repo}/blob/{branch}/{path}`, with `#L{line}`
    appended when line is non-zero.

    Args:
        remote: Remote URL as reported by `git config --get remote.origin.url`
        branch: Branch name or commit SHA
        relative_path: File path relative to the repository root
        line: Line number to anchor to (0 for none)

    Returns:
        Browsable URL string

    Raises:
        UnsupportedRemote: If remote is not a GitHub SSH remote
    """
    remote = remote.strip()
    if not remote.startswith(GITHUB_SSH_PREFIX) or not remote.endswith(GIT_SUFFIX):
        raise UnsupportedRemote(
            f"Only github repos supported, expected "
            f"'{GITHUB_SSH_PREFIX}{{org}}/{{repo}}{GIT_SUFFIX}', got: {remote!r}"
        )

    blob_path = "/".join(
        quote(part, safe="") for part in relative_path.replace("\\", "/").split("/") if part
    )
    blob = f"/blob/{quote(branch, safe='/')}/{blob_path}"

    url = remote.replace(":", "/", 1)
    url = "https://" + url[len("git@"):]
    url = url[: -len(GIT_SUFFIX)] + blob
    if line != 0:
        url += f"#L{line}"

    return url
