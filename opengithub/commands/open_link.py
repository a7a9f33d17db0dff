"""Open command implementation."""

from typing import Optional

import typer
from click.core import ParameterSource
from rich.console import Console
from rich.markup import escape

from opengithub.core.config import Config
from opengithub.core.errors import (
    ClipboardError,
    ExternalToolError,
    GitError,
    ParseError,
    ResolutionError,
    UnsupportedRemote,
)
from opengithub.core.linker import GithubLinker

console = Console()


def _fail(stage: str, error: Exception, hint: str) -> None:
    console.print(f"[red]{stage} error:[/red] {escape(str(error))}")
    console.print(f"[yellow]Hint:[/yellow] {hint}")
    raise typer.Exit(code=1)


def command(
    ctx: typer.Context,
    file: Optional[str] = typer.Argument(
        None,
        help="File (with optional :line) to open in GitHub. Defaults to clipboard.",
    ),
    root: Optional[str] = typer.Option(
        None,
        "--root",
        "-r",
        envvar="OPENGITHUB_ROOT",
        help="Root directory to search for relative paths (default: current directory)",
    ),
    branch: Optional[str] = typer.Option(
        None,
        "--branch",
        "-b",
        envvar="OPENGITHUB_BRANCH",
        help="Git branch to link to (default: current branch)",
    ),
    open_browser: bool = typer.Option(
        True,
        "--open/--no-open",
        envvar="OPENGITHUB_OPEN",
        help="Open the link in the default browser",
    ),
):
    """Resolve a file reference and print its GitHub URL.

    The reference may be partial ("server/handler.go:42"); it is searched for
    below the root directory, located in its git repository and rendered as
    a https://github.com/{org}/{repo}/blob/{branch}/{path}#L{line} link.
    """
    try:
        config = Config()
    except RuntimeError as e:
        _fail("Config", e, "Fix or remove the config file, or run: opengithub init --force")

    root = config.resolve(root, "search.root")
    branch = config.resolve(branch, "git.branch")
    if ctx.get_parameter_source("open_browser") == ParameterSource.DEFAULT:
        open_browser = bool(config.get("browser.open", True))

    linker = GithubLinker(console=console)

    try:
        raw = linker.read_input(file)
        result = linker.build(raw, root=root, branch=branch)
    except ParseError as e:
        _fail("Parse", e, "Expected 'path' or 'path:line', e.g. src/app.go:42")
    except ResolutionError as e:
        _fail(
            "Resolution",
            e,
            "Check that --root or $OPENGITHUB_ROOT points at a directory containing the file",
        )
    except ClipboardError as e:
        _fail("Clipboard", e, "Pass the file explicitly: opengithub open path/to/file:line")
    except GitError as e:
        _fail(
            "Git",
            e,
            "Check that the file is inside a git repository with an 'origin' remote",
        )
    except UnsupportedRemote as e:
        _fail("Remote", e, "Only git@github.com:{org}/{repo}.git remotes are supported")

    typer.echo(result.url)

    if open_browser:
        try:
            linker.open_url(result.url)
        except ExternalToolError as e:
            _fail("Browser", e, "Use --no-open and copy the link instead")
