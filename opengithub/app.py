"""Main Typer application instance."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from opengithub.commands import init, open_link

app = typer.Typer(
    name="opengithub",
    help="Turn a copied file path (with optional :line) into a GitHub link",
    add_completion=False,
)


@app.callback()
def configure(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log resolution and git details to stderr"
    ),
):
    """Configure logging before any command runs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


# Register commands
app.command(name="open")(open_link.command)
app.command(name="init")(init.command)


def main():
    """Entry point for pip-installed command."""
    app()


if __name__ == "__main__":
    main()
