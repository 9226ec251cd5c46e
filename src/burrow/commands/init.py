"""
Init command - prints the shell integration script.

Usage in a shell rc file:
    eval "$(burrow init bash)"
    eval "$(burrow init zsh --cmd mk --hook prompt)"
"""

import typer
from rich.console import Console
from rich.markup import escape

from burrow.errors import BurrowError
from burrow.shell import ShellOptions, render

err_console = Console(stderr=True, soft_wrap=True, emoji=False)


def run_init(shell: str, opts: ShellOptions) -> None:
    """Render and print the script; nothing reaches stdout on failure."""
    try:
        script = render(shell, opts)
    except BurrowError as e:
        err_console.print(f"[red]Error:[/red] {escape(e.message)}")
        raise typer.Exit(1)

    # Raw text: shell syntax like [[ ... ]] must not be read as markup
    typer.echo(script, nl=False)
