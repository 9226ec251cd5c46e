"""
Main CLI entry point for burrow.

Usage:
    burrow create PATH... [--verbose] [--known-names]
    burrow init {bash,zsh} [--cmd ALIAS] [--hook {none,prompt,pwd}] [--echo]
    burrow stat [PATH...] [--all]
    burrow version
"""

from pathlib import Path

import typer
from rich.console import Console

from burrow import __version__
from burrow.paths import ENV_CMD, ENV_ECHO, ENV_HOOK
from burrow.types import InitHook

app = typer.Typer(
    name="burrow",
    help="Create directories and files quickly. Paths with extensions are files; others are directories.",
    no_args_is_help=True,
)
console = Console()


@app.command()
def create(
    paths: list[Path] = typer.Argument(..., help="Paths to create"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Describe each created path instead of a blank line"
    ),
    known_names: bool = typer.Option(
        False, "--known-names", help="Treat names like Makefile or README as files"
    ),
) -> None:
    """Create directories and empty files, including missing parents."""
    from burrow.commands.create import run_create

    run_create(paths, verbose=verbose, known_names=known_names)


@app.command()
def init(
    shell: str = typer.Argument(..., help="Shell to generate the script for (bash, zsh)"),
    cmd: str | None = typer.Option(
        None, "--cmd", envvar=ENV_CMD, help="Name of the shell command (default: burrow)"
    ),
    hook: InitHook = typer.Option(
        InitHook.PWD, "--hook", envvar=ENV_HOOK, help="When the shell hook fires"
    ),
    echo: bool = typer.Option(
        False, "--echo", envvar=ENV_ECHO, help="Print the new directory when the hook fires"
    ),
) -> None:
    """Print the shell integration script."""
    from burrow.commands.init import run_init
    from burrow.shell import ShellOptions

    run_init(shell, ShellOptions(cmd=cmd, hook=hook, echo=echo))


@app.command("stat")
def stat_paths(
    paths: list[Path] | None = typer.Argument(None, help="Paths to describe"),
    all_entries: bool = typer.Option(False, "--all", help="Describe every entry of the current directory"),
) -> None:
    """Show ls -l style information about paths."""
    from burrow.commands.info import run_stat

    run_stat(paths or [], all_entries=all_entries)


@app.command()
def version() -> None:
    """Show the installed version."""
    console.print(f"burrow {__version__}")


if __name__ == "__main__":
    app()
