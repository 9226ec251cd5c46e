"""
Create command - makes directories and empty files from a list of paths.

Per-path handling:
- Path exists: report it, leave it untouched
- Missing parents: create them; on failure report and skip the path
- Final segment with an extension: create an empty file
- Otherwise: create a directory

A failing path never stops the batch. Only errors writing the report
itself propagate.
"""

from dataclasses import dataclass
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from burrow.paths import is_file_path
from burrow.types import CreateStatus

console = Console(soft_wrap=True, emoji=False)
err_console = Console(stderr=True, soft_wrap=True, emoji=False)


@dataclass(frozen=True)
class CreateResult:
    """Outcome of creating a single path."""

    path: Path
    status: CreateStatus
    error: OSError | None = None  # Set for PARENT_FAILED and CREATE_FAILED


def create_path(path: Path, known_names: bool = False) -> CreateResult:
    """Create one path as a file or directory and return what happened."""
    if path.exists():
        return CreateResult(path=path, status=CreateStatus.ALREADY_EXISTS)

    parent = path.parent
    if not parent.exists():
        try:
            parent.mkdir(parents=True)
        except OSError as e:
            return CreateResult(path=path, status=CreateStatus.PARENT_FAILED, error=e)

    if is_file_path(path, known_names):
        try:
            # Exclusive create: never truncate something that appeared meanwhile
            with path.open("x"):
                pass
        except OSError as e:
            return CreateResult(path=path, status=CreateStatus.CREATE_FAILED, error=e)
        return CreateResult(path=path, status=CreateStatus.CREATED_FILE)

    try:
        path.mkdir()
    except OSError as e:
        return CreateResult(path=path, status=CreateStatus.CREATE_FAILED, error=e)
    return CreateResult(path=path, status=CreateStatus.CREATED_DIRECTORY)


def report(result: CreateResult, verbose: bool = False, known_names: bool = False) -> None:
    """Print the status line for one result."""
    path = escape(str(result.path))
    kind = "file" if is_file_path(result.path, known_names) else "directory"

    if result.status is CreateStatus.ALREADY_EXISTS:
        console.print(f"Path already exists: {path}")
    elif result.status is CreateStatus.PARENT_FAILED:
        err_console.print(
            f"[red]Error[/red] creating directory {escape(str(result.path.parent))}: "
            f"{escape(str(result.error))}"
        )
    elif result.status is CreateStatus.CREATE_FAILED:
        err_console.print(f"[red]Error[/red] creating {kind} {path}: {escape(str(result.error))}")
    elif verbose:
        console.print(f"[green]✓[/green] Created {kind}: {path}")
    else:
        console.print()


def run_create(paths: list[Path], verbose: bool = False, known_names: bool = False) -> None:
    """Main create routine: process every path in order, reporting each."""
    for path in paths:
        result = create_path(path, known_names=known_names)
        report(result, verbose=verbose, known_names=known_names)
