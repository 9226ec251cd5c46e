"""
Stat command - ls -l style information about paths.
"""

import grp
import os
import pwd
import stat
import time
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

console = Console(soft_wrap=True, emoji=False)
err_console = Console(stderr=True, soft_wrap=True, emoji=False)

SIX_MONTHS = 182 * 24 * 60 * 60


def owner_name(uid: int) -> str:
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return str(uid)


def group_name(gid: int) -> str:
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return str(gid)


def format_mtime(mtime: float, now: float | None = None) -> str:
    """Recent files show the time of day, older ones the year."""
    now = time.time() if now is None else now
    local = time.localtime(mtime)
    if now - mtime < SIX_MONTHS:
        return time.strftime("%b %e %H:%M", local)
    return time.strftime("%b %e  %Y", local)


def stat_line(path: Path) -> str:
    """Describe `path` (without following symlinks) as a single line."""
    st = path.lstat()
    return " ".join(
        [
            stat.filemode(st.st_mode),
            str(st.st_nlink),
            owner_name(st.st_uid),
            group_name(st.st_gid),
            str(st.st_size),
            format_mtime(st.st_mtime),
            str(path),
        ]
    )


def run_stat(paths: list[Path], all_entries: bool = False) -> None:
    """Print one line per path; the first unreadable path aborts."""
    if all_entries:
        paths = sorted(Path(name) for name in os.listdir("."))

    for path in paths:
        try:
            line = stat_line(path)
        except OSError as e:
            err_console.print(f"[red]Error:[/red] {escape(str(e))}")
            raise typer.Exit(1)
        console.print(line, markup=False, highlight=False)
