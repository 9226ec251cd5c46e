"""
Shell init script rendering.

Each supported shell maps to a renderer that fills the shell's bundled
template with the options of one `burrow init` call. Adding a shell means
adding a `Shell` member, its templates and one entry in RENDERERS.
"""

import re
import string
from dataclasses import dataclass
from typing import Callable

from burrow.errors import InvalidCommandError, UnsupportedShellError
from burrow.paths import DEFAULT_COMMAND, TEMPLATES_DIR
from burrow.types import InitHook, Shell

# Alias must be usable as a function name in both bash and zsh
VALID_COMMAND = re.compile(r"[A-Za-z_][A-Za-z0-9_-]*")


class ShellTemplate(string.Template):
    """Template with `%{name}` placeholders, so shell `$` syntax stays literal."""

    delimiter = "%"


@dataclass(frozen=True)
class ShellOptions:
    """Options for rendering one init script."""

    cmd: str | None = None  # Alias for `burrow create`, default name if unset
    hook: InitHook = InitHook.PWD
    echo: bool = False  # Hook prints the new directory when it fires

    @property
    def command(self) -> str:
        if self.cmd is None or not self.cmd.strip():
            return DEFAULT_COMMAND
        return self.cmd


def load_template(name: str) -> ShellTemplate:
    """Load a bundled template by name (without the .txt suffix)."""
    return ShellTemplate((TEMPLATES_DIR / f"{name}.txt").read_text())


def render_echo(command: str, indent: int) -> str:
    """Echo statement placed in the hook body."""
    return " " * indent + f'\\builtin echo "{command}: ${{PWD}}"\n'


def render_hook(shell: Shell, opts: ShellOptions, echo_indent: int = 4) -> str:
    """Hook registration code for `shell`, empty when no hook is requested."""
    if opts.hook is InitHook.NONE:
        return ""
    echo = render_echo(opts.command, echo_indent) if opts.echo else ""
    template = load_template(f"{shell.value}-hook-{opts.hook.value}")
    return template.substitute(echo=echo)


def render_bash(opts: ShellOptions) -> str:
    # bash has no chpwd event; the pwd hook compares directories inside an `if`
    echo_indent = 8 if opts.hook is InitHook.PWD else 4
    return load_template("bash").substitute(
        cmd=opts.command,
        hook=render_hook(Shell.BASH, opts, echo_indent),
    )


def render_zsh(opts: ShellOptions) -> str:
    return load_template("zsh").substitute(
        cmd=opts.command,
        hook=render_hook(Shell.ZSH, opts),
    )


RENDERERS: dict[Shell, Callable[[ShellOptions], str]] = {
    Shell.BASH: render_bash,
    Shell.ZSH: render_zsh,
}


def parse_shell(name: str | Shell) -> Shell:
    """Resolve a shell identifier, rejecting anything without a template."""
    if isinstance(name, Shell):
        return name
    try:
        return Shell(name)
    except ValueError:
        raise UnsupportedShellError(str(name)) from None


def render(shell: str | Shell, opts: ShellOptions) -> str:
    """
    Render the init script for `shell`.

    Raises UnsupportedShellError for unknown shells and InvalidCommandError
    for aliases that are not valid function names. Nothing is rendered in
    either case.
    """
    selected = parse_shell(shell)
    if not VALID_COMMAND.fullmatch(opts.command):
        raise InvalidCommandError(opts.command)
    return RENDERERS[selected](opts)
