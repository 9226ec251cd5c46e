"""
Shared domain types for burrow.

Enums provide exhaustiveness checking and prevent stringly-typed errors.
"""

from enum import Enum


class Shell(Enum):
    """Shells with a bundled init template."""

    BASH = "bash"
    ZSH = "zsh"


class InitHook(str, Enum):
    """When the shell hook fires."""

    NONE = "none"
    PROMPT = "prompt"
    PWD = "pwd"


class CreateStatus(Enum):
    """Result status for a single path creation."""

    ALREADY_EXISTS = "already-exists"
    CREATED_FILE = "created-file"
    CREATED_DIRECTORY = "created-directory"
    PARENT_FAILED = "parent-failed"
    CREATE_FAILED = "create-failed"
