"""
Path constants and utilities for burrow.

Decides whether a requested path names a file or a directory.
"""

from pathlib import Path

import burrow.templates as templates_module

# Bundled shell templates
TEMPLATES_DIR = Path(templates_module.__file__).parent

# Name of the installed executable, also the default shell alias
DEFAULT_COMMAND = "burrow"

# Environment overrides for `burrow init`
ENV_CMD = "BURROW_CMD"
ENV_HOOK = "BURROW_HOOK"
ENV_ECHO = "BURROW_ECHO"

# Well-known files that carry no extension (opt-in via --known-names)
FILES_WITHOUT_EXTENSION = frozenset(
    name.lower()
    for name in (
        # Build tools
        "Makefile", "CMakeLists", "Rakefile", "Jakefile", "Gruntfile", "Gulpfile",
        # Container/VM
        "Dockerfile", "Containerfile", "Vagrantfile",
        # CI/CD
        "Jenkinsfile", "Procfile", "Buildfile",
        # Package managers
        "Gemfile", "Podfile", "Cartfile", "Brewfile",
        # Documentation
        "README", "LICENSE", "CHANGELOG", "CONTRIBUTING", "AUTHORS", "CONTRIBUTORS",
        "COPYING", "INSTALL", "NEWS", "TODO", "HISTORY", "NOTICE",
        # Config files
        "Cakefile", "Capfile", "Guardfile",
        # Version control
        "CODEOWNERS",
    )
)


def has_extension(path: Path) -> bool:
    """
    Check if the final path segment carries a non-empty extension.

    `.bashrc` and `..` have none, and neither does a trailing dot
    (`notes.`), which newer Pythons report as the suffix `.`.
    """
    return path.suffix not in ("", ".")


def is_file_path(path: Path, known_names: bool = False) -> bool:
    """Decide whether `path` should be created as a file rather than a directory."""
    if has_extension(path):
        return True
    return known_names and path.name.lower() in FILES_WITHOUT_EXTENSION
