"""
Burrow - create directories and files in one pass.

Components:
- Create: Paths with an extension become empty files, others directories
- Init: Shell integration snippet (command alias + optional hook) for bash/zsh
- Stat: ls -l style information about paths
"""

__version__ = "0.1.0"
