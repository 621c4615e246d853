"""siz - report file sizes under a directory tree.

Files can be filtered by type name or gitignore style globs and reported in
size, name or parallel order.
"""

from siz.app.cli import main

__all__ = ["main"]
