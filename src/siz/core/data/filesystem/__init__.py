"""Filesystem walking with gitignore style filtering."""

from __future__ import annotations

from .exclusions import GlobOverrides, IgnoreFile, IgnoreStack, Match
from .scanner import (
    DirectoryScanner,
    ParallelDirectoryScanner,
    ScanSettings,
    WalkEntry,
    WalkState,
)

__all__ = [
    "DirectoryScanner",
    "GlobOverrides",
    "IgnoreFile",
    "IgnoreStack",
    "Match",
    "ParallelDirectoryScanner",
    "ScanSettings",
    "WalkEntry",
    "WalkState",
]
