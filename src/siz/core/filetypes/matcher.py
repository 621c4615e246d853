"""Compiled file type matcher."""

from __future__ import annotations

import fnmatch
import os
import re
from collections.abc import Iterable

from siz.core.data.filesystem.exclusions import Match

__all__ = ["CompiledTypeMatcher", "Match"]


class CompiledTypeMatcher:
    """Classifies paths by the file name globs of the selected types.

    Files whose name matches a selected glob are whitelisted, every other file
    is ignored. Directories are never classified. Matching is case sensitive
    and applies to the final path component only.

    The matcher is immutable once built.
    """

    __slots__: tuple[str, ...] = ("_names", "_globs", "_regex")

    def __init__(self, selected_names: Iterable[str], globs: Iterable[str]) -> None:
        """Compile the matcher.

        Args:
            selected_names: Type names the matcher was built for
            globs: File name globs of all selected types

        Raises:
            re.error: If a glob cannot be compiled
        """
        self._names: tuple[str, ...] = tuple(selected_names)
        self._globs: tuple[str, ...] = tuple(dict.fromkeys(globs))
        pattern = "|".join(f"(?:{fnmatch.translate(glob)})" for glob in self._globs)
        self._regex: re.Pattern[str] | None = re.compile(pattern) if pattern else None

    @property
    def selected_names(self) -> tuple[str, ...]:
        """Type names the matcher whitelists."""
        return self._names

    @property
    def globs(self) -> tuple[str, ...]:
        """Deduplicated globs of the selected types."""
        return self._globs

    def matched(self, path: str, is_dir: bool) -> Match:
        """Classify a path.

        Args:
            path: Path of the entry
            is_dir: Whether the entry is a directory

        Returns:
            NONE for directories, WHITELIST for matching files, IGNORE otherwise
        """
        if is_dir:
            return Match.NONE

        name = os.path.basename(path)
        if self._regex is not None and self._regex.match(name) is not None:
            return Match.WHITELIST
        return Match.IGNORE

    def __repr__(self) -> str:
        return f"CompiledTypeMatcher(selected_names={list(self._names)!r})"
