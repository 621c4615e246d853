"""Gitignore-style path rules for filesystem walks.

Two rule sources decide whether the walker reports or descends into an
entry: ignore files found in the tree (``.ignore`` and ``.gitignore``) and
user supplied glob overrides. Both use gitignore syntax via ``pathspec``.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Final, override

import pathspec
from pathspec.pattern import Pattern

from siz.config.exceptions import GlobCompileError

logger = logging.getLogger(__name__)

# Ignore file names in precedence order, highest first
IGNORE_FILE_NAMES: Final[tuple[str, ...]] = (".ignore", ".gitignore")
GIT_IGNORE_FILE: Final[str] = ".gitignore"
GIT_DIR: Final[str] = ".git"

# pathspec pattern factory for gitignore syntax
GITIGNORE_SYNTAX: Final[str] = "gitignore"


class Match(str, Enum):
    """Outcome of matching a path against a set of rules."""

    NONE = "none"
    IGNORE = "ignore"
    WHITELIST = "whitelist"

    @property
    def is_none(self) -> bool:
        """True when no rule applied."""
        return self is Match.NONE

    @property
    def is_ignore(self) -> bool:
        """True when the path is excluded."""
        return self is Match.IGNORE

    @property
    def is_whitelist(self) -> bool:
        """True when the path is explicitly included."""
        return self is Match.WHITELIST

    @override
    def __str__(self) -> str:
        """Return string representation."""
        return self.value


def _relative_posix(path: str, base: str) -> str | None:
    """Return ``path`` relative to ``base`` with ``/`` separators.

    Returns None when ``path`` is not below ``base``.
    """
    rel = os.path.relpath(path, base)
    if rel == os.curdir or rel == os.pardir or rel.startswith(os.pardir + os.sep):
        return None
    return rel.replace(os.sep, "/")


def _compile_line(line: str) -> Pattern | None:
    # empty lines produce no pattern at all
    spec = pathspec.PathSpec.from_lines(GITIGNORE_SYNTAX, [line])
    patterns = list(spec.patterns)
    return patterns[0] if patterns else None


class IgnoreFile:
    """The rules of a single ignore file, relative to its directory.

    Later lines take precedence over earlier ones and ``!`` negates a rule.
    """

    def __init__(self, base_dir: str, patterns: Sequence[Pattern], source: str = "") -> None:
        """Initialize the ignore file.

        Args:
            base_dir: Absolute directory the patterns are relative to
            patterns: Compiled gitignore patterns in file order
            source: Path of the file the rules were read from, its base name
                is the ignore file kind
        """
        self.base_dir: str = base_dir
        self.source: str = source
        self.kind: str = os.path.basename(source)
        self._patterns: list[Pattern] = [p for p in patterns if p.include is not None]

    @classmethod
    def from_lines(cls, base_dir: str, lines: Iterable[str], source: str = "") -> IgnoreFile:
        """Compile ignore rules from text lines.

        Args:
            base_dir: Absolute directory the rules are relative to
            lines: Lines in gitignore syntax
            source: Path of the file the lines came from

        Returns:
            Compiled ignore file
        """
        spec = pathspec.PathSpec.from_lines(GITIGNORE_SYNTAX, lines)
        return cls(base_dir, spec.patterns, source)

    @classmethod
    def read(cls, path: str) -> IgnoreFile | None:
        """Read an ignore file from disk.

        Unreadable or malformed files are skipped with a warning, the same way
        git ignores them.

        Args:
            path: Absolute path of the ignore file

        Returns:
            Compiled ignore file, or None when it cannot be used
        """
        try:
            with open(path, encoding="utf-8", errors="replace") as handle:
                lines = handle.read().splitlines()
        except FileNotFoundError:
            return None
        except OSError as exc:
            logger.warning("Could not read ignore file %s: %s", path, exc)
            return None

        try:
            return cls.from_lines(os.path.dirname(path), lines, source=path)
        except ValueError as exc:
            logger.warning("Could not parse ignore file %s: %s", path, exc)
            return None

    def __len__(self) -> int:
        return len(self._patterns)

    def matched(self, path: str, is_dir: bool) -> Match:
        """Match an absolute path against the rules of this file.

        Args:
            path: Absolute path to check
            is_dir: Whether the path is a directory

        Returns:
            IGNORE or WHITELIST for the last matching rule, NONE otherwise
        """
        rel = _relative_posix(path, self.base_dir)
        if rel is None:
            return Match.NONE
        if is_dir:
            rel += "/"

        result = Match.NONE
        for pattern in self._patterns:
            if pattern.match_file(rel) is not None:
                result = Match.IGNORE if pattern.include else Match.WHITELIST
        return result


class IgnoreStack:
    """Ignore files applicable to one directory of a walk.

    Each directory gets a stack that extends its parent's with the ignore
    files the directory itself contains. A ``.ignore`` match at any level
    takes precedence over any ``.gitignore`` match; among files of one kind,
    deeper directories take precedence over shallower ones. ``.gitignore``
    files only count inside a git repository.
    """

    __slots__: tuple[str, ...] = ("parent", "files", "in_git_repo")

    def __init__(
        self,
        parent: IgnoreStack | None,
        files: Sequence[IgnoreFile],
        in_git_repo: bool,
    ) -> None:
        """Initialize the stack.

        Args:
            parent: Stack of the parent directory
            files: Ignore files of this directory in precedence order
            in_git_repo: Whether this directory is inside a git repository
        """
        self.parent: IgnoreStack | None = parent
        self.files: tuple[IgnoreFile, ...] = tuple(files)
        self.in_git_repo: bool = in_git_repo

    @classmethod
    def empty(cls) -> IgnoreStack:
        """Stack without any rules, used when ignore files are disabled."""
        return cls(None, (), in_git_repo=False)

    @classmethod
    def for_root(cls, root: str) -> IgnoreStack:
        """Build the stack for a walk root, including its ancestor directories.

        Args:
            root: Absolute path of the walk root directory

        Returns:
            Stack whose rules cover the root's ancestors
        """
        ancestors: list[str] = []
        current = os.path.dirname(root)
        while True:
            ancestors.append(current)
            parent = os.path.dirname(current)
            if parent == current:
                break
            current = parent

        # outermost first so deeper directories are pushed on top
        stack = cls.empty()
        for directory in reversed(ancestors):
            stack = stack.child(directory)
        return stack

    def child(self, directory: str) -> IgnoreStack:
        """Extend the stack with the ignore files found in ``directory``.

        Args:
            directory: Absolute directory path

        Returns:
            New stack for the directory
        """
        in_git_repo = self.in_git_repo or os.path.exists(os.path.join(directory, GIT_DIR))
        files: list[IgnoreFile] = []
        for name in IGNORE_FILE_NAMES:
            if name == GIT_IGNORE_FILE and not in_git_repo:
                continue
            ignore_file = IgnoreFile.read(os.path.join(directory, name))
            if ignore_file is not None and len(ignore_file) > 0:
                files.append(ignore_file)

        if not files and in_git_repo == self.in_git_repo:
            return self
        return IgnoreStack(self, files, in_git_repo)

    def matched(self, path: str, is_dir: bool) -> Match:
        """Match an absolute path, by ignore file kind then deepest first.

        Args:
            path: Absolute path to check
            is_dir: Whether the path is a directory

        Returns:
            The first non-NONE match, NONE when no rule applies
        """
        for kind in IGNORE_FILE_NAMES:
            stack: IgnoreStack | None = self
            while stack is not None:
                for ignore_file in stack.files:
                    if ignore_file.kind != kind:
                        continue
                    result = ignore_file.matched(path, is_dir)
                    if not result.is_none:
                        return result
                stack = stack.parent
        return Match.NONE


class GlobOverrides:
    """User supplied glob overrides relative to the walk root.

    Globs use gitignore syntax with inverted meaning: a plain glob whitelists
    matching paths and a ``!`` prefixed glob ignores them. Once at least one
    whitelist glob exists, files matching no glob are ignored. Directories are
    never ignored for failing to match. Globs starting with ``#`` are comments.
    """

    def __init__(self, root: str, globs: Iterable[str]) -> None:
        """Compile the overrides.

        Args:
            root: Walk root the globs are relative to
            globs: Glob strings in precedence order, last match wins

        Raises:
            GlobCompileError: If a glob is malformed
        """
        self.root: str = os.path.abspath(root)
        self.globs: tuple[str, ...] = tuple(glob for glob in globs if glob.strip())
        self._rules: list[tuple[Pattern, Match]] = []
        self._num_whitelists: int = 0

        for glob in self.globs:
            if glob.startswith("#"):
                logger.debug("Skipping comment glob %s", glob)
                continue
            if glob.startswith("!"):
                line, result = glob[1:], Match.IGNORE
                # only a leading '#' of the whole glob starts a comment
                if line.startswith("#"):
                    line = "\\" + line
            else:
                line, result = glob, Match.WHITELIST

            try:
                pattern = _compile_line(line)
            except ValueError as exc:
                raise GlobCompileError(glob, str(exc)) from exc
            if pattern is None or pattern.include is None:
                raise GlobCompileError(glob, "pattern matches nothing")

            self._rules.append((pattern, result))
            if result.is_whitelist:
                self._num_whitelists += 1

        logger.debug(
            "Compiled %d glob overrides (%d whitelist)",
            len(self._rules),
            self._num_whitelists,
        )

    def __len__(self) -> int:
        return len(self._rules)

    @property
    def num_whitelists(self) -> int:
        """Number of whitelist globs."""
        return self._num_whitelists

    def matched(self, path: str, is_dir: bool) -> Match:
        """Match an absolute path against the overrides.

        Args:
            path: Absolute path to check
            is_dir: Whether the path is a directory

        Returns:
            Match of the last matching glob, IGNORE for unmatched files when
            whitelist globs exist, NONE otherwise
        """
        if not self._rules:
            return Match.NONE

        rel = _relative_posix(path, self.root)
        if rel is None:
            return Match.NONE
        if is_dir:
            rel += "/"

        result = Match.NONE
        for pattern, on_match in self._rules:
            if pattern.match_file(rel) is not None:
                result = on_match

        if result.is_none and self._num_whitelists > 0 and not is_dir:
            return Match.IGNORE
        return result
