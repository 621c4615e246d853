"""Test suite for ignore file rules and glob overrides."""

from __future__ import annotations

import os
import warnings
from pathlib import Path

import pytest

from siz.config.exceptions import GlobCompileError
from siz.core.data.filesystem import exclusions
from siz.core.data.filesystem.exclusions import GlobOverrides, IgnoreFile, IgnoreStack, Match

BASE = os.path.abspath(os.sep + "base")


def under_base(*parts: str) -> str:
    return os.path.join(BASE, *parts)


class TestMatch:
    """Test the Match enum."""

    def test_predicates(self) -> None:
        """Test the tri-state predicates."""
        assert Match.NONE.is_none
        assert Match.IGNORE.is_ignore
        assert Match.WHITELIST.is_whitelist
        assert not Match.IGNORE.is_whitelist
        assert str(Match.WHITELIST) == "whitelist"


class TestIgnoreFile:
    """Test the IgnoreFile class."""

    def test_last_matching_line_wins(self) -> None:
        """Test that negation re-includes previously ignored paths."""
        rules = IgnoreFile.from_lines(BASE, ["*.log", "!keep.log"])

        assert rules.matched(under_base("debug.log"), False) is Match.IGNORE
        assert rules.matched(under_base("keep.log"), False) is Match.WHITELIST
        assert rules.matched(under_base("notes.txt"), False) is Match.NONE

    def test_paths_outside_base_do_not_match(self) -> None:
        """Test that rules only apply below their directory."""
        rules = IgnoreFile.from_lines(BASE, ["*.log"])

        assert rules.matched(os.path.abspath(os.sep + "elsewhere/debug.log"), False) is Match.NONE
        assert rules.matched(BASE, True) is Match.NONE

    def test_directory_only_pattern(self) -> None:
        """Test that a trailing slash only matches directories."""
        rules = IgnoreFile.from_lines(BASE, ["build/"])

        assert rules.matched(under_base("build"), True) is Match.IGNORE
        assert rules.matched(under_base("build"), False) is Match.NONE

    def test_anchored_pattern(self) -> None:
        """Test that a leading slash anchors to the ignore file directory."""
        rules = IgnoreFile.from_lines(BASE, ["/top.txt"])

        assert rules.matched(under_base("top.txt"), False) is Match.IGNORE
        assert rules.matched(under_base("sub", "top.txt"), False) is Match.NONE

    def test_comments_and_blank_lines_are_skipped(self) -> None:
        """Test that comments and blank lines produce no rules."""
        rules = IgnoreFile.from_lines(BASE, ["# comment", "", "*.o"])

        assert len(rules) == 1

    def test_read_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing ignore file reads as None."""
        assert IgnoreFile.read(str(tmp_path / ".ignore")) is None

    def test_read_file(self, tmp_path: Path) -> None:
        """Test reading rules from disk."""
        ignore_path = tmp_path / ".ignore"
        _ = ignore_path.write_text("*.tmp\n")

        rules = IgnoreFile.read(str(ignore_path))

        assert rules is not None
        assert rules.base_dir == str(tmp_path)
        assert rules.matched(str(tmp_path / "a.tmp"), False) is Match.IGNORE


class TestIgnoreStack:
    """Test the IgnoreStack class."""

    def test_empty_stack_matches_nothing(self) -> None:
        """Test the empty stack."""
        assert IgnoreStack.empty().matched(under_base("a.log"), False) is Match.NONE

    def test_ignore_file_is_always_read(self, tmp_path: Path) -> None:
        """Test that .ignore applies outside git repositories."""
        _ = (tmp_path / ".ignore").write_text("*.tmp\n")

        stack = IgnoreStack.empty().child(str(tmp_path))

        assert not stack.in_git_repo
        assert stack.matched(str(tmp_path / "a.tmp"), False) is Match.IGNORE

    def test_gitignore_requires_git_repository(self, tmp_path: Path) -> None:
        """Test that .gitignore only applies inside a git repository."""
        _ = (tmp_path / ".gitignore").write_text("*.txt\n")

        outside = IgnoreStack.empty().child(str(tmp_path))
        assert outside.matched(str(tmp_path / "a.txt"), False) is Match.NONE

        (tmp_path / ".git").mkdir()
        inside = IgnoreStack.empty().child(str(tmp_path))
        assert inside.in_git_repo
        assert inside.matched(str(tmp_path / "a.txt"), False) is Match.IGNORE

    def test_ignore_takes_precedence_over_gitignore(self, tmp_path: Path) -> None:
        """Test precedence of .ignore over .gitignore in one directory."""
        (tmp_path / ".git").mkdir()
        _ = (tmp_path / ".gitignore").write_text("*.log\n")
        _ = (tmp_path / ".ignore").write_text("!keep.log\n")

        stack = IgnoreStack.empty().child(str(tmp_path))

        assert stack.matched(str(tmp_path / "keep.log"), False) is Match.WHITELIST
        assert stack.matched(str(tmp_path / "other.log"), False) is Match.IGNORE

    def test_deeper_rules_override_shallower(self, tmp_path: Path) -> None:
        """Test that a subdirectory ignore file overrides its parent."""
        sub = tmp_path / "sub"
        sub.mkdir()
        _ = (tmp_path / ".ignore").write_text("*.log\n")
        _ = (sub / ".ignore").write_text("!keep.log\n")

        stack = IgnoreStack.empty().child(str(tmp_path)).child(str(sub))

        assert stack.matched(str(sub / "keep.log"), False) is Match.WHITELIST
        assert stack.matched(str(sub / "other.log"), False) is Match.IGNORE

    def test_shallow_ignore_beats_deeper_gitignore(self, tmp_path: Path) -> None:
        """Test that .ignore rules win over .gitignore rules at any depth."""
        sub = tmp_path / "sub"
        sub.mkdir()
        (tmp_path / ".git").mkdir()
        _ = (tmp_path / ".ignore").write_text("!keep.log\n")
        _ = (sub / ".gitignore").write_text("*.log\n")

        stack = IgnoreStack.empty().child(str(tmp_path)).child(str(sub))

        assert stack.matched(str(sub / "keep.log"), False) is Match.WHITELIST
        assert stack.matched(str(sub / "other.log"), False) is Match.IGNORE

    def test_ancestor_rules_apply_to_root(self, tmp_path: Path) -> None:
        """Test that ignore files above the walk root are honored."""
        root = tmp_path / "project"
        root.mkdir()
        _ = (tmp_path / ".ignore").write_text("*.bak\n")

        stack = IgnoreStack.for_root(str(root)).child(str(root))

        assert stack.matched(str(root / "old.bak"), False) is Match.IGNORE

    def test_child_without_rules_reuses_stack(self, tmp_path: Path) -> None:
        """Test that directories without ignore files share the parent stack."""
        stack = IgnoreStack.empty()

        assert stack.child(str(tmp_path)) is stack


class TestGlobOverrides:
    """Test the GlobOverrides class."""

    def test_whitelist_glob(self) -> None:
        """Test that plain globs whitelist and unmatched files are ignored."""
        overrides = GlobOverrides(BASE, ["*.md"])

        assert overrides.matched(under_base("README.md"), False) is Match.WHITELIST
        assert overrides.matched(under_base("docs", "guide.md"), False) is Match.WHITELIST
        assert overrides.matched(under_base("main.py"), False) is Match.IGNORE

    def test_directories_are_not_ignored_by_whitelists(self) -> None:
        """Test that unmatched directories are still traversed."""
        overrides = GlobOverrides(BASE, ["*.md"])

        assert overrides.matched(under_base("docs"), True) is Match.NONE

    def test_negated_glob_ignores(self) -> None:
        """Test that '!' globs ignore matching paths."""
        overrides = GlobOverrides(BASE, ["*.md", "!CHANGELOG.md"])

        assert overrides.matched(under_base("CHANGELOG.md"), False) is Match.IGNORE
        assert overrides.matched(under_base("README.md"), False) is Match.WHITELIST

    def test_only_negated_globs(self) -> None:
        """Test that without whitelist globs unmatched files are left alone."""
        overrides = GlobOverrides(BASE, ["!*.log"])

        assert overrides.num_whitelists == 0
        assert overrides.matched(under_base("debug.log"), False) is Match.IGNORE
        assert overrides.matched(under_base("main.py"), False) is Match.NONE

    def test_later_globs_take_precedence(self) -> None:
        """Test that the last matching glob decides."""
        overrides = GlobOverrides(BASE, ["!*.md", "README.md"])

        assert overrides.matched(under_base("README.md"), False) is Match.WHITELIST
        assert overrides.matched(under_base("NOTES.md"), False) is Match.IGNORE

    def test_empty_overrides_match_nothing(self) -> None:
        """Test that no globs means no decision."""
        overrides = GlobOverrides(BASE, [])

        assert len(overrides) == 0
        assert overrides.matched(under_base("main.py"), False) is Match.NONE

    def test_bare_negation_is_rejected(self) -> None:
        """Test that a glob with nothing to match is an error."""
        with pytest.raises(GlobCompileError) as exc_info:
            _ = GlobOverrides(BASE, ["!"])

        assert exc_info.value.glob == "!"
        assert str(exc_info.value).startswith("error parsing glob '!'")

    def test_compile_error_is_wrapped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that pattern errors surface as GlobCompileError."""

        def failing_compile(line: str) -> None:
            raise ValueError(f"invalid pattern {line!r}")

        monkeypatch.setattr(exclusions, "_compile_line", failing_compile)

        with pytest.raises(GlobCompileError, match="invalid pattern"):
            _ = GlobOverrides(BASE, ["a/**b"])

    def test_comment_globs_are_skipped(self) -> None:
        """Test that a leading '#' makes a glob a comment."""
        overrides = GlobOverrides(BASE, ["# docs only", "*.md"])

        assert len(overrides) == 1
        assert overrides.num_whitelists == 1
        assert overrides.matched(under_base("README.md"), False) is Match.WHITELIST

    def test_negated_hash_glob_is_literal(self) -> None:
        """Test that '!#name' ignores a file literally named '#name'."""
        overrides = GlobOverrides(BASE, ["!#scratch"])

        assert len(overrides) == 1
        assert overrides.matched(under_base("#scratch"), False) is Match.IGNORE
        assert overrides.matched(under_base("scratch"), False) is Match.NONE


class TestPatternCompilation:
    """Test that gitignore patterns compile without deprecated syntax."""

    def test_no_deprecation_warnings(self) -> None:
        """Test compiling ignore files and overrides emits no deprecation warnings."""
        with warnings.catch_warnings():
            warnings.simplefilter("error", DeprecationWarning)
            rules = IgnoreFile.from_lines(BASE, ["*.log", "!keep.log"])
            overrides = GlobOverrides(BASE, ["*.md", "!CHANGELOG.md"])

        assert len(rules) == 2
        assert len(overrides) == 2
