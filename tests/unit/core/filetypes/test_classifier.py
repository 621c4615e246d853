"""Test suite for type classification."""

from __future__ import annotations

import re

import click
import pytest

from siz.config.exceptions import TypeBuildError, UnrecognizedTypeError
from siz.core.filetypes import classifier as classifier_module
from siz.core.filetypes.classifier import (
    LIST_TYPES_HINT,
    TypeClassifier,
    unrecognized_type_message,
)
from siz.core.filetypes.defaults import TypeDefinition
from siz.core.filetypes.matcher import Match

BATCH = TypeDefinition(("bat", "batch"), ("*.bat",))
JINJA = TypeDefinition(("jinja",), ("*.j2", "*.jinja", "*.jinja2"))
RUST = TypeDefinition(("rust",), ("*.rs",))
XLS = TypeDefinition(("xls",), ("*.xls",))
XML = TypeDefinition(("xml",), ("*.xml",))


class TestTypeClassifierBuild:
    """Test TypeClassifier.build."""

    def test_single_type(self) -> None:
        """Test that a requested type whitelists only its files."""
        matcher = TypeClassifier().build(["rust"])

        assert matcher.matched("foo.rs", False) is Match.WHITELIST
        assert matcher.matched("foo.py", False) is Match.IGNORE
        assert matcher.matched("foo", False) is Match.IGNORE

    def test_multiple_types(self) -> None:
        """Test that several requested types are all whitelisted."""
        matcher = TypeClassifier().build(["rust", "py"])

        assert matcher.matched("foo.rs", False) is Match.WHITELIST
        assert matcher.matched("foo.py", False) is Match.WHITELIST
        assert matcher.matched("foo", False) is Match.IGNORE

    def test_any_alias_selects_the_definition(self) -> None:
        """Test that secondary aliases resolve to the same globs."""
        classifier = TypeClassifier([BATCH, RUST])

        assert classifier.build(["batch"]).matched("run.bat", False) is Match.WHITELIST
        assert classifier.build(["bat"]).matched("run.bat", False) is Match.WHITELIST

    def test_all_selects_every_type(self) -> None:
        """Test the 'all' pseudo type."""
        matcher = TypeClassifier([BATCH, RUST]).build(["all"])

        assert matcher.matched("run.bat", False) is Match.WHITELIST
        assert matcher.matched("lib.rs", False) is Match.WHITELIST
        assert matcher.matched("notes.txt", False) is Match.IGNORE

    def test_unknown_type_fails(self) -> None:
        """Test that an unknown type name fails the build."""
        with pytest.raises(UnrecognizedTypeError) as exc_info:
            _ = TypeClassifier().build(["bogus"])

        assert exc_info.value.name == "bogus"
        assert exc_info.value.message.startswith("unrecognized file type: bogus")

    def test_unknown_type_mixed_with_known_fails(self) -> None:
        """Test that one unknown name fails the whole build."""
        with pytest.raises(UnrecognizedTypeError):
            _ = TypeClassifier().build(["rust", "bogus"])

    def test_build_is_repeatable(self) -> None:
        """Test that repeated builds give equivalent matchers."""
        classifier = TypeClassifier()

        first = classifier.build(["rust"])
        second = classifier.build(["rust"])

        assert first.globs == second.globs
        assert second.matched("foo.py", False) is Match.IGNORE

    def test_compile_failure_is_type_build_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that other build failures surface as TypeBuildError."""

        def failing_matcher(*args: object) -> None:
            raise re.error("bad pattern")

        monkeypatch.setattr(classifier_module, "CompiledTypeMatcher", failing_matcher)

        with pytest.raises(TypeBuildError, match="^error building types: bad pattern$"):
            _ = TypeClassifier().build(["rust"])


class TestUnrecognizedTypeMessage:
    """Test the remediation text for unknown types."""

    def test_exact_match_message(self) -> None:
        """Test that exact glob matches are suggested first."""
        message = unrecognized_type_message("j2", [JINJA, RUST])

        assert message == (
            "unrecognized file type: j2\n\n"
            "Did you mean: jinja? The 'j2' string matched in the path glob pattern list.\n\n"
            f"{LIST_TYPES_HINT}"
        )

    def test_approximate_match_message(self) -> None:
        """Test the message with only approximate matches."""
        message = unrecognized_type_message("xmls", [RUST, XLS, XML])

        assert message == (
            "unrecognized file type: xmls\n\n"
            "Types with approximate type name or path glob pattern string matches: xml, xls\n\n"
            f"{LIST_TYPES_HINT}"
        )

    def test_no_match_message(self) -> None:
        """Test the message without any suggestion."""
        message = unrecognized_type_message("zzzzzz", [RUST])

        assert message == f"unrecognized file type: zzzzzz\n\n{LIST_TYPES_HINT}"

    def test_hint_text(self) -> None:
        """Test the --list-types pointer."""
        assert LIST_TYPES_HINT == (
            "See --list-types for a list of supported type names and associated path glob patterns."
        )

    def test_build_error_carries_message(self) -> None:
        """Test that build failures use the remediation text."""
        with pytest.raises(UnrecognizedTypeError) as exc_info:
            _ = TypeClassifier([RUST, XLS, XML]).build(["xmls"])

        assert str(exc_info.value) == unrecognized_type_message("xmls", [RUST, XLS, XML])


class TestListPrintable:
    """Test TypeClassifier.list_printable."""

    def test_one_line_per_alias(self) -> None:
        """Test that every alias gets its own line with the shared globs."""
        output = TypeClassifier([BATCH, RUST]).list_printable()

        assert output == "bat: *.bat\nbatch: *.bat\nrust: *.rs"

    def test_multiple_globs_are_space_separated(self) -> None:
        """Test the glob list rendering."""
        output = TypeClassifier([JINJA]).list_printable()

        assert output == "jinja: *.j2 *.jinja *.jinja2"

    def test_no_trailing_newline(self) -> None:
        """Test that the listing does not end with a line terminator."""
        output = TypeClassifier().list_printable()

        assert not output.endswith("\n")
        assert "rust: *.rs" in output.splitlines()

    def test_color_styles_names_only(self) -> None:
        """Test that color renders the alias name bold blue."""
        output = TypeClassifier([RUST]).list_printable(color=True)

        assert output == click.style("rust", fg="blue", bold=True) + ": *.rs"
        assert click.unstyle(output) == "rust: *.rs"
