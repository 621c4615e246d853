"""Test suite for the built-in file type table."""

from __future__ import annotations

from siz.core.filetypes.defaults import DEFAULT_TYPES, TypeDefinition


class TestTypeDefinition:
    """Test the TypeDefinition dataclass."""

    def test_canonical_name_is_first_alias(self) -> None:
        """Test that the first alias is the canonical name."""
        definition = TypeDefinition(("py", "python"), ("*.py", "*.pyi"))

        assert definition.canonical_name == "py"


class TestDefaultTypes:
    """Test the DEFAULT_TYPES table."""

    def test_table_is_sorted_by_canonical_name(self) -> None:
        """Test that definitions are ordered alphabetically."""
        names = [definition.canonical_name for definition in DEFAULT_TYPES]

        assert names == sorted(names)

    def test_every_definition_has_names_and_globs(self) -> None:
        """Test that no definition is empty."""
        for definition in DEFAULT_TYPES:
            assert definition.names
            assert definition.globs

    def test_canonical_names_are_unique(self) -> None:
        """Test that no two definitions share a canonical name."""
        names = [definition.canonical_name for definition in DEFAULT_TYPES]

        assert len(names) == len(set(names))

    def test_well_known_types_present(self) -> None:
        """Test a few well known definitions."""
        by_name = {name: definition for definition in DEFAULT_TYPES for name in definition.names}

        assert by_name["rust"].globs == ("*.rs",)
        assert "*.py" in by_name["python"].globs
        assert by_name["python"] is by_name["py"]
        assert "*.jinja2" in by_name["jinja"].globs
