"""File type classification from type names."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import Final

import click

from siz.config.exceptions import TypeBuildError, UnrecognizedTypeError

from .defaults import DEFAULT_TYPES, TypeTable
from .matcher import CompiledTypeMatcher
from .suggestions import suggest_types

logger = logging.getLogger(__name__)

# Selecting this name selects every defined type
ALL_TYPES: Final[str] = "all"

LIST_TYPES_HINT: Final[str] = (
    "See --list-types for a list of supported type names and associated path glob patterns."
)


def unrecognized_type_message(name: str, table: TypeTable = DEFAULT_TYPES) -> str:
    """Build the remediation text for an unknown type name.

    Exact glob matches take priority over approximate matches. Without any
    suggestion only the error and the ``--list-types`` hint remain.

    Args:
        name: The unrecognized type name
        table: Type definitions used for suggestions

    Returns:
        Multi paragraph user facing message
    """
    error = f"unrecognized file type: {name}"
    suggestions = suggest_types(name, table)

    if suggestions.exact_matches:
        joined = " or ".join(suggestions.exact_matches)
        hint = (
            f"Did you mean: {joined}? "
            f"The '{name}' string matched in the path glob pattern list."
        )
    elif suggestions.approximate_matches:
        joined = ", ".join(suggestions.approximate_matches)
        hint = f"Types with approximate type name or path glob pattern string matches: {joined}"
    else:
        return f"{error}\n\n{LIST_TYPES_HINT}"

    return f"{error}\n\n{hint}\n\n{LIST_TYPES_HINT}"


class TypeClassifier:
    """Builds type matchers from requested type names.

    Every alias of a definition is bound to all globs of that definition. The
    alias table is loaded on each :meth:`build` call, so results never depend
    on earlier calls.
    """

    def __init__(self, table: TypeTable = DEFAULT_TYPES) -> None:
        """Initialize the classifier.

        Args:
            table: Type definitions to select from
        """
        self.table: TypeTable = table

    def _load_aliases(self) -> dict[str, list[str]]:
        aliases: dict[str, list[str]] = {}
        for definition in self.table:
            for name in definition.names:
                aliases.setdefault(name, []).extend(definition.globs)
        return aliases

    def build(self, requested: Iterable[str]) -> CompiledTypeMatcher:
        """Compile a matcher whitelisting the requested types.

        Args:
            requested: Type names to select, ``"all"`` selects every type

        Returns:
            Matcher that whitelists files of the requested types

        Raises:
            UnrecognizedTypeError: If a requested name is not defined
            TypeBuildError: If the selected globs cannot be compiled
        """
        aliases = self._load_aliases()
        names = list(requested)
        globs: list[str] = []

        for name in names:
            if name == ALL_TYPES:
                for alias_globs in aliases.values():
                    globs.extend(alias_globs)
                continue

            alias_globs = aliases.get(name)
            if alias_globs is None:
                logger.debug("Unrecognized file type requested: %s", name)
                raise UnrecognizedTypeError(name, unrecognized_type_message(name, self.table))
            globs.extend(alias_globs)

        try:
            matcher = CompiledTypeMatcher(names, globs)
        except re.error as exc:
            raise TypeBuildError(exc) from exc

        logger.debug("Type matcher built for %s with %d globs", names, len(matcher.globs))
        return matcher

    def list_printable(self, color: bool = False) -> str:
        """Render the type table as ``name: glob glob ...`` lines.

        One line is produced per alias, so a definition with two aliases gives
        two lines with the same globs. No trailing newline.

        Args:
            color: Render alias names in bold blue

        Returns:
            Printable type listing
        """
        lines: list[str] = []
        for definition in self.table:
            globs = "".join(f" {glob}" for glob in definition.globs)
            for name in definition.names:
                label = click.style(name, fg="blue", bold=True) if color else name
                lines.append(f"{label}:{globs}")
        return "\n".join(lines)
