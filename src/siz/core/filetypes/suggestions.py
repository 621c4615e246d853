"""Type name suggestions for unrecognized file type requests."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Final

from siz.core.fuzzy import similarity_ratio

from .defaults import DEFAULT_TYPES, TypeTable

logger = logging.getLogger(__name__)

# Minimum similarity ratio (exclusive) for an approximate match
SIMILARITY_RATIO_THRESHOLD: Final[float] = 0.75


@dataclass(slots=True, frozen=True)
class SuggestionResult:
    """Suggested type names for one unrecognized needle string.

    Attributes:
        exact_matches: Canonical names of types with a glob pattern whose bare
            extension equals the needle, deduplicated
        approximate_matches: Canonical names ordered by descending similarity;
            may repeat a name from ``exact_matches``
    """

    exact_matches: tuple[str, ...]
    approximate_matches: tuple[str, ...]


def strip_glob_prefix(glob: str) -> str:
    """Reduce a path glob to a bare extension string.

    A leading ``"*."`` or ``"."`` is removed, anything else is returned as is.

    Examples:
        >>> strip_glob_prefix("*.rs")
        'rs'
        >>> strip_glob_prefix(".zshrc")
        'zshrc'
        >>> strip_glob_prefix("Makefile")
        'Makefile'
    """
    if glob.startswith("*."):
        return glob[2:]
    if glob.startswith("."):
        return glob[1:]
    return glob


def suggest_types(needle: str, table: TypeTable = DEFAULT_TYPES) -> SuggestionResult:
    """Rank type names that resemble an unrecognized type name.

    The needle is compared against every glob pattern (as a bare extension)
    and every alias name of each definition. A pattern that equals the needle
    exactly records the definition as an exact match instead of contributing
    a ratio. Each definition is represented by its best ratio; definitions
    scoring above ``SIMILARITY_RATIO_THRESHOLD`` are returned in descending
    ratio order, ties ordered by descending canonical name.

    Args:
        needle: User supplied type name or extension
        table: Type definitions to search

    Returns:
        Exact and approximate suggestions
    """
    exact: dict[str, None] = {}
    ranked: list[tuple[float, str]] = []

    for definition in table:
        canonical = definition.canonical_name
        ratios: list[float] = []

        # the user may have typed an extension rather than a type name
        for glob in definition.globs:
            extension = strip_glob_prefix(glob)
            if extension == needle:
                exact[canonical] = None
            else:
                ratios.append(similarity_ratio(needle, extension))

        for name in definition.names:
            ratios.append(similarity_ratio(needle, name))

        ratios = [ratio for ratio in ratios if not math.isnan(ratio)]
        if ratios:
            ranked.append((max(ratios), canonical))

    ranked.sort(reverse=True)
    approximate = tuple(
        name for ratio, name in ranked if ratio > SIMILARITY_RATIO_THRESHOLD
    )

    logger.debug(
        "Type suggestions for %r: exact=%s approximate=%s",
        needle,
        list(exact),
        list(approximate),
    )
    return SuggestionResult(
        exact_matches=tuple(exact),
        approximate_matches=approximate,
    )
