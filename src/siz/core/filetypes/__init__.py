"""File type definitions, matching and suggestions."""

from __future__ import annotations

from .classifier import TypeClassifier
from .defaults import DEFAULT_TYPES, TypeDefinition
from .matcher import CompiledTypeMatcher
from .suggestions import SuggestionResult, suggest_types

__all__ = [
    "DEFAULT_TYPES",
    "CompiledTypeMatcher",
    "SuggestionResult",
    "TypeClassifier",
    "TypeDefinition",
    "suggest_types",
]
