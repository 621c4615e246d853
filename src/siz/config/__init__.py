"""Run options and error types."""

from __future__ import annotations

from .exceptions import (
    GlobCompileError,
    OptionsError,
    OutputWriteError,
    SizError,
    TypeBuildError,
    UnrecognizedTypeError,
    WalkError,
)
from .models import ReportMode, SizeUnits, SizOptions, SortOrder, build_options

__all__ = [
    "GlobCompileError",
    "OptionsError",
    "OutputWriteError",
    "ReportMode",
    "SizError",
    "SizOptions",
    "SizeUnits",
    "SortOrder",
    "TypeBuildError",
    "UnrecognizedTypeError",
    "WalkError",
    "build_options",
]
