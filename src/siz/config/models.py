"""Validated run options.

The command line layer builds a single immutable :class:`SizOptions` per run.
Validation is fail-fast, with messages meant to be shown to the user as is.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from enum import Enum
from typing import Annotated, Any, Final, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .exceptions import OptionsError

MISSING_PATH_MESSAGE: Final[str] = (
    "a file or directory path argument is required. Enter a path at the end of your command."
)


class SizeUnits(str, Enum):
    """Rendering of the size field."""

    RAW = "raw"
    DECIMAL = "decimal"
    BINARY = "binary"


class ReportMode(str, Enum):
    """Execution mode of a run, exactly one per run."""

    SEQUENTIAL = "sequential"  # walk order, printed by ascending (size, path)
    NAME_SORTED = "name"
    SIZE_SORTED = "size"
    PARALLEL = "parallel"


class SortOrder(str, Enum):
    """Direction of the (size, path) comparison."""

    ASCENDING = "ascending"
    DESCENDING = "descending"


class SizOptions(BaseModel):
    """Options for a single run.

    Values are validated on construction and the model is frozen afterwards.
    """

    model_config = ConfigDict(frozen=True)

    path: Annotated[str | None, Field(description="File or directory to report on")] = None
    binary_units: Annotated[bool, Field(description="Render sizes in powers of 1024")] = False
    metric_units: Annotated[bool, Field(description="Render sizes in powers of 1000")] = False
    color: Annotated[bool, Field(description="Colorize path output")] = False
    depth: Annotated[
        int | None,
        Field(ge=0, description="Maximum directory depth, the root is depth 0"),
    ] = None
    follow: Annotated[bool, Field(description="Follow symbolic links")] = False
    glob: Annotated[
        tuple[str, ...] | None,
        Field(description="Gitignore style glob overrides, '!' prefix to exclude"),
    ] = None
    hidden: Annotated[bool, Field(description="Include hidden files and directories")] = False
    highlow: Annotated[bool, Field(description="Sort by size, largest first")] = False
    list_types: Annotated[bool, Field(description="List supported file types and exit")] = False
    name: Annotated[bool, Field(description="Sort by path name")] = False
    parallel: Annotated[bool, Field(description="Report in parallel, unordered")] = False
    default_type: Annotated[
        tuple[str, ...] | None,
        Field(description="File type names to include"),
    ] = None
    threads: Annotated[
        int | None,
        Field(ge=1, description="Worker threads for parallel mode"),
    ] = None

    @field_validator("glob", "default_type", mode="before")
    @classmethod
    def drop_empty_values(cls, v: Sequence[str] | str | None) -> tuple[str, ...] | None:
        """Split comma separated values and drop empty strings.

        Args:
            v: A comma separated string or a sequence of strings

        Returns:
            Non-empty values, or None when nothing remains
        """
        if v is None:
            return None
        items = [v] if isinstance(v, str) else list(v)
        values = [part.strip() for item in items for part in item.split(",")]
        values = [value for value in values if value]
        return tuple(values) or None

    @model_validator(mode="after")
    def validate_option_conflicts(self) -> Self:
        """Reject combinations of options that cannot be honored together.

        Raises:
            ValueError: If conflicting options are set
        """
        if self.binary_units and self.metric_units:
            msg = "--binary-units cannot be used with --metric-units"
            raise ValueError(msg)
        if self.glob is not None and self.default_type is not None:
            msg = "--glob cannot be used with --type"
            raise ValueError(msg)
        modes = [
            flag
            for flag, enabled in (
                ("--highlow", self.highlow),
                ("--name", self.name),
                ("--parallel", self.parallel),
            )
            if enabled
        ]
        if len(modes) > 1:
            msg = f"{' and '.join(modes)} cannot be used together"
            raise ValueError(msg)
        return self

    @model_validator(mode="after")
    def validate_path_exists(self) -> Self:
        """Require an existing path unless only the type list is requested.

        Raises:
            ValueError: If the path is missing or does not exist
        """
        if self.list_types:
            return self
        if self.path is None:
            raise ValueError(MISSING_PATH_MESSAGE)
        if not os.path.exists(self.path):
            msg = f"path does not exist: {self.path}"
            raise ValueError(msg)
        return self

    @property
    def size_units(self) -> SizeUnits:
        """Size field rendering selected by the unit flags."""
        if self.metric_units:
            return SizeUnits.DECIMAL
        if self.binary_units:
            return SizeUnits.BINARY
        return SizeUnits.RAW

    @property
    def report_mode(self) -> ReportMode:
        """Execution mode selected by the ordering flags."""
        if self.parallel:
            return ReportMode.PARALLEL
        if self.name:
            return ReportMode.NAME_SORTED
        if self.highlow:
            return ReportMode.SIZE_SORTED
        return ReportMode.SEQUENTIAL

    @property
    def sort_order(self) -> SortOrder:
        """Direction used by the size sorted modes."""
        return SortOrder.DESCENDING if self.highlow else SortOrder.ASCENDING


def build_options(**values: Any) -> SizOptions:  # pyright: ignore[reportExplicitAny, reportAny] # Forwarded keyword options
    """Validate raw option values into :class:`SizOptions`.

    Args:
        **values: Field values keyed by field name

    Returns:
        Validated options

    Raises:
        OptionsError: If validation fails
    """
    try:
        return SizOptions(**values)  # pyright: ignore[reportAny]
    except ValidationError as exc:
        raise OptionsError.from_validation_error(exc) from exc
