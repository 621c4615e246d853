"""Error taxonomy for siz."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError


class SizError(Exception):
    """Base exception for all siz errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:  # pyright: ignore[reportExplicitAny] # Flexible error context
        """Initialize SizError.

        Args:
            message: Error message
            context: Additional context information for debugging
        """
        super().__init__(message)
        self.message: str = message
        self.context: dict[str, Any] = context or {}  # pyright: ignore[reportExplicitAny] # Flexible error context


class OptionsError(SizError):
    """Exception raised when run options fail validation."""

    @classmethod
    def from_validation_error(cls, error: ValidationError) -> OptionsError:
        """Build an actionable error from a pydantic ValidationError.

        Only the messages are kept, pydantic's location and URL noise is
        dropped because options are validated from the command line.

        Args:
            error: Original pydantic validation error

        Returns:
            OptionsError carrying one line per validation failure
        """
        messages: list[str] = []
        for detail in error.errors():
            message = str(detail.get("msg", ""))
            # pydantic prefixes errors raised from validators
            message = message.removeprefix("Value error, ")
            messages.append(message)
        return cls("\n".join(messages), {"error_count": error.error_count()})


class UnrecognizedTypeError(SizError):
    """Exception raised when a requested file type name is not defined.

    The message is the complete remediation text shown to the user,
    including type name suggestions when any were found.
    """

    def __init__(self, name: str, message: str) -> None:
        """Initialize UnrecognizedTypeError.

        Args:
            name: The unrecognized type name
            message: Full user facing message
        """
        super().__init__(message, {"type_name": name})
        self.name: str = name


class TypeBuildError(SizError):
    """Exception raised for type matcher build failures other than unknown names."""

    def __init__(self, cause: Exception) -> None:
        """Initialize TypeBuildError.

        Args:
            cause: Underlying compilation failure
        """
        super().__init__(f"error building types: {cause}", {"cause": repr(cause)})


class GlobCompileError(SizError):
    """Exception raised when a user supplied glob override is malformed."""

    def __init__(self, glob: str, reason: str) -> None:
        """Initialize GlobCompileError.

        Args:
            glob: The offending glob pattern
            reason: Why the pattern was rejected
        """
        super().__init__(f"error parsing glob '{glob}': {reason}", {"glob": glob})
        self.glob: str = glob


class WalkError(SizError):
    """Exception raised when a directory entry or its metadata cannot be read."""

    def __init__(self, path: str, cause: OSError) -> None:
        """Initialize WalkError.

        Args:
            path: Path that failed
            cause: Underlying OS error
        """
        reason = cause.strerror or str(cause)
        super().__init__(f"{path}: {reason}", {"path": path, "errno": cause.errno})
        self.path: str = path
        self.cause: OSError = cause


class OutputWriteError(SizError):
    """Exception raised when a report line cannot be written.

    Broken pipes are never wrapped in this error, they propagate as
    ``BrokenPipeError`` so the top level can treat them as a clean exit.
    """

    def __init__(self, cause: OSError) -> None:
        """Initialize OutputWriteError.

        Args:
            cause: Underlying OS error
        """
        super().__init__(f"error writing to standard output: {cause}")
        self.cause: OSError = cause
