"""Test suite for the siz error taxonomy."""

from __future__ import annotations

import errno
import re

import pytest

from siz.config.exceptions import (
    GlobCompileError,
    OptionsError,
    OutputWriteError,
    SizError,
    TypeBuildError,
    UnrecognizedTypeError,
    WalkError,
)


class TestSizError:
    """Test the base error."""

    def test_message_and_context(self) -> None:
        """Test that message and context are kept."""
        error = SizError("something failed", {"key": "value"})

        assert str(error) == "something failed"
        assert error.message == "something failed"
        assert error.context == {"key": "value"}

    def test_context_defaults_to_empty(self) -> None:
        """Test the default context."""
        assert SizError("x").context == {}

    @pytest.mark.parametrize(
        "error",
        [
            OptionsError("bad option"),
            UnrecognizedTypeError("pyhton", "unrecognized file type"),
            TypeBuildError(re.error("bad pattern")),
            GlobCompileError("!", "pattern matches nothing"),
            WalkError("a", FileNotFoundError(errno.ENOENT, "No such file or directory")),
            OutputWriteError(OSError(errno.EIO, "Input/output error")),
        ],
    )
    def test_hierarchy(self, error: SizError) -> None:
        """Test that every error derives from SizError."""
        assert isinstance(error, SizError)


class TestErrorMessages:
    """Test the user facing messages."""

    def test_unrecognized_type(self) -> None:
        """Test that the full message is used as is."""
        error = UnrecognizedTypeError("pyhton", "unrecognized file type 'pyhton'")

        assert error.name == "pyhton"
        assert error.message == "unrecognized file type 'pyhton'"
        assert error.context == {"type_name": "pyhton"}

    def test_type_build(self) -> None:
        """Test the type build failure message."""
        assert TypeBuildError(re.error("bad pattern")).message == "error building types: bad pattern"

    def test_glob_compile(self) -> None:
        """Test the glob failure message."""
        error = GlobCompileError("[", "unterminated character class")

        assert error.glob == "["
        assert error.message == "error parsing glob '[': unterminated character class"

    def test_walk_error_uses_strerror(self) -> None:
        """Test that walk errors show the path and the OS reason."""
        cause = PermissionError(errno.EACCES, "Permission denied")
        error = WalkError("./secret", cause)

        assert error.message == "./secret: Permission denied"
        assert error.path == "./secret"
        assert error.cause is cause
        assert error.context["errno"] == errno.EACCES

    def test_walk_error_without_strerror(self) -> None:
        """Test the fallback for OS errors without a reason."""
        assert WalkError("a", OSError("odd failure")).message == "a: odd failure"

    def test_output_write_error(self) -> None:
        """Test the standard output failure message."""
        cause = OSError(errno.ENOSPC, "No space left on device")
        error = OutputWriteError(cause)

        assert error.cause is cause
        assert error.message.startswith("error writing to standard output: ")
        assert "No space left on device" in error.message
