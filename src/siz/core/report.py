"""Rendering and writing of report lines.

Each reported file produces one ``<size>\\t<path>\\n`` line. The size field
is a raw byte count, a decimal size right-justified to width 9 or a binary
size right-justified to width 10.
"""

from __future__ import annotations

import logging
import os
import threading
from typing import Final, TextIO

import click

from siz.config.exceptions import OutputWriteError
from siz.config.models import SizeUnits
from siz.utils.formatting import format_binary_size, format_decimal_size

logger = logging.getLogger(__name__)

DECIMAL_SIZE_WIDTH: Final[int] = 9
BINARY_SIZE_WIDTH: Final[int] = 10


def stream_supports_color(stream: TextIO) -> bool:
    """Return True when ANSI styling should be written to ``stream``.

    Only interactive terminals get color, so piped or redirected reports stay
    plain even when color was requested.
    """
    try:
        return stream.isatty()
    except (AttributeError, OSError, ValueError):
        return False


class ReportFormatter:
    """Renders (size, path) pairs as report lines.

    The unit rendering is chosen once at construction.
    """

    def __init__(self, units: SizeUnits = SizeUnits.RAW, color: bool = False) -> None:
        """Initialize the formatter.

        Args:
            units: Size rendering for the run
            color: Emphasize the parent directory portion of paths
        """
        self.units: SizeUnits = units
        self.color: bool = color

    def format_size(self, size: int) -> str:
        """Render the size field.

        Args:
            size: File size in bytes

        Returns:
            Size field without the trailing tab
        """
        if self.units is SizeUnits.DECIMAL:
            return format_decimal_size(size).rjust(DECIMAL_SIZE_WIDTH)
        if self.units is SizeUnits.BINARY:
            return format_binary_size(size).rjust(BINARY_SIZE_WIDTH)
        return str(size)

    def format_path(self, path: str) -> str:
        """Render the path field, coloring the parent directory and separator."""
        if not self.color:
            return path

        parent, name = os.path.split(path)
        if not parent:
            return path
        if not name:
            return click.style(parent, fg="blue")
        if parent == os.sep:
            return click.style(parent, fg="blue") + name
        return click.style(parent, fg="blue") + click.style(os.sep, fg="blue") + name

    def format_line(self, size: int, path: str) -> str:
        """Render a complete report line including the newline."""
        return f"{self.format_size(size)}\t{self.format_path(path)}\n"


class ReportWriter:
    """Writes report lines to a text stream.

    Writes are serialized with a lock so lines from concurrent workers never
    interleave. A ``BrokenPipeError`` propagates unchanged, any other write
    failure is raised as :class:`OutputWriteError`.
    """

    def __init__(self, stream: TextIO, formatter: ReportFormatter) -> None:
        """Initialize the writer.

        Args:
            stream: Destination stream, usually standard output
            formatter: Line formatter for the run
        """
        self.stream: TextIO = stream
        self.formatter: ReportFormatter = formatter
        self._lock: threading.Lock = threading.Lock()

    def write(self, size: int, path: str) -> None:
        """Render and write one report line.

        Args:
            size: File size in bytes
            path: File path as produced by the walk

        Raises:
            BrokenPipeError: If the reader closed the stream
            OutputWriteError: If the write failed for another reason
        """
        line = self.formatter.format_line(size, path)
        with self._lock:
            try:
                self.stream.write(line)
            except BrokenPipeError:
                raise
            except OSError as exc:
                raise OutputWriteError(exc) from exc

    def flush(self) -> None:
        """Flush the stream, classifying errors like :meth:`write`."""
        with self._lock:
            try:
                self.stream.flush()
            except BrokenPipeError:
                raise
            except OSError as exc:
                raise OutputWriteError(exc) from exc
