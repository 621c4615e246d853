"""Application runner for siz."""

from __future__ import annotations

import logging
import os
import sys
from typing import Final, TextIO

import click

from siz.config.exceptions import SizError
from siz.config.models import SizOptions
from siz.core.filetypes.classifier import TypeClassifier
from siz.core.pipeline import TraversalPipeline
from siz.core.report import stream_supports_color

logger = logging.getLogger(__name__)

# Exit codes
EXIT_SUCCESS: Final[int] = 0
EXIT_ERROR: Final[int] = 1


def report_error(error: BaseException) -> int:
    """Print an error to standard error and return the failure exit code.

    Args:
        error: Error to report, its string form is the message

    Returns:
        EXIT_ERROR
    """
    message = error.message if isinstance(error, SizError) else str(error)
    click.echo(f"{click.style('Error:', fg='red', bold=True)} {message}", err=True)
    return EXIT_ERROR


def silence_stdout() -> None:
    """Point the standard output descriptor at the null device.

    After a broken pipe, this keeps the interpreter from failing again when
    it flushes standard output at shutdown.
    """
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        # not backed by a file descriptor, nothing left to flush to a pipe
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    try:
        os.dup2(devnull, fd)
    finally:
        os.close(devnull)


class ApplicationRunner:
    """Runs one invocation and maps its outcome to an exit code."""

    def __init__(
        self,
        options: SizOptions,
        stdout: TextIO | None = None,
        classifier: TypeClassifier | None = None,
    ) -> None:
        """Initialize the application runner.

        Args:
            options: Validated run options
            stdout: Report stream, the current standard output when None
            classifier: Type classifier, the default type table when None
        """
        self.options: SizOptions = options
        self.stdout: TextIO | None = stdout
        self.classifier: TypeClassifier = classifier or TypeClassifier()

    def run(self) -> int:
        """Run the report, or the type listing, and return the exit code.

        A closed report stream ends the run successfully. Any other failure
        is printed to standard error and yields a non-zero exit code.
        """
        stream = self.stdout if self.stdout is not None else sys.stdout
        try:
            if self.options.list_types:
                color = self.options.color and stream_supports_color(stream)
                stream.write(self.classifier.list_printable(color=color) + "\n")
                stream.flush()
            else:
                TraversalPipeline(self.options, stream, self.classifier).run()
        except BrokenPipeError:
            logger.debug("Report stream closed by the reader")
            if self.stdout is None:
                silence_stdout()
            return EXIT_SUCCESS
        except (SizError, OSError) as exc:
            logger.debug("Run failed", exc_info=True)
            return report_error(exc)
        return EXIT_SUCCESS
