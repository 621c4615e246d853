"""Traversal, filtering, ordering and reporting of file sizes."""

from __future__ import annotations

import logging
import sys
import threading
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import PurePath
from typing import TextIO

from siz.config.exceptions import OutputWriteError, WalkError
from siz.config.models import ReportMode, SizOptions, SortOrder
from siz.core.data.filesystem.exclusions import GlobOverrides
from siz.core.data.filesystem.scanner import (
    DirectoryScanner,
    ParallelDirectoryScanner,
    ScanSettings,
    WalkResult,
    WalkState,
)
from siz.core.filetypes.classifier import TypeClassifier

from .report import ReportFormatter, ReportWriter, stream_supports_color

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class FileRecord:
    """Size and path of one reported file."""

    size: int
    path: str

    def sort_key(self) -> tuple[int, tuple[str, ...]]:
        """Key ordering by size, then by path component by component."""
        return (self.size, PurePath(self.path).parts)


def sort_records(records: list[FileRecord], order: SortOrder) -> None:
    """Sort records in place by (size, path).

    Descending order reverses the whole comparison, so files of equal size
    are ordered by descending path.

    Args:
        records: Records to sort
        order: Sort direction
    """
    records.sort(key=FileRecord.sort_key, reverse=order is SortOrder.DESCENDING)


class TraversalPipeline:
    """Walks a path and reports the size of every surviving file.

    The report mode is fixed by the options before traversal begins. Type
    filters and glob overrides are compiled up front, so malformed input
    fails before anything is written.
    """

    def __init__(
        self,
        options: SizOptions,
        stream: TextIO | None = None,
        classifier: TypeClassifier | None = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            options: Validated run options, a path is required
            stream: Report destination, standard output when None
            classifier: Type classifier, the default type table when None
        """
        if options.path is None:
            msg = "options.path is required to run the pipeline"
            raise ValueError(msg)

        self.options: SizOptions = options
        self.path: str = options.path
        self.classifier: TypeClassifier = classifier or TypeClassifier()
        output = stream if stream is not None else sys.stdout
        color = options.color and stream_supports_color(output)
        self.writer: ReportWriter = ReportWriter(output, ReportFormatter(options.size_units, color))

    @property
    def mode(self) -> ReportMode:
        """Report mode of this run."""
        return self.options.report_mode

    def scan_settings(self) -> ScanSettings:
        """Compile the filters and build the scanner settings.

        Raises:
            UnrecognizedTypeError: If a requested type is unknown
            TypeBuildError: If the type matcher cannot be compiled
            GlobCompileError: If a glob override is malformed
        """
        options = self.options
        types = None
        overrides = None
        if options.default_type is not None:
            types = self.classifier.build(options.default_type)
        elif options.glob is not None:
            overrides = GlobOverrides(self.path, options.glob)

        return ScanSettings(
            max_depth=options.depth,
            hidden=options.hidden,
            follow_links=options.follow,
            sort_by_name=options.name,
            overrides=overrides,
            types=types,
            threads=options.threads,
        )

    def run(self) -> int:
        """Walk the path and write the report.

        Returns:
            Number of files reported

        Raises:
            BrokenPipeError: If the reader closed the report stream
            SizError: For filter, walk and write failures
        """
        settings = self.scan_settings()
        logger.debug("Report mode %s for %s", self.mode.value, self.path)

        if self.mode is ReportMode.PARALLEL:
            count = self._run_parallel(settings)
        elif self.mode is ReportMode.NAME_SORTED:
            count = self._run_streaming(settings)
        else:
            count = self._run_size_sorted(settings, self.options.sort_order)

        self.writer.flush()
        logger.debug("Reported %d files", count)
        return count

    def records(self, settings: ScanSettings) -> Iterator[FileRecord]:
        """Yield a record per regular file in walk order.

        Raises:
            WalkError: On the first entry or metadata read failure
        """
        for entry in DirectoryScanner(self.path, settings).scan():
            if not entry.is_file:
                continue
            yield FileRecord(entry.metadata().st_size, entry.path)

    def _run_streaming(self, settings: ScanSettings) -> int:
        count = 0
        for record in self.records(settings):
            self.writer.write(record.size, record.path)
            count += 1
        return count

    def _run_size_sorted(self, settings: ScanSettings, order: SortOrder) -> int:
        collected = list(self.records(settings))
        sort_records(collected, order)
        for record in collected:
            self.writer.write(record.size, record.path)
        return len(collected)

    def _run_parallel(self, settings: ScanSettings) -> int:
        scanner = ParallelDirectoryScanner(self.path, settings)
        reported = ParallelReportVisitor(self.writer)
        scanner.run(reported)
        return reported.count


class ParallelReportVisitor:
    """Visitor that writes a report line for every file a worker finds.

    A broken pipe on write keeps the worker going. Any other write, metadata
    or entry failure is logged and stops the scan from admitting new work.
    """

    def __init__(self, writer: ReportWriter) -> None:
        """Initialize the visitor.

        Args:
            writer: Shared, thread safe report writer
        """
        self.writer: ReportWriter = writer
        self.count: int = 0
        self._count_lock: threading.Lock = threading.Lock()

    def __call__(self, result: WalkResult) -> WalkState:
        if isinstance(result, WalkError):
            logger.error("Error reading entry: %s", result)
            return WalkState.QUIT
        if not result.is_file:
            return WalkState.CONTINUE

        try:
            size = result.metadata().st_size
        except WalkError as exc:
            logger.error("Error reading metadata: %s", exc)
            return WalkState.QUIT

        try:
            self.writer.write(size, result.path)
        except BrokenPipeError:
            return WalkState.CONTINUE
        except OutputWriteError as exc:
            logger.error("Error printing to standard output: %s", exc.cause)
            return WalkState.QUIT

        with self._count_lock:
            self.count += 1
        return WalkState.CONTINUE
