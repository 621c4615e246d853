"""Gitignore-aware directory scanners.

Two scanners share one set of filtering rules:

- :class:`DirectoryScanner` walks depth first on the calling thread and
  yields entries lazily, optionally with siblings sorted by name.
- :class:`ParallelDirectoryScanner` expands directories on a pool of worker
  threads and hands every entry to a visitor callback.

Per entry, glob overrides are consulted first, then ignore files, then the
type matcher, and finally hidden entries are skipped unless something
whitelisted them. The root is never filtered. Ignored directories are not
descended into.
"""

from __future__ import annotations

import logging
import os
import queue
import stat
import threading
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Final

from siz.config.exceptions import WalkError

from .exclusions import GlobOverrides, IgnoreStack

if TYPE_CHECKING:
    from siz.core.filetypes.matcher import CompiledTypeMatcher

logger = logging.getLogger(__name__)

# Upper bound for the automatic worker thread count
MAX_DEFAULT_THREADS: Final[int] = 12

type DirId = tuple[int, int]


def default_thread_count() -> int:
    """Return the number of worker threads used when none is configured."""
    return min(MAX_DEFAULT_THREADS, os.cpu_count() or 1)


class WalkState(str, Enum):
    """Instruction returned by a parallel visitor for each entry."""

    CONTINUE = "continue"
    SKIP = "skip"  # do not descend into this directory
    QUIT = "quit"  # stop admitting new work


@dataclass(slots=True, frozen=True)
class ScanSettings:
    """Traversal settings shared by both scanners.

    Attributes:
        max_depth: Deepest entry depth reported, None for unlimited. The
            root is depth 0.
        hidden: Report entries whose name starts with a dot
        follow_links: Follow symbolic links, skipping directory cycles
        sort_by_name: Visit siblings in file name order
        overrides: Glob overrides relative to the root
        types: Type matcher restricting which files are reported
        threads: Worker threads for the parallel scanner, None for automatic
    """

    max_depth: int | None = None
    hidden: bool = False
    follow_links: bool = False
    sort_by_name: bool = False
    overrides: GlobOverrides | None = None
    types: CompiledTypeMatcher | None = None
    threads: int | None = None


@dataclass(slots=True, frozen=True)
class WalkEntry:
    """A single entry produced by a scan.

    ``path`` is the root path joined with the entry's relative path, exactly
    as the user supplied the root. ``is_file`` is also true for a symbolic
    link to a regular file, whose metadata stays unresolved unless links
    are followed.
    """

    path: str
    depth: int
    is_dir: bool
    is_file: bool
    is_symlink: bool
    follow_links: bool = False
    dir_entry: os.DirEntry[str] | None = field(default=None, repr=False, compare=False)

    def metadata(self) -> os.stat_result:
        """Return the entry's stat result.

        Symbolic links are only resolved when links are followed. The root is
        always resolved.

        Raises:
            WalkError: If the metadata cannot be read
        """
        try:
            if self.dir_entry is not None:
                return self.dir_entry.stat(follow_symlinks=self.follow_links)
            return os.stat(self.path)
        except OSError as exc:
            raise WalkError(self.path, exc) from exc


type WalkResult = WalkEntry | WalkError
type Visitor = Callable[[WalkResult], WalkState]


@dataclass(slots=True, frozen=True)
class _DirectoryWork:
    path: str
    abs_path: str
    depth: int
    ignore_stack: IgnoreStack
    ancestors: frozenset[DirId]


class _BaseScanner:
    """Filtering and entry construction shared by the scanners."""

    def __init__(self, root: str, settings: ScanSettings | None = None) -> None:
        """Initialize the scanner.

        Args:
            root: Root path, as given by the user
            settings: Traversal settings, defaults when None
        """
        self.root: str = root
        self.settings: ScanSettings = settings or ScanSettings()

    def _root_entry(self) -> WalkEntry:
        try:
            stat_result = os.stat(self.root)
            is_symlink = os.path.islink(self.root)
        except OSError as exc:
            raise WalkError(self.root, exc) from exc

        return WalkEntry(
            path=self.root,
            depth=0,
            is_dir=stat.S_ISDIR(stat_result.st_mode),
            is_file=stat.S_ISREG(stat_result.st_mode),
            is_symlink=is_symlink,
            follow_links=True,
        )

    def _root_work(self) -> _DirectoryWork:
        abs_root = os.path.abspath(self.root)
        stack = IgnoreStack.for_root(abs_root).child(abs_root)

        ancestors: frozenset[DirId] = frozenset()
        if self.settings.follow_links:
            root_id = self._dir_id(abs_root)
            if root_id is not None:
                ancestors = frozenset({root_id})

        return _DirectoryWork(self.root, abs_root, 1, stack, ancestors)

    def _depth_exhausted(self, depth: int) -> bool:
        """True when entries below ``depth`` must not be read."""
        max_depth = self.settings.max_depth
        return max_depth is not None and depth >= max_depth

    def _read_dir(self, path: str) -> list[os.DirEntry[str]]:
        try:
            with os.scandir(path) as iterator:
                entries = list(iterator)
        except OSError as exc:
            raise WalkError(path, exc) from exc

        if self.settings.sort_by_name:
            entries.sort(key=lambda item: item.name)
        return entries

    def _make_entry(self, dir_entry: os.DirEntry[str], path: str, depth: int) -> WalkEntry:
        follow = self.settings.follow_links
        try:
            return WalkEntry(
                path=path,
                depth=depth,
                is_dir=dir_entry.is_dir(follow_symlinks=follow),
                # links to regular files count as files even when not followed
                is_file=dir_entry.is_file(follow_symlinks=True),
                is_symlink=dir_entry.is_symlink(),
                follow_links=follow,
                dir_entry=dir_entry,
            )
        except OSError as exc:
            raise WalkError(path, exc) from exc

    def _should_skip(self, stack: IgnoreStack, abs_path: str, name: str, is_dir: bool) -> bool:
        settings = self.settings

        if settings.overrides is not None:
            result = settings.overrides.matched(abs_path, is_dir)
            if not result.is_none:
                return result.is_ignore

        result = stack.matched(abs_path, is_dir)
        if result.is_ignore:
            return True
        whitelisted = result.is_whitelist

        if settings.types is not None:
            result = settings.types.matched(abs_path, is_dir)
            if result.is_ignore:
                return True
            whitelisted = whitelisted or result.is_whitelist

        return not whitelisted and not settings.hidden and name.startswith(".")

    @staticmethod
    def _dir_id(path: str) -> DirId | None:
        try:
            stat_result = os.stat(path)
        except OSError:
            return None
        return (stat_result.st_dev, stat_result.st_ino)

    def _descend(self, work: _DirectoryWork, entry: WalkEntry, abs_path: str) -> _DirectoryWork | None:
        """Build the work item for a child directory, None on a link cycle."""
        ancestors = work.ancestors
        if self.settings.follow_links:
            dir_id = self._dir_id(abs_path)
            if dir_id is not None:
                if dir_id in ancestors:
                    logger.warning("Skipping symbolic link cycle at %s", entry.path)
                    return None
                ancestors = ancestors | {dir_id}

        stack = work.ignore_stack.child(abs_path)
        return _DirectoryWork(entry.path, abs_path, work.depth + 1, stack, ancestors)


class DirectoryScanner(_BaseScanner):
    """Depth first scanner running on the calling thread.

    The root entry comes first, each directory is followed by its contents.
    Any read failure aborts the scan with :class:`WalkError`.
    """

    def scan(self) -> Iterator[WalkEntry]:
        """Yield the root and every entry that survives filtering.

        Yields:
            Walk entries in traversal order

        Raises:
            WalkError: If the root, a directory or an entry cannot be read
        """
        root = self._root_entry()
        yield root
        if not root.is_dir or self._depth_exhausted(0):
            return

        work = self._root_work()
        logger.debug("Scanning %s with %s", self.root, self.settings)
        yield from self._scan_directory(work)

    def _scan_directory(self, work: _DirectoryWork) -> Iterator[WalkEntry]:
        for dir_entry in self._read_dir(work.path):
            path = os.path.join(work.path, dir_entry.name)
            abs_path = os.path.join(work.abs_path, dir_entry.name)
            entry = self._make_entry(dir_entry, path, work.depth)

            if self._should_skip(work.ignore_stack, abs_path, dir_entry.name, entry.is_dir):
                continue

            child_work: _DirectoryWork | None = None
            if entry.is_dir and not self._depth_exhausted(work.depth):
                child_work = self._descend(work, entry, abs_path)
                if child_work is None:
                    continue

            yield entry
            if child_work is not None:
                yield from self._scan_directory(child_work)


class ParallelDirectoryScanner(_BaseScanner):
    """Scanner that expands directories on a pool of worker threads.

    Workers take directories from a shared queue, pass every child entry (or
    read error) to the visitor and queue child directories unless the visitor
    returned SKIP. After a QUIT no new work is admitted. Visitation order is
    unspecified.
    """

    def __init__(self, root: str, settings: ScanSettings | None = None) -> None:
        """Initialize the scanner.

        Args:
            root: Root path, as given by the user
            settings: Traversal settings, defaults when None
        """
        super().__init__(root, settings)
        self.threads: int = self.settings.threads or default_thread_count()
        self._queue: queue.Queue[_DirectoryWork | None] = queue.Queue()
        self._quit: threading.Event = threading.Event()
        self._failure: BaseException | None = None
        self._failure_lock: threading.Lock = threading.Lock()

    def run(self, visitor: Visitor) -> None:
        """Visit the root and every entry that survives filtering.

        Args:
            visitor: Called once per entry or error, from any worker thread

        Raises:
            BaseException: The first exception raised by the visitor
        """
        self._quit.clear()
        self._failure = None

        try:
            root = self._root_entry()
        except WalkError as exc:
            visitor(exc)
            return

        state = visitor(root)
        if state is not WalkState.CONTINUE or not root.is_dir or self._depth_exhausted(0):
            return

        logger.debug(
            "Scanning %s with %d threads and %s", self.root, self.threads, self.settings
        )
        self._queue.put(self._root_work())

        workers = [
            threading.Thread(
                target=self._worker,
                args=(visitor,),
                name=f"siz-scanner-{index}",
                daemon=True,
            )
            for index in range(self.threads)
        ]
        for worker in workers:
            worker.start()

        self._queue.join()
        for _ in workers:
            self._queue.put(None)
        for worker in workers:
            worker.join()

        if self._failure is not None:
            raise self._failure

    def _worker(self, visitor: Visitor) -> None:
        while True:
            work = self._queue.get()
            try:
                if work is None:
                    return
                if not self._quit.is_set():
                    self._visit_directory(work, visitor)
            except BaseException as exc:  # re-raised on the calling thread
                with self._failure_lock:
                    if self._failure is None:
                        self._failure = exc
                self._quit.set()
            finally:
                self._queue.task_done()

    def _visit_directory(self, work: _DirectoryWork, visitor: Visitor) -> None:
        try:
            dir_entries = self._read_dir(work.path)
        except WalkError as exc:
            if visitor(exc) is WalkState.QUIT:
                self._quit.set()
            return

        for dir_entry in dir_entries:
            if self._quit.is_set():
                return

            path = os.path.join(work.path, dir_entry.name)
            abs_path = os.path.join(work.abs_path, dir_entry.name)
            try:
                entry = self._make_entry(dir_entry, path, work.depth)
            except WalkError as exc:
                if visitor(exc) is WalkState.QUIT:
                    self._quit.set()
                continue

            if self._should_skip(work.ignore_stack, abs_path, dir_entry.name, entry.is_dir):
                continue

            child_work: _DirectoryWork | None = None
            if entry.is_dir and not self._depth_exhausted(work.depth):
                child_work = self._descend(work, entry, abs_path)
                if child_work is None:
                    continue

            state = visitor(entry)
            if state is WalkState.QUIT:
                self._quit.set()
                return
            if state is WalkState.CONTINUE and child_work is not None:
                self._queue.put(child_work)
