"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator, Mapping
from pathlib import Path

import pytest

type TreeBuilder = Callable[[Mapping[str, str | None]], Path]


def build_tree(root: Path, layout: Mapping[str, str | None]) -> Path:
    """Create files and directories below ``root``.

    Keys are ``/`` separated relative paths. A string value is written as the
    file content, ``None`` creates a directory.
    """
    for relative, content in layout.items():
        target = root.joinpath(*relative.split("/"))
        if content is None:
            target.mkdir(parents=True, exist_ok=True)
        else:
            target.parent.mkdir(parents=True, exist_ok=True)
            _ = target.write_text(content)
    return root


@pytest.fixture
def make_tree(tmp_path: Path) -> TreeBuilder:
    """Return a builder that lays out a directory tree inside ``tmp_path``."""

    def _make(layout: Mapping[str, str | None]) -> Path:
        root = tmp_path / "root"
        root.mkdir(exist_ok=True)
        return build_tree(root, layout)

    return _make


@pytest.fixture(autouse=True)
def reset_package_logger() -> Generator[None, None, None]:
    """Drop handlers installed by ``configure_logging`` between tests."""
    yield
    package_logger = logging.getLogger("siz")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
