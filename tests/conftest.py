"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import logging
import os
from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture
def watch_root(tmp_path: Path) -> Path:
    """A watched directory containing ``a.txt`` and ``sub/``."""
    root = tmp_path / "watch"
    root.mkdir()
    (root / "a.txt").write_text("baseline")
    sub = root / "sub"
    sub.mkdir()
    (sub / "nested.txt").write_text("nested")
    return root


@pytest.fixture
def second_root(tmp_path: Path) -> Path:
    """A second, empty watched directory."""
    root = tmp_path / "second"
    root.mkdir()
    return root


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Undo handlers and levels set on the package logger by a test."""
    logger = logging.getLogger("dirguard")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


DEEP_TREE_DEPTH = 1100


@pytest.fixture
def deep_root(tmp_path: Path) -> Iterator[Path]:
    """A root with DEEP_TREE_DEPTH directories nested below it, each named ``d``."""
    root = tmp_path / "deep"
    root.mkdir()
    fd = os.open(root, os.O_RDONLY)
    try:
        for _ in range(DEEP_TREE_DEPTH):
            os.mkdir("d", dir_fd=fd)
            child_fd = os.open("d", os.O_RDONLY, dir_fd=fd)
            os.close(fd)
            fd = child_fd
    finally:
        os.close(fd)

    yield root

    # Remove bottom-up so cleanup does not recurse through the whole tree
    for level in range(DEEP_TREE_DEPTH, 0, -1):
        os.rmdir(os.path.join(root, *["d"] * level))
