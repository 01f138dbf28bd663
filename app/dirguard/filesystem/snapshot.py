"""Baseline snapshot capture.

Walks each watched root once, before monitoring starts, and builds the
immutable tree every later cycle is compared against. Listing or
metadata failures are not handled here: an unreadable root makes the
whole baseline untrustworthy, so the caller decides to abort.
"""

import logging
import os
import stat
from collections.abc import Iterable
from dataclasses import dataclass, field

from dirguard.filesystem.models import DirectoryEntry, FileEntry, FsEntry

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _OpenDirectory:
    """A directory whose children are still being captured.

    Attributes:
        path: Path of the directory.
        pending: Entries not visited yet, last name first.
        children: Finished child nodes, in name order.
    """

    path: str
    pending: list[os.DirEntry[str]]
    children: list[FsEntry] = field(default_factory=list)


class TreeSnapshotter:
    """Captures recursive snapshots of directory trees.

    Symbolic links are recorded as leaves and never followed, so a link
    pointing back up the tree cannot make the walk revisit a directory.
    Directories waiting for their children are kept on an explicit
    stack, so capture depth is limited by the filesystem only.
    """

    def scan(self, path: str) -> DirectoryEntry:
        """Capture the tree rooted at ``path``.

        Args:
            path: Directory to capture. Kept exactly as supplied in the
                resulting root node; child paths are joined onto it.

        Returns:
            DirectoryEntry owning the whole subtree.

        Raises:
            OSError: If a directory cannot be listed or an entry's
                metadata cannot be read.
        """
        stack = [self._open(path)]

        while True:
            current = stack[-1]
            if current.pending:
                entry = current.pending.pop()
                mode = entry.stat(follow_symlinks=False).st_mode
                if stat.S_ISDIR(mode):
                    stack.append(self._open(entry.path))
                else:
                    current.children.append(FileEntry(entry.path))
                continue

            # All children captured: freeze the node and hand it to its parent
            stack.pop()
            node = DirectoryEntry(current.path, tuple(current.children))
            if not stack:
                return node
            stack[-1].children.append(node)

    def scan_all(self, paths: Iterable[str]) -> tuple[DirectoryEntry, ...]:
        """Capture every root sequentially, in the given order.

        Args:
            paths: Root directories to capture.

        Returns:
            One snapshot per root, in input order.

        Raises:
            OSError: On the first root that cannot be captured.
        """
        snapshots: list[DirectoryEntry] = []
        for path in paths:
            logger.info("Scanning directory %s", path)
            snapshots.append(self.scan(path))
        return tuple(snapshots)

    @staticmethod
    def _open(path: str) -> _OpenDirectory:
        """List a directory, ordering entries for popping by name."""
        logger.debug("Capturing %s", path)
        with os.scandir(path) as it:
            pending = sorted(it, key=lambda e: e.name, reverse=True)
        return _OpenDirectory(path=path, pending=pending)
