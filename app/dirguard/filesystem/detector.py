"""Change detection against a baseline snapshot.

Re-lists the immediate children of a snapshot directory and reports
every path that is present now but was not captured in the baseline.
Grandchildren are never inspected, and deletions are not reported.
"""

import logging
import os
import stat
from collections.abc import Iterator

from dirguard.filesystem.models import DetectedPath, DirectoryEntry, FsEntry, PathType

logger = logging.getLogger(__name__)


class ChangeDetector:
    """Compares live directory listings with their baseline snapshot.

    Comparison is by path string only: a renamed entry shows up as a
    new name, and an entry renamed away and back is invisible.
    """

    def detect(self, node: FsEntry) -> set[str]:
        """Return the paths of new immediate children of ``node``.

        Args:
            node: Snapshot entry to check. File entries have no children
                and always yield an empty set.

        Returns:
            Set of live child paths absent from the baseline.

        Raises:
            OSError: If the directory itself cannot be listed.
        """
        if not isinstance(node, DirectoryEntry):
            return set()

        baseline = node.child_paths()
        current = self._list_children(node.path)
        return current - baseline

    def classify(self, path: str) -> PathType:
        """Determine the current type of a live path without following links.

        Args:
            path: Path to inspect.

        Returns:
            PathType of the entry.

        Raises:
            OSError: If the path cannot be inspected (e.g. it vanished).
        """
        mode = os.lstat(path).st_mode
        if stat.S_ISLNK(mode):
            return PathType.SYMLINK
        if stat.S_ISDIR(mode):
            return PathType.DIRECTORY
        if stat.S_ISREG(mode):
            return PathType.FILE
        return PathType.OTHER

    def changes(self, node: FsEntry) -> Iterator[DetectedPath]:
        """Detect new entries and classify each one.

        Entries are classified lazily, right before they are handed to
        the consumer, to keep the window between inspection and removal
        short.

        Args:
            node: Snapshot entry to check.

        Yields:
            DetectedPath for each new entry, in set iteration order.

        Raises:
            OSError: If the listing fails or a new entry cannot be
                classified.
        """
        for path in self.detect(node):
            yield DetectedPath(path=path, path_type=self.classify(path))

    def _list_children(self, path: str) -> set[str]:
        """List the live immediate child paths of a directory.

        A failure while reading one entry is logged and the entry is
        dropped; reading resumes with the next entry when the directory
        stream allows it.

        Args:
            path: Directory to list.

        Returns:
            Set of child paths.

        Raises:
            OSError: If the directory cannot be opened.
        """
        current: set[str] = set()
        with os.scandir(path) as it:
            while True:
                try:
                    entry = next(it)
                except StopIteration:
                    break
                except OSError as e:
                    logger.error("Failed to check entry in directory %s: %s", path, e)
                    continue
                current.add(entry.path)
        return current
