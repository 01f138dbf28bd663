"""Removal of unauthorized filesystem entries.

Directories are removed non-recursively: an unauthorized directory that
already has content is left in place and reported, and will be flagged
again on the next cycle.
"""

import logging
import os

from dirguard.filesystem.models import DetectedPath

logger = logging.getLogger(__name__)


class Remediator:
    """Deletes entries that are not part of a baseline snapshot."""

    def remediate(self, path: str, is_directory: bool) -> None:
        """Remove a single unauthorized entry.

        Args:
            path: Path of the entry to remove.
            is_directory: If True, remove with rmdir (must be empty).
                Otherwise unlink the file, link or special file.

        Raises:
            OSError: Unchanged from the underlying call, e.g. directory
                not empty, permission denied, or the entry vanished
                between detection and removal.
        """
        logger.info("Unauthorized entry detected at %s", path)
        if is_directory:
            os.rmdir(path)
        else:
            os.unlink(path)
        logger.info("Unauthorized entry removed: %s", path)

    def remediate_detected(self, detected: DetectedPath) -> None:
        """Remove an entry reported by the change detector.

        Args:
            detected: Detection record to act on.

        Raises:
            OSError: If removal fails.
        """
        self.remediate(detected.path, detected.is_directory)
