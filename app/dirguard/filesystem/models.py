"""Filesystem domain models for baseline snapshots and detections.

This module defines the immutable snapshot tree captured at startup
and the records emitted when a new, unauthorized entry is found.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


class PathType(str, Enum):
    """Type of a live filesystem entry.

    Symbolic links are never followed, so a link to a directory is
    classified as SYMLINK rather than DIRECTORY.

    Attributes:
        DIRECTORY: Regular directory.
        FILE: Regular file.
        SYMLINK: Symbolic link (live or dangling).
        OTHER: Socket, fifo, device or any other special file.
    """

    DIRECTORY = "directory"
    FILE = "file"
    SYMLINK = "symlink"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class FileEntry:
    """Leaf of a snapshot tree.

    Anything that was not a directory at capture time, including
    symlinks and special files.

    Attributes:
        path: Path of the entry as captured.
    """

    path: str

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class SnapshotCounts:
    """Number of entries below a snapshot directory.

    Attributes:
        directories: Directories in the subtree (the root itself excluded).
        files: Non-directory entries in the subtree.
    """

    directories: int
    files: int

    @property
    def total(self) -> int:
        """Total number of entries."""
        return self.directories + self.files


@dataclass(frozen=True, slots=True)
class DirectoryEntry:
    """Directory node of a snapshot tree.

    The children are the entries that existed under ``path`` when the
    snapshot was captured. They are stored as a tuple and never change
    afterwards, even when the live directory does.

    Attributes:
        path: Path of the directory as captured.
        children: Child entries ordered by name.
    """

    path: str
    children: tuple["FsEntry", ...] = ()

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)

    def child_paths(self) -> frozenset[str]:
        """Return the paths of the immediate children only."""
        return frozenset(child.path for child in self.children)

    def walk(self) -> Iterator["FsEntry"]:
        """Iterate over this node and every entry below it, pre-order.

        Uses an explicit stack, so arbitrarily deep trees can be walked.
        """
        stack: list[FsEntry] = [self]
        while stack:
            entry = stack.pop()
            yield entry
            if isinstance(entry, DirectoryEntry):
                stack.extend(reversed(entry.children))

    def count(self) -> SnapshotCounts:
        """Count the directories and files below this node."""
        directories = 0
        files = 0
        for entry in self.walk():
            if entry is self:
                continue
            if isinstance(entry, DirectoryEntry):
                directories += 1
            else:
                files += 1
        return SnapshotCounts(directories=directories, files=files)


FsEntry = DirectoryEntry | FileEntry


@dataclass(frozen=True, slots=True)
class DetectedPath:
    """A live entry that is not part of the baseline snapshot.

    Attributes:
        path: Path of the new entry.
        path_type: Type of the entry at detection time.
    """

    path: str
    path_type: PathType

    @property
    def is_directory(self) -> bool:
        """Check if the entry must be removed as a directory."""
        return self.path_type == PathType.DIRECTORY
