"""Filesystem snapshot, change detection and remediation.

This module provides the baseline tree model, the one-time snapshot
capture, the per-cycle change detector and the remover for
unauthorized entries.
"""

from dirguard.filesystem.detector import ChangeDetector
from dirguard.filesystem.models import (
    DetectedPath,
    DirectoryEntry,
    FileEntry,
    FsEntry,
    PathType,
    SnapshotCounts,
)
from dirguard.filesystem.remediator import Remediator
from dirguard.filesystem.snapshot import TreeSnapshotter

__all__ = [
    "ChangeDetector",
    "DetectedPath",
    "DirectoryEntry",
    "FileEntry",
    "FsEntry",
    "PathType",
    "Remediator",
    "SnapshotCounts",
    "TreeSnapshotter",
]
