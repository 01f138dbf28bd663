"""Monitoring loop.

Drives the snapshot-diff-enforce cycle: every cycle re-lists the top
level of each watched root, removes entries that are not in the
baseline, and then sleeps for a fixed interval. The loop has no
terminal state and runs until the process is stopped.
"""

import logging
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import NoReturn

from dirguard.core.config import DEFAULT_INTERVAL
from dirguard.filesystem.detector import ChangeDetector
from dirguard.filesystem.models import DirectoryEntry
from dirguard.filesystem.remediator import Remediator
from dirguard.filesystem.snapshot import TreeSnapshotter

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RootFailure:
    """Error raised while checking one root during a cycle.

    Attributes:
        root: Path of the root that failed.
        error: The underlying filesystem error.
    """

    root: str
    error: OSError


@dataclass(frozen=True, slots=True)
class CycleReport:
    """Outcome of a single monitoring cycle.

    Attributes:
        removed: Paths removed during the cycle, in removal order.
        failures: Roots whose check ended with an error.
    """

    removed: tuple[str, ...] = ()
    failures: tuple[RootFailure, ...] = ()

    @property
    def clean(self) -> bool:
        """Check if the cycle found nothing to remove and nothing failed."""
        return not self.removed and not self.failures


class MonitorLoop:
    """Enforces baseline snapshots on their live directories.

    Args:
        snapshots: Baseline snapshot of every watched root.
        detector: Change detector to use. Defaults to ChangeDetector().
        remediator: Remover to use. Defaults to Remediator().
        interval: Seconds to sleep between cycles.
        sleep: Function called with ``interval`` between cycles.
    """

    def __init__(
        self,
        snapshots: Iterable[DirectoryEntry],
        *,
        detector: ChangeDetector | None = None,
        remediator: Remediator | None = None,
        interval: float = DEFAULT_INTERVAL,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._snapshots = tuple(snapshots)
        self._detector = detector or ChangeDetector()
        self._remediator = remediator or Remediator()
        self._interval = interval
        self._sleep = sleep

    @classmethod
    def from_roots(
        cls,
        roots: Iterable[str],
        *,
        snapshotter: TreeSnapshotter | None = None,
        detector: ChangeDetector | None = None,
        remediator: Remediator | None = None,
        interval: float = DEFAULT_INTERVAL,
        sleep: Callable[[float], None] = time.sleep,
    ) -> "MonitorLoop":
        """Capture the baseline of every root and build a loop for it.

        Roots are captured sequentially, in the given order.

        Raises:
            OSError: If any root cannot be captured. Nothing is
                monitored in that case.
        """
        snapshotter = snapshotter or TreeSnapshotter()
        return cls(
            snapshotter.scan_all(roots),
            detector=detector,
            remediator=remediator,
            interval=interval,
            sleep=sleep,
        )

    @property
    def snapshots(self) -> tuple[DirectoryEntry, ...]:
        """Baseline snapshots, one per root."""
        return self._snapshots

    @property
    def interval(self) -> float:
        """Seconds slept between cycles."""
        return self._interval

    def check_root(self, snapshot: DirectoryEntry) -> list[str]:
        """Detect and remove new entries directly under one root.

        Stops at the first error; entries not handled yet are picked up
        again on the next cycle.

        Args:
            snapshot: Baseline of the root to check.

        Returns:
            Paths that were removed.

        Raises:
            OSError: If listing, classification or removal fails.
        """
        removed: list[str] = []
        for detected in self._detector.changes(snapshot):
            self._remediator.remediate_detected(detected)
            removed.append(detected.path)
        return removed

    def run_cycle(self) -> CycleReport:
        """Check every root once.

        Errors are logged and recorded per root; they never stop the
        remaining roots from being checked.

        Returns:
            CycleReport describing what was removed and what failed.
        """
        removed: list[str] = []
        failures: list[RootFailure] = []

        for snapshot in self._snapshots:
            try:
                removed.extend(self.check_root(snapshot))
            except OSError as e:
                logger.error("Error occurred while scanning directory %s: %s", snapshot.path, e)
                failures.append(RootFailure(root=snapshot.path, error=e))

        return CycleReport(removed=tuple(removed), failures=tuple(failures))

    def run(self) -> NoReturn:
        """Monitor forever, sleeping ``interval`` seconds between cycles."""
        logger.info("Monitoring %d root(s)", len(self._snapshots))
        while True:
            report = self.run_cycle()
            logger.debug(
                "Cycle finished: %d removed, %d failed",
                len(report.removed),
                len(report.failures),
            )
            self._sleep(self._interval)
