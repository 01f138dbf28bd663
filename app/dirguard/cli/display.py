"""Rich display functions for baseline snapshots."""

from collections.abc import Sequence

from rich.table import Table

from dirguard.filesystem.models import DirectoryEntry


def create_snapshot_table(snapshots: Sequence[DirectoryEntry]) -> Table:
    """Create a Rich table summarizing captured baselines.

    One row per root with the number of directories and files captured
    below it. Only top-level entries are enforced, so that count gets its
    own column.

    Args:
        snapshots: Baseline snapshots, one per watched root.

    Returns:
        Rich Table configured for baseline display.
    """
    table = Table(
        title="Baseline",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Root", no_wrap=True)
    table.add_column("Top-level", style="info", justify="right")
    table.add_column("Directories", style="muted", justify="right")
    table.add_column("Files", style="muted", justify="right")

    for snapshot in snapshots:
        counts = snapshot.count()
        table.add_row(
            f"[text]{snapshot.path}[/text]",
            str(len(snapshot.children)),
            str(counts.directories),
            str(counts.files),
        )

    return table
