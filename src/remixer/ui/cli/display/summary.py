"""Utilities for rendering the end-of-run summary."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from remixer.features.organization.usecases import NO_TAGS_BUCKET, RunStats


def render_run_summary(console: Console, stats: RunStats) -> None:
    """Render the counters and tag format histogram of a finished run.

    Args:
        console: Rich console instance used to render output.
        stats: Statistics returned by the organizer.
    """
    console.print("\n[bold]Summary:[/bold]")
    console.print(f"Processed files: {stats.processed}")
    console.print(f"[green]Automatically organized files: {stats.organized}[/green]")

    style = "red" if stats.needing_intervention else "green"
    console.print(
        f"[{style}]Files needing manual intervention: {stats.needing_intervention}[/{style}]"
    )
    if stats.needing_intervention:
        console.print(
            f"  quarantined: {stats.quarantined}, skipped: {stats.skipped}, "
            + f"read errors: {stats.read_errors}"
        )

    table = Table(title="Metadata tag types encountered (multiples can occur)")
    table.add_column("Tag format")
    table.add_column("Files", justify="right")
    for tag_format, count in sorted(stats.tag_formats.items()):
        label = f"[dim]{tag_format}[/dim]" if tag_format == NO_TAGS_BUCKET else tag_format
        table.add_row(label, str(count))
    console.print(table)
