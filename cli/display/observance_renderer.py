"""Render VTIMEZONE observance blocks as a Rich table."""

from rich.table import Table

from calshare.models.timezone import ObservanceBlock, ObservanceKind
from cli.display.console import console


def render_observances(timezone_id: str, blocks: list[ObservanceBlock]) -> None:
    """Print observance blocks for timezone_id."""
    if not blocks:
        console.print(f"[dim]No observances for {timezone_id}[/dim]")
        return

    table = Table(title=f"Observances: {timezone_id}", header_style="bold")
    table.add_column("Kind")
    table.add_column("Starts (local)")
    table.add_column("From", justify="right")
    table.add_column("To", justify="right")
    table.add_column("Name")

    for block in blocks:
        style = "yellow" if block.kind == ObservanceKind.DAYLIGHT else "cyan"
        table.add_row(
            f"[{style}]{block.kind.value}[/{style}]",
            block.starts_at,
            block.offset_from,
            block.offset_to,
            block.tz_name,
        )

    console.print(table)
