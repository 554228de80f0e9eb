from rich.console import Console
from rich.table import Table

from top10qb.domain.models import ArchiveWeek, Direction, Movement, Snapshot
from top10qb.domain.outcome import FetchOutcome, SnapshotOrigin
from top10qb.profiles import PlayerMatch, PlayerProfile, history_changes

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

_ORIGIN_LABELS = {
    SnapshotOrigin.LIVE: "[green]live sheet[/green]",
    SnapshotOrigin.CACHED: "[green]cached sheet[/green]",
    SnapshotOrigin.STALE_CACHE: "[yellow]stale sheet data[/yellow]",
    SnapshotOrigin.PLACEHOLDER: "[red]placeholder[/red]",
    SnapshotOrigin.UNCONFIGURED: "[dim]sheet not configured[/dim]",
    SnapshotOrigin.STATIC: "[dim]bundled rankings[/dim]",
}


def format_movement(movement: Movement | None) -> str:
    if movement is None:
        return ""
    if movement.direction is Direction.UP:
        return f"[green]▲ {movement.spots}[/green]"
    if movement.direction is Direction.DOWN:
        return f"[red]▼ {movement.spots}[/red]"
    return "[dim]-[/dim]"


def print_error(message: str) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {message}")


def print_status(outcome: FetchOutcome) -> None:
    line = f"Source: {_ORIGIN_LABELS[outcome.origin]}"
    if outcome.error is not None:
        line += f" [dim]({outcome.error.message})[/dim]"
    console.print(line)


def print_rankings(snapshot: Snapshot) -> None:
    table = Table(title=f"{snapshot.current_week_label}  {snapshot.current_date}".strip())
    table.add_column("#", justify="right")
    table.add_column("Quarterback")
    table.add_column("Team")
    table.add_column("Move", justify="right")
    table.add_column("Take")
    for entry in snapshot.rankings:
        name = entry.name if entry.badge is None else f"{entry.name} [bold cyan]{entry.badge.value}[/bold cyan]"
        table.add_row(str(entry.rank), name, entry.team, format_movement(entry.movement), entry.commentary)
    console.print(table)

    if snapshot.dropped:
        dropped = ", ".join(f"{d.name} (was #{d.prev})" if d.prev else d.name for d in snapshot.dropped)
        console.print(f"[bold]Dropped out:[/bold] {dropped}")
    worst = snapshot.worst
    console.print(f"[bold]Worst QB:[/bold] {worst.name} ({worst.team}) - {worst.commentary}")


def print_player(profile: PlayerProfile) -> None:
    card = profile.card
    current = f"#{card.rank}" if card.rank is not None else "OUT"
    console.print(f"[bold]{card.name}[/bold] ({card.team})  current {current}")
    if card.commentary:
        console.print(f"  {card.commentary}")
    if profile.highest is not None and profile.lowest is not None:
        console.print(f"  Highest: #{profile.highest}  Lowest: #{profile.lowest}")

    if not profile.history:
        console.print("  No ranking history yet.")
        return
    table = Table(title="History")
    table.add_column("Week")
    table.add_column("Rank", justify="right")
    table.add_column("Move", justify="right")
    for change in history_changes(profile.history):
        table.add_row(change.point.week, f"#{change.point.rank}", format_movement(change.movement))
    console.print(table)


def print_archive(weeks: tuple[ArchiveWeek, ...]) -> None:
    if not weeks:
        console.print("No archived weeks.")
        return
    table = Table(title="Archive")
    table.add_column("Week")
    table.add_column("Date")
    table.add_column("Top 3")
    table.add_column("Id", style="dim")
    for week in weeks:
        table.add_row(week.label, week.date, ", ".join(week.top3), week.id)
    console.print(table)


def print_matches(matches: list[PlayerMatch]) -> None:
    if not matches:
        console.print("No matching players.")
        return
    for match in matches:
        console.print(f"{match.name}  [dim]{match.slug}[/dim]")
