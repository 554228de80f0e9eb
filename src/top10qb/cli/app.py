import asyncio
from typing import Annotated

import typer

from top10qb.cli._logging import configure_logging
from top10qb.cli._output import (
    console,
    print_archive,
    print_error,
    print_matches,
    print_player,
    print_rankings,
    print_status,
)
from top10qb.config import ConfigError, SheetSettings, create_config, load_sheet_settings
from top10qb.domain.outcome import FetchOutcome
from top10qb.domain.serialization import dumps
from top10qb.factory import create_provider
from top10qb.profiles import player_profile, search_players

app = typer.Typer(help="Weekly top 10 NFL quarterback rankings.")


def _settings(ctx: typer.Context) -> SheetSettings:
    settings = ctx.obj
    if not isinstance(settings, SheetSettings):
        settings = load_sheet_settings()
    return settings


async def _fetch_once(settings: SheetSettings) -> FetchOutcome:
    provider = create_provider(settings)
    try:
        return await provider.refresh()
    finally:
        await provider.aclose()


def _load(ctx: typer.Context) -> FetchOutcome:
    return asyncio.run(_fetch_once(_settings(ctx)))


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
    sheet_id: Annotated[str | None, typer.Option("--sheet-id", help="Published Google Sheet id.")] = None,
    config_file: Annotated[str, typer.Option("--config", help="YAML config file.")] = "top10qb.yaml",
) -> None:
    configure_logging(verbose=verbose, show_time=ctx.invoked_subcommand == "watch")
    try:
        ctx.obj = load_sheet_settings(create_config(yaml_path=config_file, sheet_id=sheet_id))
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=2) from e


@app.command()
def rankings(ctx: typer.Context) -> None:
    """Show this week's top 10."""
    outcome = _load(ctx)
    print_rankings(outcome.snapshot)
    print_status(outcome)


@app.command()
def player(ctx: typer.Context, slug: Annotated[str, typer.Argument(help="Player slug, e.g. joe-burrow.")]) -> None:
    """Show one quarterback's ranking history."""
    outcome = _load(ctx)
    profile = player_profile(outcome.snapshot, slug)
    if profile is None:
        print_error(f"no player with slug '{slug}'")
        raise typer.Exit(code=1)
    print_player(profile)


@app.command()
def archive(ctx: typer.Context) -> None:
    """List past weeks, newest first."""
    outcome = _load(ctx)
    print_archive(outcome.snapshot.archive_weeks)


@app.command()
def search(ctx: typer.Context, query: Annotated[str, typer.Argument(help="Part of a player's name.")]) -> None:
    """Find players by name."""
    outcome = _load(ctx)
    print_matches(search_players(outcome.snapshot, query))


@app.command()
def dump(ctx: typer.Context) -> None:
    """Print the current snapshot as JSON."""
    outcome = _load(ctx)
    typer.echo(dumps(outcome.snapshot))


async def _watch(settings: SheetSettings, interval: float, count: int) -> None:
    done = asyncio.Event()
    refreshes = 0

    async def report_then_sleep(seconds: float) -> None:
        nonlocal refreshes
        refreshes += 1
        if provider.snapshot is not None and provider.origin is not None:
            print_status(FetchOutcome(snapshot=provider.snapshot, origin=provider.origin, error=provider.error))
        if count and refreshes >= count:
            done.set()
        await asyncio.sleep(seconds)

    provider = create_provider(settings, sleep=report_then_sleep)
    polling = provider.start(interval)
    finished = asyncio.create_task(done.wait())
    try:
        # a polling task that dies ends the wait too; stop() re-raises its error
        await asyncio.wait({polling, finished}, return_when=asyncio.FIRST_COMPLETED)
    finally:
        finished.cancel()
        await provider.aclose()


@app.command()
def watch(
    ctx: typer.Context,
    interval: Annotated[float | None, typer.Option("--interval", help="Seconds between refreshes.")] = None,
    count: Annotated[int, typer.Option("--count", help="Stop after this many refreshes (0 = forever).")] = 0,
) -> None:
    """Poll the sheet and report where each refresh came from."""
    settings = _settings(ctx)
    try:
        asyncio.run(_watch(settings, interval or settings.poll_interval_seconds, count))
    except KeyboardInterrupt:
        console.print("Stopped.")
