"""CLI entry point for jbchannel."""

import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from jbchannel.catalog.aggregator import FetchOutcome
from jbchannel.catalog.channel import JupiterChannel, build_channel
from jbchannel.catalog.models import (
    AllMediaQuery,
    CatalogPage,
    ChannelQuery,
    ContentType,
    MediaItem,
)
from jbchannel.config.logging import setup_logging
from jbchannel.config.manager import ConfigManager
from jbchannel.utils.display import format_duration, truncate_text
from jbchannel.utils.errors import JBChannelError

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="jbchannel",
    help="Browse Jupiter Broadcasting podcast feeds",
    no_args_is_help=True,
)
config_app = typer.Typer(name="config", help="Inspect jbchannel configuration")
app.add_typer(config_app)
console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose (DEBUG) logging"
    ),
    log_file: Path | None = typer.Option(
        None, "--log-file", help="Write logs to file"
    ),
) -> None:
    """jbchannel - Jupiter Broadcasting shows, episodes and latest media."""
    try:
        level = ConfigManager().load_config().log_level
    except JBChannelError:
        # Commands that need the config report the error themselves.
        level = "INFO"

    setup_logging(verbose=verbose, log_file=log_file, level=level)


def _open_channel() -> JupiterChannel:
    """Build a channel from the user's configuration."""
    config = ConfigManager().load_config()
    return build_channel(config)


def _item_to_dict(item: MediaItem) -> dict:
    return {
        "id": item.id,
        "title": item.name,
        "show": item.show_id,
        "date": item.date_created.isoformat() if item.date_created else None,
        "duration_seconds": item.runtime_seconds,
        "url": item.source_url,
    }


def _media_table(title: str, items: list[MediaItem], show_column: bool) -> Table:
    table = Table(title=title)
    table.add_column("#", style="dim", width=4)
    if show_column:
        table.add_column("Show", style="magenta", no_wrap=True)
    table.add_column("Title", style="cyan", max_width=60)
    table.add_column("Date", style="green", width=12)
    table.add_column("Duration", style="yellow", width=10)

    for i, item in enumerate(items, 1):
        date = item.date_created.strftime("%Y-%m-%d") if item.date_created else "-"
        row = [str(i)]
        if show_column:
            row.append(escape(item.show_id))
        row += [escape(truncate_text(item.name, 60)), date, format_duration(item.runtime_seconds)]
        table.add_row(*row)

    return table


def _print_failures(outcomes: list[FetchOutcome]) -> None:
    failed = [outcome for outcome in outcomes if not outcome.success]
    succeeded = len(outcomes) - len(failed)

    if not failed:
        console.print(f"\n[green]✓[/green] {succeeded} feeds fetched successfully")
        return

    console.print(f"\n[yellow]⚠[/yellow] {succeeded} succeeded, {len(failed)} failed")
    for outcome in failed:
        error = truncate_text(outcome.error or "Unknown error", 70)
        console.print(f"  [red]✗[/red] {escape(outcome.show_id)}: {escape(error)}")


@app.command("version")
def show_version() -> None:
    """Show version information."""
    from jbchannel import __version__

    console.print(f"[bold cyan]jbchannel[/bold cyan] v{__version__}")


@app.command("shows")
def list_shows(
    json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
) -> None:
    """List every Jupiter Broadcasting show."""
    try:
        channel = _open_channel()
    except JBChannelError as e:
        console.print(f"[red]✗[/red] Error: {escape(str(e))}")
        sys.exit(1)

    page = channel.catalog.list_shows()

    if json_output:
        shows = [
            {
                "id": show.id,
                "name": show.display_name,
                "feed_url": show.feed_url,
                "image_url": show.artwork_url,
            }
            for show in channel.registry
        ]
        print(json.dumps({"shows": shows, "total": page.total_count}, indent=2))
        return

    table = Table(title="[bold]Jupiter Broadcasting Shows[/bold]")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Feed", style="blue")

    for show in channel.registry:
        table.add_row(show.id, show.display_name, show.feed_url or "[dim]no feed[/dim]")

    console.print(table)
    console.print(f"\n[dim]Total: {page.total_count} show(s)[/dim]")


@app.command("episodes")
def list_episodes(
    show_id: Annotated[str, typer.Argument(help="Show identifier (see `jbchannel shows`)")],
    limit: Annotated[
        int,
        typer.Option("--limit", "-n", help="Number of episodes to show", min=1, max=1000),
    ] = 10,
    json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
) -> None:
    """List episodes of one show.

    Examples:
        jbchannel episodes bsd

        jbchannel episodes coder --limit 20
    """

    async def run_episodes() -> CatalogPage:
        async with _open_channel() as channel:
            query = ChannelQuery(folder_id=show_id)
            if json_output:
                return await channel.get_channel_items(query)
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                console=console,
            ) as progress:
                progress.add_task(f"Fetching {show_id} feed...", total=None)
                return await channel.get_channel_items(query)

    try:
        page = asyncio.run(run_episodes())
    except JBChannelError as e:
        console.print(f"[red]✗[/red] Error: {escape(str(e))}")
        sys.exit(1)

    items = [item for item in page.items if isinstance(item, MediaItem)][:limit]

    if json_output:
        result = {
            "show": show_id,
            "episodes": [_item_to_dict(item) for item in items],
            "total": page.total_count,
            "showing": len(items),
        }
        print(json.dumps(result, indent=2))
        return

    console.print(_media_table(f"Episodes from {escape(show_id)}", items, show_column=False))
    console.print(f"\n[dim]Showing {len(items)} of {page.total_count} episodes[/dim]")


@app.command("latest")
def list_latest(
    limit: Annotated[
        int,
        typer.Option("--limit", "-n", help="Number of items to show", min=1, max=1000),
    ] = 20,
    json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
) -> None:
    """Show the latest episodes across all shows, newest first.

    Fetches every feed in parallel. Failed feeds are reported but do not
    stop the listing.
    """

    async def run_latest() -> tuple[list[MediaItem], list[FetchOutcome]]:
        async with _open_channel() as channel:
            if json_output:
                return await channel.aggregator.fetch_latest()
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                console=console,
            ) as progress:
                progress.add_task(
                    f"Fetching {len(channel.registry)} feeds...", total=None
                )
                return await channel.aggregator.fetch_latest()

    try:
        items, outcomes = asyncio.run(run_latest())
    except JBChannelError as e:
        console.print(f"[red]✗[/red] Error: {escape(str(e))}")
        sys.exit(1)

    latest = items[:limit]

    if json_output:
        output = {
            "latest": [_item_to_dict(item) for item in latest],
            "total_feeds": len(outcomes),
            "failed": [
                {"show": outcome.show_id, "error": outcome.error}
                for outcome in outcomes
                if not outcome.success
            ],
        }
        print(json.dumps(output, indent=2))
        return

    console.print(_media_table("Latest Episodes (All Shows)", latest, show_column=True))
    _print_failures(outcomes)


@app.command("all")
def list_all(
    content_types: Annotated[
        list[ContentType] | None,
        typer.Option("--content-type", "-t", help="Only include these content types"),
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
) -> None:
    """Count every item across all shows, optionally filtered by content type."""

    async def run_all() -> CatalogPage:
        async with _open_channel() as channel:
            return await channel.get_all_media(AllMediaQuery(content_types=content_types or []))

    try:
        page = asyncio.run(run_all())
    except JBChannelError as e:
        console.print(f"[red]✗[/red] Error: {escape(str(e))}")
        sys.exit(1)

    if json_output:
        items = [item for item in page.items if isinstance(item, MediaItem)]
        print(
            json.dumps(
                {"items": [_item_to_dict(item) for item in items], "total": page.total_count},
                indent=2,
            )
        )
        return

    per_show: dict[str, int] = {}
    for item in page.items:
        if isinstance(item, MediaItem):
            per_show[item.show_id] = per_show.get(item.show_id, 0) + 1

    table = Table(title="[bold]All Media[/bold]")
    table.add_column("Show", style="cyan", no_wrap=True)
    table.add_column("Items", justify="right")
    for show_id, count in sorted(per_show.items()):
        table.add_row(show_id, str(count))

    console.print(table)
    console.print(f"\n[dim]Total: {page.total_count} item(s)[/dim]")


@config_app.command("path")
def config_path() -> None:
    """Print the config file location."""
    print(ConfigManager().config_file)


@config_app.command("show")
def config_show() -> None:
    """Print the effective configuration."""
    try:
        config = ConfigManager().load_config()
    except JBChannelError as e:
        console.print(f"[red]✗[/red] Error: {escape(str(e))}")
        sys.exit(1)

    print(json.dumps(config.model_dump(mode="json"), indent=2))


if __name__ == "__main__":
    app()
