#!/usr/bin/env python3
"""Command-line interface for ytmproxy.

This CLI is primarily for debugging and development: it runs the same
normalization and extraction as the HTTP API and prints the result.
"""

import json
import logging
import sys
from typing import Any

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ytmproxy import create_extraction_chain, create_metadata_provider
from ytmproxy.config import EndpointLimits
from ytmproxy.exceptions import ProxyError
from ytmproxy.models import NormalizedFormat, NormalizedItem
from ytmproxy.services import (
    ALBUM_BUCKETS,
    extract_items,
    extract_suggestions,
    pick_best_audio,
    resolve_search_filter,
    song_type_hint,
)

logger = logging.getLogger("ytmproxy")

LIMITS = EndpointLimits()


def setup_logging(verbose: bool = False) -> None:
    """Configure logging with Rich handler.

    Args:
        verbose: If True, set log level to DEBUG. Otherwise WARNING.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    handler = RichHandler(rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    root_logger.setLevel(level)
    root_logger.addHandler(handler)


def dump_json(data: Any) -> None:
    json.dump(data, sys.stdout, indent=2, ensure_ascii=False, default=str)
    sys.stdout.write("\n")


def print_items(console: Console, items: list[NormalizedItem], title: str) -> None:
    """Print normalized items as a table."""
    table = Table(title=title, title_justify="left")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Type", style="cyan")
    table.add_column("Title", overflow="fold")
    table.add_column("Artists", overflow="fold")
    table.add_column("ID", style="dim")

    for i, item in enumerate(items, 1):
        title_cell = item.title or "[dim]-[/dim]"
        if item.warning:
            title_cell += f" [yellow]({item.warning})[/yellow]"
        table.add_row(
            str(i),
            item.type.value,
            title_cell,
            ", ".join(item.artists),
            item.video_id or item.id,
        )
    console.print(table)


def print_formats(
    console: Console, formats: list[NormalizedFormat], best: NormalizedFormat | None
) -> None:
    """Print stream formats as a table, marking the best audio candidate."""
    table = Table(title=f"{len(formats)} format(s)", title_justify="left")
    table.add_column("", width=1)
    table.add_column("MIME type")
    table.add_column("Quality")
    table.add_column("Bitrate", justify="right")
    table.add_column("Audio", justify="right")
    table.add_column("Audio only")

    for fmt in formats:
        table.add_row(
            "[green]*[/green]" if fmt is best else "",
            fmt.mime_type or "",
            fmt.quality_label or "",
            str(fmt.bitrate or ""),
            str(fmt.audio_bitrate or ""),
            "yes" if fmt.is_audio_only else "",
        )
    console.print(table)
    if best is not None:
        console.print(f"\nBest: [cyan]{best.url}[/cyan]")


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.option("--language", default="en", show_default=True, help="Response language.")
@click.pass_context
def main(ctx: click.Context, verbose: bool, language: str) -> None:
    """Query YouTube Music through the normalizing adapter."""
    ctx.ensure_object(dict)
    ctx.obj["language"] = language
    setup_logging(verbose=verbose)


def _provider(ctx: click.Context) -> Any:
    return create_metadata_provider(language=ctx.obj.get("language", "en"))


@main.command(name="search")
@click.argument("query")
@click.option(
    "--type",
    "search_filter",
    help="Filter (song, video, album, artist, playlist; plural also accepted).",
)
@click.option("--limit", type=int, default=LIMITS.search.default, show_default=True)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def search_cmd(
    ctx: click.Context,
    query: str,
    search_filter: str | None,
    limit: int,
    as_json: bool,
) -> None:
    """Search YouTube Music and print normalized items.

    \b
    Examples:
      ytmproxy search "daft punk"
      ytmproxy search "discovery" --type albums --json
    """
    limit = LIMITS.search.clamp(limit)
    try:
        search_filter = resolve_search_filter(search_filter)
        raw = _provider(ctx).search(query, filter=search_filter, limit=limit)
    except ProxyError as e:
        raise click.ClickException(e.message) from e

    items = extract_items(raw)[:limit]
    if as_json:
        dump_json([item.model_dump(by_alias=True, exclude={"raw"}) for item in items])
    else:
        print_items(Console(), items, f"Search: {query}")


@main.command(name="suggest")
@click.argument("query")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def suggest_cmd(ctx: click.Context, query: str, as_json: bool) -> None:
    """Print autocomplete suggestions for QUERY."""
    try:
        raw = _provider(ctx).get_suggestions(query)
    except ProxyError as e:
        raise click.ClickException(e.message) from e

    suggestions = extract_suggestions(raw)[: LIMITS.suggestions.ceiling]
    if as_json:
        dump_json([s.model_dump(by_alias=True, exclude={"raw"}) for s in suggestions])
    else:
        for suggestion in suggestions:
            click.echo(suggestion.title)


@main.command(name="album")
@click.argument("album_id", metavar="BROWSE_ID")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def album_cmd(ctx: click.Context, album_id: str, as_json: bool) -> None:
    """Print the tracks of an album."""
    try:
        raw = _provider(ctx).get_album(album_id)
    except ProxyError as e:
        raise click.ClickException(e.message) from e

    tracks = extract_items(raw, song_type_hint, buckets=ALBUM_BUCKETS)
    tracks = tracks[: LIMITS.album_tracks]
    if as_json:
        dump_json([t.model_dump(by_alias=True, exclude={"raw"}) for t in tracks])
    else:
        title = raw.get("title") if isinstance(raw, dict) else None
        print_items(Console(), tracks, f"Album: {title or album_id}")


@main.command(name="extract")
@click.argument("video", metavar="VIDEO_ID_OR_URL")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option(
    "--fallback-only",
    is_flag=True,
    help="Skip the primary provider and use yt-dlp directly.",
)
@click.pass_context
def extract_cmd(
    ctx: click.Context, video: str, as_json: bool, fallback_only: bool
) -> None:
    """Resolve playable stream formats for a video.

    \b
    Examples:
      ytmproxy extract dQw4w9WgXcQ
      ytmproxy extract "https://music.youtube.com/watch?v=VIDEO_ID" --json
    """
    console = Console()
    try:
        provider = None if fallback_only else _provider(ctx)
        result = create_extraction_chain(provider).extract(video)
    except ProxyError as e:
        logger.error(e.details or e.message)
        raise click.ClickException(e.message) from e

    best = pick_best_audio(result.formats)
    if as_json:
        best_json = best.model_dump(by_alias=True, exclude={"raw"}) if best else None
        dump_json(
            {
                "extractor": result.extractor,
                "videoId": result.video_id,
                "best": best_json,
                "attempts": [a.model_dump(by_alias=True) for a in result.attempts],
            }
        )
        return

    console.print(f"Extractor: [cyan]{result.extractor}[/cyan]")
    for attempt in result.attempts:
        status = "[green]ok[/green]" if attempt.ok else f"[red]{attempt.reason}[/red]"
        console.print(f"  {attempt.provider} / {attempt.strategy}: {status}")
    print_formats(console, result.formats, best)


if __name__ == "__main__":
    main()
