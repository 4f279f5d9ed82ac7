"""CLI entry point.

Queries a collection stored in a JSON file (``{"blog": [{...}, ...]}``)
and prints items, counts or feeds.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from collectionspine.builder import CollectionBuilder
from collectionspine.core.config import Settings
from collectionspine.core.exceptions import CollectionSpineError
from collectionspine.repository.memory import MemoryRepository

app = typer.Typer(
    name="collectionspine",
    help="Query content collections and render RSS/sitemap feeds",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

DataArg = Annotated[Path, typer.Argument(help="JSON file mapping collection names to item lists")]
CollectionArg = Annotated[str, typer.Argument(help="Collection name")]


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
) -> None:
    """Configure logging for all commands."""
    settings = Settings()
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True, show_path=False)],
        force=True,
    )


def _builder(
    data: Path,
    collection: str,
    *,
    page_path: str | None = None,
    pretty_urls: bool = False,
) -> CollectionBuilder:
    try:
        repository = MemoryRepository.from_json(data)
    except CollectionSpineError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1) from e

    builder = CollectionBuilder(data.parent / collection, repository=repository)
    if page_path:
        builder.page_path(page_path)
    if pretty_urls:
        builder.pretty_urls()
    return builder


def _apply_filters(
    builder: CollectionBuilder,
    status: str | None,
    tags: list[str] | None,
    author: str | None,
) -> CollectionBuilder:
    if status:
        builder.status(status)
    if tags:
        builder.tags(tags)
    if author:
        builder.author(author)
    return builder


@app.command()
def version() -> None:
    """Show version."""
    from collectionspine import __version__

    console.print(f"collectionspine {__version__}")


@app.command("list")
def list_items(
    data: DataArg,
    collection: CollectionArg,
    status: Annotated[str | None, typer.Option(help="Only items with this status")] = None,
    tag: Annotated[list[str] | None, typer.Option(help="Only items with any of these tags")] = None,
    author: Annotated[str | None, typer.Option(help="Only items by this author")] = None,
    page: Annotated[int, typer.Option(min=1)] = 1,
    per_page: Annotated[int, typer.Option(min=1)] = 10,
    oldest: Annotated[bool, typer.Option("--oldest", help="Oldest first")] = False,
) -> None:
    """List one page of a collection."""
    builder = _apply_filters(_builder(data, collection), status, tag, author)
    if oldest:
        builder.oldest()
    result = builder.paginate(page, per_page).get()

    table = Table(title=f"{collection} (page {result.pagination.current_page}/{result.pagination.total_pages})")
    table.add_column("Date")
    table.add_column("Slug", style="cyan")
    table.add_column("Title")
    table.add_column("URL", style="dim")
    for item in result:
        table.add_row(item.date or "", item.slug or "", item.title or "", item.url or "")
    console.print(table)
    console.print(f"{result.pagination.total_items} item(s)")


@app.command()
def count(
    data: DataArg,
    collection: CollectionArg,
    status: Annotated[str | None, typer.Option(help="Only items with this status")] = None,
    tag: Annotated[list[str] | None, typer.Option(help="Only items with any of these tags")] = None,
    author: Annotated[str | None, typer.Option(help="Only items by this author")] = None,
) -> None:
    """Count matching items."""
    builder = _apply_filters(_builder(data, collection), status, tag, author)
    typer.echo(builder.count())


@app.command()
def rss(
    data: DataArg,
    collection: CollectionArg,
    title: Annotated[str | None, typer.Option(help="Channel title")] = None,
    description: Annotated[str | None, typer.Option(help="Channel description")] = None,
    link: Annotated[str | None, typer.Option(help="Site URL, base for relative links")] = None,
    limit: Annotated[int | None, typer.Option(min=1, help="Maximum number of items")] = None,
    page_path: Annotated[str | None, typer.Option(help="Detail page path for item URLs")] = None,
    pretty_urls: Annotated[bool, typer.Option("--pretty-urls")] = False,
) -> None:
    """Print an RSS 2.0 feed."""
    builder = _builder(data, collection, page_path=page_path, pretty_urls=pretty_urls)
    if limit is not None:
        builder.limit(limit)
    typer.echo(builder.rss(title=title, description=description, link=link))


@app.command()
def sitemap(
    data: DataArg,
    collection: CollectionArg,
    base_url: Annotated[str, typer.Option(help="Site URL")] = "",
    changefreq: Annotated[str | None, typer.Option(help="Change frequency")] = None,
    priority: Annotated[float | None, typer.Option(min=0.0, max=1.0)] = None,
    limit: Annotated[int | None, typer.Option(min=1, help="Maximum number of URLs")] = None,
    page_path: Annotated[str | None, typer.Option(help="Detail page path for item URLs")] = None,
    pretty_urls: Annotated[bool, typer.Option("--pretty-urls")] = False,
) -> None:
    """Print a sitemap."""
    builder = _builder(data, collection, page_path=page_path, pretty_urls=pretty_urls)
    if limit is not None:
        builder.limit(limit)
    typer.echo(builder.sitemap(base_url=base_url, changefreq=changefreq, priority=priority))


if __name__ == "__main__":
    app()
