"""storefront-cms CLI (Typer).

Why a CLI for a data-access layer:
- Content editors can check what a page would receive without running the site.
- `--output` snapshots payloads as JSON fixtures.

This layer is the "caller" of the content client: it is the one that turns
`CMSRequestError`/`httpx.HTTPError` into a red message and exit code 1.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Awaitable, Callable

import httpx
import typer
from rich.console import Console

from adapters.json_exporter import dump_payload, export_payload_json
from cli import doctor
from cli.ui_components import build_blog_table
from core.config import AppSettings
from core.domain.models import DEFAULT_BLOG_SORT
from core.errors import CMSRequestError
from core.log_setup import configure_logging
from core.services.content_client import ContentClient, build_content_client

app = typer.Typer(no_args_is_help=True, help="Read storefront content from the Strapi CMS.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


@dataclass
class CliState:
    """Shared by every command through `ctx.obj`."""

    settings: AppSettings
    http_transport: httpx.AsyncBaseTransport | None = None


class Resource(str, Enum):
    HERO_BANNER = "hero-banner"
    MID_BANNER = "mid-banner"
    COLLECTIONS = "collections"
    EXPLORE_BLOG = "explore-blog"
    VARIANT_COLORS = "variant-colors"
    ABOUT_US = "about-us"
    FAQ = "faq"
    BLOG_CATEGORIES = "blog-categories"


_ACCESSORS: dict[Resource, Callable[[ContentClient], Awaitable[Any]]] = {
    Resource.HERO_BANNER: ContentClient.get_hero_banner_data,
    Resource.MID_BANNER: ContentClient.get_mid_banner_data,
    Resource.COLLECTIONS: ContentClient.get_collections_data,
    Resource.EXPLORE_BLOG: ContentClient.get_explore_blog_data,
    Resource.VARIANT_COLORS: ContentClient.get_product_variants_colors,
    Resource.ABOUT_US: ContentClient.get_about_us,
    Resource.FAQ: ContentClient.get_faq,
    Resource.BLOG_CATEGORIES: ContentClient.get_blog_post_categories,
}


def _client(ctx: typer.Context) -> ContentClient:
    state: CliState = ctx.obj
    return build_content_client(state.settings, http_transport=state.http_transport)


def _run(coro: Awaitable[Any]) -> Any:
    try:
        return asyncio.run(coro)  # type: ignore[arg-type]
    except CMSRequestError as exc:
        status = f" (HTTP {exc.status_code})" if exc.status_code is not None else ""
        _err_console.print(f"[red]CMS error:[/red] {exc}{status}")
        raise typer.Exit(code=1) from exc
    except httpx.HTTPError as exc:
        _err_console.print(f"[red]Network error:[/red] {exc or type(exc).__name__}")
        raise typer.Exit(code=1) from exc


def _emit(payload: Any, output: Path | None) -> None:
    if output is not None:
        path = export_payload_json(payload=payload, output_path=output)
        _err_console.print(f"[green]Saved:[/green] {path}")
        return
    typer.echo(dump_payload(payload), nl=False)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging (requests, cache hits)."),
    json_logs: bool = typer.Option(False, "--json-logs", help="Render logs as JSON lines."),
) -> None:
    if not isinstance(ctx.obj, CliState):
        ctx.obj = CliState(settings=AppSettings())
    settings = ctx.obj.settings
    configure_logging("DEBUG" if verbose else settings.log_level, json=json_logs or settings.log_json)


@app.command()
def fetch(
    ctx: typer.Context,
    resource: Resource = typer.Argument(..., help="Content to fetch."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the JSON payload to this file."),
) -> None:
    """Fetch one fixed content resource and print it as JSON."""

    client = _client(ctx)
    payload = _run(_ACCESSORS[resource](client))
    _emit(payload, output)


@app.command()
def page(
    ctx: typer.Context,
    content_type: str = typer.Argument(..., help="Strapi single type, e.g. `privacy-policy`."),
    tag: str | None = typer.Option(None, "--tag", help="Cache tag (defaults to the content type)."),
    output: Path | None = typer.Option(None, "--output", "-o"),
) -> None:
    """Fetch a generic content page."""

    client = _client(ctx)
    payload = _run(client.get_content_page(content_type, tag or content_type))
    _emit(payload, output)


@app.command()
def blog(
    ctx: typer.Context,
    sort_by: str = typer.Option(DEFAULT_BLOG_SORT, "--sort-by", help="Strapi sort expression."),
    query: str | None = typer.Option(None, "--query", "-q", help="Title contains."),
    category: str | None = typer.Option(None, "--category", "-c", help="Category slug."),
    raw: bool = typer.Option(False, "--raw", help="Print the JSON envelope instead of a table."),
    output: Path | None = typer.Option(None, "--output", "-o"),
) -> None:
    """List blog posts."""

    client = _client(ctx)
    payload = _run(client.get_blog_posts(sort_by=sort_by, query=query, category=category))
    if raw or output is not None:
        _emit(payload, output)
        return
    posts = payload.get("data") if isinstance(payload, dict) else None
    _console.print(build_blog_table(posts or []))


@app.command()
def post(
    ctx: typer.Context,
    slug: str = typer.Argument(..., help="Blog post slug."),
    output: Path | None = typer.Option(None, "--output", "-o"),
) -> None:
    """Fetch a single blog post by slug (exit code 1 when not found)."""

    client = _client(ctx)
    found = _run(client.get_blog_post_by_slug(slug))
    if found is None:
        _err_console.print(f"[yellow]No blog post with slug[/yellow] {slug!r}")
        raise typer.Exit(code=1)
    _emit(found, output)


@app.command()
def slugs(ctx: typer.Context) -> None:
    """Print every blog slug, one per line."""

    client = _client(ctx)
    for slug in _run(client.get_all_blog_slugs()):
        typer.echo(slug)


def run() -> None:
    app()
