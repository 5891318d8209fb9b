"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from cli.ui_components import print_banner
from core.config import AppSettings, get_user_env_file, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_cms(
    settings: AppSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> tuple[bool, str]:
    """Hit Strapi's `/_health` endpoint (204 when the server is up)."""

    url = f"{settings.strapi_url}/_health"
    try:
        async with build_async_client(settings, transport=transport) as client:
            response = await client.get(url)
    except httpx.HTTPError as exc:
        return False, str(exc) or type(exc).__name__
    return response.is_success, f"HTTP {response.status_code}"


@app.command()
def run(ctx: typer.Context) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    state = ctx.obj
    settings: AppSettings = state.settings

    print_banner(_console)

    table = Table(title="storefront-cms Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    if settings.strapi_enabled:
        table.add_row("CMS URL", "OK", str(settings.strapi_url))
    else:
        table.add_row("CMS URL", "DISABLED", "No URL set -> empty fallbacks, no network calls")
    if settings.strapi_read_token:
        table.add_row("Read token", "OK", "Bearer token configured")
    else:
        table.add_row("Read token", "MISSING", "Requests are sent with an empty bearer token")
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")

    # Connectivity
    ok_http = True
    if settings.strapi_enabled:
        ok_http, detail_http = asyncio.run(_check_cms(settings, state.http_transport))
        table.add_row("CMS connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not settings.strapi_enabled:
        _console.print(
            "\n[yellow]Note:[/yellow] Run `storefront-cms doctor setup-cms` or set STRAPI_URL to enable the CMS."
        )
    if not ok_http:
        raise typer.Exit(code=1)


@app.command(name="setup-cms")
def setup_cms() -> None:
    """Interactive CMS setup (stores config in the user config .env)."""

    base_url = typer.prompt("Strapi base URL").strip().rstrip("/")
    token = typer.prompt("Strapi read token", hide_input=True, confirmation_prompt=False).strip()

    if not base_url.startswith(("http://", "https://")):
        raise typer.BadParameter("base URL must start with http:// or https://")

    env_path = write_user_env_vars(
        {
            "STRAPI_URL": base_url,
            "STRAPI_READ_TOKEN": token,
        },
        env_path=get_user_env_file(),
    )

    _console.print(f"[green]Saved CMS config to:[/green] {env_path}")
