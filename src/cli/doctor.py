"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import POWERED_BY_HEADER, build_async_client
from core.config import AppSettings, get_user_env_file, write_user_env_vars
from core.errors import HttpieError
from core.parsing import parse_url

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()

DEFAULT_CHECK_URL = "https://httpbin.org/get"


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"{response.http_version} {response.status_code}"
    except Exception as exc:
        return False, str(exc) or exc.__class__.__name__


@app.command()
def run(
    ctx: typer.Context,
    url: str = typer.Argument(DEFAULT_CHECK_URL, help="URL used for the connectivity check."),
) -> None:
    """Show the effective configuration and check connectivity."""

    try:
        parse_url(url)
    except HttpieError as exc:
        raise typer.BadParameter(exc.message) from exc

    settings: AppSettings = ctx.obj

    table = Table(title="httpie-lite Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("User-Agent", "OK", settings.user_agent)
    table.add_row(POWERED_BY_HEADER, "OK", settings.powered_by)
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("Redirects", "OK", "follow" if settings.follow_redirects else "do not follow")
    env_file = get_user_env_file()
    table.add_row("User config", "OK" if env_file.exists() else "OPTIONAL", str(env_file))

    # Connectivity (best-effort)
    ok_http, detail_http = asyncio.run(_check_http(url, settings))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_http:
        raise typer.Exit(code=1)


@app.command()
def setup(ctx: typer.Context) -> None:
    """Interactive setup of default headers and timeout (stored in the user config .env)."""

    current: AppSettings = ctx.obj

    user_agent = typer.prompt("User-Agent", default=current.user_agent, show_default=True).strip()
    powered_by = typer.prompt(POWERED_BY_HEADER, default=current.powered_by, show_default=True).strip()
    timeout = typer.prompt(
        "Timeout (seconds)",
        default=current.http_timeout_seconds,
        type=float,
        show_default=True,
    )

    if not user_agent or not powered_by:
        raise typer.BadParameter("User-Agent and X-POWERED-BY are required")
    if timeout <= 0:
        raise typer.BadParameter("timeout must be greater than zero")

    env_path = write_user_env_vars(
        {
            "HTTPIE_LITE_USER_AGENT": user_agent,
            "HTTPIE_LITE_POWERED_BY": powered_by,
            "HTTPIE_LITE_HTTP_TIMEOUT_SECONDS": f"{timeout:g}",
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
