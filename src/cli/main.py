"""CLI principal (Typer).

Por qué Typer:
- Subcomandos `get`/`post` declarativos con ayuda coloreada (Rich).
- Los errores de uso salen con exit 2 y el mensaje estándar de Click.

Flujo: argumentos -> `HttpRequest` -> una petición -> impresión.
"""

from __future__ import annotations

import asyncio
import logging

import typer
from pydantic import ValidationError
from rich.console import Console

from cli import doctor
from cli.logging_setup import setup_logging
from cli.ui_components import print_error, print_response
from core.config import AppSettings
from core.domain.models import HttpMethod
from core.errors import HttpieError, UsageError
from core.services.http_pipeline import build_request, execute

APP_NAME = "httpie-lite"
APP_VERSION = "0.1.0"

logger = logging.getLogger(__name__)

app = typer.Typer(
    name=APP_NAME,
    no_args_is_help=True,
    rich_markup_mode="rich",
    help="Minimal [bold cyan]httpie[/bold cyan]-style HTTP client: GET/POST with pretty-printed responses.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"{APP_NAME} {APP_VERSION}", highlight=False)
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    try:
        settings = AppSettings()
    except ValidationError as exc:
        print_error(_err_console, exc)
        raise typer.Exit(code=1) from exc
    setup_logging(settings.log_level, verbose=verbose)
    ctx.obj = settings


def _run(settings: AppSettings, method: HttpMethod, url: str, pairs: list[str]) -> None:
    try:
        request = build_request(method, url, pairs)
    except UsageError as exc:
        raise typer.BadParameter(exc.message) from exc

    logger.debug(
        "options: %s %s %s",
        request.method.value,
        request.url,
        " ".join(str(pair) for pair in request.body),
    )
    try:
        view = asyncio.run(execute(request, settings=settings))
        print_response(_console, view, indent=settings.json_indent)
    except HttpieError as exc:
        print_error(_err_console, exc)
        raise typer.Exit(code=1) from exc


@app.command()
def get(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="URL of the HTTP request."),
) -> None:
    """Send a GET request and print the response."""

    _run(ctx.obj, HttpMethod.GET, url, [])


@app.command()
def post(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="URL of the HTTP request."),
    body: list[str] | None = typer.Argument(
        None,
        help="Body fields as [green]key=value[/green]; sent as a JSON object.",
        show_default=False,
    ),
) -> None:
    """Send a POST request with a JSON body built from key=value pairs."""

    _run(ctx.obj, HttpMethod.POST, url, body or [])


def run() -> None:
    app(prog_name=APP_NAME)


if __name__ == "__main__":
    run()
