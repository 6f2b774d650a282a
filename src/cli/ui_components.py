"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Solo el JSON pasa por Rich (color). El resto del cuerpo se escribe tal cual
  en el stream: Rich expande tabs y elimina `\r` y otros caracteres de control.
- Las cabeceras usan `soft_wrap` para no partirse a 80 columnas fuera de una TTY.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from adapters.body_formatter import render_body
from core.domain.models import ResponseView


def print_status(console: Console, view: ResponseView) -> None:
    console.print(Text(view.status_line()), highlight=False, soft_wrap=True)
    console.print()


def print_headers(console: Console, view: ResponseView) -> None:
    for name, value in view.headers:
        console.print(Text.assemble((name, "green"), ": ", value), highlight=False, soft_wrap=True)
    console.print()


def print_body(console: Console, view: ResponseView, indent: int = 2) -> None:
    """JSON en cian y con indentación; el resto tal cual."""

    body = render_body(view, indent=indent)
    if view.is_json():
        console.print(Text(body, style="cyan"), highlight=False, soft_wrap=True)
        return
    console.file.write(body + "\n")
    console.file.flush()


def print_response(console: Console, view: ResponseView, indent: int = 2) -> None:
    print_status(console, view)
    print_headers(console, view)
    print_body(console, view, indent=indent)


def print_error(console: Console, exc: Exception) -> None:
    console.print(Text.assemble(("error: ", "bold red"), str(exc)), highlight=False, soft_wrap=True)
