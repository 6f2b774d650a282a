"""Formateo del cuerpo de respuesta.

Por qué separado de la UI:
- La decisión JSON/verbatim es lógica pura y testeable.
- La UI solo elige colores.
"""

from __future__ import annotations

import json

from core.domain.models import ResponseView
from core.errors import BodyDecodeError, JsonFormatError


def decode_body(content: bytes, encoding: str | None = None) -> str:
    """Decodifica estrictamente; UTF-8 si la respuesta no declara charset."""

    encoding = encoding or "utf-8"
    try:
        return content.decode(encoding)
    except LookupError as exc:
        raise BodyDecodeError(f"Unknown response charset {encoding!r}") from exc
    except UnicodeDecodeError as exc:
        raise BodyDecodeError(f"Response body is not valid {encoding}: {exc.reason}") from exc


def pretty_json(text: str, indent: int = 2) -> str:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise JsonFormatError(f"Response declared JSON but could not be parsed: {exc}") from exc
    return json.dumps(payload, ensure_ascii=False, indent=indent)


def render_body(view: ResponseView, indent: int = 2) -> str:
    if view.is_json() and view.text.strip():
        return pretty_json(view.text, indent=indent)
    return view.text
