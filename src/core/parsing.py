"""Helpers de parseo de argumentos y cabeceras.

Por qué aquí y no en la CLI:
- Son funciones puras, testeables sin Typer.
- La validación de URL ocurre antes de abrir ninguna conexión.
"""

from __future__ import annotations

import httpx

from core.domain.models import KVPair
from core.errors import InvalidUrlError

_ALLOWED_SCHEMES = ("http", "https")


def parse_url(value: str) -> str:
    """Valida que `value` sea una URL absoluta http(s) con host.

    Devuelve el string original (sin normalizar) para que la petición use
    exactamente lo que escribió el usuario.
    """

    if not value or not value.strip():
        raise InvalidUrlError(value, "empty URL")
    try:
        url = httpx.URL(value)
    except httpx.InvalidURL as exc:
        raise InvalidUrlError(value, str(exc)) from exc

    if not url.scheme:
        raise InvalidUrlError(value, "relative URL without a base")
    if url.scheme not in _ALLOWED_SCHEMES:
        raise InvalidUrlError(value, f"unsupported scheme {url.scheme!r}")
    if not url.host:
        raise InvalidUrlError(value, "missing host")
    return value


def parse_kv_pair(token: str) -> KVPair:
    return KVPair.parse(token)


def parse_media_type(header_value: str | None) -> str | None:
    """`application/JSON; charset=utf-8` -> `application/json`."""

    if header_value is None:
        return None
    media_type = header_value.split(";", 1)[0].strip().lower()
    return media_type or None
