"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers por defecto y redirecciones.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings

POWERED_BY_HEADER = "X-POWERED-BY"


def build_default_headers(settings: AppSettings) -> dict[str, str]:
    return {
        POWERED_BY_HEADER: settings.powered_by,
        "User-Agent": settings.user_agent,
    }


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con las dos cabeceras fijas de la herramienta.

    Por qué un builder:
    - Centraliza timeouts/headers para que GET y POST se comporten igual.
    - `transport` permite sustituir la red en tests.
    """

    settings = settings or AppSettings()
    headers = build_default_headers(settings)
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=settings.follow_redirects,
        headers=headers,
        transport=transport,
    )
