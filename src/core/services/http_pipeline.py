"""Request/response pipeline.

This module holds the whole linear flow behind the CLI: validate the
arguments, send exactly one request, and turn the `httpx.Response` into a
`ResponseView` the UI layer can print. Keeping it out of the CLI makes the
flow testable with a mocked transport and keeps printing out of the core.
"""

from __future__ import annotations

import logging
from typing import Iterable

import httpx

from adapters.body_formatter import decode_body
from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.models import HttpMethod, HttpRequest, KVPair, ResponseView
from core.errors import BodyDecodeError, RequestFailedError
from core.parsing import parse_kv_pair, parse_media_type, parse_url

logger = logging.getLogger(__name__)


def build_request(
    method: HttpMethod,
    url: str,
    pairs: Iterable[str | KVPair] = (),
) -> HttpRequest:
    """Validate the URL and `key=value` tokens and build an `HttpRequest`."""

    body = [p if isinstance(p, KVPair) else parse_kv_pair(p) for p in pairs]
    return HttpRequest(method=method, url=parse_url(url), body=body)


async def send_request(request: HttpRequest, *, client: httpx.AsyncClient) -> httpx.Response:
    logger.debug("%s %s", request.method.value, request.url)
    try:
        if request.method is HttpMethod.POST:
            response = await client.post(request.url, json=request.json_body())
        else:
            response = await client.get(request.url)
    except httpx.HTTPError as exc:
        raise RequestFailedError(request.url, exc) from exc
    logger.debug("%s %s -> %s", request.method.value, request.url, response.status_code)
    return response


def _decode_headers(response: httpx.Response) -> list[tuple[str, str]]:
    headers: list[tuple[str, str]] = []
    for raw_name, raw_value in response.headers.raw:
        try:
            name = raw_name.decode("ascii")
            value = raw_value.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise BodyDecodeError(f"Header {raw_name!r} is not valid UTF-8") from exc
        headers.append((name.lower(), value))
    return headers


def to_view(response: httpx.Response) -> ResponseView:
    headers = _decode_headers(response)
    content_type = next((value for name, value in headers if name == "content-type"), None)
    return ResponseView(
        http_version=response.http_version,
        status_code=response.status_code,
        reason_phrase=response.reason_phrase,
        headers=headers,
        content_type=parse_media_type(content_type),
        text=decode_body(response.content, response.charset_encoding),
    )


async def execute(
    request: HttpRequest,
    *,
    settings: AppSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> ResponseView:
    """Send `request` and return its printable view.

    When no client is given one is built from `settings` and closed
    afterwards; a caller-provided client is left open.
    """

    if client is not None:
        view = to_view(await send_request(request, client=client))
    else:
        async with build_async_client(settings) as owned:
            view = to_view(await send_request(request, client=owned))
    logger.debug("response %s", view.summary())
    return view
