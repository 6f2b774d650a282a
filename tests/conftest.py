"""Shared pytest fixtures.

- Isolates tests from `.env` files and `HTTPIE_LITE_*` variables of the host.
- Provides a factory for `httpx.MockTransport`-backed clients.
"""

from __future__ import annotations

import os
from typing import Callable

import httpx
import pytest

from adapters.http_client import build_async_client
from core.config import AppSettings


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    for key in list(os.environ):
        if key.startswith("HTTPIE_LITE_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def mock_client_factory(settings) -> Callable[..., Callable[..., httpx.AsyncClient]]:
    """Returns a `build_async_client` replacement that routes to `handler`."""

    def factory(handler: Callable[[httpx.Request], httpx.Response]):
        def builder(_settings: AppSettings | None = None, **kwargs) -> httpx.AsyncClient:
            return build_async_client(settings, transport=httpx.MockTransport(handler), **kwargs)

        return builder

    return factory
