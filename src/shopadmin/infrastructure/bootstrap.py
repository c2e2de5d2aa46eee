"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import httpx

from shopadmin.infrastructure.config import Settings
from shopadmin.infrastructure.http.http_shop_repository import HttpShopRepository


def http_client(settings: Settings) -> httpx.Client:
    return httpx.Client(
        base_url=settings.api_url,
        timeout=settings.timeout,
        headers={"Accept": "application/json"},
    )


def shop_repository(settings: Settings) -> HttpShopRepository:
    return HttpShopRepository(http_client(settings))
