"""Shared fixtures: BrandMeister clients backed by httpx.MockTransport."""

from __future__ import annotations

from typing import Callable

import httpx
import pytest

from check_brandmeister.brandmeister_client import BrandMeisterClient

API_URL = "http://api.brandmeister.network/v1.0"


@pytest.fixture
def make_client() -> Callable[..., BrandMeisterClient]:
    """Build a client whose every request is answered by ``handler``."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> BrandMeisterClient:
        return BrandMeisterClient(API_URL, transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def status_client(make_client):
    """Build a client that always answers with the given ``last_updated``."""

    def _make(last_updated: str) -> BrandMeisterClient:
        return make_client(
            lambda request: httpx.Response(200, json={"repeaterid": 270107, "last_updated": last_updated})
        )

    return _make
