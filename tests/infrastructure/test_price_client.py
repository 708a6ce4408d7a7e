"""Tests for USD price sources."""

import asyncio
from decimal import Decimal
from unittest.mock import MagicMock

import httpx
import pytest

from privaudit.infrastructure.price_client import (
    CoinbasePriceSource,
    CoinGeckoPriceSource,
    FallbackPriceSource,
)


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def test_coingecko_maps_symbols_to_ids() -> None:
    """Symbols are translated to CoinGecko ids."""
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.params["ids"])
        return httpx.Response(200, json={"ethereum": {"usd": 2000.5}})

    async def _inner():
        async with _client(handler) as client:
            return await CoinGeckoPriceSource(client=client).get_price("eth")

    assert asyncio.run(_inner()) == Decimal("2000.5")
    assert seen == ["ethereum"]


def test_coingecko_missing_price_raises_lookup_error() -> None:
    """An empty answer is a lookup failure."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={})

    async def _inner():
        async with _client(handler) as client:
            return await CoinGeckoPriceSource(client=client).get_price("FOO")

    with pytest.raises(LookupError):
        asyncio.run(_inner())


def test_coinbase_reads_usd_rate_for_wrapped_tokens() -> None:
    """Wrapped tokens are priced as their underlying coin."""
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.params["currency"])
        return httpx.Response(
            200,
            json={"data": {"currency": "BTC", "rates": {"USD": "65000.1"}}},
        )

    async def _inner():
        async with _client(handler) as client:
            return await CoinbasePriceSource(client=client).get_price("WBTC")

    assert asyncio.run(_inner()) == Decimal("65000.1")
    assert seen == ["BTC"]


class _StaticPrice:
    def __init__(self, price=None, error=None) -> None:
        self._price = price
        self._error = error

    async def get_price(self, symbol: str) -> Decimal:
        if self._error is not None:
            raise self._error
        return Decimal(self._price)


def test_fallback_tries_next_source() -> None:
    """The first successful source wins."""
    logger = MagicMock()
    source = FallbackPriceSource(
        [
            _StaticPrice(error=LookupError("missing")),
            _StaticPrice(error=httpx.ConnectError("offline")),
            _StaticPrice("1.0001"),
        ],
        logger=logger,
    )

    assert asyncio.run(source.get_price("USDC")) == Decimal("1.0001")
    assert logger.warning.call_count == 2


def test_fallback_raises_when_every_source_fails() -> None:
    """A LookupError names the last failure."""
    source = FallbackPriceSource(
        [_StaticPrice(error=LookupError("no USD rate"))],
        logger=MagicMock(),
    )

    with pytest.raises(LookupError, match="no USD rate"):
        asyncio.run(source.get_price("FOO"))
