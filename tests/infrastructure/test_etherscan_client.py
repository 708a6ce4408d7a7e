"""Tests for the Etherscan balance source."""

import asyncio

import httpx
import pytest

from privaudit.domain.errors import InvalidRequestError
from privaudit.infrastructure.etherscan_client import (
    EtherscanBalanceSource,
    EtherscanError,
)

ADDRESS = "0x" + "12" * 20
TOKEN = "0x" + "34" * 20


def _run(handler, call):
    async def _inner():
        async with httpx.AsyncClient(
            transport=httpx.MockTransport(handler)
        ) as client:
            source = EtherscanBalanceSource("secret", client=client)
            return await call(source)

    return asyncio.run(_inner())


def test_native_balance_query() -> None:
    """Balance queries send the key and chain id."""
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(dict(request.url.params))
        return httpx.Response(200, json={"status": "1", "result": "42"})

    assert _run(handler, lambda s: s.get_native_balance(ADDRESS)) == 42
    assert seen[0]["action"] == "balance"
    assert seen[0]["apikey"] == "secret"
    assert seen[0]["chainid"] == "1"
    assert seen[0]["address"] == ADDRESS


def test_token_balance_query() -> None:
    """Token queries pass the contract address."""
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(dict(request.url.params))
        return httpx.Response(200, json={"status": "1", "result": "7"})

    assert _run(handler, lambda s: s.get_token_balance(ADDRESS, TOKEN)) == 7
    assert seen[0]["action"] == "tokenbalance"
    assert seen[0]["contractaddress"] == TOKEN


def test_failed_status_raises() -> None:
    """Etherscan reports errors with status 0."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={"status": "0", "message": "NOTOK", "result": "Invalid key"},
        )

    with pytest.raises(EtherscanError, match="Invalid key"):
        _run(handler, lambda s: s.get_native_balance(ADDRESS))


def test_missing_key_is_rejected() -> None:
    """The source cannot be built without a key."""
    with pytest.raises(InvalidRequestError):
        EtherscanBalanceSource(None)
    assert EtherscanBalanceSource("k").name == "etherscan"
