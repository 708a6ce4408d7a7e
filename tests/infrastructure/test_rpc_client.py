"""Tests for the JSON-RPC balance source."""

import asyncio
import json

import httpx
import pytest

from privaudit.infrastructure.rpc_client import (
    JsonRpcBalanceSource,
    JsonRpcError,
    encode_balance_of,
)

ADDRESS = "0x" + "Ab" * 20
TOKEN = "0x" + "cd" * 20


def _run(handler, call):
    async def _inner():
        async with httpx.AsyncClient(
            transport=httpx.MockTransport(handler)
        ) as client:
            source = JsonRpcBalanceSource(
                "https://node.example/rpc",
                client=client,
            )
            return await call(source)

    return asyncio.run(_inner())


def test_native_balance_decodes_hex_result() -> None:
    """eth_getBalance results are hex quantities."""
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(json.loads(request.content))
        return httpx.Response(
            200,
            json={"jsonrpc": "2.0", "id": 1, "result": "0xde0b6b3a7640000"},
        )

    balance = _run(handler, lambda s: s.get_native_balance(ADDRESS))

    assert balance == 10**18
    assert requests[0]["method"] == "eth_getBalance"
    assert requests[0]["params"] == [ADDRESS, "latest"]


def test_token_balance_uses_balance_of_call() -> None:
    """Token balances go through eth_call with balanceOf calldata."""
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(json.loads(request.content))
        return httpx.Response(200, json={"id": 1, "result": "0x"})

    balance = _run(handler, lambda s: s.get_token_balance(ADDRESS, TOKEN))

    assert balance == 0
    call = requests[0]["params"][0]
    assert requests[0]["method"] == "eth_call"
    assert call["to"] == TOKEN
    assert call["data"] == encode_balance_of(ADDRESS)


def test_error_object_raises() -> None:
    """RPC error objects should raise JsonRpcError."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={"id": 1, "error": {"code": -32000, "message": "capped"}},
        )

    with pytest.raises(JsonRpcError, match="capped"):
        _run(handler, lambda s: s.get_native_balance(ADDRESS))


def test_http_failure_propagates() -> None:
    """Non-2xx answers surface as httpx errors."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, json={})

    with pytest.raises(httpx.HTTPStatusError):
        _run(handler, lambda s: s.get_native_balance(ADDRESS))


def test_name_and_calldata_encoding() -> None:
    """Sources are named by host and calldata is left padded."""
    source = JsonRpcBalanceSource("https://node.example/rpc")
    data = encode_balance_of(ADDRESS)

    assert source.name == "rpc:node.example"
    assert data.startswith("0x70a08231" + "0" * 24)
    assert data.endswith(ADDRESS[2:].lower())
    assert len(data) == 74
