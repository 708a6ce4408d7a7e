"""Ethereum JSON-RPC balance source."""

from itertools import count
from urllib.parse import urlparse

import httpx

from privaudit.infrastructure.http_client import request_json

BALANCE_OF_SELECTOR = "0x70a08231"


class JsonRpcError(RuntimeError):
    """Raised when an RPC endpoint answers with an error object."""


class JsonRpcBalanceSource:
    """Read balances from a single JSON-RPC endpoint."""

    def __init__(
        self,
        url: str,
        client: httpx.AsyncClient | None = None,
        timeout: float = 5.0,
    ) -> None:
        self._url = url
        self._client = client
        self._timeout = timeout
        self._ids = count(1)
        self.name = f"rpc:{urlparse(url).netloc or url}"

    async def get_native_balance(self, address: str) -> int:
        result = await self._call("eth_getBalance", [address, "latest"])
        return _hex_to_int(result)

    async def get_token_balance(
        self,
        address: str,
        token_address: str,
    ) -> int:
        call = {"to": token_address, "data": encode_balance_of(address)}
        result = await self._call("eth_call", [call, "latest"])
        return _hex_to_int(result)

    async def _call(self, method: str, params: list) -> str:
        payload = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": method,
            "params": params,
        }
        data = await request_json(
            "POST",
            self._url,
            client=self._client,
            timeout=self._timeout,
            json=payload,
        )
        if not isinstance(data, dict):
            raise JsonRpcError(f"{self.name}: unexpected response")
        if data.get("error"):
            error = data["error"]
            message = (
                error.get("message") if isinstance(error, dict) else error
            )
            raise JsonRpcError(f"{self.name}: {message}")
        if "result" not in data:
            raise JsonRpcError(f"{self.name}: response has no result")
        return data["result"]


def encode_balance_of(address: str) -> str:
    """Return calldata for ``balanceOf(address)``."""
    return BALANCE_OF_SELECTOR + address.lower().removeprefix("0x").rjust(
        64,
        "0",
    )


def _hex_to_int(value: str | None) -> int:
    if not value or value == "0x":
        return 0
    return int(value, 16)


__all__ = [
    "JsonRpcBalanceSource",
    "JsonRpcError",
    "encode_balance_of",
    "BALANCE_OF_SELECTOR",
]
