"""Etherscan balance source."""

import httpx

from privaudit.domain.errors import InvalidRequestError
from privaudit.infrastructure.http_client import request_json

ETHERSCAN_API_URL = "https://api.etherscan.io/v2/api"
MAINNET_CHAIN_ID = 1


class EtherscanError(RuntimeError):
    """Raised when Etherscan reports a failed request."""


class EtherscanBalanceSource:
    """Read balances through the Etherscan account API."""

    name = "etherscan"

    def __init__(
        self,
        api_key: str | None,
        client: httpx.AsyncClient | None = None,
        timeout: float = 5.0,
        base_url: str = ETHERSCAN_API_URL,
        chain_id: int = MAINNET_CHAIN_ID,
    ) -> None:
        """Initialize the source.

        Raises:
            InvalidRequestError: If no API key is provided.
        """
        if not api_key:
            raise InvalidRequestError("Etherscan API key is required")
        self._api_key = api_key
        self._client = client
        self._timeout = timeout
        self._base_url = base_url
        self._chain_id = chain_id

    async def get_native_balance(self, address: str) -> int:
        return await self._query(action="balance", address=address)

    async def get_token_balance(
        self,
        address: str,
        token_address: str,
    ) -> int:
        return await self._query(
            action="tokenbalance",
            address=address,
            contractaddress=token_address,
        )

    async def _query(self, **params: str) -> int:
        data = await request_json(
            "GET",
            self._base_url,
            client=self._client,
            timeout=self._timeout,
            params={
                "chainid": self._chain_id,
                "module": "account",
                "tag": "latest",
                "apikey": self._api_key,
                **params,
            },
        )
        if str(data.get("status")) != "1":
            detail = data.get("result") or data.get("message") or "unknown"
            raise EtherscanError(f"Etherscan request failed: {detail}")
        return int(data["result"])


__all__ = ["EtherscanBalanceSource", "EtherscanError", "ETHERSCAN_API_URL"]
