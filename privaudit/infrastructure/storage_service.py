"""Publishers for IPFS and Arweave gateways.

These post the document to a gateway HTTP API and return the identifier it
assigns. They do not sign transactions or pin content.
"""

import json
from typing import Any

import httpx

from privaudit.infrastructure.http_client import request_json
from privaudit.infrastructure.logging.logger import get_app_logger

APP_NAME = "PrivAudit"


class IpfsPublisher:
    """Add documents through an IPFS HTTP API gateway."""

    def __init__(
        self,
        gateway: str,
        api_key: str | None = None,
        client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
        logger=None,
    ) -> None:
        self._gateway = gateway.rstrip("/")
        self._api_key = api_key
        self._client = client
        self._timeout = timeout
        self._logger = logger or get_app_logger()

    async def publish(self, payload: dict[str, Any]) -> str:
        headers = {}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        data = await request_json(
            "POST",
            f"{self._gateway}/api/v0/add",
            client=self._client,
            timeout=self._timeout,
            headers=headers,
            files={
                "file": (
                    "artifact.json",
                    json.dumps(payload, default=str).encode("utf-8"),
                    "application/json",
                )
            },
        )
        content_id = data["Hash"]
        self._logger.info(f"Published artifact to IPFS: {content_id}")
        return content_id

    async def retrieve(self, content_id: str) -> dict[str, Any]:
        return await request_json(
            "GET",
            f"{self._gateway}/ipfs/{content_id}",
            client=self._client,
            timeout=self._timeout,
        )


class ArweavePublisher:
    """Submit documents to an Arweave gateway."""

    def __init__(
        self,
        gateway: str,
        client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
        logger=None,
    ) -> None:
        self._gateway = gateway.rstrip("/")
        self._client = client
        self._timeout = timeout
        self._logger = logger or get_app_logger()

    async def publish(self, payload: dict[str, Any]) -> str:
        tags = [
            {"name": "Content-Type", "value": "application/json"},
            {"name": "App-Name", "value": APP_NAME},
        ]
        dao_address = _find_dao_address(payload)
        if dao_address:
            tags.append({"name": "DAO-Address", "value": dao_address})
        data = await request_json(
            "POST",
            f"{self._gateway}/tx",
            client=self._client,
            timeout=self._timeout,
            json={"data": json.dumps(payload, default=str), "tags": tags},
        )
        transaction_id = data["id"]
        self._logger.info(f"Published artifact to Arweave: {transaction_id}")
        return transaction_id

    async def retrieve(self, transaction_id: str) -> dict[str, Any]:
        return await request_json(
            "GET",
            f"{self._gateway}/{transaction_id}",
            client=self._client,
            timeout=self._timeout,
        )


def _find_dao_address(payload: dict[str, Any]) -> str | None:
    for section in (payload, payload.get("proof") or {}):
        if isinstance(section, dict) and section.get("daoAddress"):
            return str(section["daoAddress"])
    return None


__all__ = ["IpfsPublisher", "ArweavePublisher"]
