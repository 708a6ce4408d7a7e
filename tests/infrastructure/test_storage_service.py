"""Tests for the IPFS and Arweave publishers."""

import asyncio
import json
from unittest.mock import MagicMock

import httpx

from privaudit.infrastructure.storage_service import (
    ArweavePublisher,
    IpfsPublisher,
)


def _run(handler, build, call):
    async def _inner():
        async with httpx.AsyncClient(
            transport=httpx.MockTransport(handler)
        ) as client:
            return await call(build(client))

    return asyncio.run(_inner())


def test_ipfs_publish_returns_hash() -> None:
    """IPFS add returns the content hash."""
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"Hash": "QmProof"})

    content_id = _run(
        handler,
        lambda client: IpfsPublisher(
            "https://ipfs.example/",
            api_key="token",
            client=client,
            logger=MagicMock(),
        ),
        lambda publisher: publisher.publish({"daoAddress": "0x1"}),
    )

    assert content_id == "QmProof"
    assert seen[0].url.path == "/api/v0/add"
    assert seen[0].headers["Authorization"] == "Bearer token"
    assert b'"daoAddress": "0x1"' in seen[0].content


def test_ipfs_retrieve_reads_gateway_path() -> None:
    """Documents are read back through the gateway."""

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/ipfs/QmProof"
        return httpx.Response(200, json={"ok": True})

    payload = _run(
        handler,
        lambda client: IpfsPublisher(
            "https://ipfs.example",
            client=client,
            logger=MagicMock(),
        ),
        lambda publisher: publisher.retrieve("QmProof"),
    )

    assert payload == {"ok": True}


def test_arweave_publish_tags_dao_address() -> None:
    """Arweave transactions carry the app and DAO tags."""
    bodies = []

    def handler(request: httpx.Request) -> httpx.Response:
        bodies.append(json.loads(request.content))
        return httpx.Response(200, json={"id": "tx-1"})

    transaction_id = _run(
        handler,
        lambda client: ArweavePublisher(
            "https://arweave.example",
            client=client,
            logger=MagicMock(),
        ),
        lambda publisher: publisher.publish(
            {"proof": {"daoAddress": "0xabc"}}
        ),
    )

    assert transaction_id == "tx-1"
    tags = {tag["name"]: tag["value"] for tag in bodies[0]["tags"]}
    assert tags["App-Name"] == "PrivAudit"
    assert tags["DAO-Address"] == "0xabc"
    assert json.loads(bodies[0]["data"]) == {"proof": {"daoAddress": "0xabc"}}
