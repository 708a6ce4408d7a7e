"""Ports for persisting and publishing JSON artifacts."""

from pathlib import Path
from typing import Any, Protocol


class ArtifactStorePort(Protocol):
    """Port storing named JSON documents."""

    def save(self, name: str, payload: dict[str, Any]) -> Path:
        """Persist the payload and return where it was written."""

    def save_bytes(self, name: str, content: bytes) -> Path:
        """Persist binary content and return where it was written."""

    def load(self, name: str) -> dict[str, Any]:
        """Return a previously saved payload."""

    def path_for(self, name: str) -> Path:
        """Return the location an artifact is stored at."""


class ArtifactPublisherPort(Protocol):
    """Port publishing a document to content-addressed storage."""

    async def publish(self, payload: dict[str, Any]) -> str:
        """Return the identifier assigned by the storage network."""


__all__ = ["ArtifactStorePort", "ArtifactPublisherPort"]
