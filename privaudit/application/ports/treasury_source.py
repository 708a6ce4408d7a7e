"""Port for sources that return whole treasury snapshots."""

from typing import Any, Protocol

from privaudit.domain.models import TreasurySnapshot


class TreasurySnapshotSourcePort(Protocol):
    """Port for snapshot providers that need an explicit connection."""

    def connect(self) -> Any:
        """Open the source and return a connection handle."""

    def fetch_snapshot(
        self,
        connection: Any,
        dao_address: str,
    ) -> TreasurySnapshot:
        """Return a snapshot using a handle obtained from ``connect``."""


__all__ = ["TreasurySnapshotSourcePort"]
