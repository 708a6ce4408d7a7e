"""Built-in demo treasury used by the CLI and the fallback pipeline."""

import time
from dataclasses import dataclass
from decimal import Decimal

from privaudit.domain.constants import DATA_SOURCE_DEMO, DEFAULT_NETWORK
from privaudit.domain.models import (
    AssetBalance,
    LiabilityBalance,
    TreasurySnapshot,
)
from privaudit.domain.services.metrics import sum_values
from privaudit.domain.tokens import MAINNET_TOKENS, NATIVE_ETH
from privaudit.infrastructure.logging.logger import get_app_logger

DEMO_DAO_ADDRESS = "0x1234567890123456789012345678901234567890"

_USDC = next(token for token in MAINNET_TOKENS if token.symbol == "USDC")

DEMO_ASSETS = (
    AssetBalance(
        address=_USDC.address,
        symbol="USDC",
        name=_USDC.name,
        balance="1000000000000",
        decimals=6,
        price_usd=Decimal("1"),
        value_usd=Decimal("1000000"),
    ),
    AssetBalance(
        address=NATIVE_ETH.address,
        symbol="ETH",
        name=NATIVE_ETH.name,
        balance="500000000000000000000",
        decimals=18,
        price_usd=Decimal("2000"),
        value_usd=Decimal("1000000"),
    ),
)
DEMO_LIABILITIES = (
    LiabilityBalance(
        address=_USDC.address,
        symbol="USDC",
        name="USDC Debt",
        balance="200000000000",
        decimals=6,
        price_usd=Decimal("1"),
        value_usd=Decimal("200000"),
        type="debt",
    ),
)


@dataclass(frozen=True)
class DemoConnection:
    """Handle returned by ``DemoTreasurySource.connect``."""

    network: str
    opened_at: int


class DemoTreasurySource:
    """Serve a fixed treasury without network access."""

    def __init__(self, network: str = DEFAULT_NETWORK, logger=None) -> None:
        self._network = network
        self._logger = logger or get_app_logger()

    def connect(self) -> DemoConnection:
        self._logger.info(f"Opened demo treasury source on {self._network}")
        return DemoConnection(
            network=self._network,
            opened_at=int(time.time() * 1000),
        )

    def fetch_snapshot(
        self,
        connection: DemoConnection,
        dao_address: str = DEMO_DAO_ADDRESS,
    ) -> TreasurySnapshot:
        """Return the demo snapshot.

        Raises:
            TypeError: If ``connection`` was not produced by ``connect``.
        """
        if not isinstance(connection, DemoConnection):
            raise TypeError("fetch_snapshot requires a DemoConnection")
        return TreasurySnapshot(
            dao_address=dao_address,
            timestamp=int(time.time() * 1000),
            assets=DEMO_ASSETS,
            liabilities=DEMO_LIABILITIES,
            total_value_usd=sum_values(DEMO_ASSETS),
            network=connection.network,
            data_source=DATA_SOURCE_DEMO,
        )


__all__ = [
    "DemoTreasurySource",
    "DemoConnection",
    "DEMO_DAO_ADDRESS",
    "DEMO_ASSETS",
    "DEMO_LIABILITIES",
]
