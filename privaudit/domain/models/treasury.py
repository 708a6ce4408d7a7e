"""Domain models for treasury balances and snapshots."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Mapping

from privaudit.domain.constants import DATA_SOURCE_SIMPLE, DEFAULT_NETWORK
from privaudit.utils.decimal_utils import coerce_decimal, decimal_to_float


@dataclass(frozen=True)
class AssetBalance:
    """Balance of a single asset held by a treasury.

    Attributes:
        address: Token contract address (zero address for the native coin).
        symbol: Ticker symbol, upper case.
        name: Human readable token name.
        balance: Raw integer balance as a string, in base units.
        decimals: Number of decimals of the token.
        price_usd: Unit price in USD.
        value_usd: ``balance / 10**decimals * price_usd``.
        type: One of token, nft, lp, other.
    """

    address: str
    symbol: str
    name: str
    balance: str
    decimals: int
    price_usd: Decimal
    value_usd: Decimal
    type: str = "token"

    @property
    def balance_formatted(self) -> Decimal:
        """Return the balance scaled by the token decimals."""
        return Decimal(int(self.balance)).scaleb(-self.decimals)

    def to_dict(self) -> dict[str, Any]:
        return _balance_to_dict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AssetBalance":
        return cls(**_balance_kwargs(data, default_type="token"))


@dataclass(frozen=True)
class LiabilityBalance:
    """Balance of a single liability owed by a treasury.

    Same shape as ``AssetBalance``; ``type`` is one of debt, vesting,
    commitment, other.
    """

    address: str
    symbol: str
    name: str
    balance: str
    decimals: int
    price_usd: Decimal
    value_usd: Decimal
    type: str = "debt"

    @property
    def balance_formatted(self) -> Decimal:
        return Decimal(int(self.balance)).scaleb(-self.decimals)

    def to_dict(self) -> dict[str, Any]:
        return _balance_to_dict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LiabilityBalance":
        return cls(**_balance_kwargs(data, default_type="debt"))


@dataclass(frozen=True)
class TreasurySnapshot:
    """Point-in-time view of a DAO treasury.

    Attributes:
        dao_address: Address whose balances were queried.
        timestamp: Creation time in milliseconds since the epoch.
        assets: Asset balances, in no particular order.
        liabilities: Liability balances.
        total_value_usd: Sum of asset values.
        network: Network the balances were read from.
        data_source: Which strategy produced the snapshot.
    """

    dao_address: str
    timestamp: int
    assets: tuple[AssetBalance, ...] = field(default_factory=tuple)
    liabilities: tuple[LiabilityBalance, ...] = field(default_factory=tuple)
    total_value_usd: Decimal = Decimal("0")
    network: str = DEFAULT_NETWORK
    data_source: str = DATA_SOURCE_SIMPLE

    def top_assets(self, limit: int = 10) -> list[AssetBalance]:
        """Return the most valuable assets, highest value first."""
        ranked = sorted(
            self.assets,
            key=lambda asset: asset.value_usd,
            reverse=True,
        )
        return ranked[:limit]

    def to_dict(self) -> dict[str, Any]:
        return {
            "daoAddress": self.dao_address,
            "timestamp": self.timestamp,
            "assets": [asset.to_dict() for asset in self.assets],
            "liabilities": [
                liability.to_dict() for liability in self.liabilities
            ],
            "totalValueUSD": decimal_to_float(self.total_value_usd),
            "network": self.network,
            "dataSource": self.data_source,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TreasurySnapshot":
        assets = tuple(
            AssetBalance.from_dict(item) for item in data.get("assets") or ()
        )
        liabilities = tuple(
            LiabilityBalance.from_dict(item)
            for item in data.get("liabilities") or ()
        )
        total = data.get("totalValueUSD")
        return cls(
            dao_address=str(data["daoAddress"]),
            timestamp=int(data.get("timestamp") or 0),
            assets=assets,
            liabilities=liabilities,
            total_value_usd=(
                coerce_decimal(total)
                if total is not None
                else sum((a.value_usd for a in assets), Decimal("0"))
            ),
            network=str(data.get("network") or DEFAULT_NETWORK),
            data_source=str(data.get("dataSource") or DATA_SOURCE_SIMPLE),
        )


def _balance_to_dict(
    item: AssetBalance | LiabilityBalance,
) -> dict[str, Any]:
    return {
        "address": item.address,
        "symbol": item.symbol,
        "name": item.name,
        "balance": item.balance,
        "balanceFormatted": str(item.balance_formatted),
        "decimals": item.decimals,
        "priceUSD": decimal_to_float(item.price_usd),
        "valueUSD": decimal_to_float(item.value_usd),
        "type": item.type,
    }


def _balance_kwargs(
    data: Mapping[str, Any],
    default_type: str,
) -> dict[str, Any]:
    return {
        "address": str(data.get("address") or ""),
        "symbol": str(data.get("symbol") or "").upper(),
        "name": str(data.get("name") or data.get("symbol") or ""),
        "balance": str(int(str(data.get("balance") or "0"))),
        "decimals": int(data.get("decimals") or 0),
        "price_usd": coerce_decimal(data.get("priceUSD")),
        "value_usd": coerce_decimal(data.get("valueUSD")),
        "type": str(data.get("type") or default_type),
    }


__all__ = ["AssetBalance", "LiabilityBalance", "TreasurySnapshot"]
