"""Domain models for derived treasury metrics."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Mapping

from privaudit.domain.constants import RISK_LOW
from privaudit.utils.decimal_utils import coerce_decimal, decimal_to_float


@dataclass(frozen=True)
class AssetDiversification:
    """Share of total assets held in each category, in percent."""

    stablecoins: Decimal = Decimal("0")
    crypto: Decimal = Decimal("0")
    nfts: Decimal = Decimal("0")
    lp_tokens: Decimal = Decimal("0")
    other: Decimal = Decimal("0")

    @property
    def total(self) -> Decimal:
        """Return the sum of all buckets (100 for a non-empty treasury)."""
        return (
            self.stablecoins
            + self.crypto
            + self.nfts
            + self.lp_tokens
            + self.other
        )

    def to_dict(self) -> dict[str, float]:
        return {
            "stablecoins": decimal_to_float(self.stablecoins),
            "crypto": decimal_to_float(self.crypto),
            "nfts": decimal_to_float(self.nfts),
            "lpTokens": decimal_to_float(self.lp_tokens),
            "other": decimal_to_float(self.other),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AssetDiversification":
        return cls(
            stablecoins=coerce_decimal(data.get("stablecoins")),
            crypto=coerce_decimal(data.get("crypto", data.get("ethereum"))),
            nfts=coerce_decimal(data.get("nfts")),
            lp_tokens=coerce_decimal(data.get("lpTokens")),
            other=coerce_decimal(data.get("other")),
        )


@dataclass(frozen=True)
class RiskMetrics:
    """Independent low/medium/high risk ratings."""

    concentration_risk: str = RISK_LOW
    volatility_risk: str = RISK_LOW
    liquidity_risk: str = RISK_LOW
    counterparty_risk: str = RISK_LOW

    def to_dict(self) -> dict[str, str]:
        return {
            "concentrationRisk": self.concentration_risk,
            "volatilityRisk": self.volatility_risk,
            "liquidityRisk": self.liquidity_risk,
            "counterpartyRisk": self.counterparty_risk,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RiskMetrics":
        return cls(
            concentration_risk=str(data.get("concentrationRisk", RISK_LOW)),
            volatility_risk=str(data.get("volatilityRisk", RISK_LOW)),
            liquidity_risk=str(data.get("liquidityRisk", RISK_LOW)),
            counterparty_risk=str(data.get("counterpartyRisk", RISK_LOW)),
        )


@dataclass(frozen=True)
class TreasuryMetrics:
    """Aggregate financial figures for a treasury snapshot.

    Attributes:
        total_assets: Sum of asset values in USD.
        total_liabilities: Sum of liability values in USD.
        net_worth: Assets minus liabilities.
        asset_diversification: Category percentages.
        risk_metrics: Risk ratings.
        runway_months: Months of runway at the estimated burn rate.
        solvency_ratio: Assets over liabilities, ``None`` when there are no
            liabilities (the ratio is undefined).
    """

    total_assets: Decimal
    total_liabilities: Decimal
    net_worth: Decimal
    asset_diversification: AssetDiversification
    risk_metrics: RiskMetrics
    runway_months: Decimal
    solvency_ratio: Decimal | None

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalAssets": decimal_to_float(self.total_assets),
            "totalLiabilities": decimal_to_float(self.total_liabilities),
            "netWorth": decimal_to_float(self.net_worth),
            "assetDiversification": self.asset_diversification.to_dict(),
            "riskMetrics": self.risk_metrics.to_dict(),
            "runwayMonths": decimal_to_float(self.runway_months),
            "solvencyRatio": decimal_to_float(self.solvency_ratio),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TreasuryMetrics":
        total_assets = coerce_decimal(data.get("totalAssets"))
        total_liabilities = coerce_decimal(data.get("totalLiabilities"))
        ratio = data.get("solvencyRatio")
        return cls(
            total_assets=total_assets,
            total_liabilities=total_liabilities,
            net_worth=total_assets - total_liabilities,
            asset_diversification=AssetDiversification.from_dict(
                data.get("assetDiversification") or {}
            ),
            risk_metrics=RiskMetrics.from_dict(data.get("riskMetrics") or {}),
            runway_months=coerce_decimal(data.get("runwayMonths")),
            solvency_ratio=(
                coerce_decimal(ratio)
                if ratio is not None and total_liabilities > 0
                else None
            ),
        )


__all__ = ["AssetDiversification", "RiskMetrics", "TreasuryMetrics"]
