"""Domain services for treasury metrics."""

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal
from logging import Logger

from privaudit.domain.constants import (
    CONCENTRATION_HIGH_PCT,
    CONCENTRATION_MEDIUM_PCT,
    COUNTERPARTY_LOW_MIN_ASSETS,
    COUNTERPARTY_MEDIUM_MIN_ASSETS,
    DEFAULT_MONTHLY_BURN_RATE,
    MAJOR_CRYPTO_SYMBOLS,
    RISK_HIGH,
    RISK_LOW,
    RISK_MEDIUM,
    STABLECOIN_SYMBOLS,
    VOLATILITY_HIGH_PCT,
    VOLATILITY_MEDIUM_PCT,
)
from privaudit.domain.models import (
    AssetBalance,
    AssetDiversification,
    LiabilityBalance,
    RiskMetrics,
    TreasuryMetrics,
    TreasurySnapshot,
)
from privaudit.domain.services.normalization import (
    is_lp_symbol,
    normalize_symbol,
)
from privaudit.domain.services.validation import validate_value_signs

HUNDRED = Decimal("100")
ZERO = Decimal("0")


def compute_treasury_metrics(
    snapshot: TreasurySnapshot,
    *,
    monthly_burn_rate: Decimal = DEFAULT_MONTHLY_BURN_RATE,
    logger: Logger | None = None,
) -> TreasuryMetrics:
    """Reduce a snapshot into aggregate figures.

    Args:
        snapshot: Treasury snapshot to summarize.
        monthly_burn_rate: Fraction of total assets assumed spent per month.
        logger: Optional logger used for data quality warnings.

    Returns:
        TreasuryMetrics: Totals, diversification, risks, runway and
        solvency ratio. An empty snapshot yields all-zero figures.
    """
    if logger is not None:
        validate_value_signs(snapshot.assets, logger)
        validate_value_signs(snapshot.liabilities, logger)

    total_assets = sum_values(snapshot.assets)
    total_liabilities = sum_values(snapshot.liabilities)

    return TreasuryMetrics(
        total_assets=total_assets,
        total_liabilities=total_liabilities,
        net_worth=total_assets - total_liabilities,
        asset_diversification=compute_asset_diversification(snapshot.assets),
        risk_metrics=assess_risks(snapshot.assets),
        runway_months=estimate_runway_months(total_assets, monthly_burn_rate),
        solvency_ratio=compute_solvency_ratio(
            total_assets,
            total_liabilities,
        ),
    )


def sum_values(
    balances: Sequence[AssetBalance] | Sequence[LiabilityBalance],
) -> Decimal:
    """Return the total USD value of a list of balances."""
    return sum((item.value_usd for item in balances), ZERO)


def compute_asset_diversification(
    assets: Sequence[AssetBalance],
) -> AssetDiversification:
    """Split total assets into category percentages.

    Symbols are matched before types, so a stablecoin flagged as ``lp``
    still counts as a stablecoin.
    """
    total = sum_values(assets)
    if total <= 0:
        return AssetDiversification()

    buckets = {
        "stablecoins": ZERO,
        "crypto": ZERO,
        "nfts": ZERO,
        "lp_tokens": ZERO,
        "other": ZERO,
    }
    for asset in assets:
        buckets[_categorize(asset)] += asset.value_usd

    return AssetDiversification(
        **{name: value / total * HUNDRED for name, value in buckets.items()}
    )


def assess_risks(assets: Sequence[AssetBalance]) -> RiskMetrics:
    """Rate concentration, volatility, liquidity and counterparty risk.

    A treasury with no value is rated low on every axis.
    """
    total = sum_values(assets)
    if total <= 0:
        return RiskMetrics()

    max_share = max(asset.value_usd / total * HUNDRED for asset in assets)
    crypto_share = (
        sum_values(
            [
                asset
                for asset in assets
                if normalize_symbol(asset.symbol) in MAJOR_CRYPTO_SYMBOLS
            ]
        )
        / total
        * HUNDRED
    )

    return RiskMetrics(
        concentration_risk=_rate(
            max_share,
            CONCENTRATION_HIGH_PCT,
            CONCENTRATION_MEDIUM_PCT,
        ),
        volatility_risk=_rate(
            crypto_share,
            VOLATILITY_HIGH_PCT,
            VOLATILITY_MEDIUM_PCT,
        ),
        liquidity_risk=RISK_LOW,
        counterparty_risk=_rate_counterparty(len(assets)),
    )


def estimate_runway_months(
    total_assets: Decimal,
    monthly_burn_rate: Decimal = DEFAULT_MONTHLY_BURN_RATE,
) -> Decimal:
    """Return months of runway, rounded to one decimal."""
    monthly_burn = total_assets * monthly_burn_rate
    if monthly_burn <= 0:
        return Decimal("0.0")
    return (total_assets / monthly_burn).quantize(
        Decimal("0.1"),
        rounding=ROUND_HALF_UP,
    )


def compute_solvency_ratio(
    total_assets: Decimal,
    total_liabilities: Decimal,
) -> Decimal | None:
    """Return assets over liabilities, or None when there are none."""
    if total_liabilities <= 0:
        return None
    return total_assets / total_liabilities


def _categorize(asset: AssetBalance) -> str:
    symbol = normalize_symbol(asset.symbol)
    if symbol in STABLECOIN_SYMBOLS:
        return "stablecoins"
    if symbol in MAJOR_CRYPTO_SYMBOLS:
        return "crypto"
    if asset.type == "nft":
        return "nfts"
    if asset.type == "lp" or is_lp_symbol(symbol):
        return "lp_tokens"
    return "other"


def _rate(value: Decimal, high: Decimal, medium: Decimal) -> str:
    if value > high:
        return RISK_HIGH
    if value > medium:
        return RISK_MEDIUM
    return RISK_LOW


def _rate_counterparty(asset_count: int) -> str:
    if asset_count > COUNTERPARTY_LOW_MIN_ASSETS:
        return RISK_LOW
    if asset_count > COUNTERPARTY_MEDIUM_MIN_ASSETS:
        return RISK_MEDIUM
    return RISK_HIGH


__all__ = [
    "compute_treasury_metrics",
    "sum_values",
    "compute_asset_diversification",
    "assess_risks",
    "estimate_runway_months",
    "compute_solvency_ratio",
]
