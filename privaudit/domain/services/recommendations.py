"""Rule-based recommendations and LLM response parsing."""

import re
from decimal import Decimal

from privaudit.domain.constants import (
    LOW_RISK_ASSETS_USD,
    MAX_RECOMMENDATIONS,
    MEDIUM_RISK_ASSETS_USD,
    RISK_HIGH,
    RUNWAY_WARNING_MONTHS,
    SOLVENCY_RATIO_WARNING,
    VOLATILITY_HIGH_PCT,
)
from privaudit.domain.models import TreasuryMetrics, TreasurySnapshot

DEFAULT_RECOMMENDATION = (
    "Continue monitoring treasury health and maintain current strategy"
)
RISK_LABEL_LOW = "Low Risk"
RISK_LABEL_MEDIUM = "Medium Risk"
RISK_LABEL_HIGH = "High Risk"

_LIST_ITEM_RE = re.compile(r"^(?:\d+[.)]\s*|[-•*]\s+)")
_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_MIN_SENTENCE_LENGTH = 10


def build_rule_recommendations(
    metrics: TreasuryMetrics,
    is_solvent: bool,
    proof_verified: bool,
) -> list[str]:
    """Return deterministic recommendations for the given metrics.

    Args:
        metrics: Computed treasury metrics.
        is_solvent: Whether assets cover liabilities.
        proof_verified: Whether the solvency commitment verified.

    Returns:
        list[str]: At least one recommendation.
    """
    recommendations: list[str] = []

    if not is_solvent:
        recommendations.append(
            "Liabilities exceed assets: prioritize restoring solvency "
            "before new spending"
        )
    if (
        metrics.solvency_ratio is not None
        and metrics.solvency_ratio < SOLVENCY_RATIO_WARNING
    ):
        recommendations.append(
            "Consider reducing liabilities or increasing assets to improve "
            "solvency ratio"
        )
    if metrics.asset_diversification.crypto > VOLATILITY_HIGH_PCT:
        recommendations.append(
            "Diversify portfolio by reducing crypto exposure and increasing "
            "stablecoin allocation"
        )
    if (
        metrics.total_assets > 0
        and metrics.runway_months < RUNWAY_WARNING_MONTHS
    ):
        recommendations.append(
            "Extend runway by reducing expenses or securing additional funding"
        )
    if not proof_verified:
        recommendations.append(
            "Complete treasury audit verification to ensure data integrity"
        )
    if metrics.risk_metrics.concentration_risk == RISK_HIGH:
        recommendations.append(
            "Reduce concentration risk by diversifying across more assets"
        )

    return recommendations or [DEFAULT_RECOMMENDATION]


def parse_list_items(response: str) -> list[str]:
    """Extract numbered or bulleted items from an LLM response."""
    items: list[str] = []
    for line in response.splitlines():
        stripped = line.strip()
        if not _LIST_ITEM_RE.match(stripped):
            continue
        item = _LIST_ITEM_RE.sub("", stripped).strip()
        if item:
            items.append(item)
    return items[:MAX_RECOMMENDATIONS]


def split_sentences(response: str) -> list[str]:
    """Split free text into sentences longer than ten characters."""
    sentences = [
        part.strip()
        for part in _SENTENCE_SPLIT_RE.split(response)
        if len(part.strip()) > _MIN_SENTENCE_LENGTH
    ]
    return sentences[:MAX_RECOMMENDATIONS]


def assess_overall_risk(metrics: TreasuryMetrics, is_solvent: bool) -> str:
    """Return the overall risk label shown on reports."""
    if not is_solvent:
        return RISK_LABEL_HIGH
    if metrics.total_assets > LOW_RISK_ASSETS_USD:
        return RISK_LABEL_LOW
    if metrics.total_assets > MEDIUM_RISK_ASSETS_USD:
        return RISK_LABEL_MEDIUM
    return RISK_LABEL_HIGH


def build_summary(metrics: TreasuryMetrics, asset_count: int) -> str:
    """Return the one-paragraph report summary."""
    if metrics.total_assets <= 0:
        return (
            "No priced assets were found for this treasury. Metrics are "
            "reported as zero."
        )
    health = "strong" if metrics.total_assets > MEDIUM_RISK_ASSETS_USD else (
        "moderate"
    )
    noun = "token" if asset_count == 1 else "different tokens"
    return (
        f"This DAO treasury analysis reveals "
        f"{format_usd(metrics.total_assets)} in total assets across "
        f"{asset_count} {noun}. The treasury demonstrates {health} "
        f"financial health with a net worth of "
        f"{format_usd(metrics.net_worth)}."
    )


def build_llm_prompt(
    metrics: TreasuryMetrics,
    snapshot: TreasurySnapshot,
    proof_verified: bool,
) -> str:
    """Return the user prompt sent to the LLM."""
    div = metrics.asset_diversification
    risk = metrics.risk_metrics
    ratio = (
        f"{metrics.solvency_ratio:.2f}"
        if metrics.solvency_ratio is not None
        else "undefined (no liabilities)"
    )
    status = "Verified" if proof_verified else "Not Verified"
    top_assets = "\n".join(
        f"- {asset.symbol}: {format_usd(asset.value_usd)}"
        for asset in snapshot.top_assets(5)
    ) or "- none"
    return "\n".join(
        [
            "Analyze this DAO treasury and provide 3-5 actionable "
            "recommendations as a numbered list.",
            "",
            f"Address: {snapshot.dao_address}",
            f"Network: {snapshot.network}",
            f"Data source: {snapshot.data_source}",
            "",
            f"Total Assets: {format_usd(metrics.total_assets)}",
            f"Total Liabilities: {format_usd(metrics.total_liabilities)}",
            f"Net Worth: {format_usd(metrics.net_worth)}",
            f"Solvency Ratio: {ratio}",
            f"Runway: {metrics.runway_months} months",
            "",
            f"Stablecoins: {div.stablecoins:.1f}%",
            f"Crypto: {div.crypto:.1f}%",
            f"NFTs: {div.nfts:.1f}%",
            f"LP Tokens: {div.lp_tokens:.1f}%",
            f"Other: {div.other:.1f}%",
            "",
            f"Concentration Risk: {risk.concentration_risk}",
            f"Volatility Risk: {risk.volatility_risk}",
            f"Liquidity Risk: {risk.liquidity_risk}",
            f"Counterparty Risk: {risk.counterparty_risk}",
            "",
            f"Proof Status: {status}",
            "",
            "Top assets:",
            top_assets,
        ]
    )


def dao_display_name(address: str) -> str:
    return f"DAO {address[:8]}..."


def format_usd(value: Decimal) -> str:
    return f"${value:,.2f}"


__all__ = [
    "DEFAULT_RECOMMENDATION",
    "RISK_LABEL_LOW",
    "RISK_LABEL_MEDIUM",
    "RISK_LABEL_HIGH",
    "build_rule_recommendations",
    "parse_list_items",
    "split_sentences",
    "assess_overall_risk",
    "build_summary",
    "build_llm_prompt",
    "dao_display_name",
    "format_usd",
]
