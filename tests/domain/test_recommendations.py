"""Tests for report recommendation rules and LLM response parsing."""

from decimal import Decimal

from privaudit.domain.models import (
    AssetDiversification,
    RiskMetrics,
    TreasuryMetrics,
)
from privaudit.domain.services.recommendations import (
    DEFAULT_RECOMMENDATION,
    assess_overall_risk,
    build_rule_recommendations,
    build_summary,
    dao_display_name,
    parse_list_items,
    split_sentences,
)


def _metrics(
    total_assets: str = "2000000",
    total_liabilities: str = "0",
    crypto: str = "40",
    runway: str = "24",
    concentration: str = "low",
) -> TreasuryMetrics:
    assets = Decimal(total_assets)
    liabilities = Decimal(total_liabilities)
    return TreasuryMetrics(
        total_assets=assets,
        total_liabilities=liabilities,
        net_worth=assets - liabilities,
        asset_diversification=AssetDiversification(
            stablecoins=Decimal("100") - Decimal(crypto),
            crypto=Decimal(crypto),
        ),
        risk_metrics=RiskMetrics(concentration_risk=concentration),
        runway_months=Decimal(runway),
        solvency_ratio=assets / liabilities if liabilities > 0 else None,
    )


def test_healthy_treasury_gets_single_fallback() -> None:
    """When no rule fires only the monitoring advice is returned."""
    result = build_rule_recommendations(_metrics(), True, True)

    assert result == [DEFAULT_RECOMMENDATION]


def test_rules_fire_for_each_weakness() -> None:
    """Every weak metric should add its own recommendation."""
    metrics = _metrics(
        total_liabilities="1500000",
        crypto="80",
        runway="10",
        concentration="high",
    )

    result = build_rule_recommendations(metrics, True, False)

    assert len(result) == 5
    assert any("solvency ratio" in item for item in result)
    assert any("crypto exposure" in item for item in result)
    assert any("runway" in item for item in result)
    assert any("audit verification" in item for item in result)
    assert any("concentration risk" in item for item in result)


def test_insolvent_treasury_is_flagged() -> None:
    """An insolvent treasury should get a liabilities recommendation."""
    result = build_rule_recommendations(
        _metrics(total_assets="100", total_liabilities="200"),
        False,
        True,
    )

    assert result[0].startswith("Liabilities exceed assets")


def test_empty_treasury_skips_runway_rule() -> None:
    """A treasury with no assets only gets the fallback advice."""
    result = build_rule_recommendations(
        _metrics(total_assets="0", crypto="0", runway="0"),
        True,
        True,
    )

    assert result == [DEFAULT_RECOMMENDATION]


def test_parse_list_items_strips_markers_and_caps_count() -> None:
    """Numbered and bulleted lines become items, other lines are ignored."""
    response = "\n".join(
        [
            "Here is my advice:",
            "1. Hold more stablecoins",
            "2) Reduce ETH exposure",
            "- Diversify custody",
            "• Publish monthly reports",
            "* Review vesting schedules",
            "6. Extra item",
        ]
    )

    items = parse_list_items(response)

    assert items == [
        "Hold more stablecoins",
        "Reduce ETH exposure",
        "Diversify custody",
        "Publish monthly reports",
        "Review vesting schedules",
    ]


def test_parse_list_items_ignores_markdown_emphasis_and_rules() -> None:
    """Bold headings and horizontal rules are not bullets."""
    response = "\n".join(
        [
            "**Recommendations:**",
            "---",
            "*Note* these are estimates",
            "- Diversify custody",
        ]
    )

    assert parse_list_items(response) == ["Diversify custody"]


def test_split_sentences_drops_short_fragments() -> None:
    """Sentence fallback keeps only sentences longer than ten characters."""
    response = "Hold more stablecoins. Ok! Reduce exposure to ETH?"

    assert split_sentences(response) == [
        "Hold more stablecoins",
        "Reduce exposure to ETH",
    ]


def test_overall_risk_label_thresholds() -> None:
    """Labels follow solvency first, then total asset size."""
    assert assess_overall_risk(_metrics("2000000"), True) == "Low Risk"
    assert assess_overall_risk(_metrics("500000"), True) == "Medium Risk"
    assert assess_overall_risk(_metrics("50000"), True) == "High Risk"
    assert assess_overall_risk(_metrics("2000000"), False) == "High Risk"


def test_summary_and_display_name() -> None:
    """Summary mentions totals and the display name truncates the address."""
    summary = build_summary(_metrics("2000000"), 2)

    assert "$2,000,000.00" in summary
    assert "2 different tokens" in summary
    assert "strong" in summary
    assert dao_display_name("0x1234567890abcdef") == "DAO 0x123456..."
