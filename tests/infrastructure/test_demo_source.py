"""Tests for the built-in demo treasury."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from privaudit.domain.services.metrics import compute_treasury_metrics
from privaudit.infrastructure.demo_source import (
    DEMO_DAO_ADDRESS,
    DemoTreasurySource,
)


def test_demo_snapshot_contents() -> None:
    """The demo treasury holds USDC and ETH and owes USDC."""
    source = DemoTreasurySource(network="sepolia", logger=MagicMock())

    snapshot = source.fetch_snapshot(source.connect())

    assert snapshot.dao_address == DEMO_DAO_ADDRESS
    assert snapshot.network == "sepolia"
    assert snapshot.data_source == "demo"
    assert [a.symbol for a in snapshot.assets] == ["USDC", "ETH"]
    assert snapshot.total_value_usd == Decimal("2000000")
    assert snapshot.liabilities[0].value_usd == Decimal("200000")


def test_demo_metrics() -> None:
    """Demo metrics match the documented ratings."""
    source = DemoTreasurySource(logger=MagicMock())

    metrics = compute_treasury_metrics(source.fetch_snapshot(source.connect()))

    assert metrics.net_worth == Decimal("1800000")
    assert metrics.solvency_ratio == Decimal("10")
    assert metrics.risk_metrics.concentration_risk == "medium"
    assert metrics.risk_metrics.volatility_risk == "medium"
    assert metrics.risk_metrics.counterparty_risk == "high"


def test_fetch_requires_demo_connection() -> None:
    """Only connections from connect() are accepted."""
    source = DemoTreasurySource(logger=MagicMock())

    with pytest.raises(TypeError):
        source.fetch_snapshot(object())
