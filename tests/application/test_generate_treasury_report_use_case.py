"""Tests for the GenerateTreasuryReportUseCase pipeline."""

import asyncio
from dataclasses import replace
from unittest.mock import MagicMock

import pytest

from privaudit.application.use_cases.generate_treasury_report import (
    GenerateTreasuryReportUseCase,
)
from privaudit.domain.errors import InvalidRequestError, TreasuryFetchError
from privaudit.domain.models import DataSource, TreasurySnapshot
from privaudit.domain.services.recommendations import (
    DEFAULT_RECOMMENDATION,
)
from privaudit.infrastructure.demo_source import DemoTreasurySource

ADDRESS = "0x" + "ab" * 20


class _FailingFetcher:
    def __init__(self, error: Exception) -> None:
        self._error = error

    async def execute(self, dao_address: str):
        raise self._error


class _DemoFetcher:
    """Fetcher returning the demo snapshot with a live label."""

    def __init__(self) -> None:
        self._source = DemoTreasurySource(logger=MagicMock())

    async def execute(self, dao_address: str):
        snapshot = self._source.fetch_snapshot(
            self._source.connect(),
            dao_address,
        )
        return replace(snapshot, data_source="simple")


def _fetch_error() -> TreasuryFetchError:
    return TreasuryFetchError(
        "All balance sources failed (rpc:a); last error: down",
        attempts=["rpc:a"],
    )


def test_successful_fetch_runs_full_pipeline() -> None:
    """The result should carry report, proof and verification."""
    use_case = GenerateTreasuryReportUseCase(
        _DemoFetcher(),
        logger=MagicMock(),
    )

    result = asyncio.run(use_case.execute(ADDRESS))

    assert result.verification.is_valid
    assert result.report.proof_verified is True
    assert result.report.dao_address == ADDRESS
    assert result.metadata["dataSource"] == "simple"
    assert result.metadata["assetCount"] == 2
    assert result.metadata["recommendationSource"] == "rules"
    assert "fallbackReason" not in result.metadata
    payload = result.to_dict()
    assert payload["success"] is True
    assert payload["treasuryData"]["dataSource"] == "simple"


def test_fallback_mode_substitutes_flagged_demo_data() -> None:
    """Demo data must be flagged when it replaces a failed fetch."""
    use_case = GenerateTreasuryReportUseCase(
        _FailingFetcher(_fetch_error()),
        data_source=DataSource.FALLBACK_DEMO,
        logger=MagicMock(),
        demo_source=DemoTreasurySource(logger=MagicMock()),
    )

    result = asyncio.run(use_case.execute(ADDRESS))

    assert result.snapshot.data_source == "fallback-demo"
    assert result.snapshot.dao_address == ADDRESS
    assert result.metadata["dataSource"] == "fallback-demo"
    assert "last error: down" in result.metadata["fallbackReason"]
    assert result.report.is_solvent is True


@pytest.mark.parametrize("data_source", [DataSource.SIMPLE, DataSource.REAL])
def test_fetch_failure_propagates_without_fallback(data_source) -> None:
    """Only the fallback mode may hide a fetch failure."""
    use_case = GenerateTreasuryReportUseCase(
        _FailingFetcher(_fetch_error()),
        data_source=data_source,
        logger=MagicMock(),
    )

    with pytest.raises(TreasuryFetchError):
        asyncio.run(use_case.execute(ADDRESS))


def test_invalid_address_is_never_masked_by_fallback() -> None:
    """Bad input is an error even when fallback is enabled."""
    use_case = GenerateTreasuryReportUseCase(
        _FailingFetcher(InvalidRequestError("Invalid Ethereum address")),
        data_source=DataSource.FALLBACK_DEMO,
        logger=MagicMock(),
        demo_source=DemoTreasurySource(logger=MagicMock()),
    )

    with pytest.raises(InvalidRequestError):
        asyncio.run(use_case.execute("nope"))


def test_fallback_mode_requires_demo_source() -> None:
    """Fallback without demo data is a configuration error."""
    with pytest.raises(ValueError):
        GenerateTreasuryReportUseCase(
            _FailingFetcher(_fetch_error()),
            data_source=DataSource.FALLBACK_DEMO,
            logger=MagicMock(),
        )


def test_analyze_only_pipeline() -> None:
    """analyze should work without a fetcher."""
    source = DemoTreasurySource(logger=MagicMock())
    snapshot = source.fetch_snapshot(source.connect())
    use_case = GenerateTreasuryReportUseCase(None, logger=MagicMock())

    result = asyncio.run(use_case.analyze(snapshot))

    assert result.metadata["dataSource"] == "demo"
    assert result.proof_artifact.metadata.total_liabilities == 200000
    with pytest.raises(RuntimeError):
        asyncio.run(use_case.execute(ADDRESS))


def test_empty_treasury_reports_zero_metrics_and_default_advice() -> None:
    """An address holding nothing still produces a verified report."""
    snapshot = TreasurySnapshot(dao_address=ADDRESS, timestamp=1)
    use_case = GenerateTreasuryReportUseCase(None, logger=MagicMock())

    result = asyncio.run(use_case.analyze(snapshot))

    metrics = result.report.metrics
    assert metrics.total_assets == 0
    assert metrics.net_worth == 0
    assert metrics.runway_months == 0
    assert result.verification.is_valid
    assert result.report.is_solvent is True
    assert result.report.recommendations == (DEFAULT_RECOMMENDATION,)
    assert result.report.summary.startswith("No priced assets")
