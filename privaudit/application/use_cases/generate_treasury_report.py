"""Use case running the whole treasury audit pipeline."""

import time
from dataclasses import replace
from datetime import datetime, timezone

from privaudit.application.ports.treasury_source import (
    TreasurySnapshotSourcePort,
)
from privaudit.application.use_cases.compute_treasury_metrics import (
    ComputeTreasuryMetricsUseCase,
)
from privaudit.application.use_cases.fetch_treasury_snapshot import (
    FetchTreasurySnapshotUseCase,
)
from privaudit.application.use_cases.generate_report import (
    GenerateReportUseCase,
)
from privaudit.application.use_cases.generate_solvency_proof import (
    GenerateSolvencyProofUseCase,
)
from privaudit.application.use_cases.verify_solvency_proof import (
    VerifySolvencyProofUseCase,
)
from privaudit.domain.constants import DATA_SOURCE_FALLBACK_DEMO
from privaudit.domain.errors import TreasuryFetchError
from privaudit.domain.models import (
    DataSource,
    TreasuryReportResult,
    TreasurySnapshot,
)
from privaudit.infrastructure.logging.logger import get_app_logger


class GenerateTreasuryReportUseCase:
    """Fetch, measure, commit, verify and report on a treasury.

    The data source decides how the snapshot is obtained. Only
    ``DataSource.FALLBACK_DEMO`` may substitute demo data, and the result
    is then flagged in both the snapshot and the metadata.
    """

    def __init__(
        self,
        fetcher: FetchTreasurySnapshotUseCase | None,
        data_source: DataSource = DataSource.SIMPLE,
        logger=None,
        metrics_use_case: ComputeTreasuryMetricsUseCase | None = None,
        prover: GenerateSolvencyProofUseCase | None = None,
        verifier: VerifySolvencyProofUseCase | None = None,
        reporter: GenerateReportUseCase | None = None,
        demo_source: TreasurySnapshotSourcePort | None = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            fetcher: Use case reading the live snapshot; None when only
                ``analyze`` is used.
            data_source: Strategy label for this run.
            logger: Optional logger compatible with logging.Logger-like API.
            metrics_use_case: Optional metrics step.
            prover: Optional commitment step.
            verifier: Optional verification step.
            reporter: Optional report step.
            demo_source: Source used when the fetch fails in fallback mode.
        """
        if data_source is DataSource.FALLBACK_DEMO and demo_source is None:
            raise ValueError("Fallback mode requires a demo source.")
        self._logger = logger or get_app_logger()
        self._fetcher = fetcher
        self._data_source = data_source
        self._metrics = metrics_use_case or ComputeTreasuryMetricsUseCase(
            logger=self._logger
        )
        self._prover = prover or GenerateSolvencyProofUseCase(
            logger=self._logger
        )
        self._verifier = verifier or VerifySolvencyProofUseCase(
            logger=self._logger
        )
        self._reporter = reporter or GenerateReportUseCase(
            logger=self._logger
        )
        self._demo_source = demo_source

    async def execute(self, dao_address: str) -> TreasuryReportResult:
        """Run the pipeline for one address.

        Raises:
            InvalidRequestError: If the address is malformed.
            TreasuryFetchError: If every source failed and no fallback is
                allowed.
            ProofGenerationError: If the commitment cannot be produced.
        """
        if self._fetcher is None:
            raise RuntimeError("No treasury fetcher configured.")
        started = time.perf_counter()
        metadata: dict[str, object] = {"dataSource": self._data_source.value}

        try:
            snapshot = await self._fetcher.execute(dao_address)
        except TreasuryFetchError as exc:
            if self._data_source is not DataSource.FALLBACK_DEMO:
                raise
            self._logger.warning(
                f"Falling back to demo data for {dao_address}: {exc}"
            )
            snapshot = self._load_demo(dao_address)
            metadata["dataSource"] = DATA_SOURCE_FALLBACK_DEMO
            metadata["fallbackReason"] = str(exc)

        return await self.analyze(snapshot, metadata, started=started)

    async def analyze(
        self,
        snapshot: TreasurySnapshot,
        metadata: dict[str, object] | None = None,
        started: float | None = None,
    ) -> TreasuryReportResult:
        """Run every step after the fetch on an existing snapshot.

        Args:
            snapshot: Snapshot to analyze.
            metadata: Optional metadata merged into the result.
            started: Optional ``perf_counter`` value the run started at.
        """
        started = time.perf_counter() if started is None else started
        metadata = dict(metadata or {"dataSource": snapshot.data_source})
        metrics = self._metrics.execute(snapshot)
        artifact = self._prover.execute(snapshot)
        verification = self._verifier.execute(artifact)
        report = await self._reporter.execute(
            metrics,
            snapshot,
            artifact,
            verification,
        )

        metadata.update(
            {
                "generatedAt": datetime.now(timezone.utc).isoformat(),
                "processingTime": int((time.perf_counter() - started) * 1000),
                "recommendationSource": report.recommendation_source,
                "assetCount": len(snapshot.assets),
            }
        )
        return TreasuryReportResult(
            report=report,
            proof_artifact=artifact,
            verification=verification,
            snapshot=snapshot,
            metadata=metadata,
        )

    def _load_demo(self, dao_address: str) -> TreasurySnapshot:
        connection = self._demo_source.connect()
        snapshot = self._demo_source.fetch_snapshot(
            connection,
            dao_address.strip(),
        )
        return replace(snapshot, data_source=DATA_SOURCE_FALLBACK_DEMO)


__all__ = ["GenerateTreasuryReportUseCase"]
