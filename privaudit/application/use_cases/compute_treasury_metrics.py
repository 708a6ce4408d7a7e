"""Use case to reduce a treasury snapshot into metrics."""

from decimal import Decimal

from privaudit.domain.constants import DEFAULT_MONTHLY_BURN_RATE
from privaudit.domain.models import TreasuryMetrics, TreasurySnapshot
from privaudit.domain.services.metrics import compute_treasury_metrics
from privaudit.infrastructure.logging.logger import get_app_logger


class ComputeTreasuryMetricsUseCase:
    """Compute aggregate figures for a snapshot."""

    def __init__(
        self,
        logger=None,
        monthly_burn_rate: Decimal = DEFAULT_MONTHLY_BURN_RATE,
    ) -> None:
        """Initialize the use case.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
            monthly_burn_rate: Fraction of assets assumed spent each month.
        """
        self._logger = logger or get_app_logger()
        self._burn_rate = monthly_burn_rate

    def execute(self, snapshot: TreasurySnapshot) -> TreasuryMetrics:
        """Return the metrics for a snapshot."""
        metrics = compute_treasury_metrics(
            snapshot,
            monthly_burn_rate=self._burn_rate,
            logger=self._logger,
        )
        self._logger.info(
            f"Metrics computed for {snapshot.dao_address}: "
            f"assets={metrics.total_assets}, "
            f"liabilities={metrics.total_liabilities}, "
            f"net_worth={metrics.net_worth}"
        )
        return metrics


__all__ = ["ComputeTreasuryMetricsUseCase"]
