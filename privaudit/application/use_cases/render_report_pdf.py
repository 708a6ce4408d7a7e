"""Use case to render a treasury report as PDF."""

from privaudit.application.ports.pdf_renderer import PdfRendererPort
from privaudit.domain.errors import ReportGenerationError
from privaudit.domain.models import (
    TreasuryReport,
    TreasurySnapshot,
    VerificationResult,
)
from privaudit.infrastructure.logging.logger import get_app_logger


class RenderReportPdfUseCase:
    """Render a report through the configured PDF renderer."""

    def __init__(self, renderer: PdfRendererPort, logger=None) -> None:
        self._renderer = renderer
        self._logger = logger or get_app_logger()

    def execute(
        self,
        report: TreasuryReport,
        snapshot: TreasurySnapshot | None = None,
        verification: VerificationResult | None = None,
    ) -> bytes:
        """Return the PDF document.

        Raises:
            ReportGenerationError: If the renderer fails.
        """
        try:
            content = self._renderer.render(report, snapshot, verification)
        except ReportGenerationError:
            raise
        except Exception as exc:
            self._logger.error(f"PDF rendering failed: {exc}")
            raise ReportGenerationError(
                f"Failed to render PDF report: {exc}"
            ) from exc
        self._logger.info(
            f"Rendered PDF for {report.dao_address} ({len(content)} bytes)"
        )
        return content


__all__ = ["RenderReportPdfUseCase"]
