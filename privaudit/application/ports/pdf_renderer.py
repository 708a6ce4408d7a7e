"""Port for rendering reports to PDF."""

from typing import Protocol

from privaudit.domain.models import (
    TreasuryReport,
    TreasurySnapshot,
    VerificationResult,
)


class PdfRendererPort(Protocol):
    """Port turning a report into PDF bytes."""

    def render(
        self,
        report: TreasuryReport,
        snapshot: TreasurySnapshot | None = None,
        verification: VerificationResult | None = None,
    ) -> bytes:
        """Return the rendered document."""


__all__ = ["PdfRendererPort"]
