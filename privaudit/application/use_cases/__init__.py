"""Application use cases package."""

from .compute_treasury_metrics import ComputeTreasuryMetricsUseCase
from .fetch_treasury_snapshot import FetchTreasurySnapshotUseCase
from .generate_report import GenerateReportUseCase
from .generate_solvency_proof import GenerateSolvencyProofUseCase
from .generate_treasury_report import GenerateTreasuryReportUseCase
from .render_report_pdf import RenderReportPdfUseCase
from .verify_solvency_proof import VerifySolvencyProofUseCase

__all__ = [
    "ComputeTreasuryMetricsUseCase",
    "FetchTreasurySnapshotUseCase",
    "GenerateReportUseCase",
    "GenerateSolvencyProofUseCase",
    "GenerateTreasuryReportUseCase",
    "RenderReportPdfUseCase",
    "VerifySolvencyProofUseCase",
]
