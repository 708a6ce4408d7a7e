"""Domain package for treasury models and business rules."""

from .errors import (
    InvalidRequestError,
    PrivAuditError,
    ProofGenerationError,
    ReportGenerationError,
    TreasuryFetchError,
)
from .models import (
    AssetBalance,
    AssetDiversification,
    DataSource,
    LiabilityBalance,
    ProofArtifact,
    ProofMetadata,
    RiskMetrics,
    TreasuryMetrics,
    TreasuryReport,
    TreasuryReportResult,
    TreasurySnapshot,
    VerificationResult,
)

__all__ = [
    "InvalidRequestError",
    "PrivAuditError",
    "ProofGenerationError",
    "ReportGenerationError",
    "TreasuryFetchError",
    "AssetBalance",
    "AssetDiversification",
    "DataSource",
    "LiabilityBalance",
    "ProofArtifact",
    "ProofMetadata",
    "RiskMetrics",
    "TreasuryMetrics",
    "TreasuryReport",
    "TreasuryReportResult",
    "TreasurySnapshot",
    "VerificationResult",
]
