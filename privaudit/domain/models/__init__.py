"""Domain models package."""

from .metrics import AssetDiversification, RiskMetrics, TreasuryMetrics
from .proofs import ProofArtifact, ProofMetadata, VerificationResult
from .reports import (
    DataSource,
    TreasuryReport,
    TreasuryReportResult,
)
from .treasury import AssetBalance, LiabilityBalance, TreasurySnapshot

__all__ = [
    "AssetBalance",
    "LiabilityBalance",
    "TreasurySnapshot",
    "AssetDiversification",
    "RiskMetrics",
    "TreasuryMetrics",
    "ProofArtifact",
    "ProofMetadata",
    "VerificationResult",
    "DataSource",
    "TreasuryReport",
    "TreasuryReportResult",
]
