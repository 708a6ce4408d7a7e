"""Domain models for generated treasury reports."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from privaudit.domain.constants import (
    DATA_SOURCE_FALLBACK_DEMO,
    DATA_SOURCE_REAL,
    DATA_SOURCE_SIMPLE,
)
from privaudit.domain.models.metrics import TreasuryMetrics
from privaudit.domain.models.proofs import ProofArtifact, VerificationResult
from privaudit.domain.models.treasury import TreasurySnapshot

RECOMMENDATIONS_FROM_LLM = "llm"
RECOMMENDATIONS_FROM_LLM_SENTENCES = "llm-sentences"
RECOMMENDATIONS_FROM_RULES = "rules"


class DataSource(str, Enum):
    """Strategy used to obtain a treasury snapshot.

    SIMPLE reads public RPC endpoints only. REAL tries the block explorer
    first and requires an API key. FALLBACK_DEMO behaves like SIMPLE but
    substitutes flagged demo data when every source fails.
    """

    SIMPLE = DATA_SOURCE_SIMPLE
    REAL = DATA_SOURCE_REAL
    FALLBACK_DEMO = DATA_SOURCE_FALLBACK_DEMO


@dataclass(frozen=True)
class TreasuryReport:
    """Human readable report for a treasury."""

    dao_name: str
    dao_address: str
    report_date: str
    metrics: TreasuryMetrics
    is_solvent: bool
    proof_verified: bool
    proof_hash: str
    summary: str
    recommendations: tuple[str, ...]
    risk_assessment: str
    recommendation_source: str = RECOMMENDATIONS_FROM_RULES

    def to_dict(self) -> dict[str, Any]:
        return {
            "daoName": self.dao_name,
            "daoAddress": self.dao_address,
            "reportDate": self.report_date,
            "metrics": self.metrics.to_dict(),
            "isSolvent": self.is_solvent,
            "proofVerified": self.proof_verified,
            "proofHash": self.proof_hash,
            "summary": self.summary,
            "recommendations": list(self.recommendations),
            "riskAssessment": self.risk_assessment,
            "recommendationSource": self.recommendation_source,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TreasuryReport":
        address = str(data.get("daoAddress") or "")
        return cls(
            dao_name=str(data.get("daoName") or address),
            dao_address=address,
            report_date=str(data.get("reportDate") or ""),
            metrics=TreasuryMetrics.from_dict(data.get("metrics") or {}),
            is_solvent=bool(data.get("isSolvent", True)),
            proof_verified=bool(data.get("proofVerified", False)),
            proof_hash=str(data.get("proofHash") or ""),
            summary=str(data.get("summary") or ""),
            recommendations=tuple(
                str(item) for item in data.get("recommendations") or ()
            ),
            risk_assessment=str(data.get("riskAssessment") or ""),
            recommendation_source=str(
                data.get("recommendationSource") or RECOMMENDATIONS_FROM_RULES
            ),
        )


@dataclass(frozen=True)
class TreasuryReportResult:
    """Everything produced by one run of the report pipeline."""

    report: TreasuryReport
    proof_artifact: ProofArtifact
    verification: VerificationResult
    snapshot: TreasurySnapshot
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": True,
            "reportData": self.report.to_dict(),
            "proofArtifact": self.proof_artifact.to_dict(),
            "verificationResult": self.verification.to_dict(),
            "treasuryData": self.snapshot.to_dict(),
            "metadata": dict(self.metadata),
        }


__all__ = [
    "DataSource",
    "TreasuryReport",
    "TreasuryReportResult",
    "RECOMMENDATIONS_FROM_LLM",
    "RECOMMENDATIONS_FROM_LLM_SENTENCES",
    "RECOMMENDATIONS_FROM_RULES",
]
