"""Use case to turn metrics and a verification outcome into a report."""

from datetime import datetime, timezone

from privaudit.application.ports.llm_client import LlmClientPort
from privaudit.domain.models import (
    ProofArtifact,
    TreasuryMetrics,
    TreasuryReport,
    TreasurySnapshot,
    VerificationResult,
)
from privaudit.domain.models.reports import (
    RECOMMENDATIONS_FROM_LLM,
    RECOMMENDATIONS_FROM_LLM_SENTENCES,
    RECOMMENDATIONS_FROM_RULES,
)
from privaudit.domain.services.recommendations import (
    assess_overall_risk,
    build_llm_prompt,
    build_rule_recommendations,
    build_summary,
    dao_display_name,
    parse_list_items,
    split_sentences,
)
from privaudit.infrastructure.logging.logger import get_app_logger

SYSTEM_PROMPT = (
    "You are a DAO treasury analyst. Give concise, actionable "
    "recommendations about solvency, diversification, runway and risk."
)


class GenerateReportUseCase:
    """Build a treasury report, phrasing recommendations with an LLM.

    Without an LLM client, or when the model's answer cannot be parsed,
    the deterministic rule set is used.
    """

    def __init__(
        self,
        llm_client: LlmClientPort | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            llm_client: Optional chat model used for recommendations.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._llm_client = llm_client
        self._logger = logger or get_app_logger()

    async def execute(
        self,
        metrics: TreasuryMetrics,
        snapshot: TreasurySnapshot,
        proof_artifact: ProofArtifact,
        verification: VerificationResult,
    ) -> TreasuryReport:
        """Return the report.

        Args:
            metrics: Metrics computed from the snapshot.
            snapshot: Snapshot the metrics were computed from.
            proof_artifact: Solvency commitment for the snapshot.
            verification: Outcome of verifying ``proof_artifact``.

        Returns:
            TreasuryReport: Summary, recommendations and risk label.
        """
        is_solvent = proof_artifact.metadata.is_solvent
        proof_verified = verification.is_valid
        recommendations, source = await self._recommendations(
            metrics,
            snapshot,
            is_solvent,
            proof_verified,
        )
        self._logger.info(
            f"Report for {snapshot.dao_address}: {len(recommendations)} "
            f"recommendations from {source}"
        )
        return TreasuryReport(
            dao_name=dao_display_name(snapshot.dao_address),
            dao_address=snapshot.dao_address,
            report_date=datetime.now(timezone.utc).isoformat(),
            metrics=metrics,
            is_solvent=is_solvent,
            proof_verified=proof_verified,
            proof_hash=proof_artifact.proof_hash,
            summary=build_summary(metrics, len(snapshot.assets)),
            recommendations=tuple(recommendations),
            risk_assessment=assess_overall_risk(metrics, is_solvent),
            recommendation_source=source,
        )

    async def _recommendations(
        self,
        metrics: TreasuryMetrics,
        snapshot: TreasurySnapshot,
        is_solvent: bool,
        proof_verified: bool,
    ) -> tuple[list[str], str]:
        rules = build_rule_recommendations(metrics, is_solvent, proof_verified)
        if self._llm_client is None:
            return rules, RECOMMENDATIONS_FROM_RULES

        prompt = build_llm_prompt(metrics, snapshot, proof_verified)
        try:
            response = await self._llm_client.complete(SYSTEM_PROMPT, prompt)
        except Exception as exc:
            self._logger.warning(
                f"LLM recommendations failed, using rules: {exc}"
            )
            return rules, RECOMMENDATIONS_FROM_RULES

        items = parse_list_items(response or "")
        if items:
            return items, RECOMMENDATIONS_FROM_LLM
        sentences = split_sentences(response or "")
        if sentences:
            return sentences, RECOMMENDATIONS_FROM_LLM_SENTENCES
        self._logger.warning("LLM response had no usable recommendations")
        return rules, RECOMMENDATIONS_FROM_RULES


__all__ = ["GenerateReportUseCase", "SYSTEM_PROMPT"]
