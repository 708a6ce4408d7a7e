"""Use case to check a solvency commitment."""

import time
from collections.abc import Mapping
from typing import Any

from privaudit.domain.models import ProofArtifact, VerificationResult
from privaudit.domain.services.commitment import (
    ASSETS_KIND,
    LIABILITIES_KIND,
    commit_total,
    commitments_match,
    compute_proof_hash,
)
from privaudit.domain.services.validation import is_hex_digest
from privaudit.infrastructure.logging.logger import get_app_logger


class VerifySolvencyProofUseCase:
    """Recompute an artifact's commitments from its disclosed totals."""

    def __init__(self, logger=None) -> None:
        self._logger = logger or get_app_logger()

    def execute(
        self,
        artifact: ProofArtifact | Mapping[str, Any],
    ) -> VerificationResult:
        """Return whether the artifact is internally consistent.

        Malformed input yields an invalid result instead of an exception.

        Args:
            artifact: Artifact instance or its JSON mapping.

        Returns:
            VerificationResult: Validity, elapsed milliseconds and, when
            invalid, the reason.
        """
        started = time.perf_counter()
        try:
            proof = self._coerce(artifact)
            error = self._check(proof)
        except (
            KeyError,
            TypeError,
            ValueError,
            AttributeError,
            ArithmeticError,
        ) as exc:
            proof = None
            error = f"Malformed proof artifact: {_describe(exc)}"

        elapsed = int((time.perf_counter() - started) * 1000)
        if error:
            self._logger.warning(f"Proof verification failed: {error}")
            return VerificationResult(
                is_valid=False,
                verification_time=elapsed,
                error=error,
                public_signals=tuple(proof.public_signals) if proof else (),
            )
        self._logger.info(f"Proof verified for {proof.dao_address}")
        return VerificationResult(
            is_valid=True,
            verification_time=elapsed,
            public_signals=tuple(proof.public_signals),
        )

    @staticmethod
    def _coerce(artifact: ProofArtifact | Mapping[str, Any]) -> ProofArtifact:
        if isinstance(artifact, ProofArtifact):
            return artifact
        if not isinstance(artifact, Mapping):
            raise TypeError("expected a mapping")
        return ProofArtifact.from_dict(artifact)

    @staticmethod
    def _check(proof: ProofArtifact) -> str | None:
        for label, value in (
            ("assets commitment", proof.assets_commitment),
            ("liabilities commitment", proof.liabilities_commitment),
            ("nonce", proof.nonce),
            ("proof hash", proof.proof_hash),
        ):
            if not is_hex_digest(value):
                return f"Invalid {label} format"

        metadata = proof.metadata
        expected_assets = commit_total(
            ASSETS_KIND,
            metadata.total_assets,
            proof.nonce,
            dao_address=proof.dao_address,
            timestamp=proof.timestamp,
        )
        if not commitments_match(expected_assets, proof.assets_commitment):
            return "Assets commitment does not match disclosed total"

        expected_liabilities = commit_total(
            LIABILITIES_KIND,
            metadata.total_liabilities,
            proof.nonce,
            dao_address=proof.dao_address,
            timestamp=proof.timestamp,
        )
        if not commitments_match(
            expected_liabilities,
            proof.liabilities_commitment,
        ):
            return "Liabilities commitment does not match disclosed total"

        if metadata.is_solvent != (
            metadata.total_assets >= metadata.total_liabilities
        ):
            return "Solvency flag contradicts disclosed totals"

        expected_hash = compute_proof_hash(
            proof.assets_commitment,
            proof.liabilities_commitment,
            dao_address=proof.dao_address,
            timestamp=proof.timestamp,
            is_solvent=metadata.is_solvent,
        )
        if not commitments_match(expected_hash, proof.proof_hash):
            return "Proof hash does not match commitments"
        return None


def _describe(exc: BaseException) -> str:
    if isinstance(exc, KeyError):
        return f"missing field {exc}"
    return str(exc) or type(exc).__name__


__all__ = ["VerifySolvencyProofUseCase"]
