"""Use case to commit to a treasury's solvency."""

import time
from collections.abc import Callable

from privaudit.domain.errors import ProofGenerationError
from privaudit.domain.models import (
    ProofArtifact,
    ProofMetadata,
    TreasurySnapshot,
)
from privaudit.domain.services.commitment import (
    ASSETS_KIND,
    LIABILITIES_KIND,
    commit_total,
    compute_proof_hash,
    generate_nonce,
)
from privaudit.domain.services.metrics import sum_values
from privaudit.infrastructure.logging.logger import get_app_logger


class GenerateSolvencyProofUseCase:
    """Produce a keyed-hash solvency commitment for a snapshot.

    This is a placeholder for a zero-knowledge proof: the totals travel in
    the artifact metadata so that anyone can recompute the commitments.
    """

    def __init__(
        self,
        logger=None,
        nonce_factory: Callable[[], str] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
            nonce_factory: Optional callable returning a hex nonce.
        """
        self._logger = logger or get_app_logger()
        self._nonce_factory = nonce_factory or generate_nonce

    def execute(self, snapshot: TreasurySnapshot) -> ProofArtifact:
        """Return the proof artifact for a snapshot.

        Raises:
            ProofGenerationError: If the commitments cannot be computed.
        """
        started = time.perf_counter()
        self._logger.info(
            f"Generating solvency commitment for {snapshot.dao_address}"
        )
        try:
            total_assets = sum_values(snapshot.assets)
            total_liabilities = sum_values(snapshot.liabilities)
            is_solvent = total_assets >= total_liabilities
            nonce = self._nonce_factory()
            assets_commitment = commit_total(
                ASSETS_KIND,
                total_assets,
                nonce,
                dao_address=snapshot.dao_address,
                timestamp=snapshot.timestamp,
            )
            liabilities_commitment = commit_total(
                LIABILITIES_KIND,
                total_liabilities,
                nonce,
                dao_address=snapshot.dao_address,
                timestamp=snapshot.timestamp,
            )
            proof_hash = compute_proof_hash(
                assets_commitment,
                liabilities_commitment,
                dao_address=snapshot.dao_address,
                timestamp=snapshot.timestamp,
                is_solvent=is_solvent,
            )
        except (ArithmeticError, TypeError, ValueError) as exc:
            self._logger.error(f"Proof generation failed: {exc}")
            raise ProofGenerationError(
                f"Failed to generate solvency proof: {exc}"
            ) from exc

        proving_time = int((time.perf_counter() - started) * 1000)
        self._logger.info(
            f"Solvency commitment ready in {proving_time}ms "
            f"(solvent={is_solvent})"
        )
        return ProofArtifact(
            assets_commitment=assets_commitment,
            liabilities_commitment=liabilities_commitment,
            nonce=nonce,
            timestamp=snapshot.timestamp,
            dao_address=snapshot.dao_address,
            proof_hash=proof_hash,
            metadata=ProofMetadata(
                proving_time=proving_time,
                is_solvent=is_solvent,
                total_assets=total_assets,
                total_liabilities=total_liabilities,
            ),
        )


__all__ = ["GenerateSolvencyProofUseCase"]
