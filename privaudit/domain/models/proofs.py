"""Domain models for solvency commitments and their verification."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Mapping

from privaudit.utils.decimal_utils import canonical_decimal, coerce_decimal

COMMITMENT_ALGORITHM = "HMAC-SHA256"
CIRCUIT_VERSION = "1.0.0"


@dataclass(frozen=True)
class ProofMetadata:
    """Public facts disclosed alongside the commitments.

    The totals are disclosed in cleartext; only ``is_solvent`` is meant to
    be the published claim.
    """

    proving_time: int
    is_solvent: bool
    total_assets: Decimal
    total_liabilities: Decimal
    circuit_version: str = CIRCUIT_VERSION

    def to_dict(self) -> dict[str, Any]:
        return {
            "provingTime": self.proving_time,
            "isSolvent": self.is_solvent,
            "totalAssets": canonical_decimal(self.total_assets),
            "totalLiabilities": canonical_decimal(self.total_liabilities),
            "circuitVersion": self.circuit_version,
        }


@dataclass(frozen=True)
class ProofArtifact:
    """Shareable solvency commitment for a treasury snapshot.

    Attributes:
        assets_commitment: Keyed hash binding the asset total.
        liabilities_commitment: Keyed hash binding the liability total.
        nonce: Hex encoded key used for both commitments.
        timestamp: Snapshot timestamp in milliseconds.
        dao_address: Address the snapshot was taken for.
        proof_hash: Hash over both commitments and the solvency claim.
        metadata: Public metadata, including the disclosed totals.
        algorithm: Commitment algorithm identifier.
    """

    assets_commitment: str
    liabilities_commitment: str
    nonce: str
    timestamp: int
    dao_address: str
    proof_hash: str
    metadata: ProofMetadata
    algorithm: str = COMMITMENT_ALGORITHM

    @property
    def public_signals(self) -> list[str]:
        return [self.assets_commitment, self.liabilities_commitment]

    def to_dict(self) -> dict[str, Any]:
        return {
            "proof": {
                "totalAssetsCommitment": self.assets_commitment,
                "totalLiabilitiesCommitment": self.liabilities_commitment,
                "nonce": self.nonce,
                "proofHash": self.proof_hash,
                "publicSignals": self.public_signals,
                "algorithm": self.algorithm,
                "timestamp": self.timestamp,
                "daoAddress": self.dao_address,
            },
            "metadata": self.metadata.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ProofArtifact":
        """Rebuild an artifact from its JSON form.

        Raises:
            KeyError: When a required field is missing.
            TypeError: When a section has the wrong shape.
        """
        proof = data["proof"]
        metadata = data["metadata"]
        return cls(
            assets_commitment=str(proof["totalAssetsCommitment"]),
            liabilities_commitment=str(proof["totalLiabilitiesCommitment"]),
            nonce=str(proof["nonce"]),
            timestamp=int(proof["timestamp"]),
            dao_address=str(proof["daoAddress"]),
            proof_hash=str(proof["proofHash"]),
            algorithm=str(proof.get("algorithm", COMMITMENT_ALGORITHM)),
            metadata=ProofMetadata(
                proving_time=int(metadata.get("provingTime", 0)),
                is_solvent=bool(metadata["isSolvent"]),
                total_assets=coerce_decimal(metadata["totalAssets"]),
                total_liabilities=coerce_decimal(
                    metadata["totalLiabilities"]
                ),
                circuit_version=str(
                    metadata.get("circuitVersion", CIRCUIT_VERSION)
                ),
            ),
        )


@dataclass(frozen=True)
class VerificationResult:
    """Outcome of checking a proof artifact."""

    is_valid: bool
    verification_time: int
    error: str | None = None
    public_signals: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "isValid": self.is_valid,
            "verificationTime": self.verification_time,
            "publicSignals": list(self.public_signals),
        }
        if self.error:
            payload["error"] = self.error
        return payload

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "VerificationResult":
        return cls(
            is_valid=bool(data.get("isValid", False)),
            verification_time=int(data.get("verificationTime") or 0),
            error=data.get("error") or None,
            public_signals=tuple(
                str(item) for item in data.get("publicSignals") or ()
            ),
        )


__all__ = [
    "COMMITMENT_ALGORITHM",
    "CIRCUIT_VERSION",
    "ProofMetadata",
    "ProofArtifact",
    "VerificationResult",
]
