"""Keyed-hash commitments over treasury totals.

A commitment is HMAC-SHA256 keyed by a random nonce over a canonical JSON
serialization of one total. This binds the disclosed totals to the artifact
but reveals them in cleartext: it is not a zero-knowledge proof. A real
guarantee needs a circuit proving ``sum(assets) >= sum(liabilities)``
without disclosing either sum.
"""

import hashlib
import hmac
import json
import secrets
from decimal import Decimal
from typing import Any

from privaudit.utils.decimal_utils import canonical_decimal

NONCE_BYTES = 32
ASSETS_KIND = "assets"
LIABILITIES_KIND = "liabilities"


def generate_nonce() -> str:
    """Return a hex encoded nonce drawn from the OS CSPRNG."""
    return secrets.token_hex(NONCE_BYTES)


def canonical_json(payload: dict[str, Any]) -> bytes:
    """Serialize a payload with sorted keys and no whitespace."""
    return json.dumps(
        payload,
        sort_keys=True,
        separators=(",", ":"),
    ).encode("utf-8")


def commit_total(
    kind: str,
    total: Decimal,
    nonce: str,
    *,
    dao_address: str,
    timestamp: int,
) -> str:
    """Return the commitment to one total.

    Args:
        kind: ``assets`` or ``liabilities``.
        total: USD total being committed.
        nonce: Hex encoded HMAC key.
        dao_address: Address the total belongs to.
        timestamp: Snapshot timestamp in milliseconds.

    Returns:
        str: 64-character hex digest.

    Raises:
        ValueError: If the nonce is not valid hex.
    """
    message = canonical_json(
        {
            "daoAddress": dao_address.lower(),
            "kind": kind,
            "timestamp": int(timestamp),
            "total": canonical_decimal(total),
        }
    )
    key = bytes.fromhex(nonce)
    return hmac.new(key, message, hashlib.sha256).hexdigest()


def compute_proof_hash(
    assets_commitment: str,
    liabilities_commitment: str,
    *,
    dao_address: str,
    timestamp: int,
    is_solvent: bool,
) -> str:
    """Return the SHA-256 digest tying both commitments to the claim."""
    message = canonical_json(
        {
            "assetsCommitment": assets_commitment,
            "daoAddress": dao_address.lower(),
            "isSolvent": bool(is_solvent),
            "liabilitiesCommitment": liabilities_commitment,
            "timestamp": int(timestamp),
        }
    )
    return hashlib.sha256(message).hexdigest()


def commitments_match(expected: str, actual: str) -> bool:
    """Compare two digests in constant time."""
    return hmac.compare_digest(expected, actual)


__all__ = [
    "NONCE_BYTES",
    "ASSETS_KIND",
    "LIABILITIES_KIND",
    "generate_nonce",
    "canonical_json",
    "commit_total",
    "compute_proof_hash",
    "commitments_match",
]
