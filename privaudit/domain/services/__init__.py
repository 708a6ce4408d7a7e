"""Domain services package."""

from .commitment import (
    commit_total,
    commitments_match,
    compute_proof_hash,
    generate_nonce,
)
from .metrics import (
    assess_risks,
    compute_asset_diversification,
    compute_solvency_ratio,
    compute_treasury_metrics,
    estimate_runway_months,
)
from .normalization import (
    format_units,
    normalize_symbol,
)
from .recommendations import (
    assess_overall_risk,
    build_rule_recommendations,
    build_summary,
    parse_list_items,
    split_sentences,
)
from .validation import is_hex_digest, is_valid_address, validate_value_signs

__all__ = [
    "commit_total",
    "commitments_match",
    "compute_proof_hash",
    "generate_nonce",
    "assess_risks",
    "compute_asset_diversification",
    "compute_solvency_ratio",
    "compute_treasury_metrics",
    "estimate_runway_months",
    "format_units",
    "normalize_symbol",
    "assess_overall_risk",
    "build_rule_recommendations",
    "build_summary",
    "parse_list_items",
    "split_sentences",
    "is_hex_digest",
    "is_valid_address",
    "validate_value_signs",
]
