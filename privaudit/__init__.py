"""PrivAudit: DAO treasury metrics, solvency commitments and reports."""

__version__ = "0.1.0"
