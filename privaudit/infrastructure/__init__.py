"""Infrastructure adapters for PrivAudit."""
