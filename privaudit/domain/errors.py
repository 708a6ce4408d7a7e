"""Domain exceptions for PrivAudit."""


class PrivAuditError(Exception):
    """Base class for errors raised by PrivAudit."""


class InvalidRequestError(PrivAuditError):
    """Raised when caller input is missing or malformed."""


class TreasuryFetchError(PrivAuditError):
    """Raised when every configured balance source failed.

    Attributes:
        attempts: Names of the sources that were tried, in order.
        last_error: The failure reported by the last source.
    """

    def __init__(
        self,
        message: str,
        attempts: list[str] | None = None,
        last_error: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.attempts = list(attempts or [])
        self.last_error = last_error


class ProofGenerationError(PrivAuditError):
    """Raised when a solvency commitment cannot be produced."""


class ReportGenerationError(PrivAuditError):
    """Raised when a report or its PDF rendering fails."""


__all__ = [
    "PrivAuditError",
    "InvalidRequestError",
    "TreasuryFetchError",
    "ProofGenerationError",
    "ReportGenerationError",
]
