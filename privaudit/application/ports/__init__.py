"""Application ports package."""

from .artifact_store import ArtifactPublisherPort, ArtifactStorePort
from .balance_source import BalanceSourcePort
from .llm_client import LlmClientPort
from .pdf_renderer import PdfRendererPort
from .price_source import PriceSourcePort
from .treasury_source import TreasurySnapshotSourcePort

__all__ = [
    "ArtifactPublisherPort",
    "ArtifactStorePort",
    "BalanceSourcePort",
    "LlmClientPort",
    "PdfRendererPort",
    "PriceSourcePort",
    "TreasurySnapshotSourcePort",
]
