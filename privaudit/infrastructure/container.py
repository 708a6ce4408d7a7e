"""Composition root for wiring infrastructure adapters."""

from privaudit.application.ports.artifact_store import (
    ArtifactPublisherPort,
    ArtifactStorePort,
)
from privaudit.application.ports.balance_source import BalanceSourcePort
from privaudit.application.ports.llm_client import LlmClientPort
from privaudit.application.ports.price_source import PriceSourcePort
from privaudit.application.use_cases.compute_treasury_metrics import (
    ComputeTreasuryMetricsUseCase,
)
from privaudit.application.use_cases.fetch_treasury_snapshot import (
    FetchTreasurySnapshotUseCase,
)
from privaudit.application.use_cases.generate_report import (
    GenerateReportUseCase,
)
from privaudit.application.use_cases.generate_treasury_report import (
    GenerateTreasuryReportUseCase,
)
from privaudit.application.use_cases.render_report_pdf import (
    RenderReportPdfUseCase,
)
from privaudit.domain.errors import InvalidRequestError
from privaudit.domain.models import DataSource, TreasurySnapshot
from privaudit.infrastructure.artifact_store import JsonArtifactStore
from privaudit.infrastructure.demo_source import (
    DEMO_DAO_ADDRESS,
    DemoTreasurySource,
)
from privaudit.infrastructure.etherscan_client import EtherscanBalanceSource
from privaudit.infrastructure.llm_clients import (
    AnthropicLlmClient,
    OpenAiLlmClient,
)
from privaudit.infrastructure.logging.logger import get_app_logger
from privaudit.infrastructure.pdf_renderer import FpdfReportRenderer
from privaudit.infrastructure.price_client import (
    CoinbasePriceSource,
    CoinGeckoPriceSource,
    FallbackPriceSource,
)
from privaudit.infrastructure.rpc_client import JsonRpcBalanceSource
from privaudit.infrastructure.settings import (
    PrivAuditSettings,
    resolve_api_key,
)
from privaudit.infrastructure.storage_service import (
    ArweavePublisher,
    IpfsPublisher,
)


def build_settings() -> PrivAuditSettings:
    """Return settings read from the environment."""
    return PrivAuditSettings.from_env()


def build_balance_sources(
    data_source: DataSource,
    settings: PrivAuditSettings,
    etherscan_api_key: str | None = None,
) -> list[BalanceSourcePort]:
    """Return balance sources in the order they should be tried.

    Raises:
        InvalidRequestError: If the real pipeline has no Etherscan key.
    """
    if data_source is DataSource.REAL:
        key = resolve_api_key(etherscan_api_key, settings.etherscan_api_key)
        if not key:
            raise InvalidRequestError(
                "Etherscan API key is required for real data"
            )
        sources: list[BalanceSourcePort] = [
            EtherscanBalanceSource(key, timeout=settings.request_timeout)
        ]
        urls = settings.rpc_urls
    else:
        sources = []
        urls = settings.simple_rpc_urls
    sources.extend(
        JsonRpcBalanceSource(url, timeout=settings.request_timeout)
        for url in urls
    )
    return sources


def build_price_source(settings: PrivAuditSettings) -> PriceSourcePort:
    """Return CoinGecko prices with a Coinbase fallback."""
    return FallbackPriceSource(
        [
            CoinGeckoPriceSource(timeout=settings.request_timeout),
            CoinbasePriceSource(timeout=settings.request_timeout),
        ],
        logger=get_app_logger(),
    )


def build_llm_client(
    settings: PrivAuditSettings,
    ai_api_key: str | None = None,
) -> LlmClientPort | None:
    """Return the configured LLM client, or None without an API key."""
    key = resolve_api_key(ai_api_key, settings.ai_api_key)
    if key is None:
        return None
    if settings.ai_provider == "anthropic":
        return AnthropicLlmClient(key, model=settings.ai_model)
    return OpenAiLlmClient(key, model=settings.ai_model)


def build_fetch_use_case(
    data_source: DataSource,
    settings: PrivAuditSettings | None = None,
    etherscan_api_key: str | None = None,
) -> FetchTreasurySnapshotUseCase:
    """Return the snapshot fetcher for a data source."""
    resolved = settings or build_settings()
    return FetchTreasurySnapshotUseCase(
        build_balance_sources(data_source, resolved, etherscan_api_key),
        build_price_source(resolved),
        logger=get_app_logger(),
        request_timeout=resolved.request_timeout,
        token_delay=resolved.token_delay,
        data_source=(
            DataSource.SIMPLE.value
            if data_source is DataSource.FALLBACK_DEMO
            else data_source.value
        ),
    )


def build_treasury_report_use_case(
    data_source: DataSource,
    etherscan_api_key: str | None = None,
    ai_api_key: str | None = None,
    settings: PrivAuditSettings | None = None,
) -> GenerateTreasuryReportUseCase:
    """Return the full report pipeline for one request.

    Args:
        data_source: How the snapshot is obtained.
        etherscan_api_key: Optional key overriding ``ETHERSCAN_API_KEY``.
        ai_api_key: Optional key overriding the configured LLM key.
        settings: Optional settings; read from the environment if omitted.
    """
    resolved = settings or build_settings()
    logger = get_app_logger()
    return GenerateTreasuryReportUseCase(
        build_fetch_use_case(data_source, resolved, etherscan_api_key),
        data_source=data_source,
        logger=logger,
        metrics_use_case=ComputeTreasuryMetricsUseCase(
            logger=logger,
            monthly_burn_rate=resolved.monthly_burn_rate,
        ),
        reporter=GenerateReportUseCase(
            build_llm_client(resolved, ai_api_key),
            logger=logger,
        ),
        demo_source=(
            DemoTreasurySource(logger=logger)
            if data_source is DataSource.FALLBACK_DEMO
            else None
        ),
    )


def build_demo_report_use_case(
    ai_api_key: str | None = None,
    settings: PrivAuditSettings | None = None,
) -> GenerateTreasuryReportUseCase:
    """Return a pipeline that only analyzes snapshots it is handed."""
    resolved = settings or build_settings()
    logger = get_app_logger()
    return GenerateTreasuryReportUseCase(
        None,
        logger=logger,
        metrics_use_case=ComputeTreasuryMetricsUseCase(
            logger=logger,
            monthly_burn_rate=resolved.monthly_burn_rate,
        ),
        reporter=GenerateReportUseCase(
            build_llm_client(resolved, ai_api_key),
            logger=logger,
        ),
    )


def load_demo_snapshot(
    dao_address: str = DEMO_DAO_ADDRESS,
) -> TreasurySnapshot:
    """Return the built-in demo snapshot."""
    source = DemoTreasurySource(logger=get_app_logger())
    connection = source.connect()
    return source.fetch_snapshot(connection, dao_address)


def build_pdf_use_case() -> RenderReportPdfUseCase:
    """Return the PDF rendering use case."""
    return RenderReportPdfUseCase(
        FpdfReportRenderer(),
        logger=get_app_logger(),
    )


def build_artifact_store(
    settings: PrivAuditSettings | None = None,
) -> ArtifactStorePort:
    """Return the local artifact store."""
    resolved = settings or build_settings()
    return JsonArtifactStore(resolved.artifacts_dir, logger=get_app_logger())


def build_publishers(
    settings: PrivAuditSettings | None = None,
) -> dict[str, ArtifactPublisherPort]:
    """Return publishers for every configured storage gateway."""
    resolved = settings or build_settings()
    publishers: dict[str, ArtifactPublisherPort] = {}
    if resolved.ipfs_gateway:
        publishers["ipfs"] = IpfsPublisher(
            resolved.ipfs_gateway,
            logger=get_app_logger(),
        )
    if resolved.arweave_gateway:
        publishers["arweave"] = ArweavePublisher(
            resolved.arweave_gateway,
            logger=get_app_logger(),
        )
    return publishers


__all__ = [
    "build_settings",
    "build_balance_sources",
    "build_price_source",
    "build_llm_client",
    "build_fetch_use_case",
    "build_treasury_report_use_case",
    "build_demo_report_use_case",
    "load_demo_snapshot",
    "build_pdf_use_case",
    "build_artifact_store",
    "build_publishers",
]
