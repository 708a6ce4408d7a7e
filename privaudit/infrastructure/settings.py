"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
import math
import os
from pathlib import Path

from privaudit.domain.constants import DEFAULT_MONTHLY_BURN_RATE
from privaudit.infrastructure.logging.logger import get_app_logger
from privaudit.utils.utils import get_project_root

SIMPLE_RPC_URLS = (
    "https://ethereum-rpc.publicnode.com",
    "https://rpc.ankr.com/eth",
    "https://eth.llamarpc.com",
)
REAL_RPC_URLS = SIMPLE_RPC_URLS + (
    "https://ethereum.blockpi.network/v1/rpc/public",
    "https://cloudflare-eth.com",
)
AI_PROVIDERS = ("openai", "anthropic")
DEFAULT_AI_MODELS = {
    "openai": "gpt-4",
    "anthropic": "claude-3-5-sonnet-20241022",
}


def resolve_api_key(
    request_value: str | None,
    env_value: str | None,
) -> str | None:
    """Return the request supplied key, falling back to the environment.

    Blank strings count as missing.
    """
    for value in (request_value, env_value):
        if value and value.strip():
            return value.strip()
    return None


@dataclass(frozen=True)
class PrivAuditSettings:
    """Runtime settings for data sources, the LLM and artifacts.

    Attributes:
        etherscan_api_key: Key for the block explorer API.
        ai_api_key: Key for the configured LLM provider.
        ai_provider: ``openai`` or ``anthropic``.
        ai_model: Model name sent to the provider.
        rpc_urls: JSON-RPC endpoints tried in order by the real pipeline.
        simple_rpc_urls: JSON-RPC endpoints tried by the simple pipeline.
        request_timeout: Seconds allowed for each network call.
        token_delay: Seconds waited between token lookups.
        monthly_burn_rate: Fraction of assets assumed spent each month.
        artifacts_dir: Directory for proof and report files.
        ipfs_gateway: Optional IPFS API gateway for publishing.
        arweave_gateway: Optional Arweave gateway for publishing.
    """

    etherscan_api_key: str | None = None
    ai_api_key: str | None = None
    ai_provider: str = "openai"
    ai_model: str = DEFAULT_AI_MODELS["openai"]
    rpc_urls: tuple[str, ...] = REAL_RPC_URLS
    simple_rpc_urls: tuple[str, ...] = SIMPLE_RPC_URLS
    request_timeout: float = 5.0
    token_delay: float = 0.2
    monthly_burn_rate: Decimal = DEFAULT_MONTHLY_BURN_RATE
    artifacts_dir: Path = field(
        default_factory=lambda: get_project_root() / "artifacts"
    )
    ipfs_gateway: str | None = None
    arweave_gateway: str | None = None

    @classmethod
    def from_env(cls) -> "PrivAuditSettings":
        """Build settings from environment variables.

        Returns:
            PrivAuditSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        provider = os.getenv("AI_PROVIDER", "openai").strip().lower()
        if provider not in AI_PROVIDERS:
            logger.warning(
                f"Unknown AI_PROVIDER '{provider}', using openai instead"
            )
            provider = "openai"
        provider_key = (
            "ANTHROPIC_API_KEY"
            if provider == "anthropic"
            else "OPENAI_API_KEY"
        )
        rpc_urls = cls._parse_urls(os.getenv("PRIVAUDIT_RPC_URLS"))
        artifacts_dir = os.getenv("PRIVAUDIT_ARTIFACTS_DIR")

        return cls(
            etherscan_api_key=resolve_api_key(
                None,
                os.getenv("ETHERSCAN_API_KEY"),
            ),
            ai_api_key=resolve_api_key(
                os.getenv("AI_API_KEY"),
                os.getenv(provider_key),
            ),
            ai_provider=provider,
            ai_model=(
                os.getenv("AI_MODEL", "").strip()
                or DEFAULT_AI_MODELS[provider]
            ),
            rpc_urls=rpc_urls or REAL_RPC_URLS,
            simple_rpc_urls=rpc_urls or SIMPLE_RPC_URLS,
            request_timeout=cls._parse_float(
                "PRIVAUDIT_REQUEST_TIMEOUT",
                5.0,
                logger,
            ),
            token_delay=cls._parse_float("PRIVAUDIT_TOKEN_DELAY", 0.2, logger),
            monthly_burn_rate=cls._parse_burn_rate(logger),
            artifacts_dir=(
                Path(artifacts_dir).expanduser().resolve()
                if artifacts_dir
                else get_project_root() / "artifacts"
            ),
            ipfs_gateway=os.getenv("PRIVAUDIT_IPFS_GATEWAY") or None,
            arweave_gateway=os.getenv("PRIVAUDIT_ARWEAVE_GATEWAY") or None,
        )

    @staticmethod
    def _parse_urls(raw: str | None) -> tuple[str, ...]:
        if not raw:
            return ()
        return tuple(url.strip() for url in raw.split(",") if url.strip())

    @staticmethod
    def _parse_float(name: str, default: float, logger) -> float:
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = float(raw)
        except ValueError:
            logger.warning(f"Invalid {name} '{raw}', using {default}")
            return default
        if not math.isfinite(value) or value < 0:
            logger.warning(f"Out of range {name} '{raw}', using {default}")
            return default
        return value

    @staticmethod
    def _parse_burn_rate(logger) -> Decimal:
        raw = os.getenv("PRIVAUDIT_BURN_RATE")
        if raw is None or not raw.strip():
            return DEFAULT_MONTHLY_BURN_RATE
        try:
            value = Decimal(raw.strip())
        except InvalidOperation:
            logger.warning(
                f"Invalid PRIVAUDIT_BURN_RATE '{raw}', using "
                f"{DEFAULT_MONTHLY_BURN_RATE}"
            )
            return DEFAULT_MONTHLY_BURN_RATE
        if not value.is_finite() or value <= 0:
            logger.warning(
                f"Out of range PRIVAUDIT_BURN_RATE '{raw}', using "
                f"{DEFAULT_MONTHLY_BURN_RATE}"
            )
            return DEFAULT_MONTHLY_BURN_RATE
        return value


__all__ = [
    "PrivAuditSettings",
    "resolve_api_key",
    "SIMPLE_RPC_URLS",
    "REAL_RPC_URLS",
    "DEFAULT_AI_MODELS",
]
