"""Tests for the composition root."""

from unittest.mock import MagicMock

import pytest

import privaudit.infrastructure.container as container
from privaudit.domain.errors import InvalidRequestError
from privaudit.domain.models import DataSource
from privaudit.infrastructure.etherscan_client import EtherscanBalanceSource
from privaudit.infrastructure.llm_clients import (
    AnthropicLlmClient,
    OpenAiLlmClient,
)
from privaudit.infrastructure.rpc_client import JsonRpcBalanceSource
from privaudit.infrastructure.settings import PrivAuditSettings
from privaudit.infrastructure.storage_service import (
    ArweavePublisher,
    IpfsPublisher,
)


@pytest.fixture(autouse=True)
def _quiet_logger(monkeypatch) -> None:
    monkeypatch.setattr(container, "get_app_logger", MagicMock)


def _settings(tmp_path, **overrides) -> PrivAuditSettings:
    return PrivAuditSettings(artifacts_dir=tmp_path, **overrides)


def test_real_sources_start_with_etherscan(tmp_path) -> None:
    """The real pipeline tries Etherscan before every RPC endpoint."""
    settings = _settings(tmp_path, etherscan_api_key="env-key")

    sources = container.build_balance_sources(DataSource.REAL, settings)

    assert isinstance(sources[0], EtherscanBalanceSource)
    assert len(sources) == 1 + len(settings.rpc_urls)
    assert all(isinstance(s, JsonRpcBalanceSource) for s in sources[1:])


def test_real_sources_require_a_key(tmp_path) -> None:
    """Without any Etherscan key the real pipeline is refused."""
    with pytest.raises(InvalidRequestError, match="required for real data"):
        container.build_balance_sources(DataSource.REAL, _settings(tmp_path))


def test_simple_sources_use_public_rpc(tmp_path) -> None:
    """Simple and fallback pipelines only use public endpoints."""
    settings = _settings(tmp_path, simple_rpc_urls=("https://a.example",))

    sources = container.build_balance_sources(
        DataSource.FALLBACK_DEMO,
        settings,
    )

    assert [source.name for source in sources] == ["rpc:a.example"]


def test_llm_client_selection(tmp_path) -> None:
    """The provider decides the client and a missing key disables it."""
    openai = _settings(tmp_path)
    anthropic = _settings(tmp_path, ai_provider="anthropic")

    assert container.build_llm_client(openai) is None
    assert isinstance(
        container.build_llm_client(openai, "request-key"),
        OpenAiLlmClient,
    )
    assert isinstance(
        container.build_llm_client(anthropic, "request-key"),
        AnthropicLlmClient,
    )


def test_fallback_fetcher_is_labelled_simple(tmp_path) -> None:
    """Live data fetched in fallback mode is reported as simple."""
    use_case = container.build_fetch_use_case(
        DataSource.FALLBACK_DEMO,
        _settings(tmp_path),
    )

    assert use_case._data_source == "simple"


def test_report_pipeline_wiring(tmp_path) -> None:
    """Fallback pipelines receive a demo source."""
    use_case = container.build_treasury_report_use_case(
        DataSource.FALLBACK_DEMO,
        settings=_settings(tmp_path),
    )

    assert use_case._demo_source is not None
    assert use_case._fetcher is not None


def test_artifact_store_and_publishers(tmp_path) -> None:
    """Gateways enable publishers and the store uses the settings dir."""
    settings = _settings(
        tmp_path,
        ipfs_gateway="https://ipfs.example",
        arweave_gateway="https://arweave.example",
    )

    store = container.build_artifact_store(settings)
    publishers = container.build_publishers(settings)

    assert store.base_dir == tmp_path
    assert isinstance(publishers["ipfs"], IpfsPublisher)
    assert isinstance(publishers["arweave"], ArweavePublisher)
    assert container.build_publishers(_settings(tmp_path)) == {}


def test_load_demo_snapshot_uses_address() -> None:
    """The demo snapshot can be relabelled with another address."""
    snapshot = container.load_demo_snapshot("0x" + "ef" * 20)

    assert snapshot.dao_address == "0x" + "ef" * 20
    assert len(snapshot.assets) == 2
