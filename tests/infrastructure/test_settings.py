"""Tests for infrastructure settings."""

from decimal import Decimal
from pathlib import Path
from unittest.mock import MagicMock

import pytest

import privaudit.infrastructure.settings as settings_module
from privaudit.infrastructure.settings import (
    REAL_RPC_URLS,
    SIMPLE_RPC_URLS,
    PrivAuditSettings,
    resolve_api_key,
)

_ENV_VARS = (
    "AI_PROVIDER",
    "AI_API_KEY",
    "AI_MODEL",
    "OPENAI_API_KEY",
    "ANTHROPIC_API_KEY",
    "ETHERSCAN_API_KEY",
    "PRIVAUDIT_RPC_URLS",
    "PRIVAUDIT_REQUEST_TIMEOUT",
    "PRIVAUDIT_TOKEN_DELAY",
    "PRIVAUDIT_BURN_RATE",
    "PRIVAUDIT_ARTIFACTS_DIR",
    "PRIVAUDIT_IPFS_GATEWAY",
    "PRIVAUDIT_ARWEAVE_GATEWAY",
)


@pytest.fixture
def logger(monkeypatch) -> MagicMock:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    fake = MagicMock()
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: fake)
    return fake


def test_defaults_without_environment(logger) -> None:
    """Missing variables should fall back to defaults."""
    settings = PrivAuditSettings.from_env()

    assert settings.ai_provider == "openai"
    assert settings.ai_model == "gpt-4"
    assert settings.ai_api_key is None
    assert settings.etherscan_api_key is None
    assert settings.rpc_urls == REAL_RPC_URLS
    assert settings.simple_rpc_urls == SIMPLE_RPC_URLS
    assert settings.request_timeout == 5.0
    assert settings.monthly_burn_rate == Decimal("0.10")
    assert settings.artifacts_dir.name == "artifacts"
    assert settings.ipfs_gateway is None


def test_anthropic_provider_uses_its_key(logger, monkeypatch) -> None:
    """The provider decides which key variable is read."""
    monkeypatch.setenv("AI_PROVIDER", "Anthropic")
    monkeypatch.setenv("OPENAI_API_KEY", "openai-key")
    monkeypatch.setenv("ANTHROPIC_API_KEY", "anthropic-key")

    settings = PrivAuditSettings.from_env()

    assert settings.ai_provider == "anthropic"
    assert settings.ai_api_key == "anthropic-key"
    assert settings.ai_model.startswith("claude")


def test_unknown_provider_falls_back_to_openai(logger, monkeypatch) -> None:
    """Unknown providers are logged and replaced."""
    monkeypatch.setenv("AI_PROVIDER", "mystery")
    monkeypatch.setenv("AI_API_KEY", " explicit ")

    settings = PrivAuditSettings.from_env()

    assert settings.ai_provider == "openai"
    assert settings.ai_api_key == "explicit"
    logger.warning.assert_called_once()


def test_rpc_urls_override_both_lists(logger, monkeypatch, tmp_path) -> None:
    """A comma list replaces every built-in endpoint."""
    monkeypatch.setenv(
        "PRIVAUDIT_RPC_URLS",
        "https://a.example, ,https://b.example",
    )
    monkeypatch.setenv("PRIVAUDIT_ARTIFACTS_DIR", str(tmp_path))

    settings = PrivAuditSettings.from_env()

    expected = ("https://a.example", "https://b.example")
    assert settings.rpc_urls == expected
    assert settings.simple_rpc_urls == expected
    assert isinstance(settings.artifacts_dir, Path)
    assert settings.artifacts_dir == tmp_path.resolve()


@pytest.mark.parametrize("raw", ["soon", "-1", "nan", "inf"])
def test_invalid_timeout_uses_default(logger, monkeypatch, raw) -> None:
    """Unusable numbers should be logged and ignored."""
    monkeypatch.setenv("PRIVAUDIT_REQUEST_TIMEOUT", raw)

    settings = PrivAuditSettings.from_env()

    assert settings.request_timeout == 5.0
    logger.warning.assert_called_once()


@pytest.mark.parametrize("raw", ["fast", "0", "-0.1", "NaN"])
def test_invalid_burn_rate_uses_default(logger, monkeypatch, raw) -> None:
    """Burn rates must be positive decimals."""
    monkeypatch.setenv("PRIVAUDIT_BURN_RATE", raw)

    settings = PrivAuditSettings.from_env()

    assert settings.monthly_burn_rate == Decimal("0.10")
    logger.warning.assert_called_once()


def test_valid_burn_rate_is_used(logger, monkeypatch) -> None:
    """A custom burn rate should be parsed exactly."""
    monkeypatch.setenv("PRIVAUDIT_BURN_RATE", "0.05")
    monkeypatch.setenv("PRIVAUDIT_TOKEN_DELAY", "0")

    settings = PrivAuditSettings.from_env()

    assert settings.monthly_burn_rate == Decimal("0.05")
    assert settings.token_delay == 0.0
    logger.warning.assert_not_called()


def test_resolve_api_key_prefers_request_value() -> None:
    """Request keys win and blank values count as missing."""
    assert resolve_api_key("request", "env") == "request"
    assert resolve_api_key("  ", "env") == "env"
    assert resolve_api_key(None, "") is None
