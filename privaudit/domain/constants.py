"""Domain constants for treasury analytics."""

from decimal import Decimal

STABLECOIN_SYMBOLS = ("USDC", "USDT", "DAI", "BUSD", "TUSD")
MAJOR_CRYPTO_SYMBOLS = ("ETH", "BTC", "WBTC", "WETH")
LP_SYMBOL_MARKER = "LP"

RISK_LOW = "low"
RISK_MEDIUM = "medium"
RISK_HIGH = "high"

CONCENTRATION_HIGH_PCT = Decimal("50")
CONCENTRATION_MEDIUM_PCT = Decimal("25")
VOLATILITY_HIGH_PCT = Decimal("70")
VOLATILITY_MEDIUM_PCT = Decimal("30")
COUNTERPARTY_LOW_MIN_ASSETS = 10
COUNTERPARTY_MEDIUM_MIN_ASSETS = 5

DEFAULT_MONTHLY_BURN_RATE = Decimal("0.10")

SOLVENCY_RATIO_WARNING = Decimal("1.5")
RUNWAY_WARNING_MONTHS = Decimal("12")
LOW_RISK_ASSETS_USD = Decimal("1000000")
MEDIUM_RISK_ASSETS_USD = Decimal("100000")
MAX_RECOMMENDATIONS = 5

NATIVE_TOKEN_ADDRESS = "0x0000000000000000000000000000000000000000"
DEFAULT_NETWORK = "ethereum"

DATA_SOURCE_SIMPLE = "simple"
DATA_SOURCE_REAL = "real"
DATA_SOURCE_FALLBACK_DEMO = "fallback-demo"
DATA_SOURCE_DEMO = "demo"


__all__ = [
    "STABLECOIN_SYMBOLS",
    "MAJOR_CRYPTO_SYMBOLS",
    "LP_SYMBOL_MARKER",
    "RISK_LOW",
    "RISK_MEDIUM",
    "RISK_HIGH",
    "CONCENTRATION_HIGH_PCT",
    "CONCENTRATION_MEDIUM_PCT",
    "VOLATILITY_HIGH_PCT",
    "VOLATILITY_MEDIUM_PCT",
    "COUNTERPARTY_LOW_MIN_ASSETS",
    "COUNTERPARTY_MEDIUM_MIN_ASSETS",
    "DEFAULT_MONTHLY_BURN_RATE",
    "SOLVENCY_RATIO_WARNING",
    "RUNWAY_WARNING_MONTHS",
    "LOW_RISK_ASSETS_USD",
    "MEDIUM_RISK_ASSETS_USD",
    "MAX_RECOMMENDATIONS",
    "NATIVE_TOKEN_ADDRESS",
    "DEFAULT_NETWORK",
    "DATA_SOURCE_SIMPLE",
    "DATA_SOURCE_REAL",
    "DATA_SOURCE_FALLBACK_DEMO",
    "DATA_SOURCE_DEMO",
]
