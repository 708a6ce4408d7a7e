"""Tokens tracked when reading a treasury."""

from dataclasses import dataclass

from privaudit.domain.constants import NATIVE_TOKEN_ADDRESS


@dataclass(frozen=True)
class TokenInfo:
    """Static description of a token contract.

    Attributes:
        address: Contract address, or the zero address for the native coin.
        symbol: Ticker symbol used for pricing.
        name: Human readable name.
        decimals: Number of decimals of the raw balance.
    """

    address: str
    symbol: str
    name: str
    decimals: int


NATIVE_ETH = TokenInfo(NATIVE_TOKEN_ADDRESS, "ETH", "Ethereum", 18)

MAINNET_TOKENS = (
    TokenInfo(
        "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48",
        "USDC",
        "USD Coin",
        6,
    ),
    TokenInfo(
        "0xdAC17F958D2ee523a2206206994597C13D831ec7",
        "USDT",
        "Tether USD",
        6,
    ),
    TokenInfo(
        "0x6B175474E89094C44Da98b954EedeAC495271d0F",
        "DAI",
        "Dai Stablecoin",
        18,
    ),
    TokenInfo(
        "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2",
        "WETH",
        "Wrapped Ether",
        18,
    ),
    TokenInfo(
        "0x2260FAC5E5542a773Aa44fBCfeDf7C193bc2C599",
        "WBTC",
        "Wrapped BTC",
        8,
    ),
)


__all__ = ["TokenInfo", "NATIVE_ETH", "MAINNET_TOKENS"]
