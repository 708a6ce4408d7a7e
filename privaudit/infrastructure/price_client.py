"""USD price sources."""

from collections.abc import Sequence
from decimal import Decimal

import httpx

from privaudit.application.ports.price_source import PriceSourcePort
from privaudit.domain.services.normalization import normalize_symbol
from privaudit.infrastructure.http_client import request_json
from privaudit.infrastructure.logging.logger import get_app_logger

COINGECKO_PRICE_URL = "https://api.coingecko.com/api/v3/simple/price"
COINBASE_RATES_URL = "https://api.coinbase.com/v2/exchange-rates"

COINGECKO_IDS = {
    "USDC": "usd-coin",
    "USDT": "tether",
    "DAI": "dai",
    "ETH": "ethereum",
    "WETH": "weth",
    "WBTC": "wrapped-bitcoin",
    "MATIC": "matic-network",
    "ARB": "arbitrum",
    "OP": "optimism",
}
COINBASE_SYMBOLS = {"WETH": "ETH", "WBTC": "BTC"}


class CoinGeckoPriceSource:
    """Price lookups through the CoinGecko simple price endpoint."""

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float = 5.0,
        url: str = COINGECKO_PRICE_URL,
    ) -> None:
        self._client = client
        self._timeout = timeout
        self._url = url

    async def get_price(self, symbol: str) -> Decimal:
        symbol = normalize_symbol(symbol)
        coin_id = COINGECKO_IDS.get(symbol, symbol.lower())
        data = await request_json(
            "GET",
            self._url,
            client=self._client,
            timeout=self._timeout,
            params={"ids": coin_id, "vs_currencies": "usd"},
        )
        price = (data.get(coin_id) or {}).get("usd")
        if price is None:
            raise LookupError(f"CoinGecko has no USD price for {symbol}")
        return Decimal(str(price))


class CoinbasePriceSource:
    """Price lookups through Coinbase exchange rates."""

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float = 5.0,
        url: str = COINBASE_RATES_URL,
    ) -> None:
        self._client = client
        self._timeout = timeout
        self._url = url

    async def get_price(self, symbol: str) -> Decimal:
        symbol = normalize_symbol(symbol)
        currency = COINBASE_SYMBOLS.get(symbol, symbol)
        data = await request_json(
            "GET",
            self._url,
            client=self._client,
            timeout=self._timeout,
            params={"currency": currency},
        )
        rate = ((data.get("data") or {}).get("rates") or {}).get("USD")
        if rate is None:
            raise LookupError(f"Coinbase has no USD rate for {symbol}")
        return Decimal(str(rate))


class FallbackPriceSource:
    """Try several price sources in order for each symbol."""

    def __init__(
        self,
        sources: Sequence[PriceSourcePort],
        logger=None,
    ) -> None:
        self._sources = tuple(sources)
        self._logger = logger or get_app_logger()

    async def get_price(self, symbol: str) -> Decimal:
        last_error: Exception | None = None
        for source in self._sources:
            try:
                return await source.get_price(symbol)
            except (
                LookupError,
                ValueError,
                ArithmeticError,
                httpx.HTTPError,
            ) as exc:
                last_error = exc
                self._logger.warning(
                    f"{type(source).__name__} price for {symbol} failed: "
                    f"{exc}"
                )
        raise LookupError(f"No price available for {symbol}: {last_error}")


__all__ = [
    "CoinGeckoPriceSource",
    "CoinbasePriceSource",
    "FallbackPriceSource",
    "COINGECKO_IDS",
]
