"""Use case to read a treasury snapshot from balance and price sources."""

import asyncio
import time
from collections.abc import Callable, Sequence
from decimal import Decimal

from privaudit.application.ports.balance_source import BalanceSourcePort
from privaudit.application.ports.price_source import PriceSourcePort
from privaudit.domain.constants import DATA_SOURCE_SIMPLE, DEFAULT_NETWORK
from privaudit.domain.errors import InvalidRequestError, TreasuryFetchError
from privaudit.domain.models import AssetBalance, TreasurySnapshot
from privaudit.domain.services.metrics import sum_values
from privaudit.domain.services.normalization import format_units
from privaudit.domain.services.validation import is_valid_address
from privaudit.domain.tokens import MAINNET_TOKENS, NATIVE_ETH, TokenInfo
from privaudit.infrastructure.logging.logger import get_app_logger

DEFAULT_REQUEST_TIMEOUT = 5.0
DEFAULT_TOKEN_DELAY = 0.2


def _now_ms() -> int:
    return int(time.time() * 1000)


class FetchTreasurySnapshotUseCase:
    """Build a snapshot by trying balance sources in order."""

    def __init__(
        self,
        balance_sources: Sequence[BalanceSourcePort],
        price_source: PriceSourcePort,
        logger=None,
        tokens: Sequence[TokenInfo] = MAINNET_TOKENS,
        request_timeout: float = DEFAULT_REQUEST_TIMEOUT,
        token_delay: float = DEFAULT_TOKEN_DELAY,
        data_source: str = DATA_SOURCE_SIMPLE,
        network: str = DEFAULT_NETWORK,
        clock: Callable[[], int] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            balance_sources: Sources tried in order until one returns assets.
            price_source: Source of USD unit prices.
            logger: Optional logger compatible with logging.Logger-like API.
            tokens: Token contracts queried besides the native coin.
            request_timeout: Seconds allowed for each network call.
            token_delay: Seconds waited between token lookups.
            data_source: Label stored on the produced snapshot.
            network: Network label stored on the produced snapshot.
            clock: Optional callable returning the time in milliseconds.
        """
        if not balance_sources:
            raise ValueError("At least one balance source is required.")
        self._sources = tuple(balance_sources)
        self._price_source = price_source
        self._logger = logger or get_app_logger()
        self._tokens = tuple(tokens)
        self._timeout = request_timeout
        self._token_delay = token_delay
        self._data_source = data_source
        self._network = network
        self._clock = clock or _now_ms

    async def execute(self, dao_address: str) -> TreasurySnapshot:
        """Return the snapshot for an address.

        Args:
            dao_address: 20-byte hex address of the treasury.

        Returns:
            TreasurySnapshot: Assets of the first source that found any, or
            an empty snapshot when every source answered with nothing.

        Raises:
            InvalidRequestError: If the address is malformed.
            TreasuryFetchError: If every source failed.
        """
        address = (dao_address or "").strip()
        if not is_valid_address(address):
            raise InvalidRequestError(
                f"Invalid Ethereum address: '{dao_address}'"
            )

        attempts: list[str] = []
        last_error: Exception | None = None
        answered = False
        prices: dict[str, Decimal] = {}

        for source in self._sources:
            attempts.append(source.name)
            self._logger.info(f"Fetching treasury {address} via {source.name}")
            try:
                assets = await self._collect_assets(source, address, prices)
            except Exception as exc:
                last_error = exc
                self._logger.warning(
                    f"Balance source {source.name} failed: {_describe(exc)}"
                )
                continue
            answered = True
            if assets:
                return self._snapshot(address, assets)
            self._logger.info(f"Balance source {source.name} found no assets")

        if answered:
            return self._snapshot(address, [])

        raise TreasuryFetchError(
            f"All balance sources failed ({', '.join(attempts)}); "
            f"last error: {_describe(last_error)}",
            attempts=attempts,
            last_error=last_error,
        )

    async def _collect_assets(
        self,
        source: BalanceSourcePort,
        address: str,
        prices: dict[str, Decimal],
    ) -> list[AssetBalance]:
        """Read the native balance and every tracked token from a source.

        A failing native lookup fails the whole source; a failing token or
        price lookup only drops that token.
        """
        assets: list[AssetBalance] = []

        native = await self._with_timeout(source.get_native_balance(address))
        asset = await self._price_asset(NATIVE_ETH, native, prices)
        if asset is not None:
            assets.append(asset)

        for token in self._tokens:
            await asyncio.sleep(self._token_delay)
            try:
                raw = await self._with_timeout(
                    source.get_token_balance(address, token.address)
                )
            except Exception as exc:
                self._logger.warning(
                    f"Skipping {token.symbol} on {source.name}: "
                    f"{_describe(exc)}"
                )
                continue
            asset = await self._price_asset(token, raw, prices)
            if asset is not None:
                assets.append(asset)

        return assets

    async def _price_asset(
        self,
        token: TokenInfo,
        raw_balance: int,
        prices: dict[str, Decimal],
    ) -> AssetBalance | None:
        if raw_balance <= 0:
            return None
        price = prices.get(token.symbol)
        if price is None:
            try:
                price = await self._with_timeout(
                    self._price_source.get_price(token.symbol)
                )
            except Exception as exc:
                self._logger.warning(
                    f"Skipping {token.symbol}: price lookup failed: "
                    f"{_describe(exc)}"
                )
                return None
            prices[token.symbol] = price
        return AssetBalance(
            address=token.address,
            symbol=token.symbol,
            name=token.name,
            balance=str(raw_balance),
            decimals=token.decimals,
            price_usd=price,
            value_usd=format_units(raw_balance, token.decimals) * price,
        )

    async def _with_timeout(self, awaitable):
        return await asyncio.wait_for(awaitable, timeout=self._timeout)

    def _snapshot(
        self,
        address: str,
        assets: list[AssetBalance],
    ) -> TreasurySnapshot:
        total = sum_values(assets)
        self._logger.info(
            f"Treasury {address}: {len(assets)} assets, total={total}"
        )
        return TreasurySnapshot(
            dao_address=address,
            timestamp=self._clock(),
            assets=tuple(assets),
            liabilities=(),
            total_value_usd=total,
            network=self._network,
            data_source=self._data_source,
        )


def _describe(exc: BaseException | None) -> str:
    if exc is None:
        return "unknown error"
    if isinstance(exc, asyncio.TimeoutError):
        return "request timed out"
    return str(exc) or type(exc).__name__


__all__ = [
    "FetchTreasurySnapshotUseCase",
    "DEFAULT_REQUEST_TIMEOUT",
    "DEFAULT_TOKEN_DELAY",
]
