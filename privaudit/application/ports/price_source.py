"""Port for USD price lookups."""

from decimal import Decimal
from typing import Protocol


class PriceSourcePort(Protocol):
    """Port returning the USD price of a token symbol."""

    async def get_price(self, symbol: str) -> Decimal:
        """Return the unit price in USD.

        Raises:
            LookupError: When the symbol has no known price.
        """


__all__ = ["PriceSourcePort"]
