"""Port for reading on-chain balances."""

from typing import Protocol


class BalanceSourcePort(Protocol):
    """Port exposing raw balances for an address.

    Attributes:
        name: Identifier used in logs and fetch errors.
    """

    name: str

    async def get_native_balance(self, address: str) -> int:
        """Return the native coin balance in base units."""

    async def get_token_balance(
        self,
        address: str,
        token_address: str,
    ) -> int:
        """Return an ERC-20 balance in base units."""


__all__ = ["BalanceSourcePort"]
