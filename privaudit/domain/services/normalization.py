"""Domain normalization helpers."""

from decimal import Decimal

from privaudit.domain.constants import LP_SYMBOL_MARKER


def normalize_symbol(symbol: str | None) -> str:
    """Normalize token symbols.

    Args:
        symbol: Raw symbol value from an API.

    Returns:
        str: Upper-case symbol, empty when missing.
    """
    if not symbol:
        return ""
    return symbol.strip().upper()


def format_units(raw_balance: int | str, decimals: int) -> Decimal:
    """Scale a raw integer balance by the token decimals.

    Args:
        raw_balance: Balance in base units.
        decimals: Number of decimals of the token.

    Returns:
        Decimal: Human readable balance.
    """
    return Decimal(int(raw_balance)).scaleb(-decimals)


def is_lp_symbol(symbol: str) -> bool:
    return LP_SYMBOL_MARKER in normalize_symbol(symbol)


__all__ = [
    "normalize_symbol",
    "format_units",
    "is_lp_symbol",
]
