"""Domain validation helpers."""

import re
from collections.abc import Iterable
from logging import Logger

from privaudit.domain.models import AssetBalance, LiabilityBalance

_ADDRESS_RE = re.compile(r"0x[0-9a-fA-F]{40}")
_HEX_DIGEST_RE = re.compile(r"[0-9a-f]{64}")


def is_valid_address(address: str | None) -> bool:
    """Return True for a ``0x`` prefixed 20-byte hex address."""
    if not address:
        return False
    return bool(_ADDRESS_RE.fullmatch(address.strip()))


def is_hex_digest(value: object) -> bool:
    """Return True for a 64-character lower-case hex string."""
    return isinstance(value, str) and bool(_HEX_DIGEST_RE.fullmatch(value))


def validate_value_signs(
    balances: Iterable[AssetBalance | LiabilityBalance],
    logger: Logger,
) -> None:
    """Warn when a balance carries a negative USD value.

    Args:
        balances: Asset or liability balances to inspect.
        logger: Logger used for warnings.
    """
    for item in balances:
        if item.value_usd < 0:
            logger.warning(
                f"Negative USD value for {item.symbol} ({item.type}): "
                f"{item.value_usd}"
            )


__all__ = ["is_valid_address", "is_hex_digest", "validate_value_signs"]
