"""
Core types for storecart.

Re-exports from kungfu + identity and money aliases.
"""

from __future__ import annotations

from decimal import Decimal

# Re-export from kungfu
from kungfu import Result, Ok, Error, LazyCoroResult

# ═══════════════════════════════════════════════════════════════════════════════
# Identity
# ═══════════════════════════════════════════════════════════════════════════════

type StoreId = str
type CategoryId = str
type ItemId = str

# ═══════════════════════════════════════════════════════════════════════════════
# Money
# ═══════════════════════════════════════════════════════════════════════════════

type Money = Decimal
type Percent = Decimal

ZERO = Decimal(0)
HUNDRED = Decimal(100)


def to_money(value: int | float | str | Decimal) -> Money:
    """Convert a wire number into Money without float artifacts."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    "LazyCoroResult",
    # Identity
    "StoreId",
    "CategoryId",
    "ItemId",
    # Money
    "Money",
    "Percent",
    "ZERO",
    "HUNDRED",
    "to_money",
)
