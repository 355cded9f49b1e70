"""
Cart — mutable quantities over a read-only catalog, expressed as pure transitions.

    from storecart import cart as K

    c = K.increment(K.EMPTY_CART, item)
    c = K.increment(c, item)
    c = K.decrement(c, item.id)

    c.original_total, c.discounted_total, c.savings   # always derived from lines
"""

from storecart.cart._types import (
    CartLine,
    Cart,
    EMPTY_CART,
    Totals,
)
from storecart.cart._engine import (
    discounted_price,
    snapshot_line,
    increment,
    decrement,
    clear,
)

__all__ = (
    # Types
    "CartLine",
    "Cart",
    "EMPTY_CART",
    "Totals",
    # Engine
    "discounted_price",
    "snapshot_line",
    "increment",
    "decrement",
    "clear",
)
