"""
Cart engine — pure cart transitions.

Every function takes the complete prior cart and returns a new one.
Nothing is modified in place, so two queued transitions can never observe
a half-applied state.
"""

from __future__ import annotations

from dataclasses import replace

from storecart._types import ItemId, Money, Percent, HUNDRED
from storecart.catalog._types import Item
from storecart.cart._types import Cart, CartLine

# ═══════════════════════════════════════════════════════════════════════════════
# Pricing
# ═══════════════════════════════════════════════════════════════════════════════


def discounted_price(mrp: Money, discount: Percent) -> Money:
    """Price with the percentage discount applied."""
    return mrp - (mrp * discount) / HUNDRED


def snapshot_line(item: Item) -> CartLine:
    """First-add line for an item: quantity 1, prices frozen from the item."""
    return CartLine(
        item_id=item.id,
        quantity=1,
        price=item.mrp,
        discount=item.discount,
        discounted_price=discounted_price(item.mrp, item.discount),
    )


# ═══════════════════════════════════════════════════════════════════════════════
# Transitions
# ═══════════════════════════════════════════════════════════════════════════════


def increment(cart: Cart, item: Item) -> Cart:
    """Add one of item. Existing lines keep their original snapshot."""
    if cart.line(item.id) is None:
        return Cart(lines=(*cart.lines, snapshot_line(item)))

    return Cart(
        lines=tuple(
            replace(line, quantity=line.quantity + 1) if line.item_id == item.id else line
            for line in cart.lines
        )
    )


def decrement(cart: Cart, item_id: ItemId) -> Cart:
    """
    Remove one of item.

    A line at quantity 1 is dropped entirely. Unknown items are a no-op.
    """
    existing = cart.line(item_id)
    if existing is None:
        return cart

    if existing.quantity > 1:
        return Cart(
            lines=tuple(
                replace(line, quantity=line.quantity - 1) if line.item_id == item_id else line
                for line in cart.lines
            )
        )

    return Cart(lines=tuple(line for line in cart.lines if line.item_id != item_id))


def clear(cart: Cart) -> Cart:
    """Empty cart; all totals derive to zero."""
    return Cart()


__all__ = (
    "discounted_price",
    "snapshot_line",
    "increment",
    "decrement",
    "clear",
)
