"""
Cart types — lines with price snapshots and derived totals.
"""

from __future__ import annotations

from dataclasses import dataclass

from storecart._types import ItemId, Money, Percent, ZERO

# ═══════════════════════════════════════════════════════════════════════════════
# CartLine — One Item, Snapshotted At First Add
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class CartLine:
    """
    A cart entry.

    price, discount and discounted_price are captured when the item first
    enters the cart and never refreshed afterwards.
    """

    item_id: ItemId
    quantity: int
    price: Money
    discount: Percent
    discounted_price: Money

    @property
    def original_subtotal(self) -> Money:
        return self.price * self.quantity

    @property
    def discounted_subtotal(self) -> Money:
        return self.discounted_price * self.quantity


# ═══════════════════════════════════════════════════════════════════════════════
# Cart — Insertion-Ordered Lines, Totals Derived On Read
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Cart:
    lines: tuple[CartLine, ...] = ()

    @property
    def original_total(self) -> Money:
        return sum((line.original_subtotal for line in self.lines), ZERO)

    @property
    def discounted_total(self) -> Money:
        return sum((line.discounted_subtotal for line in self.lines), ZERO)

    @property
    def savings(self) -> Money:
        return self.original_total - self.discounted_total

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def line_count(self) -> int:
        """Distinct items in the cart (badge count)."""
        return len(self.lines)

    def line(self, item_id: ItemId) -> CartLine | None:
        for line in self.lines:
            if line.item_id == item_id:
                return line
        return None

    def quantity_of(self, item_id: ItemId) -> int:
        line = self.line(item_id)
        return line.quantity if line is not None else 0


EMPTY_CART = Cart()


@dataclass(frozen=True, slots=True)
class Totals:
    """Point-in-time totals for display."""

    original: Money
    discounted: Money
    savings: Money

    @classmethod
    def of(cls, cart: Cart) -> Totals:
        original = cart.original_total
        discounted = cart.discounted_total
        return cls(original=original, discounted=discounted, savings=original - discounted)


__all__ = (
    "CartLine",
    "Cart",
    "EMPTY_CART",
    "Totals",
)
