"""
Catalog types — the read-only store/category/item graph.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from storecart._types import StoreId, CategoryId, ItemId, Money, Percent

# ═══════════════════════════════════════════════════════════════════════════════
# Catalog Entities
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Store:
    id: StoreId
    name: str


@dataclass(frozen=True, slots=True)
class Category:
    id: CategoryId
    name: str


@dataclass(frozen=True, slots=True)
class Item:
    """
    Catalog item.

    Note: display_quantity mirrors the cart quantity for rendering only.
    It is never read when building orders.
    """

    id: ItemId
    name: str
    category: CategoryId
    mrp: Money
    discount: Percent  # 0..100
    display_quantity: int = 0


# ═══════════════════════════════════════════════════════════════════════════════
# Catalog — One Resolved Identifier
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Catalog:
    store: Store
    categories: tuple[Category, ...]
    items: tuple[Item, ...]

    def item(self, item_id: ItemId) -> Item | None:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def with_display_quantity(self, item_id: ItemId, quantity: int) -> Catalog:
        """New catalog with one item's display quantity replaced."""
        return replace(
            self,
            items=tuple(
                replace(i, display_quantity=max(quantity, 0)) if i.id == item_id else i
                for i in self.items
            ),
        )


__all__ = (
    "Store",
    "Category",
    "Item",
    "Catalog",
)
