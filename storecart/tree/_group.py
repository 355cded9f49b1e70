"""
Category tree — display grouping derived from catalog + cart.
"""

from __future__ import annotations

from dataclasses import dataclass

from storecart._types import CategoryId
from storecart.catalog._types import Catalog, Category, Item
from storecart.cart._types import Cart

# ═══════════════════════════════════════════════════════════════════════════════
# Grouped View
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class ItemRow:
    item: Item
    quantity: int


@dataclass(frozen=True, slots=True)
class CategoryGroup:
    category: Category
    rows: tuple[ItemRow, ...]
    expanded: bool = False


def group_by_category(
    catalog: Catalog | None,
    cart: Cart,
    expanded: CategoryId | None = None,
) -> tuple[CategoryGroup, ...]:
    """
    Pair every category with its items and their current cart quantities.

    Categories keep catalog order, items keep catalog order within a
    category. Items pointing at an unknown category are left out.
    Quantities are read from cart on every call.
    """
    if catalog is None:
        return ()

    return tuple(
        CategoryGroup(
            category=category,
            rows=tuple(
                ItemRow(item=item, quantity=cart.quantity_of(item.id))
                for item in catalog.items
                if item.category == category.id
            ),
            expanded=category.id == expanded,
        )
        for category in catalog.categories
    )


# ═══════════════════════════════════════════════════════════════════════════════
# Expansion Selector
# ═══════════════════════════════════════════════════════════════════════════════


def toggle(expanded: CategoryId | None, category_id: CategoryId) -> CategoryId | None:
    """At most one category is open: same id collapses, another id switches."""
    if expanded == category_id:
        return None
    return category_id


__all__ = (
    "ItemRow",
    "CategoryGroup",
    "group_by_category",
    "toggle",
)
