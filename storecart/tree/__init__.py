"""
Tree — categories with their items, plus the single expanded-category selector.

    from storecart import tree as T

    expanded = T.toggle(None, "fruit")        # "fruit"
    expanded = T.toggle(expanded, "dairy")    # "dairy", fruit collapses
    groups = T.group_by_category(catalog, cart, expanded)
"""

from storecart.tree._group import (
    ItemRow,
    CategoryGroup,
    group_by_category,
    toggle,
)

__all__ = (
    "ItemRow",
    "CategoryGroup",
    "group_by_category",
    "toggle",
)
