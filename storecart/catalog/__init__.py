"""
Catalog — the read-only store/category/item graph for one identifier.

    from storecart import catalog as C

    match C.CatalogStore.resolve(" 8901234 ", source=store_api):
        case Ok(store):
            result = await store.fetch()   # one request; later calls reuse it
        case Error(e):
            ...  # InvalidIdentifier
"""

from storecart.catalog._types import (
    Store,
    Category,
    Item,
    Catalog,
)
from storecart.catalog._store import (
    CatalogSource,
    normalize_identifier,
    CatalogStore,
)

__all__ = (
    # Types
    "Store",
    "Category",
    "Item",
    "Catalog",
    # Store
    "CatalogSource",
    "normalize_identifier",
    "CatalogStore",
)
