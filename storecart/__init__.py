"""
storecart — resolve a store, build a cart, place an order.

    from storecart import catalog as C   # Catalog fetch, once per identifier
    from storecart import cart as K      # Pure cart transitions + derived totals
    from storecart import tree as T      # Category grouping + expansion selector
    from storecart import order as O     # Validation + single-flight submission
    from storecart import recovery as R  # Render fault boundary
    from storecart import session as S   # State struct, reducer, async driver
"""

from storecart import catalog
from storecart import cart
from storecart import tree
from storecart import order
from storecart import recovery
from storecart import session
from storecart import view
from storecart import wire
from storecart import lift
from storecart._types import (
    StoreId,
    CategoryId,
    ItemId,
    Money,
    Percent,
)
from storecart._errors import (
    NetworkError,
    NotFound,
    InvalidIdentifier,
    CatalogError,
    ValidationErrorKind,
    ValidationError,
    OrderError,
    RenderFault,
)

__version__ = "0.1.0"

__all__ = (
    "catalog",
    "cart",
    "tree",
    "order",
    "recovery",
    "session",
    "view",
    "wire",
    "lift",
    "StoreId",
    "CategoryId",
    "ItemId",
    "Money",
    "Percent",
    "NetworkError",
    "NotFound",
    "InvalidIdentifier",
    "CatalogError",
    "ValidationErrorKind",
    "ValidationError",
    "OrderError",
    "RenderFault",
)
