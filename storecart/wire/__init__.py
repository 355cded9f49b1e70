"""
Wire — the backend's JSON contract as pydantic schemas.

    from storecart import wire as W

    catalog = W.CatalogSchema.model_validate(body).to_domain()
    body = W.OrderRequest.from_domain(payload).to_json()

Each schema converts to the domain (to_domain) and/or from it (from_domain).
"""

from storecart.wire._schemas import (
    StoreSchema,
    CategorySchema,
    ItemSchema,
    CatalogSchema,
    OrderLineSchema,
    OrderRequest,
    OrderResponse,
)

__all__ = (
    "StoreSchema",
    "CategorySchema",
    "ItemSchema",
    "CatalogSchema",
    "OrderLineSchema",
    "OrderRequest",
    "OrderResponse",
)
