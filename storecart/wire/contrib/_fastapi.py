import logging
import uuid
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

import fastapi

from storecart.catalog._types import Catalog, Category, Item, Store
from storecart.wire._schemas import CatalogSchema, OrderRequest

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Backend:
    """
    In-memory backend state.

    fail_orders: how many upcoming POST /orders calls answer 503.
    """

    catalogs: dict[str, Catalog] = field(default_factory=dict[str, Catalog])
    orders: list[dict[str, Any]] = field(default_factory=list[dict[str, Any]])
    fail_orders: int = 0
    order_requests: int = 0

    def add(self, identifier: str, catalog: Catalog) -> "Backend":
        self.catalogs[identifier] = catalog
        return self


def create_app(backend: Backend, prefix: str = "") -> fastapi.FastAPI:
    router = fastapi.APIRouter(prefix=prefix)

    @router.get("/stores/{identifier}")
    async def get_store(identifier: str) -> dict[str, Any]:
        catalog = backend.catalogs.get(identifier)
        if catalog is None:
            raise fastapi.HTTPException(status_code=404, detail="Store not found")
        return CatalogSchema.from_domain(catalog).model_dump(by_alias=True)

    @router.post("/orders", status_code=201)
    async def create_order(req: OrderRequest) -> dict[str, Any]:
        backend.order_requests += 1
        if backend.fail_orders > 0:
            backend.fail_orders -= 1
            raise fastapi.HTTPException(status_code=503, detail="Order service unavailable")

        if req.store not in {c.store.id for c in backend.catalogs.values()}:
            raise fastapi.HTTPException(status_code=422, detail="Unknown store")

        order = {"_id": f"ord_{uuid.uuid4().hex[:12]}", **req.model_dump(by_alias=True)}
        backend.orders.append(order)
        logger.info("Backend accepted order %s for store %s", order["_id"], req.store)
        return order

    app = fastapi.FastAPI(title="storecart backend")
    app.include_router(router)
    return app


def demo_backend() -> Backend:
    """Backend seeded with one small grocery store under identifier `8901234`."""
    fruit = Category("cat-fruit", "Fruit")
    dairy = Category("cat-dairy", "Dairy")
    bakery = Category("cat-bakery", "Bakery")

    catalog = Catalog(
        store=Store("store-1", "Corner Grocer"),
        categories=(fruit, dairy, bakery),
        items=(
            Item("item-apple", "Apples (1kg)", fruit.id, Decimal("100"), Decimal("20")),
            Item("item-banana", "Bananas (dozen)", fruit.id, Decimal("60"), Decimal("0")),
            Item("item-milk", "Milk (1L)", dairy.id, Decimal("56"), Decimal("5")),
            Item("item-paneer", "Paneer (200g)", dairy.id, Decimal("90"), Decimal("10")),
            Item("item-bread", "Brown Bread", bakery.id, Decimal("45"), Decimal("0")),
        ),
    )
    return Backend().add("8901234", catalog)
