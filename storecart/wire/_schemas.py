"""
Wire schemas — the JSON contract of the store backend.

Backend documents use `_id` for identity and camelCase for
`discountedPrice`; the domain side uses plain snake_case.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from storecart._types import to_money
from storecart.catalog._types import Store, Category, Item, Catalog
from storecart.cart._types import CartLine
from storecart.order._types import Order, OrderPayload


class _Schema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# ═══════════════════════════════════════════════════════════════════════════════
# GET /stores/{identifier}
# ═══════════════════════════════════════════════════════════════════════════════


class StoreSchema(_Schema):
    id: str = Field(alias="_id")
    name: str

    def to_domain(self) -> Store:
        return Store(id=self.id, name=self.name)


class CategorySchema(_Schema):
    id: str = Field(alias="_id")
    name: str

    def to_domain(self) -> Category:
        return Category(id=self.id, name=self.name)


class ItemSchema(_Schema):
    id: str = Field(alias="_id")
    name: str
    category: str
    mrp: Decimal = Field(ge=0)
    discount: Decimal = Field(default=Decimal(0), ge=0, le=100)

    @field_validator("discount", mode="before")
    @classmethod
    def missing_discount(cls, value: object) -> object:
        return 0 if value is None else value

    @field_serializer("mrp", "discount")
    def serialize_number(self, value: Decimal) -> float:
        return float(value)

    def to_domain(self) -> Item:
        return Item(
            id=self.id,
            name=self.name,
            category=self.category,
            mrp=to_money(self.mrp),
            discount=to_money(self.discount),
        )


class CatalogSchema(_Schema):
    """
    Store lookup response.

    Note: store is optional here so that a body without a store decodes
    and can be reported as not-found rather than as a malformed response.
    """

    store: StoreSchema | None = None
    categories: list[CategorySchema] = Field(default_factory=list[CategorySchema])
    items: list[ItemSchema] = Field(default_factory=list[ItemSchema])

    def to_domain(self) -> Catalog | None:
        if self.store is None:
            return None
        return Catalog(
            store=self.store.to_domain(),
            categories=tuple(c.to_domain() for c in self.categories),
            items=tuple(i.to_domain() for i in self.items),
        )

    @classmethod
    def from_domain(cls, dom: Catalog) -> CatalogSchema:
        return cls(
            store=StoreSchema(id=dom.store.id, name=dom.store.name),
            categories=[CategorySchema(id=c.id, name=c.name) for c in dom.categories],
            items=[
                ItemSchema(
                    id=i.id,
                    name=i.name,
                    category=i.category,
                    mrp=i.mrp,
                    discount=i.discount,
                )
                for i in dom.items
            ],
        )


# ═══════════════════════════════════════════════════════════════════════════════
# POST /orders
# ═══════════════════════════════════════════════════════════════════════════════


class OrderLineSchema(_Schema):
    item: str
    quantity: int
    price: float
    discount: float
    discounted_price: float = Field(alias="discountedPrice")

    @classmethod
    def from_domain(cls, dom: CartLine) -> OrderLineSchema:
        return cls(
            item=dom.item_id,
            quantity=dom.quantity,
            price=float(dom.price),
            discount=float(dom.discount),
            discounted_price=float(dom.discounted_price),
        )

    def to_domain(self) -> CartLine:
        return CartLine(
            item_id=self.item,
            quantity=self.quantity,
            price=to_money(self.price),
            discount=to_money(self.discount),
            discounted_price=to_money(self.discounted_price),
        )


class OrderRequest(_Schema):
    items: list[OrderLineSchema]
    mobile: str
    store: str
    total: float
    status: Literal["Pending"] = "Pending"

    @classmethod
    def from_domain(cls, dom: OrderPayload) -> OrderRequest:
        return cls(
            items=[OrderLineSchema.from_domain(line) for line in dom.lines],
            mobile=dom.mobile,
            store=dom.store_id,
            total=float(dom.total),
            status=dom.status,
        )

    def to_domain(self) -> OrderPayload:
        return OrderPayload(
            store_id=self.store,
            lines=tuple(line.to_domain() for line in self.items),
            total=to_money(self.total),
            mobile=self.mobile,
            status=self.status,
        )

    def to_json(self) -> dict[str, object]:
        return self.model_dump(by_alias=True)


class OrderResponse(_Schema):
    """Created order as echoed by the backend; extra fields are kept."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str | None = Field(default=None, alias="_id")
    status: str = "Pending"

    def to_order(self, payload: OrderPayload) -> Order:
        return Order(
            id=self.id,
            store_id=payload.store_id,
            lines=payload.lines,
            total=payload.total,
            status=self.status,
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
