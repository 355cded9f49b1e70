"""Shared pytest fixtures for storecart tests."""

import asyncio
from collections.abc import Awaitable
from decimal import Decimal
from typing import Any

import httpx
import pytest
from kungfu import LazyCoroResult, Ok, Error

from storecart.api import StoreApi
from storecart.catalog import Catalog, Category, Item, Store
from storecart.config import Settings
from storecart.order import Order, OrderPayload
from storecart._errors import NetworkError, NotFound
from storecart.wire.contrib import fastapi as backend_app


def run[T](awaitable: Awaitable[T]) -> T:
    """Drive a coroutine or LazyCoroResult to completion on a fresh loop."""
    async def main() -> T:
        return await awaitable
    return asyncio.run(main())


def unwrap_ok(result: Any) -> Any:
    match result:
        case Ok(value):
            return value
        case _:
            raise AssertionError(f"expected Ok, got {result!r}")


def unwrap_err(result: Any) -> Any:
    match result:
        case Error(error):
            return error
        case _:
            raise AssertionError(f"expected Error, got {result!r}")


# ═══════════════════════════════════════════════════════════════════════════════
# Catalog
# ═══════════════════════════════════════════════════════════════════════════════

FRUIT = Category("cat-fruit", "Fruit")
DAIRY = Category("cat-dairy", "Dairy")
EMPTY = Category("cat-empty", "Household")

APPLE = Item("item-apple", "Apples", FRUIT.id, Decimal("100"), Decimal("20"))
BANANA = Item("item-banana", "Bananas", FRUIT.id, Decimal("60"), Decimal("0"))
MILK = Item("item-milk", "Milk", DAIRY.id, Decimal("56"), Decimal("5"))
STRAY = Item("item-stray", "Stray", "cat-missing", Decimal("10"), Decimal("0"))
FREEBIE = Item("item-free", "Sample", DAIRY.id, Decimal("0"), Decimal("0"))


@pytest.fixture
def catalog() -> Catalog:
    return Catalog(
        store=Store("store-1", "Corner Grocer"),
        categories=(FRUIT, DAIRY, EMPTY),
        items=(APPLE, BANANA, MILK, STRAY, FREEBIE),
    )


# ═══════════════════════════════════════════════════════════════════════════════
# In-memory backend
# ═══════════════════════════════════════════════════════════════════════════════


class FakeBackend:
    """CatalogSource + OrdersApi without HTTP. Counts every call."""

    def __init__(self, catalogs: dict[str, Catalog]) -> None:
        self.catalogs = catalogs
        self.catalog_calls: list[str] = []
        self.order_calls: list[OrderPayload] = []
        self.fetch_failures = 0
        self.order_failures = 0
        self.gate: asyncio.Event | None = None

    def get_catalog(self, identifier: str) -> LazyCoroResult[Catalog, NetworkError | NotFound]:
        async def impl():
            self.catalog_calls.append(identifier)
            if self.fetch_failures:
                self.fetch_failures -= 1
                return Error(NetworkError("Network error: connection refused"))
            found = self.catalogs.get(identifier)
            return Ok(found) if found is not None else Error(NotFound(identifier))
        return LazyCoroResult(impl)

    def create_order(self, payload: OrderPayload) -> LazyCoroResult[Order, NetworkError]:
        async def impl():
            self.order_calls.append(payload)
            if self.gate is not None:
                await self.gate.wait()
            if self.order_failures:
                self.order_failures -= 1
                return Error(NetworkError("Network error: connection reset"))
            return Ok(Order(
                id=f"ord_{len(self.order_calls)}",
                store_id=payload.store_id,
                lines=payload.lines,
                total=payload.total,
                status=payload.status,
            ))
        return LazyCoroResult(impl)


@pytest.fixture
def backend(catalog) -> FakeBackend:
    return FakeBackend({"8901234": catalog})


# ═══════════════════════════════════════════════════════════════════════════════
# HTTP
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def settings() -> Settings:
    return Settings(
        api_base_url="http://backend.test/api",
        mobile="0000000000",
        timeout=None,
        currency="₹",
        log_level="DEBUG",
    )


@pytest.fixture
def server(catalog) -> backend_app.Backend:
    return backend_app.Backend().add("8901234", catalog)


@pytest.fixture
def asgi_api(server, settings) -> StoreApi:
    """StoreApi wired to the FastAPI reference backend in-process."""
    app = backend_app.create_app(server, prefix="/api")
    return StoreApi.from_settings(settings, transport=httpx.ASGITransport(app=app))


def mock_api(settings: Settings, handler) -> StoreApi:
    return StoreApi.from_settings(settings, transport=httpx.MockTransport(handler))
