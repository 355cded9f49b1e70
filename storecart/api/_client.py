"""
Store API — async HTTP client for the two backend operations.

    GET  /stores/{identifier}  → catalog
    POST /orders               → created order

All failures come back as Result errors; nothing here raises.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Self
from urllib.parse import quote

import httpx
import pydantic
from kungfu import LazyCoroResult, Result, Ok, Error

from storecart import lift as L
from storecart._errors import NetworkError, NotFound
from storecart.catalog._types import Catalog
from storecart.config import Settings
from storecart.order._types import Order, OrderPayload
from storecart.wire._schemas import CatalogSchema, OrderRequest, OrderResponse

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════════
# Error Mapping
# ═══════════════════════════════════════════════════════════════════════════════


def _transport_error(e: Exception) -> NetworkError:
    if isinstance(e, httpx.HTTPError):
        return NetworkError(f"Network error: {e}" if str(e) else f"Network error: {type(e).__name__}")
    return NetworkError(f"Request failed: {type(e).__name__}: {e}")


def _status_error(response: httpx.Response) -> NetworkError:
    return NetworkError(
        f"Unexpected response {response.status_code} from {response.request.url.path}",
        status_code=response.status_code,
    )


def _json_body(response: httpx.Response) -> Result[Any, NetworkError]:
    if not response.content:
        return Ok(None)
    try:
        return Ok(response.json())
    except ValueError:
        return Error(NetworkError("Malformed response: body is not JSON", response.status_code))


# ═══════════════════════════════════════════════════════════════════════════════
# Store API
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(slots=True)
class StoreApi:
    """
    Backend client. Satisfies both CatalogSource and OrdersApi.

    Note: the timeout comes from settings and defaults to None (wait
    indefinitely). In-flight requests are never cancelled.
    """

    client: httpx.AsyncClient

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> StoreApi:
        return cls(httpx.AsyncClient(
            base_url=settings.api_base_url,
            timeout=settings.timeout,
            transport=transport,
        ))

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.aclose()

    # ───────────────────────────────────────────────────────────────────────────
    # GET /stores/{identifier}
    # ───────────────────────────────────────────────────────────────────────────

    def get_catalog(self, identifier: str) -> LazyCoroResult[Catalog, NetworkError | NotFound]:
        path = f"/stores/{quote(identifier, safe='')}"

        async def impl() -> Result[Catalog, NetworkError | NotFound]:
            sent = await L.catching_async(
                lambda: self.client.get(path),
                on_error=_transport_error,
            )
            match sent:
                case Error(e):
                    return Error(e)
                case Ok(response):
                    pass

            if response.status_code == httpx.codes.NOT_FOUND:
                return Error(NotFound(identifier))
            if response.is_error:
                return Error(_status_error(response))

            match _json_body(response):
                case Error(e):
                    return Error(e)
                case Ok(body):
                    pass

            if not body:
                return Error(NetworkError("Invalid store data received", response.status_code))

            try:
                schema = CatalogSchema.model_validate(body)
            except pydantic.ValidationError as e:
                logger.debug("Catalog schema mismatch: %s", e)
                return Error(NetworkError(
                    f"Invalid store data received ({e.error_count()} problem(s))",
                    response.status_code,
                ))

            catalog = schema.to_domain()
            if catalog is None:
                return Error(NotFound(identifier))
            return Ok(catalog)

        return L.from_result_fn(impl)

    # ───────────────────────────────────────────────────────────────────────────
    # POST /orders
    # ───────────────────────────────────────────────────────────────────────────

    def create_order(self, payload: OrderPayload) -> LazyCoroResult[Order, NetworkError]:
        body = OrderRequest.from_domain(payload).to_json()

        async def impl() -> Result[Order, NetworkError]:
            sent = await L.catching_async(
                lambda: self.client.post("/orders", json=body),
                on_error=_transport_error,
            )
            match sent:
                case Error(e):
                    return Error(e)
                case Ok(response):
                    pass

            if response.is_error:
                return Error(_status_error(response))

            match _json_body(response):
                case Error(e):
                    return Error(e)
                case Ok(created):
                    pass

            if not created:
                return Error(NetworkError("Failed to create order", response.status_code))
            if not isinstance(created, dict):
                return Ok(OrderResponse().to_order(payload))

            try:
                echoed = OrderResponse.model_validate(created)
            except pydantic.ValidationError:
                return Error(NetworkError("Malformed order response", response.status_code))
            return Ok(echoed.to_order(payload))

        return L.from_result_fn(impl)


__all__ = ("StoreApi",)
