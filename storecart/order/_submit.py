"""
Order submission — single-flight with user-directed retry.

Note: the in-flight check and the phase change happen before the first
await, so on one event loop a second submit() can never slip past the guard.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol

from kungfu import LazyCoroResult, Result, Ok, Error

from storecart._errors import NetworkError, OrderError
from storecart.catalog._types import Catalog
from storecart.cart._types import Cart
from storecart.order._types import Order, OrderPayload, SubmitPhase
from storecart.order._validate import validate

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════════
# Orders API Protocol
# ═══════════════════════════════════════════════════════════════════════════════


class OrdersApi(Protocol):
    """
    Anything that can create an order.

    Implemented by storecart.api.StoreApi; tests pass in-memory fakes.
    """

    def create_order(self, payload: OrderPayload) -> LazyCoroResult[Order, NetworkError]:
        ...


type PhaseListener = Callable[[SubmitPhase], None]

type SubmitResult = Result[Order, OrderError]


# ═══════════════════════════════════════════════════════════════════════════════
# Order Submitter
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(slots=True)
class OrderSubmitter:
    """
    Validates and submits orders, one at a time.

    submit() / retry() return None when a submission is already in flight:
    the call is ignored, neither queued nor reported as an error.

    After a network failure the validated payload is retained and retry()
    re-sends it as-is, without reading catalog or cart again. After a
    validation failure there is no payload, so retry() validates afresh.
    """

    api: OrdersApi
    mobile: str
    on_phase: PhaseListener | None = None
    phase: SubmitPhase = SubmitPhase.IDLE
    retained: OrderPayload | None = None
    last_error: OrderError | None = field(default=None)

    @property
    def in_flight(self) -> bool:
        return self.phase.in_flight

    async def submit(self, catalog: Catalog | None, cart: Cart) -> SubmitResult | None:
        if self.in_flight:
            logger.debug("Order submission already in flight; ignoring submit")
            return None

        self._enter(SubmitPhase.VALIDATING)
        match validate(catalog, cart, mobile=self.mobile):
            case Ok(payload):
                return await self._send(payload)
            case Error(error):
                return self._fail(error, retained=None)

    async def retry(self, catalog: Catalog | None, cart: Cart) -> SubmitResult | None:
        """Retry after a failure. catalog and cart are only read when nothing was retained."""
        if self.in_flight:
            logger.debug("Order submission already in flight; ignoring retry")
            return None

        if self.retained is not None:
            return await self._send(self.retained)
        return await self.submit(catalog, cart)

    def cancel(self) -> None:
        """Drop the retained payload. Cart state is left untouched."""
        if self.in_flight:
            return
        self.retained = None
        self.last_error = None
        self._enter(SubmitPhase.IDLE)

    # ───────────────────────────────────────────────────────────────────────────

    async def _send(self, payload: OrderPayload) -> SubmitResult:
        self._enter(SubmitPhase.SUBMITTING)
        try:
            result = await self.api.create_order(payload)
        except BaseException:
            self._enter(SubmitPhase.IDLE)
            raise

        match result:
            case Ok(order):
                logger.info(
                    "Order placed for store %s: %d line(s), total %s",
                    payload.store_id, len(payload.lines), payload.total,
                )
                self.retained = None
                self.last_error = None
                self._enter(SubmitPhase.SUCCEEDED)
                self._enter(SubmitPhase.IDLE)
                return Ok(order)
            case Error(error):
                return self._fail(error, retained=payload)

    def _fail(self, error: OrderError, retained: OrderPayload | None) -> SubmitResult:
        logger.error("Error placing order: %s", error)
        self.retained = retained
        self.last_error = error
        self._enter(SubmitPhase.FAILED)
        self._enter(SubmitPhase.RETRY_PENDING)
        return Error(error)

    def _enter(self, phase: SubmitPhase) -> None:
        self.phase = phase
        if self.on_phase is not None:
            self.on_phase(phase)


__all__ = (
    "OrdersApi",
    "PhaseListener",
    "SubmitResult",
    "OrderSubmitter",
)
