"""
Order types — payload, created order, submission phase.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Literal

from storecart._types import StoreId, Money
from storecart.cart._types import CartLine

type OrderStatus = Literal["Pending"]

PENDING: OrderStatus = "Pending"

# ═══════════════════════════════════════════════════════════════════════════════
# Submit Phase — Lifecycle
# ═══════════════════════════════════════════════════════════════════════════════


class SubmitPhase(Enum):
    """
    Order submission lifecycle.

        IDLE → VALIDATING → SUBMITTING → SUCCEEDED → IDLE (cart cleared)
                                       → FAILED → RETRY_PENDING | IDLE
    """

    IDLE = auto()
    VALIDATING = auto()
    SUBMITTING = auto()
    SUCCEEDED = auto()
    FAILED = auto()
    RETRY_PENDING = auto()

    @property
    def in_flight(self) -> bool:
        return self in (SubmitPhase.VALIDATING, SubmitPhase.SUBMITTING)


# ═══════════════════════════════════════════════════════════════════════════════
# Payload & Order
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class OrderPayload:
    """
    Validated order request.

    Note: built once by validate(); Retry re-sends this exact value.
    """

    store_id: StoreId
    lines: tuple[CartLine, ...]
    total: Money
    mobile: str
    status: OrderStatus = PENDING


@dataclass(frozen=True, slots=True)
class Order:
    """Order as accepted by the backend."""

    id: str | None
    store_id: StoreId
    lines: tuple[CartLine, ...]
    total: Money
    status: str


__all__ = (
    "OrderStatus",
    "PENDING",
    "SubmitPhase",
    "OrderPayload",
    "Order",
)
