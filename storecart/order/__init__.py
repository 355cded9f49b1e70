"""
Order — validation and single-flight submission with user-directed retry.

    from storecart import order as O

    submitter = O.OrderSubmitter(api=store_api, mobile=settings.mobile)

    match await submitter.submit(catalog, cart):
        case None:
            ...  # already in flight, ignored
        case Ok(order):
            ...  # clear the cart
        case Error(e):
            ...  # offer Retry (submitter.retry) or Cancel (submitter.cancel)

Lifecycle:

    IDLE → VALIDATING → SUBMITTING ─┬─ SUCCEEDED → IDLE
              │                     │
              └─────────────────────┴─ FAILED → RETRY_PENDING ─┬─ retry() → SUBMITTING
                                                               └─ cancel() → IDLE
"""

from storecart.order._types import (
    OrderStatus,
    PENDING,
    SubmitPhase,
    OrderPayload,
    Order,
)
from storecart.order._validate import validate
from storecart.order._submit import (
    OrdersApi,
    PhaseListener,
    SubmitResult,
    OrderSubmitter,
)

__all__ = (
    # Types
    "OrderStatus",
    "PENDING",
    "SubmitPhase",
    "OrderPayload",
    "Order",
    # Validation
    "validate",
    # Submission
    "OrdersApi",
    "PhaseListener",
    "SubmitResult",
    "OrderSubmitter",
)
