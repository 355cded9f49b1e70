"""
Order validation — preconditions checked before any network call.
"""

from __future__ import annotations

from kungfu import Result, Ok, Error

from storecart._errors import ValidationError, ValidationErrorKind
from storecart._types import ZERO
from storecart.catalog._types import Catalog
from storecart.cart._types import Cart
from storecart.order._types import OrderPayload, PENDING


def validate(
    catalog: Catalog | None,
    cart: Cart,
    *,
    mobile: str,
) -> Result[OrderPayload, ValidationError]:
    """
    Check a cart against the resolved catalog and build the order payload.

    Checks run in order: store, empty cart, line quantities, total.
    The line check covers carts built by hand; engine transitions never
    leave a line at quantity 0.
    """
    if catalog is None or not catalog.store.id:
        return Error(ValidationError(ValidationErrorKind.MISSING_STORE))

    if cart.is_empty:
        return Error(ValidationError(ValidationErrorKind.EMPTY_CART))

    if any(line.quantity <= 0 for line in cart.lines):
        return Error(ValidationError(ValidationErrorKind.INVALID_QUANTITY))

    total = cart.discounted_total
    if total <= ZERO:
        return Error(ValidationError(ValidationErrorKind.INVALID_TOTAL))

    return Ok(OrderPayload(
        store_id=catalog.store.id,
        lines=cart.lines,
        total=total,
        mobile=mobile,
        status=PENDING,
    ))


__all__ = ("validate",)
