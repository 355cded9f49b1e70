"""
Session state — one explicit struct, changed only through reduce().

    new_state = reduce(old_state, action)

reduce() is pure: it never touches the network and never mutates its input.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Literal

from storecart._errors import CatalogError, InvalidIdentifier, NotFound, OrderError
from storecart._types import CategoryId, ItemId
from storecart.catalog._types import Catalog
from storecart.cart import _engine as engine
from storecart.cart._types import Cart, EMPTY_CART, Totals
from storecart.order._types import Order, SubmitPhase
from storecart.tree._group import toggle

# ═══════════════════════════════════════════════════════════════════════════════
# Prompt — Actionable Notification
# ═══════════════════════════════════════════════════════════════════════════════

RETRY = "Retry"
CANCEL = "Cancel"
OK = "OK"

type PromptFor = Literal["fetch", "order", "notice"]


@dataclass(frozen=True, slots=True)
class Prompt:
    title: str
    message: str
    actions: tuple[str, ...]
    operation: PromptFor

    @property
    def retryable(self) -> bool:
        return RETRY in self.actions


FETCH_FAILED = "Failed to fetch store details. Please try again."
ORDER_FAILED = "Something went wrong. Please try again."


def fetch_failed_prompt(error: CatalogError) -> Prompt:
    message = error.message if isinstance(error, NotFound) else FETCH_FAILED
    return Prompt("Error", message, (RETRY, CANCEL), "fetch")


def order_failed_prompt(error: OrderError) -> Prompt:
    return Prompt("Order Failed", error.message or ORDER_FAILED, (RETRY, CANCEL), "order")


ORDER_PLACED = Prompt(
    "Order Successful",
    "Your order has been placed successfully!",
    (OK,),
    "notice",
)


# ═══════════════════════════════════════════════════════════════════════════════
# Session State
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class SessionState:
    identifier: str | None = None
    loading: bool = False
    catalog: Catalog | None = None
    cart: Cart = EMPTY_CART
    expanded: CategoryId | None = None
    phase: SubmitPhase = SubmitPhase.IDLE
    prompt: Prompt | None = None
    last_order: Order | None = None

    @property
    def totals(self) -> Totals:
        return Totals.of(self.cart)


INITIAL = SessionState()


# ═══════════════════════════════════════════════════════════════════════════════
# Actions
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class IdentifierRejected:
    error: InvalidIdentifier


@dataclass(frozen=True, slots=True)
class Resolving:
    """A new identifier: everything from the previous one is dropped."""

    identifier: str


@dataclass(frozen=True, slots=True)
class Reloading:
    pass


@dataclass(frozen=True, slots=True)
class CatalogLoaded:
    catalog: Catalog


@dataclass(frozen=True, slots=True)
class CatalogFailed:
    error: CatalogError


@dataclass(frozen=True, slots=True)
class Increment:
    item_id: ItemId


@dataclass(frozen=True, slots=True)
class Decrement:
    item_id: ItemId


@dataclass(frozen=True, slots=True)
class Toggle:
    category_id: CategoryId


@dataclass(frozen=True, slots=True)
class PhaseChanged:
    phase: SubmitPhase


@dataclass(frozen=True, slots=True)
class OrderSucceeded:
    order: Order


@dataclass(frozen=True, slots=True)
class OrderFailed:
    error: OrderError


@dataclass(frozen=True, slots=True)
class DismissPrompt:
    pass


type Action = (
    IdentifierRejected
    | Resolving
    | Reloading
    | CatalogLoaded
    | CatalogFailed
    | Increment
    | Decrement
    | Toggle
    | PhaseChanged
    | OrderSucceeded
    | OrderFailed
    | DismissPrompt
)


# ═══════════════════════════════════════════════════════════════════════════════
# reduce()
# ═══════════════════════════════════════════════════════════════════════════════


def _with_cart(state: SessionState, item_id: ItemId, cart: Cart) -> SessionState:
    """Commit a cart change together with the item's display quantity."""
    catalog = state.catalog
    if catalog is not None:
        catalog = catalog.with_display_quantity(item_id, cart.quantity_of(item_id))
    return replace(state, cart=cart, catalog=catalog)


def _cleared(catalog: Catalog | None) -> Catalog | None:
    if catalog is None:
        return None
    for item in catalog.items:
        if item.display_quantity:
            catalog = catalog.with_display_quantity(item.id, 0)
    return catalog


def reduce(state: SessionState, action: Action) -> SessionState:
    match action:
        case IdentifierRejected(error):
            return replace(state, prompt=Prompt("Error", error.message, (OK,), "notice"))

        case Resolving(identifier):
            return SessionState(identifier=identifier, loading=True)

        case Reloading():
            return replace(state, loading=True, prompt=None)

        case CatalogLoaded(catalog):
            return replace(state, loading=False, catalog=catalog)

        case CatalogFailed(error):
            return replace(state, loading=False, prompt=fetch_failed_prompt(error))

        case Increment(item_id):
            item = state.catalog.item(item_id) if state.catalog is not None else None
            if item is None:
                return state
            return _with_cart(state, item_id, engine.increment(state.cart, item))

        case Decrement(item_id):
            if state.cart.line(item_id) is None:
                return state
            return _with_cart(state, item_id, engine.decrement(state.cart, item_id))

        case Toggle(category_id):
            return replace(state, expanded=toggle(state.expanded, category_id))

        case PhaseChanged(phase):
            return replace(state, phase=phase)

        case OrderSucceeded(order):
            return replace(
                state,
                cart=engine.clear(state.cart),
                catalog=_cleared(state.catalog),
                prompt=ORDER_PLACED,
                last_order=order,
            )

        case OrderFailed(error):
            return replace(state, prompt=order_failed_prompt(error))

        case DismissPrompt():
            return replace(state, prompt=None)


__all__ = (
    # Prompt
    "RETRY",
    "CANCEL",
    "OK",
    "Prompt",
    "ORDER_PLACED",
    "fetch_failed_prompt",
    "order_failed_prompt",
    # State
    "SessionState",
    "INITIAL",
    # Actions
    "IdentifierRejected",
    "Resolving",
    "Reloading",
    "CatalogLoaded",
    "CatalogFailed",
    "Increment",
    "Decrement",
    "Toggle",
    "PhaseChanged",
    "OrderSucceeded",
    "OrderFailed",
    "DismissPrompt",
    "Action",
    # Reducer
    "reduce",
)
