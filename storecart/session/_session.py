"""
Session — drives one identifier's catalog/cart pair on the event loop.
"""

from __future__ import annotations

import logging
from typing import Protocol

from kungfu import Result, Ok, Error

from storecart._errors import CatalogError
from storecart.catalog._store import CatalogSource, CatalogStore
from storecart.catalog._types import Catalog
from storecart.order._submit import OrdersApi, OrderSubmitter, SubmitResult
from storecart.order._types import SubmitPhase
from storecart.recovery._shell import RecoveryShell, RenderOutcome
from storecart.session._state import (
    INITIAL,
    Action,
    SessionState,
    reduce,
    IdentifierRejected,
    Resolving,
    Reloading,
    CatalogLoaded,
    CatalogFailed,
    Increment,
    Decrement,
    Toggle,
    PhaseChanged,
    OrderSucceeded,
    OrderFailed,
    DismissPrompt,
)
from storecart.view._render import Screen, render_screen

logger = logging.getLogger(__name__)


class StoreBackend(CatalogSource, OrdersApi, Protocol):
    """Both backend operations; storecart.api.StoreApi is one."""


class Session:
    """
    Owns the state for the currently resolved identifier.

    Every change goes through dispatch() → reduce(). Async operations
    (fetch, submit) dispatch their outcome when they finish; an outcome that
    arrives after a newer identifier was resolved is dropped.
    """

    def __init__(self, backend: StoreBackend, *, mobile: str, currency: str = "₹") -> None:
        self.backend = backend
        self.mobile = mobile
        self.currency = currency
        self.state: SessionState = INITIAL
        self.catalog_store: CatalogStore | None = None
        self.shell = RecoveryShell()
        self.submitter = self._submitter_for(None)

    def dispatch(self, action: Action) -> SessionState:
        self.state = reduce(self.state, action)
        return self.state

    def _submitter_for(self, store: CatalogStore | None) -> OrderSubmitter:
        """Submitter owned by one resolved identifier; its phases stop reaching state once superseded."""

        def on_phase(phase: SubmitPhase) -> None:
            if store is self.catalog_store:
                self.dispatch(PhaseChanged(phase))

        return OrderSubmitter(api=self.backend, mobile=self.mobile, on_phase=on_phase)

    # ───────────────────────────────────────────────────────────────────────────
    # Catalog
    # ───────────────────────────────────────────────────────────────────────────

    async def resolve(self, raw: str) -> Result[Catalog, CatalogError]:
        """Resolve a typed or scanned identifier; the previous cart is dropped."""
        match CatalogStore.resolve(raw, self.backend):
            case Error(e):
                self.dispatch(IdentifierRejected(e))
                return Error(e)
            case Ok(store):
                pass

        self.catalog_store = store
        self.submitter = self._submitter_for(store)
        self.dispatch(Resolving(store.identifier))
        return await self._load(store)

    async def _load(self, store: CatalogStore) -> Result[Catalog, CatalogError]:
        result = await store.fetch()
        if store is not self.catalog_store:
            logger.debug("Dropping catalog result for superseded identifier %r", store.identifier)
            return result

        match result:
            case Ok(catalog):
                self.dispatch(CatalogLoaded(catalog))
            case Error(e):
                self.dispatch(CatalogFailed(e))
        return result

    # ───────────────────────────────────────────────────────────────────────────
    # Cart & Tree
    # ───────────────────────────────────────────────────────────────────────────

    def increment(self, item_id: str) -> SessionState:
        return self.dispatch(Increment(item_id))

    def decrement(self, item_id: str) -> SessionState:
        return self.dispatch(Decrement(item_id))

    def toggle(self, category_id: str) -> SessionState:
        return self.dispatch(Toggle(category_id))

    # ───────────────────────────────────────────────────────────────────────────
    # Orders
    # ───────────────────────────────────────────────────────────────────────────

    async def place_order(self) -> SubmitResult | None:
        store = self.catalog_store
        result = await self.submitter.submit(self.state.catalog, self.state.cart)
        return self._settle(store, result)

    def _settle(self, store: CatalogStore | None, result: SubmitResult | None) -> SubmitResult | None:
        if result is None or store is not self.catalog_store:
            return result

        match result:
            case Ok(order):
                self.dispatch(OrderSucceeded(order))
            case Error(e):
                self.dispatch(OrderFailed(e))
        return result

    # ───────────────────────────────────────────────────────────────────────────
    # Prompt Actions
    # ───────────────────────────────────────────────────────────────────────────

    async def retry(self) -> Result[object, object] | None:
        """Re-attempt exactly the operation the current prompt reports."""
        prompt = self.state.prompt
        if prompt is None or not prompt.retryable:
            return None

        match prompt.operation:
            case "fetch":
                store = self.catalog_store
                if store is None:
                    return None
                self.dispatch(Reloading())
                return await self._load(store)
            case "order":
                if self.submitter.in_flight:
                    return None
                self.dispatch(DismissPrompt())
                store = self.catalog_store
                result = await self.submitter.retry(self.state.catalog, self.state.cart)
                return self._settle(store, result)
            case _:
                return None

    def cancel(self) -> None:
        """Close the prompt. State is left as it is."""
        prompt = self.state.prompt
        if prompt is None:
            return
        if prompt.operation == "order":
            self.submitter.cancel()
        self.dispatch(DismissPrompt())

    def dismiss(self) -> None:
        """Close the prompt with its non-retry action; same as cancel()."""
        self.cancel()

    # ───────────────────────────────────────────────────────────────────────────
    # Rendering
    # ───────────────────────────────────────────────────────────────────────────

    def render(self) -> RenderOutcome[Screen]:
        state = self.state
        return self.shell.render(lambda: render_screen(state, currency=self.currency))

    def reset_view(self) -> None:
        self.shell.reset()


__all__ = (
    "StoreBackend",
    "Session",
)
