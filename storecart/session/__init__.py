"""
Session — explicit state + pure reducer + the async driver around them.

    from storecart import session as S

    s = S.Session(api, mobile=settings.mobile)
    await s.resolve("8901234")
    s.toggle("cat-fruit")
    s.increment("item-apple")
    await s.place_order()

    if s.state.prompt is not None and s.state.prompt.retryable:
        await s.retry()   # or s.cancel()

State flow:

    action ──► reduce(state, action) ──► new state ──► render_screen(state)
                                                          (inside RecoveryShell)
"""

from storecart.session._state import (
    RETRY,
    CANCEL,
    OK,
    Prompt,
    ORDER_PLACED,
    fetch_failed_prompt,
    order_failed_prompt,
    SessionState,
    INITIAL,
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
    Action,
    reduce,
)
from storecart.session._session import (
    StoreBackend,
    Session,
)

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
    "reduce",
    # Driver
    "StoreBackend",
    "Session",
)
