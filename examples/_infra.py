"""Shared infrastructure for examples."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Coroutine

import httpx

from storecart.api import StoreApi
from storecart.config import Settings
from storecart.recovery import Rendered, Faulted
from storecart.session import Session
from storecart.wire.contrib import fastapi as backend_app


# Settings pointed at the in-process backend
DEMO_SETTINGS = Settings(
    api_base_url="http://demo.local",
    mobile="9000000000",
    timeout=None,
    currency="₹",
    log_level="WARNING",
)


# In-process API
def demo_api(backend: backend_app.Backend) -> StoreApi:
    app = backend_app.create_app(backend)
    return StoreApi.from_settings(DEMO_SETTINGS, transport=httpx.ASGITransport(app=app))


# Helpers
def banner(title: str) -> None:
    print(f"\n{'─' * 50}\n{title}\n{'─' * 50}")


def show(session: Session) -> None:
    match session.render():
        case Rendered(screen):
            print(screen.text)
        case Faulted(fault, text, _):
            print(f"  {text} ({fault})")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:
    asyncio.run(main())
