"""
FastAPI reference backend for the storecart wire contract.

    from storecart.wire.contrib import fastapi as backend

    state = backend.demo_backend()
    app = backend.create_app(state, prefix="/api")

Serves GET /stores/{identifier} and POST /orders from memory. Used by the
demo CLI and the tests (through httpx.ASGITransport).
"""

from ._fastapi import (
    Backend,
    create_app,
    demo_backend,
)

__all__ = (
    "Backend",
    "create_app",
    "demo_backend",
)
