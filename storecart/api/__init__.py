"""
API — httpx client for the store backend.

    from storecart.api import StoreApi

    async with StoreApi.from_settings(settings) as api:
        catalog = await api.get_catalog("8901234")
        order = await api.create_order(payload)
"""

from storecart.api._client import StoreApi

__all__ = ("StoreApi",)
