"""
Optional integrations for storecart.wire.

    from storecart.wire.contrib import fastapi
"""
