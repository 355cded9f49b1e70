"""
Checkout Example — resolve a store, fill the cart, survive a failed order.

Run: python -m examples.checkout_example
"""

from kungfu import Ok, Error

from storecart.session import Session
from storecart.wire.contrib import fastapi as backend_app
from examples._infra import DEMO_SETTINGS, banner, demo_api, run, show


async def main() -> None:
    backend = backend_app.demo_backend()
    # First order attempt answers 503
    backend.fail_orders = 1

    async with demo_api(backend) as api:
        session = Session(api, mobile=DEMO_SETTINGS.mobile, currency=DEMO_SETTINGS.currency)

        # 1. Blank barcode never reaches the backend
        banner("1. Blank barcode")
        await session.resolve("   ")
        show(session)
        session.dismiss()

        # 2. Load and browse
        banner("2. Load store 8901234")
        match await session.resolve(" 8901234 "):
            case Ok(catalog):
                print(f"  loaded {catalog.store.name}: {len(catalog.items)} items")
            case Error(e):
                print(f"  error: {e}")
                return
        session.toggle("cat-fruit")
        session.increment("item-apple")
        session.increment("item-apple")
        session.increment("item-banana")
        show(session)

        # 3. Order fails, cart is kept
        banner("3. Place order (backend unavailable)")
        await session.place_order()
        show(session)
        print(f"\n  order requests so far: {backend.order_requests}")

        # 4. Retry re-sends the same payload
        banner("4. Retry")
        match await session.retry():
            case Ok(order):
                print(f"  placed {order.id}, total {order.total}")
            case Error(e):
                print(f"  error: {e}")
        show(session)

        print(f"\nSummary: {backend.order_requests} order requests, {len(backend.orders)} order stored")


if __name__ == "__main__":
    run(main)
