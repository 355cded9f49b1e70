"""
Interactive CLI — a terminal front end over one Session.

┌─────────────────────────────────────────────────────────────────────────┐
│  COMMAND            WHAT IT DOES                                        │
├─────────────────────────────────────────────────────────────────────────┤
│  store <id>         Resolve an identifier (drops the current cart)      │
│  open <category>    Expand a category (again to collapse)               │
│  add / remove <item>  Change an item's quantity by one                  │
│  order              Place the order                                     │
│  retry / cancel     Answer a failure prompt                             │
└─────────────────────────────────────────────────────────────────────────┘

Run against a real backend (STORECART_API_BASE_URL) or an in-process demo:

    storecart --demo
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from dataclasses import replace

import httpx
from kungfu import Ok, Error

from storecart.api import StoreApi
from storecart.config import Settings, load_settings
from storecart.recovery import Rendered, Faulted
from storecart.session import Session, OK

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════════
# Help
# ═══════════════════════════════════════════════════════════════════════════════

HELP_TEXT = """
┌─────────────────────────────────────────────────────────────────────────────┐
│                              COMMANDS                                        │
├─────────────────────────────────────────────────────────────────────────────┤
│  store <id>                 Load the store for a barcode / identifier       │
│  open <category-id>         Expand or collapse a category                   │
│  add <item-id>              Add one to the cart                             │
│  remove <item-id>           Remove one from the cart                        │
│  show                       Redraw the screen                               │
│  order                      Place order                                     │
│  retry | cancel | ok        Answer the current prompt                       │
│  reset                      Recover the screen after a display error        │
├─────────────────────────────────────────────────────────────────────────────┤
│  help                       Show this help                                  │
│  quit                       Exit                                            │
└─────────────────────────────────────────────────────────────────────────────┘

Ids are shown in <angle brackets> next to each category and item.
"""


def print_help() -> None:
    print(HELP_TEXT)


def show(session: Session) -> None:
    match session.render():
        case Rendered(screen):
            print()
            print(screen.text)
        case Faulted(fault, text, action):
            print(f"\n  ✗ {text}  [{action}]  (type 'reset')")
            logger.debug("Render fault: %s", fault)


# ═══════════════════════════════════════════════════════════════════════════════
# Main Loop
# ═══════════════════════════════════════════════════════════════════════════════


async def run_cli(session: Session, identifier: str | None = None) -> None:
    print_help()

    if identifier:
        await session.resolve(identifier)
        show(session)

    while True:
        try:
            line = (await asyncio.to_thread(input, "\n> ")).strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            break

        if not line:
            continue

        parts = line.split(maxsplit=1)
        cmd = parts[0].lower()
        arg = parts[1].strip() if len(parts) == 2 else ""

        match cmd:
            case "quit" | "exit" | "q":
                print("Bye!")
                break

            case "help" | "h" | "?":
                print_help()
                continue

            case "store" | "scan":
                match await session.resolve(arg):
                    case Ok(catalog):
                        print(f"  ✓ {catalog.store.name}")
                    case Error(e):
                        print(f"  ✗ {e}")

            case "open":
                if not arg:
                    print("  Usage: open <category-id>")
                    continue
                session.toggle(arg)

            case "add" | "+":
                if not arg:
                    print("  Usage: add <item-id>")
                    continue
                session.increment(arg)

            case "remove" | "-":
                if not arg:
                    print("  Usage: remove <item-id>")
                    continue
                session.decrement(arg)

            case "order":
                if await session.place_order() is None:
                    print("  … order already in progress")

            case "retry":
                if await session.retry() is None:
                    print("  Nothing to retry")

            case "cancel":
                session.cancel()

            case "ok":
                prompt = session.state.prompt
                if prompt is not None and OK in prompt.actions:
                    session.dismiss()

            case "reset":
                session.reset_view()

            case "show":
                pass

            case _:
                print(f"  ✗ Unknown command: {cmd}")
                print("  Type 'help' for available commands.")
                continue

        show(session)


# ═══════════════════════════════════════════════════════════════════════════════
# Entry Point
# ═══════════════════════════════════════════════════════════════════════════════


def build_api(settings: Settings, demo: bool) -> StoreApi:
    if not demo:
        return StoreApi.from_settings(settings)

    from storecart.wire.contrib import fastapi as backend

    app = backend.create_app(backend.demo_backend())
    return StoreApi.from_settings(
        replace(settings, api_base_url="http://demo.local"),
        transport=httpx.ASGITransport(app=app),
    )


async def amain(args: argparse.Namespace, settings: Settings) -> None:
    async with build_api(settings, demo=args.demo) as api:
        session = Session(api, mobile=settings.mobile, currency=settings.currency)
        identifier = args.identifier or ("8901234" if args.demo else None)
        await run_cli(session, identifier)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="storecart", description="Browse a store and place an order")
    parser.add_argument("identifier", nargs="?", help="store barcode / identifier to load on start")
    parser.add_argument("--demo", action="store_true", help="use the in-process demo backend")
    parser.add_argument("--base-url", help="backend base URL (overrides STORECART_API_BASE_URL)")
    args = parser.parse_args(argv)

    settings = load_settings()
    if args.base_url:
        settings = replace(settings, api_base_url=args.base_url.rstrip("/"))

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    asyncio.run(amain(args, settings))


if __name__ == "__main__":
    main()
