"""
Lift — helpers for lifting values into LazyCoroResult.

Re-exports from combinators.lift with storecart-specific additions.
"""

from __future__ import annotations

from collections.abc import Callable, Awaitable

from kungfu import LazyCoroResult, Result

from combinators.lift import catching_async


# ═══════════════════════════════════════════════════════════════════════════════
# storecart-specific helpers
# ═══════════════════════════════════════════════════════════════════════════════

def from_result[T, E](result: Result[T, E]) -> LazyCoroResult[T, E]:
    """Lift a Result into LazyCoroResult."""
    async def _run() -> Result[T, E]:
        return result
    return LazyCoroResult(_run)


def from_result_fn[T, E](
    fn: Callable[[], Awaitable[Result[T, E]]],
) -> LazyCoroResult[T, E]:
    """
    Wrap an async function that already returns a Result.

    Nothing runs until the returned value is awaited.
    """
    return LazyCoroResult(fn)


__all__ = (
    # From combinators.lift
    "catching_async",
    # storecart additions
    "from_result",
    "from_result_fn",
)
