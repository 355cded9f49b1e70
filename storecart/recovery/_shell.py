"""
Recovery shell — render fault boundary with manual reset.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from storecart._errors import RenderFault

logger = logging.getLogger(__name__)

FAULT_TEXT = "Something went wrong!"
RESET_LABEL = "Try Again"

# ═══════════════════════════════════════════════════════════════════════════════
# Render Outcome
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Rendered[T]:
    value: T


@dataclass(frozen=True, slots=True)
class Faulted:
    fault: RenderFault
    text: str = FAULT_TEXT
    action: str = RESET_LABEL


type RenderOutcome[T] = Rendered[T] | Faulted


# ═══════════════════════════════════════════════════════════════════════════════
# Recovery Shell
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(slots=True)
class RecoveryShell:
    """
    Wraps a rendering computation.

    The first failure flips the shell to faulted. While faulted, render()
    returns the same Faulted without calling the renderer. reset() clears
    only that flag: catalog and cart are not restored or re-fetched and
    stay as they were when the fault happened.
    """

    fault: RenderFault | None = None

    @property
    def faulted(self) -> bool:
        return self.fault is not None

    def render[T](self, renderer: Callable[[], T]) -> RenderOutcome[T]:
        if self.fault is not None:
            return Faulted(self.fault)

        try:
            value = renderer()
        except Exception as e:
            self.fault = RenderFault(e)
            logger.exception("Error caught by boundary")
            return Faulted(self.fault)

        return Rendered(value)

    def reset(self) -> None:
        if self.fault is not None:
            logger.info("Render fault cleared by reset: %s", self.fault)
        self.fault = None


__all__ = (
    "FAULT_TEXT",
    "RESET_LABEL",
    "Rendered",
    "Faulted",
    "RenderOutcome",
    "RecoveryShell",
)
