"""
Screen rendering — session state to a text display tree.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

from storecart._types import Money, ZERO
from storecart.order._types import SubmitPhase
from storecart.tree._group import CategoryGroup, ItemRow, group_by_category

if TYPE_CHECKING:
    from storecart.session._state import SessionState

LOADING_TEXT = "Loading store details..."
PLACE_ORDER = "Place Order"
PLACING_ORDER = "Placing Order..."


@dataclass(frozen=True, slots=True)
class Summary:
    original: str
    savings: str | None
    final: str
    button: str


@dataclass(frozen=True, slots=True)
class Screen:
    title: str
    badge: int | None
    sections: tuple[tuple[str, ...], ...]
    summary: Summary | None
    prompt: tuple[str, ...] | None
    loading: bool = False

    @property
    def lines(self) -> tuple[str, ...]:
        out: list[str] = [self.title if self.badge is None else f"{self.title}  [{self.badge}]"]
        if self.loading:
            out.append(LOADING_TEXT)
        for section in self.sections:
            out.extend(section)
        if self.summary is not None:
            out.append(f"Original Price  {self.summary.original}")
            if self.summary.savings is not None:
                out.append(f"Your Savings    {self.summary.savings}")
            out.append(f"Final Price     {self.summary.final}")
            out.append(f"[ {self.summary.button} ]")
        if self.prompt is not None:
            out.extend(self.prompt)
        return tuple(out)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


# ═══════════════════════════════════════════════════════════════════════════════
# Formatting
# ═══════════════════════════════════════════════════════════════════════════════


def plain(value: Decimal) -> str:
    """Decimal without trailing zeros or exponent: 20.0 → '20', 12.50 → '12.5'."""
    if value == value.to_integral_value():
        return f"{value.quantize(Decimal(1)):f}"
    return f"{value.normalize():f}"


def money(value: Money, currency: str) -> str:
    return f"{currency}{value:.2f}"


# ═══════════════════════════════════════════════════════════════════════════════
# Sections
# ═══════════════════════════════════════════════════════════════════════════════


def _row(row: ItemRow, currency: str) -> str:
    item = row.item
    badge = f" ({plain(item.discount)}% OFF)" if item.discount > ZERO else ""
    return f"    {item.name}  {currency}{plain(item.mrp)}{badge}  [−] {row.quantity} [+]   <{item.id}>"


def _section(group: CategoryGroup, currency: str) -> tuple[str, ...]:
    arrow = "▲" if group.expanded else "▼"
    header = f"  {arrow} {group.category.name}   <{group.category.id}>"
    if not group.expanded:
        return (header,)
    return (header, *(_row(row, currency) for row in group.rows))


def _summary(state: SessionState, currency: str) -> Summary | None:
    if state.cart.is_empty:
        return None
    totals = state.totals
    return Summary(
        original=money(totals.original, currency),
        savings=money(totals.savings, currency) if totals.savings > ZERO else None,
        final=money(totals.discounted, currency),
        button=PLACING_ORDER if state.phase is SubmitPhase.SUBMITTING else PLACE_ORDER,
    )


def render_screen(state: SessionState, currency: str = "₹") -> Screen:
    """Build the store screen. Pure; the recovery shell wraps calls to it."""
    catalog = state.catalog
    title = catalog.store.name if catalog is not None else (state.identifier or "")
    groups = group_by_category(catalog, state.cart, state.expanded)

    prompt = None
    if state.prompt is not None:
        actions = "  ".join(f"[{a}]" for a in state.prompt.actions)
        prompt = (f"! {state.prompt.title}: {state.prompt.message}", f"  {actions}")

    return Screen(
        title=title,
        badge=state.cart.line_count or None,
        sections=tuple(_section(g, currency) for g in groups),
        summary=_summary(state, currency),
        prompt=prompt,
        loading=state.loading,
    )


__all__ = (
    "LOADING_TEXT",
    "PLACE_ORDER",
    "PLACING_ORDER",
    "Summary",
    "Screen",
    "plain",
    "money",
    "render_screen",
)
