"""
Recovery — isolate rendering faults behind an explicit result type.

    from storecart import recovery as R

    shell = R.RecoveryShell()

    match shell.render(lambda: view.render(state)):
        case R.Rendered(screen):
            ...
        case R.Faulted(fault):
            ...  # show fault text, wire the action to shell.reset()
"""

from storecart.recovery._shell import (
    FAULT_TEXT,
    RESET_LABEL,
    Rendered,
    Faulted,
    RenderOutcome,
    RecoveryShell,
)

__all__ = (
    "FAULT_TEXT",
    "RESET_LABEL",
    "Rendered",
    "Faulted",
    "RenderOutcome",
    "RecoveryShell",
)
