"""
View — the store screen as plain text.

    from storecart import view as V

    screen = V.render_screen(session.state, currency="₹")
    print(screen.text)
"""

from storecart.view._render import (
    LOADING_TEXT,
    PLACE_ORDER,
    PLACING_ORDER,
    Summary,
    Screen,
    plain,
    money,
    render_screen,
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
