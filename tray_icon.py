"""System-tray icon setup via pystray."""

from datetime import date
from typing import Callable

import pystray
from PIL import Image
from pystray import MenuItem, Menu

from icon_gen import create_icon_image
from locale_text import today_caption


def tray_title(today: date) -> str:
    """Tooltip text: today's Gregorian and approximate Hijri date."""
    return f"Dual Calendar – {today_caption(today)}"


def create_tray(
    icon_image: Image.Image,
    on_show: Callable[[], None],
    on_exit: Callable[[], None],
    on_today: Callable[[], None] | None = None,
) -> pystray.Icon:
    """Build and return a pystray Icon (not yet started)."""
    items: list[MenuItem | Menu] = [
        MenuItem("Show Calendar", lambda _icon, _item: on_show(), default=True),
    ]
    if on_today is not None:
        items.append(MenuItem("Go to Today", lambda _icon, _item: on_today()))
    items.append(Menu.SEPARATOR)
    items.append(MenuItem("Exit", lambda _icon, _item: on_exit()))
    menu = Menu(*items)
    icon = pystray.Icon("dual-calendar", icon_image, tray_title(date.today()), menu)
    return icon


def refresh_tray(icon: pystray.Icon, today: date) -> None:
    """Redraw the day number and tooltip after the date rolls over."""
    icon.icon = create_icon_image(today)
    icon.title = tray_title(today)
