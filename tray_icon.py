"""System-tray icon setup via pystray."""

from datetime import date
from typing import Callable

import pystray
from PIL import Image
from pystray import MenuItem, Menu

from calendar_logic import month_label


def tray_title(today: date) -> str:
    return f"Mini Calendar – {today.day} {month_label(today.year, today.month)}"


def build_menu(
    on_show: Callable[[], None],
    on_exit: Callable[[], None],
    on_settings: Callable[[], None] | None = None,
) -> Menu:
    items: list[MenuItem | Menu] = [
        MenuItem("Show Calendar", lambda _icon, _item: on_show(), default=True),
    ]
    if on_settings is not None:
        items.append(MenuItem("Settings", lambda _icon, _item: on_settings()))
    items.append(Menu.SEPARATOR)
    items.append(MenuItem("Exit", lambda _icon, _item: on_exit()))
    return Menu(*items)


def create_tray(
    icon_image: Image.Image,
    on_show: Callable[[], None],
    on_exit: Callable[[], None],
    on_settings: Callable[[], None] | None = None,
) -> pystray.Icon:
    """Build and return a pystray Icon (not yet started)."""
    menu = build_menu(on_show, on_exit, on_settings)
    return pystray.Icon("mini-calendar", icon_image, tray_title(date.today()), menu)
