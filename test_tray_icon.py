import os
from datetime import date

# Menu building needs no tray; keep pystray off the display
os.environ.setdefault("PYSTRAY_BACKEND", "dummy")

from pystray import Menu  # noqa: E402

from tray_icon import build_menu, tray_title  # noqa: E402


def test_tray_title():
    assert tray_title(date(2024, 3, 10)) == "Mini Calendar – 10 March 2024"


def test_menu_items():
    menu = build_menu(lambda: None, lambda: None, on_settings=lambda: None)
    texts = [item.text for item in menu.items if item is not Menu.SEPARATOR]
    assert texts == ["Show Calendar", "Settings", "Exit"]
    assert menu.items[0].default


def test_menu_without_settings():
    menu = build_menu(lambda: None, lambda: None)
    texts = [item.text for item in menu.items if item is not Menu.SEPARATOR]
    assert texts == ["Show Calendar", "Exit"]


def test_menu_actions_call_back():
    calls = []
    menu = build_menu(lambda: calls.append("show"), lambda: calls.append("exit"),
                      on_settings=lambda: calls.append("settings"))
    for item in menu.items:
        if item is not Menu.SEPARATOR:
            item(None)
    assert calls == ["show", "settings", "exit"]
