"""Entry point — glues pystray (daemon thread) with tkinter (main thread)."""

import ctypes
import logging
import threading

from calendar_window import CalendarWindow
from icon_gen import create_icon_image
from tray_icon import create_tray

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def _enable_dpi_awareness() -> None:
    # Crisp fonts on Hi-DPI monitors; only available on Windows
    try:
        ctypes.windll.shcore.SetProcessDpiAwareness(1)
    except (AttributeError, OSError) as exc:
        logger.debug("DPI awareness not set: %s", exc)


def main() -> None:
    _enable_dpi_awareness()

    cal_win = CalendarWindow()

    # Callbacks marshalled onto the tkinter main thread
    def on_show() -> None:
        cal_win.root.after(0, cal_win.toggle)

    def on_exit() -> None:
        def _quit() -> None:
            logger.info("Exiting")
            tray.stop()
            cal_win.root.destroy()
        cal_win.root.after(0, _quit)

    def on_settings() -> None:
        cal_win.root.after(0, cal_win.open_settings)

    tray = create_tray(create_icon_image(), on_show, on_exit, on_settings=on_settings)

    # Run pystray in a daemon thread so it doesn't block tkinter
    tray_thread = threading.Thread(target=tray.run, daemon=True)
    tray_thread.start()
    logger.info("Mini calendar running in the system tray")

    # tkinter main loop on the main thread
    cal_win.root.mainloop()


if __name__ == "__main__":
    main()
