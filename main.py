"""Entry point — glues pystray (daemon thread) with tkinter (main thread)."""

import ctypes
import logging
import os
import threading

from calendar_window import CalendarWindow
from icon_gen import create_icon_image
from tray_icon import create_tray, refresh_tray


def main() -> None:
    logging.basicConfig(
        level=os.environ.get("DUAL_CALENDAR_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # DPI awareness so positions / fonts are crisp on Hi-DPI monitors (Windows only)
    try:
        ctypes.windll.shcore.SetProcessDpiAwareness(1)
    except (AttributeError, OSError):
        pass

    cal_win = CalendarWindow()

    # Callbacks marshalled onto the tkinter main thread
    def on_show() -> None:
        cal_win.root.after(0, cal_win.toggle)

    def on_today() -> None:
        cal_win.root.after(0, cal_win.go_today)

    def on_exit() -> None:
        def _quit() -> None:
            tray.stop()
            cal_win.root.destroy()
        cal_win.root.after(0, _quit)

    icon_image = create_icon_image()
    tray = create_tray(icon_image, on_show, on_exit, on_today=on_today)
    cal_win.on_new_day = lambda today: refresh_tray(tray, today)

    # Run pystray in a daemon thread so it doesn't block tkinter
    tray_thread = threading.Thread(target=tray.run, daemon=True)
    tray_thread.start()

    cal_win.show()
    # tkinter main loop on the main thread
    cal_win.root.mainloop()


if __name__ == "__main__":
    main()
