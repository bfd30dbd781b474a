"""Single-month calendar window (tkinter) positioned above the taskbar."""

import calendar as _cal
import logging
from datetime import date
from tkinter import font as tkfont
import tkinter as tk

from calendar_logic import LTR, RTL, DayCell, WeekLayout, day_of_year, weekday_headers
from calendar_state import CalendarState
from settings import load_layout, save_layout

logger = logging.getLogger(__name__)

# Colours
ACCENT = "#018076"
HEADER_BG = "#F3F3F3"
GRID_BG = "white"
CELL_BG = "#F5F5F5"
FILLER_FG = "#AAAAAA"

_ROWS = 6  # 6 fillers + 31 days never exceed 6 weeks


class _MonthPanel:
    """Pre-allocated widget pool for one month (weekday row + 6 weeks)."""

    __slots__ = ("frame", "day_headers", "day_cells")

    def __init__(self, parent: tk.Frame, fonts: dict, on_press) -> None:
        self.frame = tk.Frame(parent, bg=GRID_BG)

        self.day_headers: list[tk.Label] = []
        for col in range(7):
            lbl = tk.Label(
                self.frame, font=fonts["bold"], bg=GRID_BG, fg="#333333", width=4,
            )
            lbl.grid(row=0, column=col, pady=(0, 4))
            self.day_headers.append(lbl)

        self.day_cells: list[tk.Canvas] = []
        for i in range(_ROWS * 7):
            cell = tk.Canvas(
                self.frame, width=fonts["cell_w"], height=fonts["cell_h"],
                bg=GRID_BG, highlightthickness=0, borderwidth=0,
            )
            cell.bind("<ButtonPress-1>", on_press)
            self.day_cells.append(cell)


class CalendarWindow:
    """Month calendar that appears above the taskbar."""

    def __init__(self) -> None:
        self.root = tk.Tk()
        self.root.title(self._title())
        self.root.resizable(False, False)
        self.root.configure(bg=GRID_BG)
        self.root.attributes("-topmost", True)

        self._setup_fonts()

        self.layout: WeekLayout = load_layout()
        self.state = CalendarState(week_start=self.layout.week_start)

        # Canvas id -> cell shown on it (filled during _render)
        self._widget_cells: dict[int, DayCell] = {}
        self._outer: tk.Frame | None = None
        self._header_label: tk.Label | None = None
        self._footer_label: tk.Label | None = None
        self._panel: _MonthPanel | None = None

        _tmp = tk.Label(self.root, text="00", font=self.font_normal, width=4)
        _tmp.update_idletasks()
        self._panel_fonts = {
            "bold": self.font_bold, "normal": self.font_normal,
            "cell_w": _tmp.winfo_reqwidth(), "cell_h": _tmp.winfo_reqheight() + 6,
        }
        _tmp.destroy()

        self._build_shell()
        self._render()

        self.root.bind("<Escape>", lambda _e: self.hide())
        self.root.protocol("WM_DELETE_WINDOW", self.hide)
        self.root.withdraw()

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------
    def _setup_fonts(self) -> None:
        families = tkfont.families(self.root)
        base = "Segoe UI" if "Segoe UI" in families else "TkDefaultFont"
        self.font_normal = tkfont.Font(family=base, size=9)
        self.font_bold = tkfont.Font(family=base, size=9, weight="bold")
        self.font_header = tkfont.Font(family=base, size=11, weight="bold")
        self.font_nav = tkfont.Font(family=base, size=12, weight="bold")
        self.font_footer = tkfont.Font(family=base, size=9)

    @staticmethod
    def _title() -> str:
        return f"Mini Calendar  Day: {day_of_year(date.today())}"

    # ------------------------------------------------------------------
    # Build shell — header with nav, day grid, footer
    # ------------------------------------------------------------------
    def _build_shell(self) -> None:
        if self._outer is not None:
            self._outer.destroy()
        self._outer = tk.Frame(self.root, bg=GRID_BG)
        self._outer.pack(padx=10, pady=8)

        rtl = self.layout.direction == RTL
        back_side, fwd_side = ("right", "left") if rtl else ("left", "right")

        # Header row: ◀◀ ◀ Month Year ▶ ▶▶ (mirrored for RTL)
        nav = tk.Frame(self._outer, bg=HEADER_BG)
        nav.pack(fill="x", pady=(0, 6))

        buttons = [
            ("◀◀", "▶▶", back_side, -12),
            ("◀", "▶", back_side, -1),
            ("▶▶", "◀◀", fwd_side, 12),
            ("▶", "◀", fwd_side, 1),
        ]
        for ltr_text, rtl_text, side, offset in buttons:
            btn = tk.Label(
                nav, text=rtl_text if rtl else ltr_text, font=self.font_nav,
                bg=HEADER_BG, cursor="hand2",
            )
            btn.pack(side=side, padx=4)
            btn.bind("<Button-1>", lambda _e, n=offset: self._navigate(n))

        self._header_label = tk.Label(
            nav, font=self.font_header, bg=HEADER_BG, fg="#333333",
        )
        self._header_label.pack(side=back_side, expand=True)

        self._panel = _MonthPanel(self._outer, self._panel_fonts, self._on_press)
        self._panel.frame.pack()

        bottom = tk.Frame(self._outer, bg=GRID_BG)
        bottom.pack(fill="x", pady=(6, 0))
        btn_today = tk.Label(
            bottom, text="Today", font=self.font_bold, bg=GRID_BG, fg=ACCENT,
            cursor="hand2",
        )
        btn_today.pack(side=back_side)
        btn_today.bind("<Button-1>", lambda _e: self._go_today())

        self._footer_label = tk.Label(
            bottom, font=self.font_footer, bg=GRID_BG, fg="#555555",
        )
        self._footer_label.pack(side=fwd_side)

    def _column(self, index: int) -> int:
        col = index % 7
        return 6 - col if self.layout.direction == RTL else col

    # ------------------------------------------------------------------
    # Render the current state into the pooled widgets
    # ------------------------------------------------------------------
    def _render(self) -> None:
        panel = self._panel
        self._widget_cells.clear()
        self._header_label.configure(text=self.state.current_month_label())

        for i, abbr in enumerate(weekday_headers(self.layout.week_start)):
            panel.day_headers[self._column(i)].configure(text=abbr)

        cells = self.state.current_grid()
        for i, canvas in enumerate(panel.day_cells):
            if i >= len(cells):
                canvas.grid_forget()
                continue
            cell = cells[i]
            canvas.grid(row=i // 7 + 1, column=self._column(i), padx=2, pady=2)
            bg, fg = self._day_colors(cell)
            font = self.font_bold if cell.in_month else self.font_normal
            self._draw_cell(canvas, str(cell.day), bg, fg, font,
                            cursor="hand2" if cell.in_month else "")
            self._widget_cells[id(canvas)] = cell

        self._footer_label.configure(text=self._footer_text())

    # ------------------------------------------------------------------
    # Day colour logic
    # ------------------------------------------------------------------
    def _day_colors(self, cell: DayCell) -> tuple[str, str]:
        if not cell.in_month:
            return GRID_BG, FILLER_FG
        if self.state.is_selected(cell) or self.state.is_today(cell):
            return ACCENT, "white"
        return CELL_BG, "black"

    def _draw_cell(self, cell: tk.Canvas, text: str, bg: str, fg: str,
                   font, cursor: str = "") -> None:
        cell.delete("all")
        w = cell.winfo_width()
        h = cell.winfo_height()
        if w <= 1:
            w = int(cell["width"])
        if h <= 1:
            h = int(cell["height"])
        cell.configure(bg=bg, cursor=cursor)
        cell.create_text(w // 2, h // 2, text=text, fill=fg, font=font)

    def _footer_text(self) -> str:
        if self.state.selected_day is not None:
            y, m = self.state.displayed_month
            picked = date(y, m, self.state.selected_day)
            return f"Selected: {picked.strftime('%d.%m.%Y')}"
        return f"Today: {date.today().strftime('%d.%m.%Y')}"

    # ------------------------------------------------------------------
    # User intents
    # ------------------------------------------------------------------
    def _on_press(self, event: tk.Event) -> None:
        cell = self._widget_cells.get(id(event.widget))
        if cell is not None and self.state.select_day(cell):
            self._render()

    def _navigate(self, offset: int) -> None:
        self.state.page_month(offset)
        self._render()

    def _go_today(self) -> None:
        self.state.go_today()
        self._render()

    # ------------------------------------------------------------------
    # Settings dialog
    # ------------------------------------------------------------------
    def open_settings(self) -> None:
        dlg = tk.Toplevel(self.root)
        dlg.title("Settings")
        dlg.resizable(False, False)
        dlg.attributes("-topmost", True)
        dlg.grab_set()

        frame = tk.Frame(dlg, padx=12, pady=8)
        frame.pack()

        tk.Label(frame, text="Week starts on:", font=self.font_normal).grid(
            row=0, column=0, sticky="w", pady=4,
        )
        day_names = list(_cal.day_name)
        week_start_var = tk.StringVar(value=day_names[self.layout.week_start])
        tk.OptionMenu(frame, week_start_var, *day_names).grid(
            row=0, column=1, padx=(8, 0), pady=4, sticky="we",
        )

        rtl_var = tk.BooleanVar(value=self.layout.direction == RTL)
        tk.Checkbutton(
            frame, text="Right-to-left layout", variable=rtl_var,
            font=self.font_normal,
        ).grid(row=1, column=0, columnspan=2, sticky="w", pady=4)

        btn_frame = tk.Frame(frame)
        btn_frame.grid(row=2, column=0, columnspan=2, pady=(8, 0))

        def on_ok() -> None:
            layout = WeekLayout(
                RTL if rtl_var.get() else LTR,
                day_names.index(week_start_var.get()),
            )
            save_layout(layout)
            dlg.destroy()
            self.apply_layout(layout)

        tk.Button(btn_frame, text="OK", width=8, command=on_ok).pack(
            side="left", padx=4,
        )
        tk.Button(btn_frame, text="Cancel", width=8, command=dlg.destroy).pack(
            side="left", padx=4,
        )

    def apply_layout(self, layout: WeekLayout) -> None:
        logger.info("Layout changed to %s, week starting %s",
                    layout.direction, _cal.day_name[layout.week_start])
        self.layout = layout
        self.state.set_week_start(layout.week_start)
        self._build_shell()
        self._render()

    # ------------------------------------------------------------------
    # Show / Hide / Toggle
    # ------------------------------------------------------------------
    def toggle(self) -> None:
        if self.root.state() == "withdrawn" or not self.root.winfo_viewable():
            self.show()
        else:
            self.hide()

    def show(self) -> None:
        self.state.go_today()
        self.root.title(self._title())
        self._render()
        self.root.deiconify()
        self._position_window()
        self.root.lift()
        self.root.focus_force()

    def hide(self) -> None:
        self.root.withdraw()

    # ------------------------------------------------------------------
    # Position bottom-right above the taskbar
    # ------------------------------------------------------------------
    def _position_window(self) -> None:
        self.root.update_idletasks()
        win_w = self.root.winfo_reqwidth()
        win_h = self.root.winfo_reqheight()
        # No portable work-area query; leave room for a typical taskbar
        x = self.root.winfo_screenwidth() - win_w - 12
        y = self.root.winfo_screenheight() - win_h - 60
        self.root.geometry(f"+{x}+{y}")
